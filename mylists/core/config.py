# mylists/core/config.py
# -----------------------------------------------------------------------------
# Centralized Configuration Management
# -----------------------------------------------------------------------------

# SECTION: IMPORTS
import logging
from pathlib import Path
from typing import Any

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from mylists.helpers._logger import log

# SECTION: PATHS
DEFAULT_DATA_DIR: Path = Path.home() / ".mylists"
DEFAULT_DATA_FILENAME = "lists.json"

# SECTION: CONFIGURATION MODELS


# KLASS: StorageConfig
class StorageConfig(BaseSettings):
    """Where the lists and tasks are persisted."""

    model_config = SettingsConfigDict(
        env_prefix="MYLISTS_STORAGE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    data_dir: Path = Field(DEFAULT_DATA_DIR, description="Directory holding the data file.")
    data_filename: str = Field(DEFAULT_DATA_FILENAME, description="Name of the JSON data file.")
    autosave: bool = Field(True, description="Save the store after every change.")

    @property
    def data_file(self) -> Path:
        return self.data_dir / self.data_filename

    @field_validator("data_dir", mode="before")
    @classmethod
    def _resolve_path(cls, v: Any) -> Path:
        return Path(v).expanduser().resolve()


# KLASS: LoggingConfig
class LoggingConfig(BaseSettings):
    """Log level and the directory of the rotating log file."""

    model_config = SettingsConfigDict(
        env_prefix="MYLISTS_LOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    level: str = Field("INFO", description="Application log level name.")
    dir: Path | None = Field(None, description="Directory for mylists.log. Defaults to <data_dir>/logs.")

    @field_validator("level")
    @classmethod
    def _check_level(cls, v: str) -> str:
        name = v.upper()
        if not isinstance(logging.getLevelName(name), int):
            raise ValueError(f"Unknown log level '{v}'")
        return name


# KLASS: AppConfig
class AppConfig(BaseSettings):
    """Main application configuration aggregating the other configs."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    storage: StorageConfig = Field(default_factory=StorageConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @property
    def log_dir(self) -> Path:
        return self.logging.dir or self.storage.data_dir / "logs"


# FUNC: load_config
def load_config(data_file: Path | None = None) -> AppConfig:
    """Builds the configuration and makes sure its directories exist.

    Args:
        data_file: Optional override of the data file path (command line).

    Raises:
        SystemExit: If the configuration is invalid.
    """
    try:
        config = AppConfig()
        if data_file is not None:
            data_file = data_file.expanduser().resolve()
            config.storage = StorageConfig(data_dir=data_file.parent, data_filename=data_file.name)
        config.storage.data_dir.mkdir(parents=True, exist_ok=True)
    except ValidationError as e:
        log.critical(f"Configuration validation failed:\n{e}")
        raise SystemExit("Configuration Error") from e
    except OSError as e:
        log.critical(f"Failed to prepare data directory: {e}", exc_info=True)
        raise SystemExit("Configuration Initialization Error") from e

    log.info(f"Configuration loaded. Data file: {config.storage.data_file}")
    return config


__all__ = ["AppConfig", "LoggingConfig", "StorageConfig", "load_config"]
