# mylists/helpers/_logger.py

# SECTION: MODULE DOCSTRING
"""Application logger setup.

Warnings and errors go to the Textual devtools console (``textual console``),
everything from DEBUG up goes to a rotating log file once a log directory is
configured.
"""

# SECTION: IMPORTS
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from textual.logging import TextualHandler

# SECTION: CONSTANTS
LOGGER_NAME = "MyLists"
LOG_FILENAME = "mylists.log"
LOG_FORMAT_FILE = "%(asctime)s - %(filename)s:%(lineno)d - %(levelname)s - %(message)s"
SUCCESS_LEVEL_NUM = 25

# --- Custom Success Level ---
logging.addLevelName(SUCCESS_LEVEL_NUM, "SUCCESS")


def success(self, message, *args, **kws):
    if self.isEnabledFor(SUCCESS_LEVEL_NUM):
        self._log(SUCCESS_LEVEL_NUM, message, args, **kws)


logging.Logger.success = success


# FUNC: setup_logging
def setup_logging(
    log_level: int | str = logging.DEBUG,
    logger_name: str = LOGGER_NAME,
    log_dir: Path | None = None,
) -> logging.Logger:
    """Configures the application logger.

    Can be called again (e.g. after configuration is loaded) to swap handlers
    on the same logger instance, so modules holding ``log`` keep working.

    Args:
        log_level: Level for the logger itself.
        logger_name: Name of the logger to configure.
        log_dir: Directory for the rotating log file. No file handler when None.

    Returns:
        The configured logger.
    """
    log = logging.getLogger(logger_name)
    log.setLevel(log_level)

    # Clear existing handlers to prevent duplicates
    if log.hasHandlers():
        for handler in list(log.handlers):
            handler.close()
        log.handlers.clear()

    textual_handler = TextualHandler()
    textual_handler.setLevel(logging.WARNING)
    log.addHandler(textual_handler)

    if log_dir:
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(log_dir / LOG_FILENAME, maxBytes=10 * 1024 * 1024, backupCount=5, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT_FILE))
        log.addHandler(file_handler)

    root_logger = logging.getLogger()
    if not root_logger.handlers:
        root_logger.addHandler(logging.NullHandler())

    log.propagate = False
    return log


# Singleton logger instance, shared by the whole application
_log_instance: logging.Logger | None = None


def get_logger() -> logging.Logger:
    global _log_instance
    if _log_instance is None:
        _log_instance = setup_logging(log_level=logging.DEBUG)
    return _log_instance


log = get_logger()


def configure_third_party_loggers() -> None:
    """Caps noisy third-party loggers at WARNING."""
    for logger_name in ("asyncio", "textual"):
        logger = logging.getLogger(logger_name)
        logger.setLevel(logging.WARNING)
        logger.propagate = False


configure_third_party_loggers()
