# mylists/helpers/_json.py
# ─── Helper ───────────────────────────────────────────────────────────────────
#                JSON Save/Load Utilities
# ──────────────────────────────────────────────────────────────────────────────

# SECTION: MODULE DOCSTRING
"""Saves and loads the store's JSON data file.

Pretty printing, UTF-8 encoding, directory creation and error logging. Writes
go through a temporary file in the same directory and are then moved into
place, so a crash mid-write leaves the previous file intact.
"""

# SECTION: IMPORTS
import json
import os
import tempfile
from pathlib import Path
from typing import Any

from ._logger import log

# SECTION: TYPE ALIASES
JSONSerializable = dict[str, Any] | list[Any]
LoadResult = JSONSerializable | None


# SECTION: CORE FUNCTIONS


# FUNC: save_json
def save_json(
    data: JSONSerializable,
    filepath: str | Path,
    indent: int = 2,
    ensure_ascii: bool = False,
) -> bool:
    """Saves a dict or list to a JSON file with pretty printing.

    Args:
        data: The Python dictionary or list to save.
        filepath: Destination path of the JSON file.
        indent: JSON indentation level.
        ensure_ascii: If True, escape non-ASCII characters.

    Returns:
        True if saving was successful, False otherwise.
    """
    output_path = Path(filepath).resolve()
    log.debug(f"Attempting to save JSON data to: '{output_path}'")

    tmp_name: str | None = None
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile("w", encoding="utf-8", dir=output_path.parent, suffix=".tmp", delete=False) as f:
            tmp_name = f.name
            json.dump(data, f, indent=indent, ensure_ascii=ensure_ascii)
        os.replace(tmp_name, output_path)
        tmp_name = None

        log.debug(f"Saved JSON data to: '{output_path}'")
        return True

    except TypeError as e:
        log.error(f"Data structure not JSON serializable for '{output_path}'. Error: {e}")
        return False
    except OSError as e:
        log.error(f"Could not write file '{output_path}'. Error: {e}")
        return False
    finally:
        if tmp_name is not None:
            Path(tmp_name).unlink(missing_ok=True)


# FUNC: load_json
def load_json(filepath: str | Path) -> LoadResult:
    """Loads data from a JSON file.

    Returns:
        The loaded dictionary or list, or None if the file doesn't exist,
        cannot be read, or contains invalid JSON.
    """
    input_path = Path(filepath).resolve()

    if not input_path.is_file():
        log.warning(f"JSON file not found at '{input_path}'")
        return None

    log.debug(f"Attempting to load JSON from: '{input_path}'")
    try:
        with input_path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        log.error(f"Failed to load or parse JSON file '{input_path}'. Error: {e}")
        return None

    if isinstance(data, (dict, list)):
        return data
    log.warning(f"Invalid data type ({type(data).__name__}) in JSON file: '{input_path}'. Expected dict or list.")
    return None
