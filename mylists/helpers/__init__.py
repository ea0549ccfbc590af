# mylists/helpers/__init__.py

"""MyLists helper utilities.

- Date/Time handling for reminders (_date.py)
- JSON file handling (_json.py)
- Logging setup (_logger.py)
- Rich console (_rich.py)
"""

from ._date import (
    convert_to_local_time,
    format_reminder,
    get_local_timezone,
    is_today,
    parse_reminder,
)
from ._json import load_json, save_json
from ._logger import get_logger, log, setup_logging
from ._rich import console, print

__all__ = [
    # Logging
    "log",
    "get_logger",
    "setup_logging",
    # Rich Console / Print
    "console",
    "print",
    # JSON Handling
    "save_json",
    "load_json",
    # Date Utilities
    "convert_to_local_time",
    "format_reminder",
    "get_local_timezone",
    "is_today",
    "parse_reminder",
]
