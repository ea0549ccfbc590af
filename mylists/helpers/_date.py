# mylists/helpers/_date.py

# SECTION: MODULE DOCSTRING
"""Date and time helpers for reminder dates.

Parses reminder inputs into timezone-aware datetimes, answers "is this
today?" in the local calendar, and renders reminders for display.
Requires `python-dateutil` and `timeago`.
"""

# SECTION: IMPORTS
from datetime import datetime, timezone, tzinfo

import dateutil.parser
import timeago
from dateutil.tz import tzlocal

from ._logger import log

# SECTION: FUNCTIONS


# FUNC: get_local_timezone
def get_local_timezone() -> tzinfo:
    """Safely gets the local timezone object using tzlocal."""
    try:
        local_tz = tzlocal()
        if local_tz is None:
            raise ValueError("tzlocal returned None")
        return local_tz
    except Exception as e:
        log.warning(f"Error getting local timezone: {e}. Falling back to UTC.")
        return timezone.utc


# FUNC: parse_reminder
def parse_reminder(value: str | datetime | int | float | None) -> datetime | None:
    """Converts a reminder input to a timezone-aware datetime.

    Naive values (strings without offset, naive datetimes) are taken as local
    wall-clock time, since that is what a user types. Numbers are epoch
    seconds.

    Args:
        value: ISO 8601 string, datetime, epoch seconds, or None.

    Returns:
        An aware datetime, or None for None/blank input.

    Raises:
        ValueError: If the value cannot be parsed.
        TypeError: If the value has an unsupported type.
    """
    if value is None:
        return None
    if isinstance(value, str) and not value.strip():
        return None

    if isinstance(value, bool):
        raise TypeError("Unsupported reminder type: bool")
    if isinstance(value, (int, float)):
        return datetime.fromtimestamp(value, tz=timezone.utc)
    if isinstance(value, str):
        dt_object = dateutil.parser.isoparse(value.strip())
    elif isinstance(value, datetime):
        dt_object = value
    else:
        raise TypeError(f"Unsupported reminder type: {type(value).__name__}")

    if dt_object.tzinfo is None or dt_object.tzinfo.utcoffset(dt_object) is None:
        dt_object = dt_object.replace(tzinfo=get_local_timezone())
    return dt_object


# FUNC: convert_to_local_time
def convert_to_local_time(value: datetime) -> datetime:
    """Converts a datetime to the local timezone (naive values are already local)."""
    if value.tzinfo is None:
        return value.replace(tzinfo=get_local_timezone())
    return value.astimezone(get_local_timezone())


# FUNC: is_today
def is_today(value: datetime | None, now: datetime | None = None) -> bool:
    """Checks whether a datetime falls on the current local calendar day.

    Args:
        value: The datetime to check. None is never today.
        now: Reference "now"; defaults to the current local time.

    Returns:
        True if both fall on the same local date.
    """
    if value is None:
        return False
    reference = convert_to_local_time(now) if now is not None else datetime.now(get_local_timezone())
    return convert_to_local_time(value).date() == reference.date()


# FUNC: format_reminder
def format_reminder(value: datetime | None, now: datetime | None = None) -> str:
    """Renders a reminder as local time plus a relative hint.

    Example: "2026-10-19 18:30 (in 2 hours)". Empty string when there is no
    reminder.
    """
    if value is None:
        return ""
    local_value = convert_to_local_time(value)
    reference = convert_to_local_time(now) if now is not None else datetime.now(get_local_timezone())
    return f"{local_value.strftime('%Y-%m-%d %H:%M')} ({timeago.format(local_value, reference)})"
