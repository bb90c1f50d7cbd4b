"""Date parsing utilities."""

from datetime import date, datetime
from typing import Optional

from dateutil import tz


def parse_manual_date(date_str: str) -> Optional[date]:
    """Parse a strict YYYY-MM-DD string into a date.

    Unlike a lenient parser, out-of-range parts never roll over into the
    next month: "2021-02-30" is rejected rather than read as March 2nd.

    Args:
        date_str: Date string in YYYY-MM-DD form

    Returns:
        Date object, or None if the string is not a valid calendar date
    """
    if not date_str or not isinstance(date_str, str):
        return None

    parts = date_str.split("-")
    if len(parts) != 3:
        return None

    if not all(part.isascii() and part.isdigit() for part in parts):
        return None
    year, month, day = (int(part) for part in parts)

    try:
        parsed = date(year, month, day)
    except ValueError:
        return None

    if (parsed.year, parsed.month, parsed.day) != (year, month, day):
        return None
    return parsed


def format_manual_date(value: date) -> str:
    """Format a date back into YYYY-MM-DD."""
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def days_since(date_str: str, today: Optional[date] = None) -> Optional[int]:
    """Count whole calendar days between a manual date and today.

    Args:
        date_str: Date string in YYYY-MM-DD form
        today: Reference date (defaults to the local current date)

    Returns:
        0 for today, positive for past dates, negative for future dates,
        or None if the date cannot be parsed
    """
    manual_date = parse_manual_date(date_str)
    if manual_date is None:
        return None

    if today is None:
        today = date.today()
    return (today - manual_date).days


def format_timestamp(timestamp_ns: int) -> str:
    """Format a nanosecond epoch timestamp as a local date-time string.

    The value is truncated to milliseconds first. Output looks like
    "Jan 5, 2024, 03:07 PM".
    """
    millis = int(timestamp_ns) // 1_000_000
    moment = datetime.fromtimestamp(millis / 1000, tz=tz.tzlocal())
    return f"{moment:%b} {moment.day}, {moment.year}, {moment:%I:%M %p}"
