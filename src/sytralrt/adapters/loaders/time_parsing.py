"""Date and hour reconstruction for feeds that split timestamps in two strings."""

from datetime import date, datetime, time, tzinfo

from sytralrt.domain.errors import TimeParseError

DATE_FORMAT = "%Y-%m-%d"
HOUR_FORMAT = "%H:%M:%S"
DATETIME_FORMAT = f"{DATE_FORMAT} {HOUR_FORMAT}"


def parse_date(value: str) -> date:
    """Parse a ``YYYY-MM-DD`` date string."""
    try:
        return datetime.strptime(value.strip(), DATE_FORMAT).date()
    except ValueError as e:
        raise TimeParseError(f"invalid date {value!r}, expected YYYY-MM-DD") from e


def parse_hour(value: str) -> time:
    """Parse a ``HH:MM:SS`` time-of-day string."""
    try:
        return datetime.strptime(value.strip(), HOUR_FORMAT).time()
    except ValueError as e:
        raise TimeParseError(f"invalid hour {value!r}, expected HH:MM:SS") from e


def combine_date_and_hour(date_value: str, hour_value: str, tz: tzinfo) -> datetime:
    """Relocate the time of day of hour_value onto the calendar day of date_value.

    Both strings are parsed independently; the result is an aware datetime in tz.

    Raises:
        TimeParseError: If either string does not match its format.
    """
    day = parse_date(date_value)
    hour = parse_hour(hour_value)
    return datetime.combine(day, hour, tzinfo=tz)


def parse_datetime(value: str, tz: tzinfo) -> datetime:
    """Parse a ``YYYY-MM-DD HH:MM:SS`` string as a local time in tz."""
    try:
        return datetime.strptime(value.strip(), DATETIME_FORMAT).replace(tzinfo=tz)
    except ValueError as e:
        raise TimeParseError(f"invalid datetime {value!r}, expected YYYY-MM-DD HH:MM:SS") from e


def parse_optional_date(value: str) -> date | None:
    """Parse a date that may be left empty."""
    if not value.strip():
        return None
    return parse_date(value)
