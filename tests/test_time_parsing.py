"""Tests for date and hour reconstruction."""

from datetime import date, datetime, time, timedelta
from zoneinfo import ZoneInfo

import pytest

from sytralrt.adapters.loaders.time_parsing import (
    combine_date_and_hour,
    parse_date,
    parse_datetime,
    parse_hour,
    parse_optional_date,
)
from sytralrt.domain.errors import TimeParseError


def test_when_combining_then_hour_is_placed_on_date_in_timezone(paris: ZoneInfo) -> None:
    """Given date 2024-03-10 and hour 07:15:30, when combining, then the local time matches."""
    result = combine_date_and_hour("2024-03-10", "07:15:30", paris)

    assert result == datetime(2024, 3, 10, 7, 15, 30, tzinfo=paris)
    assert result.utcoffset() == timedelta(hours=1)


def test_when_date_in_summer_then_offset_follows_daylight_saving(paris: ZoneInfo) -> None:
    """Given a summer date, when combining, then the summer offset of the timezone applies."""
    result = combine_date_and_hour("2024-07-01", "12:00:00", paris)

    assert result.utcoffset() == timedelta(hours=2)


@pytest.mark.parametrize(
    ("date_value", "hour_value"),
    [("2024-13-01", "07:15:30"), ("10/03/2024", "07:15:30"), ("2024-03-10", "25:00:00"), ("", "")],
)
def test_when_parts_invalid_then_time_parse_error(
    paris: ZoneInfo, date_value: str, hour_value: str
) -> None:
    """Given a malformed date or hour, when combining, then a TimeParseError is raised."""
    with pytest.raises(TimeParseError):
        combine_date_and_hour(date_value, hour_value, paris)


def test_single_part_parsers() -> None:
    """Given valid strings, when parsing parts, then date and time values are returned."""
    assert parse_date(" 2024-03-10 ") == date(2024, 3, 10)
    assert parse_hour("23:59:59") == time(23, 59, 59)
    assert parse_optional_date("") is None
    assert parse_optional_date("2024-03-12") == date(2024, 3, 12)


def test_when_parsing_datetime_then_it_is_local_to_timezone(paris: ZoneInfo) -> None:
    """Given a full timestamp string, when parsing, then it is aware in the given timezone."""
    assert parse_datetime("2024-03-10 07:15:00", paris) == datetime(
        2024, 3, 10, 7, 15, tzinfo=paris
    )
