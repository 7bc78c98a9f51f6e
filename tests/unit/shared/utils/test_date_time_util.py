"""
Tests for date_time_util conversions.
Covers: parsing/formatting, epoch millis, instants, dispatch, configured zones.
"""

from datetime import datetime, timedelta, timezone

import pytest

from beankit.domain.shared.exceptions import InvalidDateTimeFormatError
from beankit.shared.utils.date_time_util import (
    format_local_datetime,
    from_instant,
    from_timestamp_millis,
    parse_local_datetime,
    to_instant,
    to_local_datetime,
    to_timestamp_millis,
)

PLUS_EIGHT = timezone(timedelta(hours=8))


# ============================================================================
# TEXT
# ============================================================================


def test_parse_local_datetime():
    """Test parsing the yyyy-MM-dd HH:mm:ss format."""
    assert parse_local_datetime("2024-03-01 12:30:05") == datetime(2024, 3, 1, 12, 30, 5)


@pytest.mark.parametrize(
    "text",
    [
        "2024-03-01",
        "2024/03/01 12:30:05",
        "2024-03-01T12:30:05",
        "2024-3-1 12:30:05",
        "2024-02-30 12:00:00",
        "",
    ],
)
def test_parse_local_datetime_invalid(text):
    """Test that malformed text raises InvalidDateTimeFormatError."""
    with pytest.raises(InvalidDateTimeFormatError) as exc_info:
        parse_local_datetime(text)
    assert exc_info.value.original_value == text


def test_format_local_datetime_round_trip():
    """Test that formatting then parsing reproduces the value."""
    value = datetime(2023, 12, 31, 23, 59, 59)
    text = format_local_datetime(value)

    assert text == "2023-12-31 23:59:59"
    assert parse_local_datetime(text) == value


def test_parse_and_format_years_below_1000():
    """Test that four-digit years below 1000 are zero-padded both ways."""
    value = parse_local_datetime("0999-01-01 00:00:00")

    assert value == datetime(999, 1, 1)
    assert format_local_datetime(value) == "0999-01-01 00:00:00"


def test_format_local_datetime_drops_microseconds():
    """Test that sub-second precision is not part of the text format."""
    assert format_local_datetime(datetime(2024, 1, 2, 3, 4, 5, 678_000)) == "2024-01-02 03:04:05"


def test_format_local_datetime_rejects_aware_values():
    """Test that aware datetimes are not local date-times."""
    with pytest.raises(InvalidDateTimeFormatError):
        format_local_datetime(datetime(2024, 1, 1, tzinfo=timezone.utc))


# ============================================================================
# EPOCH MILLISECONDS / INSTANTS
# ============================================================================


def test_from_timestamp_millis_utc(utc_timezone):
    """Test epoch zero in UTC."""
    assert from_timestamp_millis(0) == datetime(1970, 1, 1)


def test_from_timestamp_millis_keeps_milliseconds(utc_timezone):
    """Test that sub-second precision is preserved."""
    assert from_timestamp_millis(1_500) == datetime(1970, 1, 1, 0, 0, 1, 500_000)


def test_from_timestamp_millis_offset(offset_timezone):
    """Test epoch zero at +08:00."""
    assert from_timestamp_millis(0) == datetime(1970, 1, 1, 8, 0)


def test_from_instant_converts_to_configured_zone(offset_timezone):
    """Test that instants are shifted into the configured zone."""
    instant = datetime(2024, 1, 1, 0, 0, tzinfo=timezone.utc)
    assert from_instant(instant) == datetime(2024, 1, 1, 8, 0)


def test_from_instant_rejects_naive():
    """Test that naive datetimes are not instants."""
    with pytest.raises(InvalidDateTimeFormatError):
        from_instant(datetime(2024, 1, 1))


def test_to_instant_attaches_configured_zone(offset_timezone):
    """Test local date-time to instant at +08:00."""
    instant = to_instant(datetime(2024, 1, 1, 8, 0))

    assert instant.utcoffset() == timedelta(hours=8)
    assert instant == datetime(2024, 1, 1, 0, 0, tzinfo=timezone.utc)


def test_to_instant_system_zone_round_trip(system_timezone):
    """Test that the system local zone round-trips."""
    local = datetime(2024, 6, 15, 10, 0)
    instant = to_instant(local)

    assert instant.tzinfo is not None
    assert from_instant(instant) == local


def test_to_instant_rejects_aware():
    """Test that aware datetimes are rejected as local date-times."""
    with pytest.raises(InvalidDateTimeFormatError):
        to_instant(datetime(2024, 1, 1, tzinfo=PLUS_EIGHT))


def test_to_timestamp_millis(utc_timezone):
    """Test local date-time to epoch milliseconds in UTC."""
    assert to_timestamp_millis(datetime(1970, 1, 1, 0, 0, 1)) == 1_000
    assert to_timestamp_millis(datetime(1969, 12, 31, 23, 59, 59)) == -1_000


def test_timestamp_millis_round_trip(offset_timezone):
    """Test millis -> local -> millis."""
    millis = 1_709_296_205_123
    assert to_timestamp_millis(from_timestamp_millis(millis)) == millis


# ============================================================================
# to_local_datetime() dispatch
# ============================================================================


def test_to_local_datetime_from_text():
    """Test dispatch on str."""
    assert to_local_datetime("2024-03-01 12:30:05") == datetime(2024, 3, 1, 12, 30, 5)


def test_to_local_datetime_from_millis(utc_timezone):
    """Test dispatch on int."""
    assert to_local_datetime(0) == datetime(1970, 1, 1)


def test_to_local_datetime_from_instant(utc_timezone):
    """Test dispatch on aware datetime."""
    instant = datetime(2024, 1, 1, 8, 0, tzinfo=PLUS_EIGHT)
    assert to_local_datetime(instant) == datetime(2024, 1, 1, 0, 0)


@pytest.mark.parametrize("value", [True, 1.5, None, b"2024"])
def test_to_local_datetime_unsupported_types(value):
    """Test that other types raise TypeError."""
    with pytest.raises(TypeError):
        to_local_datetime(value)
