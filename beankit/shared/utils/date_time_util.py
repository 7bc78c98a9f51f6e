"""
Date/Time Conversion Utilities

Conversions between the temporal representations used by callers:

    - local date-time: naive datetime, interpreted in the configured zone
    - instant: timezone-aware datetime
    - epoch milliseconds: int
    - text: "yyyy-MM-dd HH:mm:ss" (DATE_TIME_PATTERN)

The zone comes from beankit.shared.config.get_timezone() on every call
(BEANKIT_TIMEZONE, system local zone when unset).

Examples:
    >>> os.environ["BEANKIT_TIMEZONE"] = "UTC"
    >>> parse_local_datetime("2024-03-01 12:30:00")
    datetime.datetime(2024, 3, 1, 12, 30)
    >>> to_timestamp_millis(datetime(1970, 1, 1, 0, 0, 1))
    1000
"""

from datetime import datetime, timedelta, timezone

from beankit.domain.shared.exceptions import InvalidDateTimeFormatError
from beankit.shared.config import DATE_TIME_PATTERN, DATE_TIME_TEXT_PATTERN, get_timezone

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def parse_local_datetime(text: str) -> datetime:
    """
    Parse a "yyyy-MM-dd HH:mm:ss" string into a local date-time.

    Raises:
        InvalidDateTimeFormatError: If text does not match DATE_TIME_PATTERN
    """
    try:
        parsed = datetime.strptime(text, DATE_TIME_PATTERN)
    except (TypeError, ValueError) as e:
        raise InvalidDateTimeFormatError(
            "Expected date-time in format yyyy-MM-dd HH:mm:ss",
            original_value=text,
            original_error=e,
        ) from e

    # strptime accepts unpadded fields ("2024-3-1 9:5:0"), the pattern does not
    if not DATE_TIME_TEXT_PATTERN.match(text):
        raise InvalidDateTimeFormatError(
            "Expected zero-padded date-time in format yyyy-MM-dd HH:mm:ss",
            original_value=text,
        )
    return parsed


def format_local_datetime(value: datetime) -> str:
    """Format a local date-time as "yyyy-MM-dd HH:mm:ss"."""
    _require_naive(value)
    # isoformat pads years below 1000, strftime("%Y") does not on glibc
    return value.replace(microsecond=0).isoformat(sep=" ")


def from_timestamp_millis(millis: int) -> datetime:
    """Convert epoch milliseconds to a local date-time."""
    return from_instant(_EPOCH + timedelta(milliseconds=millis))


def from_instant(instant: datetime) -> datetime:
    """
    Convert an instant to a local date-time in the configured zone.

    Raises:
        InvalidDateTimeFormatError: If instant is naive
    """
    if instant.tzinfo is None or instant.utcoffset() is None:
        raise InvalidDateTimeFormatError(
            "Instant must be timezone-aware", original_value=instant
        )
    return instant.astimezone(get_timezone()).replace(tzinfo=None)


def to_local_datetime(value: str | int | datetime) -> datetime:
    """
    Convert text, epoch milliseconds or an instant to a local date-time.

    Args:
        value: "yyyy-MM-dd HH:mm:ss" string, epoch milliseconds, or aware datetime

    Returns:
        Naive datetime in the configured zone

    Raises:
        InvalidDateTimeFormatError: If a string is malformed or a datetime is naive
        TypeError: For any other type (bool included)
    """
    if isinstance(value, str):
        return parse_local_datetime(value)
    if isinstance(value, int) and not isinstance(value, bool):
        return from_timestamp_millis(value)
    if isinstance(value, datetime):
        return from_instant(value)
    raise TypeError(
        f"Cannot convert {type(value).__name__} to a local date-time"
    )


def to_instant(value: datetime) -> datetime:
    """
    Attach the configured zone to a local date-time.

    With no configured zone, the system local zone (including its DST rules)
    is used.

    Raises:
        InvalidDateTimeFormatError: If value is already timezone-aware
    """
    _require_naive(value)
    zone = get_timezone()
    if zone is None:
        return value.astimezone()
    return value.replace(tzinfo=zone)


def to_timestamp_millis(value: datetime) -> int:
    """Convert a local date-time to epoch milliseconds."""
    delta = to_instant(value) - _EPOCH
    return delta // timedelta(milliseconds=1)


def _require_naive(value: datetime) -> None:
    if value.tzinfo is not None:
        raise InvalidDateTimeFormatError(
            "Local date-time must not carry a time zone", original_value=value
        )
