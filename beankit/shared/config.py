"""
Library Configuration

Configuration constants for the property copier, date/time and string utilities.

Design Principles:
    - Configuration as code (Final constants)
    - Environment overrides are read at call time, never cached
    - No global mutable state

Environment:
    BEANKIT_TIMEZONE: Zone used to interpret local date-times.
        Unset or empty -> system local zone
        "UTC" / "Z" -> UTC
        "+08:00" / "-05:30" -> fixed offset
        Any other value -> IANA zone name (e.g. "Europe/Warsaw")
"""

import logging
import os
import re
import string
from datetime import timedelta, timezone, tzinfo
from typing import Final
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from beankit.domain.shared.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


# ============================================================================
# PROPERTY COPY
# ============================================================================

# Names never treated as record fields (type tag)
RESERVED_FIELD_NAMES: Final[frozenset[str]] = frozenset({"__class__"})


# ============================================================================
# DATE / TIME
# ============================================================================

# strptime/strftime equivalent of "yyyy-MM-dd HH:mm:ss"
DATE_TIME_PATTERN: Final[str] = "%Y-%m-%d %H:%M:%S"

# Zero-padded text accepted by the pattern above
DATE_TIME_TEXT_PATTERN: Final[re.Pattern] = re.compile(
    r"^\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}$"
)

TIMEZONE_ENV_VAR: Final[str] = "BEANKIT_TIMEZONE"

# "+08:00", "-0530"
UTC_OFFSET_PATTERN: Final[re.Pattern] = re.compile(r"^([+-])(\d{2}):?(\d{2})$")


# ============================================================================
# RANDOM STRINGS
# ============================================================================

DEFAULT_RANDOM_STRING_LENGTH: Final[int] = 12

# A-Z a-z 0-9
RANDOM_STRING_ALPHABET: Final[str] = (
    string.ascii_uppercase + string.ascii_lowercase + string.digits
)


def get_timezone() -> tzinfo | None:
    """
    Resolve the zone used for local date-time conversions.

    Reads BEANKIT_TIMEZONE on every call so tests and callers can change it
    at runtime.

    Returns:
        tzinfo for the configured zone, or None for the system local zone

    Raises:
        ConfigurationError: If the value is neither an offset nor a known zone name

    Examples:
        >>> os.environ["BEANKIT_TIMEZONE"] = "+08:00"
        >>> get_timezone()
        datetime.timezone(datetime.timedelta(seconds=28800))
    """
    raw_value = os.getenv(TIMEZONE_ENV_VAR, "").strip()
    if not raw_value:
        return None

    if raw_value.upper() in ("UTC", "Z"):
        return timezone.utc

    offset_match = UTC_OFFSET_PATTERN.match(raw_value)
    if offset_match:
        sign, hours, minutes = offset_match.groups()
        if int(hours) > 23 or int(minutes) > 59:
            raise ConfigurationError(
                f"UTC offset out of range: {raw_value!r}", setting=TIMEZONE_ENV_VAR
            )
        offset = timedelta(hours=int(hours), minutes=int(minutes))
        return timezone(-offset if sign == "-" else offset)

    try:
        return ZoneInfo(raw_value)
    except (ZoneInfoNotFoundError, ValueError) as e:
        logger.warning(f"Unknown time zone in {TIMEZONE_ENV_VAR}: {raw_value!r}")
        raise ConfigurationError(
            f"Unknown time zone {raw_value!r}: {e}", setting=TIMEZONE_ENV_VAR
        ) from e
