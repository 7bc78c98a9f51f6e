"""
Shared Utilities

Responsibility:
    Generic utility functions used across the application.

Contains:
    - bean_util: Property copying between records
    - field_table: Field enumeration of records
    - type_check: Assignment compatibility of values and annotations
    - date_time_util: Date/time conversions
    - string_util: Random strings, UUIDs, prefixes

Does NOT contain:
    - Exception types (use beankit.domain.shared)
    - Configuration constants (use beankit.shared.config)
"""

from .bean_util import (
    all_fields_absent,
    copy_function,
    copy_into,
    copy_list,
    copy_not_empty_properties,
    copy_not_null_properties,
    copy_to,
    to_map,
)
from .date_time_util import (
    format_local_datetime,
    from_instant,
    from_timestamp_millis,
    parse_local_datetime,
    to_instant,
    to_local_datetime,
    to_timestamp_millis,
)
from .field_table import describe_fields
from .string_util import random_string, random_uuid, substring_begin

__all__ = [
    # Bean utilities
    "copy_into",
    "copy_not_null_properties",
    "copy_not_empty_properties",
    "copy_to",
    "copy_function",
    "copy_list",
    "all_fields_absent",
    "to_map",
    "describe_fields",
    # Date/time utilities
    "parse_local_datetime",
    "format_local_datetime",
    "from_timestamp_millis",
    "from_instant",
    "to_local_datetime",
    "to_instant",
    "to_timestamp_millis",
    # String utilities
    "random_string",
    "random_uuid",
    "substring_begin",
]
