"""
beankit - bean property copying, date/time conversion and random string utilities.

Usage:
    >>> from beankit import CopyPolicy, copy_into, copy_to, copy_list
    >>> dto = copy_to(entity, UserDTO)
    >>> copy_into(patch, entity, CopyPolicy.SKIP_NULL)

Layout:
    - beankit.domain: CopyPolicy, FieldDescriptor, exceptions
    - beankit.shared.config: Constants and environment settings
    - beankit.shared.utils: Utility functions
"""

import logging

from .domain import (
    AliasedTargetError,
    BeanKitException,
    ConfigurationError,
    CopyPolicy,
    FieldDescriptor,
    InvalidDateTimeFormatError,
    InvalidLengthError,
    TypeMismatchError,
)
from .shared.utils import (
    all_fields_absent,
    copy_function,
    copy_into,
    copy_list,
    copy_not_empty_properties,
    copy_not_null_properties,
    copy_to,
    describe_fields,
    format_local_datetime,
    from_instant,
    from_timestamp_millis,
    parse_local_datetime,
    random_string,
    random_uuid,
    substring_begin,
    to_instant,
    to_local_datetime,
    to_map,
    to_timestamp_millis,
)

__version__ = "0.1.0"

# Library code never configures handlers
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Domain
    "CopyPolicy",
    "FieldDescriptor",
    "BeanKitException",
    "TypeMismatchError",
    "AliasedTargetError",
    "InvalidDateTimeFormatError",
    "InvalidLengthError",
    "ConfigurationError",
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
