"""
Shared Domain Module

Shared domain concepts used across all utility modules.

This module exports:
    - BeanKitException: Base exception for all library errors
    - TypeMismatchError, AliasedTargetError: property copy failures
    - InvalidDateTimeFormatError: date/time conversion failures
    - InvalidLengthError: negative string lengths
    - ConfigurationError: unusable environment settings
"""

from .exceptions import (
    AliasedTargetError,
    BeanKitException,
    ConfigurationError,
    InvalidDateTimeFormatError,
    InvalidLengthError,
    TypeMismatchError,
)

__all__ = [
    "BeanKitException",
    "TypeMismatchError",
    "AliasedTargetError",
    "InvalidDateTimeFormatError",
    "InvalidLengthError",
    "ConfigurationError",
]
