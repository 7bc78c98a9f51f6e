"""
Domain Layer - Core Types

Framework-independent types shared by all beankit utilities: copy policies,
field descriptors and the exception hierarchy.

Exports:
    - CopyPolicy: Which source fields are copied
    - FieldDescriptor: One copyable field of a record type
    - BeanKitException and its subclasses

Usage:
    >>> from beankit.domain import CopyPolicy, TypeMismatchError
    >>> from beankit.domain.models import FieldDescriptor
"""

from .models import CopyPolicy, FieldDescriptor
from .shared import (
    AliasedTargetError,
    BeanKitException,
    ConfigurationError,
    InvalidDateTimeFormatError,
    InvalidLengthError,
    TypeMismatchError,
)

__all__ = [
    # Models
    "CopyPolicy",
    "FieldDescriptor",
    # Exceptions
    "BeanKitException",
    "TypeMismatchError",
    "AliasedTargetError",
    "InvalidDateTimeFormatError",
    "InvalidLengthError",
    "ConfigurationError",
]
