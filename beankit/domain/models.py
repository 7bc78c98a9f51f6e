"""
Shared Domain Models

Responsibility:
    Small types shared by the property copying utilities.

Contains:
    - CopyPolicy: Enum selecting which source fields are copied
    - FieldDescriptor: Immutable description of one copyable field

Does NOT contain:
    - Copy logic (belongs to beankit.shared.utils.bean_util)
    - Field enumeration (belongs to beankit.shared.utils.field_table)
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class CopyPolicy(str, Enum):
    """
    Rule governing which fields are copied based on the source value.

    Attributes:
        ALL: Copy every field whose name exists on both source and target
        SKIP_NULL: Omit fields whose source value is None
        SKIP_EMPTY: Omit fields whose source value is None or whose str()
            has no non-whitespace content

    Usage:
        >>> from beankit.domain.models import CopyPolicy
        >>> policy = CopyPolicy.SKIP_EMPTY
        >>> policy.skips(None)
        True
        >>> policy.skips("   ")
        True
        >>> CopyPolicy.SKIP_NULL.skips("   ")
        False
    """

    ALL = "all"
    SKIP_NULL = "skip_null"
    SKIP_EMPTY = "skip_empty"

    def skips(self, value: Any) -> bool:
        """
        Check whether a source value is filtered out under this policy.

        Args:
            value: Value read from the source field

        Returns:
            True if the field must not be copied, False otherwise
        """
        if self is CopyPolicy.ALL:
            return False
        if value is None:
            return True
        if self is CopyPolicy.SKIP_EMPTY:
            return not str(value).strip()
        return False


@dataclass(frozen=True)
class FieldDescriptor:
    """
    Immutable value object describing one field of a record type.

    Attributes:
        name: Field name, used to pair source and target fields
        annotation: Declared type of the field, None when unknown
            (unannotated plain attributes). Unknown annotations are not type-checked.
        readable: Field value can be read from an instance
        writable: Field value can be assigned on an instance
            (False for frozen dataclasses/models and setter-less properties)

    Examples:
        >>> descriptor = FieldDescriptor("name", str)
        >>> descriptor.readable, descriptor.writable
        (True, True)
    """

    name: str
    annotation: Any = None
    readable: bool = True
    writable: bool = True

    def read(self, record: Any) -> Any:
        """Read this field's value from a record."""
        return getattr(record, self.name)

    def write(self, record: Any, value: Any) -> None:
        """Assign this field's value on a record."""
        setattr(record, self.name, value)
