"""
Domain Layer Exceptions

This module defines the exception hierarchy raised by beankit utilities.
All library-specific exceptions inherit from BeanKitException.

Responsibility:
    - Base exception class for library errors
    - Type-safe error handling for callers
    - Clear separation from built-in exceptions (TypeError, ValueError)

Architecture Notes:
    - Part of Shared Domain (used by every utility module)
    - Copy failures, date/time parsing failures, length and configuration
      errors each get a dedicated subclass carrying structured context
"""

from typing import Any


class BeanKitException(Exception):
    """
    Root of every error raised by beankit utilities.

    Built-in errors stay built-in: None records and unsupported argument types
    raise TypeError, so an except BeanKitException clause only catches
    conditions the library itself detected (incompatible field values,
    malformed date-time text, negative lengths, bad BEANKIT_TIMEZONE).

    Attributes:
        message: Detail text without the class-name prefix

    Examples:
        >>> try:
        ...     copy_list(rows, OrderDTO)
        ... except TypeMismatchError as e:
        ...     logger.warning(f"Row skipped, field {e.field_name!r}: {e.message}")
        ... except BeanKitException as e:
        ...     logger.error(f"Copy aborted: {e}")
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        """Message prefixed with the concrete error class, e.g. "InvalidLengthError: ..."."""
        return f"{self.__class__.__name__}: {self.message}"

    def __repr__(self) -> str:
        """Constructor-style form used in logs and assertion output."""
        return f"{self.__class__.__name__}(message={self.message!r})"


class TypeMismatchError(BeanKitException):
    """
    Raised when a source value cannot be assigned to the target field of the same name.

    No coercion is attempted: the value must already satisfy the target
    field's annotation. The copy aborts at the failing field, fields copied
    before it keep their new values.

    Attributes:
        field_name: Name of the field that failed
        expected_type: Annotation of the target field
        actual_type: Type of the source value

    Examples:
        >>> raise TypeMismatchError(
        ...     "Cannot assign str to int",
        ...     field_name="age",
        ...     expected_type=int,
        ...     actual_type=str,
        ... )
    """

    def __init__(
        self,
        message: str,
        field_name: str | None = None,
        expected_type: Any = None,
        actual_type: type | None = None,
    ) -> None:
        """
        Initialize type mismatch error.

        Args:
            message: Error description
            field_name: Name of the failing field (optional)
            expected_type: Target field annotation (optional)
            actual_type: Type of the offending source value (optional)
        """
        self.field_name = field_name
        self.expected_type = expected_type
        self.actual_type = actual_type

        if field_name:
            super().__init__(f"{message} | Field: '{field_name}'")
        else:
            super().__init__(message)


class AliasedTargetError(BeanKitException):
    """
    Raised when a target factory returns the source record itself.

    copy_to() guarantees a fresh instance, so a factory that hands back the
    source object is rejected instead of silently aliasing it.
    """


class InvalidDateTimeFormatError(BeanKitException):
    """
    Raised when a date/time value cannot be converted.

    This exception is raised when:
    - A string does not match DATE_TIME_PATTERN ("yyyy-MM-dd HH:mm:ss")
    - A naive datetime is passed where an instant (aware datetime) is required
    - An aware datetime is passed where a local date-time is required

    Attributes:
        original_value: Value that failed conversion (optional)
        original_error: Underlying exception, e.g. ValueError from strptime (optional)

    Examples:
        >>> raise InvalidDateTimeFormatError(
        ...     "Cannot parse date-time",
        ...     original_value="2024/01/01",
        ... )
    """

    def __init__(
        self,
        message: str,
        original_value: Any = None,
        original_error: Exception | None = None,
    ) -> None:
        """
        Initialize date/time format error.

        Args:
            message: Error description
            original_value: Value that failed conversion (optional)
            original_error: Underlying exception (optional)
        """
        self.original_value = original_value
        self.original_error = original_error

        detailed_parts = [message]
        if original_value is not None:
            detailed_parts.append(f"Value: {original_value!r}")
        if original_error:
            detailed_parts.append(
                f"Original error: {type(original_error).__name__}: {original_error}"
            )

        super().__init__(" | ".join(detailed_parts))


class InvalidLengthError(BeanKitException):
    """
    Raised when a requested string length or size is negative.

    Examples:
        >>> raise InvalidLengthError("Length must be >= 0, got -1", length=-1)
    """

    def __init__(self, message: str, length: int | None = None) -> None:
        """
        Initialize length error.

        Args:
            message: Error description
            length: Offending length value (optional)
        """
        self.length = length
        super().__init__(message)


class ConfigurationError(BeanKitException):
    """
    Raised when an environment setting holds an unusable value.

    Attributes:
        setting: Name of the environment variable (optional)
    """

    def __init__(self, message: str, setting: str | None = None) -> None:
        self.setting = setting
        super().__init__(message)
