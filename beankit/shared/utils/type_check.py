"""
Assignment Compatibility Check

Decides whether a value may be assigned to a field with a given annotation,
without any coercion.

Rules:
    - None / Any / TypeVar / unresolved forward reference: always compatible
    - None value: only when the annotation admits None (Optional, X | None, Any)
    - Union: compatible with any arm
    - Literal: value must be one of the literal values
    - Annotated / ClassVar / Final / NewType: checked against the wrapped type
    - Parameterized generics (list[int], dict[str, X]): origin only, items are not inspected
    - float accepts int, complex accepts int and float (numeric tower)
    - Any other class: isinstance()
"""

import logging
import types
import typing
from typing import Annotated, Any, ClassVar, Final, ForwardRef, Literal, TypeVar, Union

logger = logging.getLogger(__name__)

_UNION_ORIGINS = (Union, types.UnionType)
_WRAPPER_ORIGINS = (Annotated, ClassVar, Final)

# Numeric tower as accepted by static type checkers
_NUMERIC_PROMOTIONS: dict[type, tuple[type, ...]] = {
    float: (int, float),
    complex: (int, float, complex),
}


def is_assignable(value: Any, annotation: Any) -> bool:
    """
    Check whether value satisfies annotation.

    Args:
        value: Candidate value
        annotation: Target field annotation (None when unknown)

    Returns:
        True if value can be assigned without coercion

    Examples:
        >>> is_assignable(1, float)
        True
        >>> is_assignable("1", int)
        False
        >>> is_assignable(None, int | None)
        True
        >>> is_assignable(None, int)
        False
    """
    if annotation is None or annotation is Any:
        return True
    if isinstance(annotation, (TypeVar, ForwardRef, str)):
        return True
    if annotation is type(None):
        return value is None

    supertype = getattr(annotation, "__supertype__", None)
    if supertype is not None:
        return is_assignable(value, supertype)

    origin = typing.get_origin(annotation)
    arguments = typing.get_args(annotation)

    if origin in _UNION_ORIGINS:
        return any(is_assignable(value, arm) for arm in arguments)
    if origin is Literal:
        return any(value == literal and type(value) is type(literal) for literal in arguments)
    if origin in _WRAPPER_ORIGINS:
        return is_assignable(value, arguments[0]) if arguments else True

    if value is None:
        return False

    if origin is not None:
        return _safe_isinstance(value, origin)

    if annotation in _NUMERIC_PROMOTIONS:
        return isinstance(value, _NUMERIC_PROMOTIONS[annotation])

    return _safe_isinstance(value, annotation)


def describe_annotation(annotation: Any) -> str:
    """Human-readable name of an annotation for error messages."""
    if isinstance(annotation, type) and typing.get_origin(annotation) is None:
        return annotation.__name__
    return repr(annotation).replace("typing.", "")


def _safe_isinstance(value: Any, annotation: Any) -> bool:
    if not isinstance(annotation, type):
        return True
    try:
        return isinstance(value, annotation)
    except TypeError as e:
        # Non runtime-checkable Protocols cannot be used with isinstance()
        logger.debug(f"Skipping type check against {annotation!r}: {e}")
        return True
