"""
Bean Utilities

Copies declared properties between records (dataclasses, pydantic models,
plain objects) by field name, with optional filtering of null or empty
source values.

Responsibility:
    - Copy matching fields from a source record into a target record
    - Create fresh copies through a factory callback (single record or list)
    - Inspect records for all-None fields
    - Index a collection by a key function

Architecture Notes:
    - Stateless module-level functions, no caches and no shared state
    - Fields are paired by name through field tables (see field_table.py)
    - No coercion: incompatible values raise TypeMismatchError and abort the copy
    - No rollback: fields copied before a failure keep their new values

Examples:
    >>> @dataclass
    ... class UserEntity:
    ...     name: str | None = None
    ...     email: str | None = None
    ...     password_hash: str | None = None
    >>> @dataclass
    ... class UserDTO:
    ...     name: str | None = None
    ...     email: str | None = None
    >>> dto = copy_to(UserEntity("Ann", "ann@example.com", "x"), UserDTO)
    >>> dto
    UserDTO(name='Ann', email='ann@example.com')
"""

import logging
from collections.abc import Callable, Hashable, Iterable
from typing import Any, TypeVar

from beankit.domain.models import CopyPolicy
from beankit.domain.shared.exceptions import AliasedTargetError, TypeMismatchError
from beankit.shared.utils.field_table import describe_fields
from beankit.shared.utils.type_check import describe_annotation, is_assignable

logger = logging.getLogger(__name__)

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


def copy_into(
    source: Any,
    target: Any,
    policy: CopyPolicy = CopyPolicy.ALL,
    exclude: Iterable[str] = (),
) -> None:
    """
    Copy fields present on both source and target from source into target.

    For every readable source field with a writable target field of the same
    name, the source value is filtered through the policy, checked against the
    target field annotation and assigned. Fields are never created on the target.

    Args:
        source: Record to read from
        target: Record to write into (mutated in place)
        policy: Which source values are copied (default: ALL)
        exclude: Field names that are never copied

    Raises:
        TypeError: If source or target is None
        TypeMismatchError: If a source value does not satisfy the target
            field annotation. Fields copied before it stay assigned.

    Examples:
        >>> patch = UserDTO(name=None, email="new@example.com")
        >>> copy_into(patch, entity, CopyPolicy.SKIP_NULL)
        >>> entity.name  # untouched
        'Ann'
    """
    if source is None or target is None:
        raise TypeError("Source and target must not be None")

    policy = CopyPolicy(policy)
    excluded = frozenset(exclude)
    source_fields = describe_fields(source)
    target_fields = describe_fields(target)

    copied = 0
    for name, source_field in source_fields.items():
        target_field = target_fields.get(name)
        if target_field is None or name in excluded:
            continue
        if not (source_field.readable and target_field.writable):
            logger.debug(f"Skipping non-transferable field '{name}'")
            continue

        value = source_field.read(source)
        if policy.skips(value):
            continue

        if not is_assignable(value, target_field.annotation):
            expected = describe_annotation(target_field.annotation)
            raise TypeMismatchError(
                f"Cannot assign {type(value).__name__} value to "
                f"{type(target).__name__}.{name} of type {expected}",
                field_name=name,
                expected_type=target_field.annotation,
                actual_type=type(value),
            )

        target_field.write(target, value)
        copied += 1

    logger.debug(
        f"Copied {copied} field(s) from {type(source).__name__} "
        f"to {type(target).__name__} (policy={policy.value})"
    )


def copy_not_null_properties(source: Any, target: Any) -> None:
    """Copy source fields whose value is not None into target."""
    copy_into(source, target, CopyPolicy.SKIP_NULL)


def copy_not_empty_properties(source: Any, target: Any) -> None:
    """Copy source fields whose value is not None and not blank when stringified."""
    copy_into(source, target, CopyPolicy.SKIP_EMPTY)


def copy_to(source: Any, factory: Callable[[], T]) -> T | None:
    """
    Copy a record into a new instance created by factory.

    Args:
        source: Record to copy, may be None
        factory: Zero-argument callable returning a fresh target record
            (typically the target class itself)

    Returns:
        The new target record with all matching fields copied, or None when
        source is None (factory is not called)

    Raises:
        AliasedTargetError: If factory returns the source object itself
        TypeMismatchError: If a field value is incompatible with the target
    """
    if source is None:
        return None

    target = factory()
    if target is source:
        raise AliasedTargetError(
            f"Factory returned the source {type(source).__name__} instance instead of a new record"
        )

    copy_into(source, target, CopyPolicy.ALL)
    return target


def copy_function(
    factory: Callable[[], T],
    addition: Callable[[Any, T], None] | None = None,
) -> Callable[[Any], T | None]:
    """
    Build a one-argument copy function for use with map() and comprehensions.

    Args:
        factory: Zero-argument callable returning a fresh target record
        addition: Optional callback invoked as addition(source, target)
            after each successful copy (e.g. to fill derived fields)

    Returns:
        Function mapping a source record to a new target (None for None)

    Examples:
        >>> to_dto = copy_function(UserDTO, lambda s, t: setattr(t, "name", s.name.upper()))
        >>> [dto.name for dto in map(to_dto, users)]
        ['ANN', 'BOB']
    """

    def _copy(source: Any) -> T | None:
        target = copy_to(source, factory)
        if target is not None and addition is not None:
            addition(source, target)
        return target

    return _copy


def copy_list(source_list: Iterable[Any] | None, factory: Callable[[], T]) -> list[T | None]:
    """
    Copy every element of a sequence into a new record created by factory.

    Args:
        source_list: Records to copy; None is treated as empty
        factory: Zero-argument callable returning a fresh target record

    Returns:
        New list with the same length and order as source_list.
        None elements map to None. None input yields [].
    """
    if source_list is None:
        return []
    return [copy_to(source, factory) for source in source_list]


def all_fields_absent(record: Any) -> bool:
    """
    Check whether every field of a record is None.

    Reserved names (the type tag) are not considered. A None record counts as
    having all fields absent.

    Args:
        record: Record to inspect, may be None

    Returns:
        True if every readable field holds None, False if any holds a value
    """
    if record is None:
        return True
    return all(
        descriptor.read(record) is None
        for descriptor in describe_fields(record).values()
        if descriptor.readable
    )


def to_map(collection: Iterable[V], key_fn: Callable[[V], K]) -> dict[K, V]:
    """
    Index a collection by a key computed per element.

    Keys keep the position of their first occurrence; on collision the later
    element replaces the earlier one (last-write-wins).

    Args:
        collection: Elements to index
        key_fn: Function computing the key of an element

    Returns:
        Insertion-ordered dict of key to element

    Examples:
        >>> to_map([{"k": 1, "v": "a"}, {"k": 1, "v": "b"}], lambda item: item["k"])
        {1: {'k': 1, 'v': 'b'}}
    """
    result: dict[K, V] = {}
    for element in collection:
        result[key_fn(element)] = element
    return result
