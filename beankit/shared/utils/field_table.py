"""
Field Table

Enumerates the copyable fields of a record as FieldDescriptor objects.

Supported record shapes:
    - @dataclass instances: dataclasses.fields(), annotations resolved with
      typing.get_type_hints(); every field is read-only when the dataclass is frozen,
      unset init=False fields are not readable
    - pydantic BaseModel instances: model_fields on the model class; read-only
      when the model or the individual field is frozen
    - plain objects: public instance attributes (__dict__ and __slots__),
      annotated class attributes (ClassVar excluded) and public class-level
      properties (readable with a getter, writable with a setter)

Reserved names (RESERVED_FIELD_NAMES) are never listed.

Architecture Notes:
    - Tables are built per call, nothing is cached between calls
    - Unresolvable annotations degrade to None (unchecked), never raise
"""

import dataclasses
import logging
import typing
from typing import Any, ClassVar

from pydantic import BaseModel

from beankit.domain.models import FieldDescriptor
from beankit.shared.config import RESERVED_FIELD_NAMES

logger = logging.getLogger(__name__)


def describe_fields(record: Any) -> dict[str, FieldDescriptor]:
    """
    Build the field table of a record.

    Args:
        record: Dataclass instance, pydantic model instance or plain object

    Returns:
        Mapping of field name to FieldDescriptor, in declaration order

    Raises:
        TypeError: If record is None or a class instead of an instance

    Examples:
        >>> @dataclass
        ... class User:
        ...     name: str
        ...     age: int | None = None
        >>> list(describe_fields(User("Ann")))
        ['name', 'age']
    """
    if record is None:
        raise TypeError("Cannot describe fields of None")
    if isinstance(record, type):
        raise TypeError(f"Expected a record instance, got class {record.__name__}")

    if isinstance(record, BaseModel):
        descriptors = _describe_model_fields(record)
    elif dataclasses.is_dataclass(record):
        descriptors = _describe_dataclass_fields(record)
    else:
        descriptors = _describe_plain_fields(record)

    return {
        descriptor.name: descriptor
        for descriptor in descriptors
        if descriptor.name not in RESERVED_FIELD_NAMES
    }


def _describe_dataclass_fields(record: Any) -> list[FieldDescriptor]:
    record_type = type(record)
    hints = _resolve_type_hints(record_type)
    frozen = record_type.__dataclass_params__.frozen

    descriptors = []
    for field in dataclasses.fields(record):
        annotation = hints.get(field.name)
        if annotation is None and not isinstance(field.type, str):
            annotation = field.type
        descriptors.append(
            FieldDescriptor(
                name=field.name,
                annotation=annotation,
                # init=False fields without default stay unset until assigned
                readable=hasattr(record, field.name),
                writable=not frozen,
            )
        )
    return descriptors


def _describe_model_fields(record: BaseModel) -> list[FieldDescriptor]:
    model_type = type(record)
    model_frozen = bool(model_type.model_config.get("frozen", False))

    return [
        FieldDescriptor(
            name=name,
            annotation=field_info.annotation,
            readable=True,
            writable=not (model_frozen or field_info.frozen),
        )
        for name, field_info in model_type.model_fields.items()
    ]


def _describe_plain_fields(record: Any) -> list[FieldDescriptor]:
    record_type = type(record)
    hints = _resolve_type_hints(record_type)

    names: list[str] = list(getattr(record, "__dict__", {}))
    for klass in record_type.__mro__:
        slots = vars(klass).get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for slot in slots:
            # Unset slots raise AttributeError on read
            if slot not in names and hasattr(record, slot):
                names.append(slot)

    # Annotated class attributes the instance never reassigned
    for name, annotation in hints.items():
        if name in names or typing.get_origin(annotation) is ClassVar:
            continue
        if isinstance(getattr(record_type, name, None), property):
            continue
        if hasattr(record, name):
            names.append(name)

    descriptors = [
        FieldDescriptor(name=name, annotation=hints.get(name))
        for name in names
        if not name.startswith("_")
    ]

    # Properties: first definition along the MRO wins
    seen = set(names)
    for klass in record_type.__mro__:
        for name, attribute in vars(klass).items():
            if name in seen or name.startswith("_"):
                continue
            if isinstance(attribute, property):
                seen.add(name)
                descriptors.append(
                    FieldDescriptor(
                        name=name,
                        annotation=None,
                        readable=attribute.fget is not None,
                        writable=attribute.fset is not None,
                    )
                )
    return descriptors


def _resolve_type_hints(record_type: type) -> dict[str, Any]:
    """Resolve annotations of a class; unresolvable forward references yield {}."""
    try:
        return typing.get_type_hints(record_type)
    except (NameError, TypeError) as e:
        logger.debug(
            f"Cannot resolve annotations of {record_type.__name__}, "
            f"fields will not be type-checked: {e}"
        )
        return {}
