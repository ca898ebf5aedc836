import dataclasses
import typing
from typing import Any

from struct_builder.core.errors import UnsupportedShapeError
from struct_builder.models import GenericType, PlainType, RawField, RawTypeDefinition, TypeReference


def _visibility(name: str) -> str:
    return "" if name.startswith("_") else "pub"


def _type_name(annotation: Any) -> str:
    name = getattr(annotation, "__name__", None)
    return name if isinstance(name, str) else repr(annotation)


def type_reference_from_annotation(annotation: Any) -> TypeReference:
    origin = typing.get_origin(annotation)
    if origin is None:
        return PlainType(name=_type_name(annotation))
    return GenericType(
        name=_type_name(origin),
        arguments=tuple(type_reference_from_annotation(arg) for arg in typing.get_args(annotation)),
    )


def definition_from_dataclass(cls: type) -> RawTypeDefinition:
    """Describe a dataclass as a named-field record, in field declaration order.

    Fields declared with ``init=False`` are not constructor arguments and get
    no builder field.
    """
    if not (isinstance(cls, type) and dataclasses.is_dataclass(cls)):
        raise UnsupportedShapeError(getattr(cls, "__name__", repr(cls)), "not a dataclass")

    hints = typing.get_type_hints(cls)
    fields = tuple(
        RawField(
            visibility=_visibility(field.name),
            name=field.name,
            type=type_reference_from_annotation(hints.get(field.name, field.type)),
        )
        for field in dataclasses.fields(cls)
        if field.init
    )
    return RawTypeDefinition(name=cls.__name__, visibility=_visibility(cls.__name__), fields=fields)
