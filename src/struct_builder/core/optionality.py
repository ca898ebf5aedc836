from dataclasses import dataclass

from struct_builder.models import GenericType, TypeReference

DEFAULT_WRAPPER_NAME = "Option"


@dataclass(frozen=True)
class RequiredType:
    type: TypeReference


@dataclass(frozen=True)
class OptionalType:
    inner: TypeReference


Optionality = RequiredType | OptionalType


def generic_argument(type_ref: TypeReference) -> tuple[str, TypeReference] | None:
    """Return (base name, argument) for a generic instantiation of arity one."""
    match type_ref:
        case GenericType(name=name, arguments=(argument,)):
            return name, argument
        case _:
            return None


def classify(type_ref: TypeReference, wrapper_name: str = DEFAULT_WRAPPER_NAME) -> Optionality:
    """Classify a field type as optional or required.

    The match is purely structural: the base name must equal ``wrapper_name``
    exactly and there must be exactly one type argument. Aliases, qualified
    paths and look-alike wrappers under other names are required fields.
    """
    generic = generic_argument(type_ref)
    if generic is not None and generic[0] == wrapper_name:
        return OptionalType(inner=generic[1])
    return RequiredType(type=type_ref)
