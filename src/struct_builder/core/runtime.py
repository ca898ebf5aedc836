"""Turn a BuilderPlan into a working Python builder class."""

import copy
import logging
from collections.abc import Callable
from typing import Any, TypeVar

from struct_builder.config import get_settings
from struct_builder.core.dataclass_source import definition_from_dataclass
from struct_builder.core.errors import BuilderError, MissingRequiredFieldError, UnsupportedShapeError
from struct_builder.core.option import NOTHING, Option, Some
from struct_builder.core.schema import extract_schema
from struct_builder.core.synthesize import synthesize_builder
from struct_builder.models import BuilderPlan

logger = logging.getLogger(__name__)

C = TypeVar("C", bound=type)

# Setters wrap with `Some` and optional storage starts at `NOTHING`, so plans
# must be synthesized against the Python wrapper itself.
WRAPPER_NAME = Option.__name__
WRAPPER_EMPTY: Option[Any] = NOTHING


class BuilderBase:
    """Common behaviour of materialized builders.

    Storage lives in ``_storage`` keyed by field name, so setter methods can
    share their field's name.
    """

    __builder_plan__: BuilderPlan
    _storage: dict[str, Option[Any]]

    def __init__(self, storage: dict[str, Option[Any]]) -> None:
        self._storage = storage

    def __repr__(self) -> str:
        values = ", ".join(f"{name}={value!r}" for name, value in self._storage.items())
        return f"{type(self).__name__}({values})"

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._storage == other._storage  # type: ignore[attr-defined]

    __hash__ = None  # type: ignore[assignment]


def _make_setter(name: str) -> Callable[[BuilderBase, Any], BuilderBase]:
    def setter(self: BuilderBase, value: Any) -> BuilderBase:
        self._storage[name] = Some(value)
        return self

    setter.__name__ = name
    setter.__qualname__ = name
    return setter


def _make_assembly(plan: BuilderPlan, record_factory: Callable[..., Any]) -> Callable[[BuilderBase], Any]:
    fields = plan.assembly_fields

    def assemble(self: BuilderBase) -> Any:
        values: dict[str, Any] = {}
        for field in fields:
            stored = self._storage[field.name]
            if field.is_optional:
                values[field.name] = copy.deepcopy(stored)
            elif isinstance(stored, Some):
                values[field.name] = copy.deepcopy(stored.value)
            else:
                raise MissingRequiredFieldError(field.name)
        return record_factory(**values)

    assemble.__name__ = plan.assembly_name
    assemble.__qualname__ = plan.assembly_name
    assemble.__doc__ = f"Assemble a {plan.source_name}, failing on the first required field that was never set."
    return assemble


def materialize_builder(plan: BuilderPlan, record_factory: Callable[..., Any]) -> type[BuilderBase]:
    """Create the builder class described by ``plan``.

    ``record_factory`` is called with one keyword argument per field when the
    assembly method succeeds. Only plans for the ``Option`` wrapper can be
    materialized.
    """
    if plan.wrapper_name != WRAPPER_NAME:
        raise BuilderError(
            f"{plan.source_name}: Python builders need the '{WRAPPER_NAME}' wrapper, not '{plan.wrapper_name}'"
        )
    namespace: dict[str, Any] = {"__builder_plan__": plan, "__module__": __name__}
    for setter in plan.setters:
        if setter.name in (plan.assembly_name, "_storage") or hasattr(BuilderBase, setter.name):
            raise UnsupportedShapeError(plan.source_name, f"field '{setter.name}' collides with a builder method")
        namespace[setter.name] = _make_setter(setter.name)
    namespace[plan.assembly_name] = _make_assembly(plan, record_factory)
    return type(plan.builder_name, (BuilderBase,), namespace)


def make_factory(plan: BuilderPlan, builder_cls: type[BuilderBase]) -> Callable[[], BuilderBase]:
    """Return the zero-argument entry point that creates a fresh builder."""

    def factory() -> BuilderBase:
        storage: dict[str, Option[Any]] = {}
        for field in plan.storage_fields:
            storage[field.name] = NOTHING if field.initially_absent else WRAPPER_EMPTY
        return builder_cls(storage)

    factory.__name__ = plan.factory_name
    factory.__qualname__ = f"{plan.source_name}.{plan.factory_name}"
    return factory


def derive_builder(cls: C | None = None, *, wrapper_name: str | None = None) -> Any:
    """Class decorator giving a dataclass a ``builder()`` entry point.

    Usable bare (``@derive_builder``) or with options
    (``@derive_builder(wrapper_name="Option")``).
    """

    def wrap(target: C) -> C:
        resolved_wrapper = wrapper_name or get_settings().optional_wrapper
        schema = extract_schema(definition_from_dataclass(target))
        plan = synthesize_builder(schema, resolved_wrapper)
        builder_cls = materialize_builder(plan, target)
        builder_cls.__qualname__ = f"{target.__qualname__}.{plan.builder_name}"
        builder_cls.__module__ = target.__module__
        setattr(target, plan.factory_name, staticmethod(make_factory(plan, builder_cls)))
        setattr(target, "__builder_plan__", plan)
        logger.debug("Attached %s.%s()", target.__name__, plan.factory_name)
        return target

    if cls is None:
        return wrap
    return wrap(cls)
