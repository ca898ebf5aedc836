from struct_builder.config import get_settings
from struct_builder.core.rust_printer import render_builder
from struct_builder.core.rust_source import find_type_definition, parse_type_definitions
from struct_builder.core.schema import extract_schema
from struct_builder.core.synthesize import synthesize_builder
from struct_builder.models import BuilderPlan, RawTypeDefinition

DERIVE_NAME = "Builder"


def select_definitions(definitions: list[RawTypeDefinition], type_name: str | None = None) -> list[RawTypeDefinition]:
    """Pick the named definition, or every definition deriving ``Builder``."""
    if type_name:
        return [find_type_definition(definitions, type_name)]
    selected = [d for d in definitions if DERIVE_NAME in d.derives]
    if not selected:
        raise ValueError(f"No type derives {DERIVE_NAME}; pass a type name explicitly.")
    return selected


def plan_definition(definition: RawTypeDefinition, wrapper_name: str | None = None) -> BuilderPlan:
    return synthesize_builder(extract_schema(definition), wrapper_name or get_settings().optional_wrapper)


def plan_definitions(
    definitions: list[RawTypeDefinition], type_name: str | None = None, wrapper_name: str | None = None
) -> list[BuilderPlan]:
    return [plan_definition(definition, wrapper_name) for definition in select_definitions(definitions, type_name)]


def plan_from_source(source: str, type_name: str | None = None, wrapper_name: str | None = None) -> list[BuilderPlan]:
    return plan_definitions(parse_type_definitions(source.encode("utf-8")), type_name, wrapper_name)


def render_plans(plans: list[BuilderPlan]) -> list[tuple[BuilderPlan, str]]:
    return [(plan, render_builder(plan)) for plan in plans]


def generate_from_source(
    source: str, type_name: str | None = None, wrapper_name: str | None = None
) -> list[tuple[BuilderPlan, str]]:
    """Synthesize and render builders for Rust source.

    Nothing is rendered unless every selected definition is a named-field
    record; the first unsupported one raises UnsupportedShapeError.
    """
    return render_plans(plan_from_source(source, type_name, wrapper_name))
