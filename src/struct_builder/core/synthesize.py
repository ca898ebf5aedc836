import logging

from struct_builder.core.optionality import DEFAULT_WRAPPER_NAME, OptionalType, classify
from struct_builder.models import (
    AssemblyField,
    BuilderPlan,
    GenericType,
    Setter,
    StorageField,
    TypeSchema,
)

logger = logging.getLogger(__name__)


def builder_name_for(type_name: str) -> str:
    return f"{type_name}Builder"


def synthesize_builder(schema: TypeSchema, wrapper_name: str = DEFAULT_WRAPPER_NAME) -> BuilderPlan:
    """Derive the builder plan for a record schema.

    Per field, in declaration order:

    - optional (``wrapper<T>``): storage keeps the field's own type, the setter
      takes ``T`` and wraps it, assembly copies the stored value through.
    - required: storage is ``wrapper<field type>`` starting absent, the setter
      takes the field type, assembly fails on the first absent field.
    """
    storage_fields: list[StorageField] = []
    setters: list[Setter] = []
    assembly_fields: list[AssemblyField] = []

    for field in schema.fields:
        optionality = classify(field.type, wrapper_name)
        if isinstance(optionality, OptionalType):
            storage_type = field.type
            param_type = optionality.inner
            is_optional = True
        else:
            storage_type = GenericType(name=wrapper_name, arguments=(field.type,))
            param_type = field.type
            is_optional = False

        storage_fields.append(
            StorageField(
                visibility=field.visibility,
                name=field.name,
                storage_type=storage_type,
                initially_absent=not is_optional,
            )
        )
        setters.append(Setter(visibility=field.visibility, name=field.name, param_type=param_type))
        assembly_fields.append(AssemblyField(name=field.name, is_optional=is_optional))

    plan = BuilderPlan(
        source_name=schema.name,
        source_visibility=schema.visibility,
        builder_name=builder_name_for(schema.name),
        builder_visibility=schema.visibility,
        wrapper_name=wrapper_name,
        storage_fields=tuple(storage_fields),
        setters=tuple(setters),
        assembly_fields=tuple(assembly_fields),
    )

    logger.info(
        "Synthesized %s for %s (%d required, %d optional)",
        plan.builder_name,
        schema.name,
        sum(1 for f in assembly_fields if not f.is_optional),
        sum(1 for f in assembly_fields if f.is_optional),
    )
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Builder plan: %s", plan.model_dump_json(indent=2))
    return plan
