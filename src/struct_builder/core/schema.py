from struct_builder.core.errors import UnsupportedShapeError
from struct_builder.models import (
    DefinitionKind,
    FieldDescriptor,
    FieldStyle,
    RawTypeDefinition,
    TypeSchema,
)


def extract_schema(definition: RawTypeDefinition) -> TypeSchema:
    """Normalize a raw type definition into an ordered TypeSchema.

    Only records with named fields are accepted; anything else raises
    UnsupportedShapeError. Field order is kept exactly as declared.
    """
    if definition.kind is not DefinitionKind.RECORD:
        raise UnsupportedShapeError(definition.name, f"{definition.kind.value} types are not supported")
    if definition.field_style is not FieldStyle.NAMED:
        raise UnsupportedShapeError(definition.name, f"{definition.field_style.value}-style records are not supported")

    fields: list[FieldDescriptor] = []
    for index, raw in enumerate(definition.fields):
        if not raw.name:
            raise UnsupportedShapeError(definition.name, f"field {index} has no name")
        fields.append(FieldDescriptor(visibility=raw.visibility, name=raw.name, type=raw.type))

    return TypeSchema(name=definition.name, visibility=definition.visibility, fields=tuple(fields))
