from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class PlainType(_Frozen):
    kind: Literal["plain"] = "plain"
    name: str

    def render(self) -> str:
        return self.name


class GenericType(_Frozen):
    kind: Literal["generic"] = "generic"
    name: str
    arguments: tuple["TypeReference", ...] = ()

    def render(self) -> str:
        return f"{self.name}<{', '.join(arg.render() for arg in self.arguments)}>"


TypeReference = Annotated[PlainType | GenericType, Field(discriminator="kind")]

GenericType.model_rebuild()  # necessary for recursive types


class DefinitionKind(str, Enum):
    RECORD = "record"
    ENUM = "enum"
    UNION = "union"


class FieldStyle(str, Enum):
    NAMED = "named"
    TUPLE = "tuple"
    UNIT = "unit"


class RawField(_Frozen):
    visibility: str = ""
    name: str | None = None
    type: TypeReference


class RawTypeDefinition(_Frozen):
    """A type definition as handed over by a front-end, before any shape checks."""

    name: str
    visibility: str = ""
    kind: DefinitionKind = DefinitionKind.RECORD
    field_style: FieldStyle = FieldStyle.NAMED
    fields: tuple[RawField, ...] = ()
    derives: tuple[str, ...] = ()


class FieldDescriptor(_Frozen):
    visibility: str
    name: str
    type: TypeReference


class TypeSchema(_Frozen):
    name: str
    visibility: str
    fields: tuple[FieldDescriptor, ...]


class StorageField(_Frozen):
    visibility: str
    name: str
    storage_type: TypeReference
    initially_absent: bool


class Setter(_Frozen):
    visibility: str
    name: str
    param_type: TypeReference


class AssemblyField(_Frozen):
    name: str
    is_optional: bool


class BuilderPlan(_Frozen):
    source_name: str
    source_visibility: str
    builder_name: str
    builder_visibility: str
    wrapper_name: str
    factory_name: str = "builder"
    assembly_name: str = "build"
    storage_fields: tuple[StorageField, ...] = ()
    setters: tuple[Setter, ...] = ()
    assembly_fields: tuple[AssemblyField, ...] = ()
