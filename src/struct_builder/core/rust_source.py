import logging
import re
from collections.abc import Iterator
from pathlib import Path

from tree_sitter import Node
from tree_sitter_language_pack import get_parser

from struct_builder.models import (
    DefinitionKind,
    FieldStyle,
    GenericType,
    PlainType,
    RawField,
    RawTypeDefinition,
    TypeReference,
)

logger = logging.getLogger(__name__)

_DERIVE_RE = re.compile(r"^#\[\s*derive\s*\((?P<names>.*)\)\s*\]$", re.DOTALL)

_ITEM_KINDS = {
    "struct_item": DefinitionKind.RECORD,
    "enum_item": DefinitionKind.ENUM,
    "union_item": DefinitionKind.UNION,
}


def _text(node: Node, source: bytes) -> str:
    return source[node.start_byte : node.end_byte].decode("utf-8")


def _visibility(node: Node, source: bytes) -> str:
    for child in node.children:
        if child.type == "visibility_modifier":
            return _text(child, source)
    return ""


def _parse_derives(attribute_text: str) -> list[str]:
    match = _DERIVE_RE.match(attribute_text.strip())
    if match is None:
        return []
    # `serde::Serialize` derives as `Serialize`
    return [name.strip().rsplit("::", 1)[-1] for name in match.group("names").split(",") if name.strip()]


def type_reference_from_node(node: Node, source: bytes) -> TypeReference:
    """Convert a tree-sitter type node into a TypeReference.

    Only ``generic_type`` nodes become generic references; every other type
    (references, tuples, arrays, scoped paths) is kept as plain source text.
    """
    if node.type == "generic_type":
        base = node.child_by_field_name("type")
        arguments = node.child_by_field_name("type_arguments")
        assert base is not None
        args: tuple[TypeReference, ...] = ()
        if arguments is not None:
            args = tuple(type_reference_from_node(arg, source) for arg in arguments.named_children)
        return GenericType(name=_text(base, source), arguments=args)
    return PlainType(name=_text(node, source))


def _named_fields(body: Node, source: bytes) -> tuple[RawField, ...]:
    fields: list[RawField] = []
    for child in body.named_children:
        if child.type != "field_declaration":
            continue
        name = child.child_by_field_name("name")
        type_node = child.child_by_field_name("type")
        assert name is not None and type_node is not None
        fields.append(
            RawField(
                visibility=_visibility(child, source),
                name=_text(name, source),
                type=type_reference_from_node(type_node, source),
            )
        )
    return tuple(fields)


def _ordered_fields(body: Node, source: bytes) -> tuple[RawField, ...]:
    fields: list[RawField] = []
    pending_visibility = ""
    for child in body.named_children:
        if child.type == "visibility_modifier":
            pending_visibility = _text(child, source)
        elif child.type in ("attribute_item", "line_comment", "block_comment"):
            continue
        else:
            fields.append(RawField(visibility=pending_visibility, type=type_reference_from_node(child, source)))
            pending_visibility = ""
    return tuple(fields)


def _definition_from_item(node: Node, source: bytes, derives: list[str]) -> RawTypeDefinition:
    name = node.child_by_field_name("name")
    assert name is not None
    body = node.child_by_field_name("body")

    style = FieldStyle.UNIT
    fields: tuple[RawField, ...] = ()
    if body is not None and body.type == "field_declaration_list":
        style = FieldStyle.NAMED
        fields = _named_fields(body, source)
    elif body is not None and body.type == "ordered_field_declaration_list":
        style = FieldStyle.TUPLE
        fields = _ordered_fields(body, source)

    return RawTypeDefinition(
        name=_text(name, source),
        visibility=_visibility(node, source),
        kind=_ITEM_KINDS[node.type],
        field_style=style,
        fields=fields,
        derives=tuple(derives),
    )


def _walk_items(container: Node, source: bytes) -> Iterator[RawTypeDefinition]:
    derives: list[str] = []
    for child in container.named_children:
        if child.type == "attribute_item":
            derives.extend(_parse_derives(_text(child, source)))
            continue
        if child.type in _ITEM_KINDS:
            yield _definition_from_item(child, source, derives)
        elif child.type == "mod_item":
            body = child.child_by_field_name("body")
            if body is not None:
                yield from _walk_items(body, source)
        if child.type not in ("line_comment", "block_comment"):
            derives = []


def parse_type_definitions(source: bytes) -> list[RawTypeDefinition]:
    """Parse Rust source and return its struct, enum and union definitions in source order."""
    parser = get_parser("rust")
    tree = parser.parse(source)
    definitions = list(_walk_items(tree.root_node, source))
    logger.debug("Found %d type definition(s)", len(definitions))
    return definitions


def parse_type_definitions_from_file(path: str) -> list[RawTypeDefinition]:
    file_path = Path(path)
    try:
        source_bytes = file_path.read_bytes()
    except FileNotFoundError:
        raise FileNotFoundError(f"File not found: {path}") from None
    return parse_type_definitions(source_bytes)


def find_type_definition(definitions: list[RawTypeDefinition], name: str) -> RawTypeDefinition:
    for definition in definitions:
        if definition.name == name:
            return definition
    known = sorted(d.name for d in definitions)
    raise ValueError(f"Type '{name}' not found. Available: {known}")
