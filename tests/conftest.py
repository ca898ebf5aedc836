"""Shared fixtures and helpers for tests."""

from pathlib import Path

import pytest
from tree_sitter import Parser
from tree_sitter_language_pack import get_parser

from struct_builder.models import (
    FieldDescriptor,
    GenericType,
    PlainType,
    TypeSchema,
)

_REPO_ROOT = Path(__file__).parent.parent


# ---------------------------------------------------------------------------
# Auto-marker: tag tests as "unit" or "integration" based on directory
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        test_path = Path(str(item.fspath))
        rel = test_path.relative_to(_REPO_ROOT / "tests")
        parts = rel.parts
        if parts and parts[0] == "integration":
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# Shared unit-test fixtures
# ---------------------------------------------------------------------------

POINT_SOURCE = """\
#[derive(Builder)]
pub struct Point {
    pub x: i32,
    pub y: Option<i32>,
}
"""


@pytest.fixture
def rust_parser() -> Parser:
    """Return a tree-sitter parser for Rust."""
    return get_parser("rust")


@pytest.fixture
def point_source() -> str:
    return POINT_SOURCE


@pytest.fixture
def point_schema() -> TypeSchema:
    """Schema of `Point { pub x: i32, pub y: Option<i32> }`."""
    i32 = PlainType(name="i32")
    return TypeSchema(
        name="Point",
        visibility="pub",
        fields=(
            FieldDescriptor(visibility="pub", name="x", type=i32),
            FieldDescriptor(visibility="pub", name="y", type=GenericType(name="Option", arguments=(i32,))),
        ),
    )
