"""Tests for the struct-builder CLI."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from struct_builder.cli.app import app

runner = CliRunner()


@pytest.mark.parametrize(
    "args",
    [
        [],
        ["types"],
        ["plan"],
        ["generate"],
    ],
    ids=["root", "types", "plan", "generate"],
)
def test_short_help_flag(args: list[str]) -> None:
    result = runner.invoke(app, [*args, "-h"])
    assert result.exit_code == 0
    assert "Usage" in result.output


def test_generate_prints_rust(point_source: str) -> None:
    result = runner.invoke(app, ["generate", "--code", point_source])

    assert result.exit_code == 0
    assert "pub struct PointBuilder {" in result.output
    assert 'None => return Err(format!("missing required field: {}", "x").into()),' in result.output


def test_generate_from_file_to_output(tmp_path: Path, point_source: str) -> None:
    source = tmp_path / "point.rs"
    source.write_text(point_source, encoding="utf-8")
    target = tmp_path / "point_builder.rs"

    result = runner.invoke(app, ["generate", str(source), "--output", str(target)])

    assert result.exit_code == 0
    assert target.read_text(encoding="utf-8").startswith("pub struct PointBuilder {")


def test_generate_rejects_tuple_struct() -> None:
    result = runner.invoke(app, ["generate", "--code", "#[derive(Builder)]\nstruct Id(u64);"])

    assert result.exit_code == 1
    assert "unsupported shape" in result.output


def test_generate_missing_file(tmp_path: Path) -> None:
    result = runner.invoke(app, ["generate", str(tmp_path / "nope.rs")])

    assert result.exit_code == 1
    assert "File not found" in result.output


def test_plan_json(point_source: str) -> None:
    result = runner.invoke(app, ["plan", "--code", point_source, "--json"])

    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["builder_name"] == "PointBuilder"
    assert [a["is_optional"] for a in data["assembly_fields"]] == [False, True]


def test_plan_table_with_wrapper(point_source: str) -> None:
    result = runner.invoke(app, ["plan", "--code", point_source, "--wrapper", "Maybe"])

    assert result.exit_code == 0
    assert "PointBuilder" in result.output
    assert "Maybe" in result.output


def test_types_lists_definitions() -> None:
    result = runner.invoke(app, ["types", "--code", "struct A { x: u8 }\nenum B { C }"])

    assert result.exit_code == 0
    assert "(2 types)" in result.output


def test_types_and_plan_read_definitions_from_file(tmp_path: Path, point_source: str) -> None:
    source = tmp_path / "point.rs"
    source.write_text(point_source + "\nenum Mode { On }\n", encoding="utf-8")

    types_result = runner.invoke(app, ["types", str(source)])
    plan_result = runner.invoke(app, ["plan", str(source), "--json"])

    assert types_result.exit_code == 0
    assert "(2 types)" in types_result.output
    assert plan_result.exit_code == 0
    assert json.loads(plan_result.output)["source_name"] == "Point"


def test_types_missing_file(tmp_path: Path) -> None:
    result = runner.invoke(app, ["types", str(tmp_path / "nope.rs")])

    assert result.exit_code == 1
    assert "File not found" in result.output
