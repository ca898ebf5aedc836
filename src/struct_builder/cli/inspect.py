from collections.abc import Sequence
from typing import Annotated, Any

import typer
from rich.console import Console
from rich.table import Table

from struct_builder.cli.source import fail, read_definitions
from struct_builder.core.errors import BuilderError
from struct_builder.core.generate import plan_definitions
from struct_builder.models import BuilderPlan

console = Console()


def _render_table(title: str, headers: Sequence[str], rows: Sequence[tuple[Any, ...]]) -> None:
    table = Table(title=title, show_lines=False)
    for h in headers:
        table.add_column(h)
    for row in rows:
        table.add_row(*(str(v) for v in row))
    console.print(table)


def _render_plan(plan: BuilderPlan) -> None:
    console.print(
        f"[bold]{plan.builder_name}[/bold] for {plan.source_name} "
        f"(wrapper: {plan.wrapper_name}, factory: {plan.factory_name}(), assembly: {plan.assembly_name}())"
    )
    _render_table(
        "storage",
        ["visibility", "name", "type", "starts absent"],
        [(f.visibility or "-", f.name, f.storage_type.render(), f.initially_absent) for f in plan.storage_fields],
    )
    _render_table(
        "setters",
        ["visibility", "name", "parameter"],
        [(s.visibility or "-", s.name, s.param_type.render()) for s in plan.setters],
    )
    _render_table(
        "assembly",
        ["name", "optional"],
        [(a.name, a.is_optional) for a in plan.assembly_fields],
    )


def types(
    path: Annotated[str | None, typer.Argument(help="Path to a Rust source file.")] = None,
    code: Annotated[str | None, typer.Option(help="Rust source string to read instead of a file path.")] = None,
) -> None:
    """List the type definitions found in Rust source."""
    definitions = read_definitions(path, code)
    _render_table(
        "types",
        ["name", "kind", "style", "fields", "derives"],
        [
            (d.name, d.kind.value, d.field_style.value, len(d.fields), ", ".join(d.derives) or "-")
            for d in definitions
        ],
    )
    console.print(f"({len(definitions)} types)")


def plan(
    path: Annotated[str | None, typer.Argument(help="Path to a Rust source file.")] = None,
    code: Annotated[str | None, typer.Option(help="Rust source string to read instead of a file path.")] = None,
    type_name: Annotated[str | None, typer.Option("--type", help="Only plan this type.")] = None,
    wrapper: Annotated[str | None, typer.Option(help="Optional wrapper name (default: Option).")] = None,
    as_json: Annotated[bool, typer.Option("--json", help="Print the plan as JSON.")] = False,
) -> None:
    """Show the builder plan for each selected type."""
    definitions = read_definitions(path, code)
    try:
        plans = plan_definitions(definitions, type_name, wrapper)
    except (BuilderError, ValueError) as exc:
        raise fail(exc) from exc

    for builder_plan in plans:
        if as_json:
            typer.echo(builder_plan.model_dump_json(indent=2))
        else:
            _render_plan(builder_plan)
