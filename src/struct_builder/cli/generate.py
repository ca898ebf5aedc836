from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from struct_builder.cli.source import fail, read_definitions
from struct_builder.core.errors import BuilderError
from struct_builder.core.generate import plan_definitions, render_plans

console = Console()


def generate(
    path: Annotated[str | None, typer.Argument(help="Path to a Rust source file.")] = None,
    code: Annotated[str | None, typer.Option(help="Rust source string to read instead of a file path.")] = None,
    type_name: Annotated[str | None, typer.Option("--type", help="Only generate this type.")] = None,
    wrapper: Annotated[str | None, typer.Option(help="Optional wrapper name (default: Option).")] = None,
    output: Annotated[Path | None, typer.Option(help="Write the generated code to this file.")] = None,
) -> None:
    """Generate Rust builder declarations."""
    definitions = read_definitions(path, code)
    try:
        generated = render_plans(plan_definitions(definitions, type_name, wrapper))
    except (BuilderError, ValueError) as exc:
        raise fail(exc) from exc

    text = "\n".join(rendered for _, rendered in generated)
    if output is None:
        typer.echo(text, nl=False)
        return
    output.write_text(text, encoding="utf-8")
    names = ", ".join(plan.builder_name for plan, _ in generated)
    console.print(f"[green]Wrote[/green] {names} to {output}")
