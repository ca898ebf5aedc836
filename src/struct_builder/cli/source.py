import typer
from rich.console import Console
from rich.markup import escape

from struct_builder.core.errors import BuilderError
from struct_builder.core.rust_source import parse_type_definitions, parse_type_definitions_from_file
from struct_builder.models import RawTypeDefinition

err_console = Console(stderr=True)


def read_definitions(path: str | None, code: str | None) -> list[RawTypeDefinition]:
    """Parse type definitions from ``--code`` or from the file at ``path``."""
    if code is not None:
        return parse_type_definitions(code.encode("utf-8"))
    if path is None:
        err_console.print("[red]Provide a path or --code.[/red]")
        raise typer.Exit(1)
    try:
        return parse_type_definitions_from_file(path)
    except FileNotFoundError as exc:
        err_console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(1) from None


def fail(exc: BuilderError | ValueError) -> typer.Exit:
    err_console.print(f"[red]{escape(str(exc))}[/red]")
    return typer.Exit(1)
