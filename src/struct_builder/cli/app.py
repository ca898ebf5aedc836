import logging
from typing import Annotated

import typer
from rich.logging import RichHandler

from struct_builder.cli.generate import generate
from struct_builder.cli.inspect import plan, types
from struct_builder.config import get_settings

app = typer.Typer(
    name="struct-builder",
    help="Struct Builder CLI — derive builder types for named-field records.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.callback()
def configure(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log the synthesized plans.")] = False,
) -> None:
    level = "DEBUG" if verbose else get_settings().log_level
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
    )


app.command("types")(types)
app.command("plan")(plan)
app.command("generate")(generate)


def main() -> None:
    app()
