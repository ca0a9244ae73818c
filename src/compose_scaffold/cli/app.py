import logging
from typing import Annotated

import typer
from rich.logging import RichHandler

from compose_scaffold.cli.python import python
from compose_scaffold.cli.render import render_app
from compose_scaffold.config import Settings

app = typer.Typer(
    name="compose-scaffold",
    help="Compose Scaffold CLI — generate Docker files and debug setup for Python projects.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.callback()
def _configure(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging.")] = False,
) -> None:
    level = "DEBUG" if verbose else Settings.from_env().log_level
    logging.basicConfig(level=level, format="%(message)s", handlers=[RichHandler(show_path=False)], force=True)


app.command("python")(python)
app.add_typer(render_app, name="render")


def main() -> None:
    app()
