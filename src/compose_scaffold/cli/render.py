"""Print a single generated template."""

from typing import Annotated

import typer
from rich.console import Console

from compose_scaffold.cli.python import get_helper
from compose_scaffold.core.python import PYTHON_GENERATOR, gen_docker_compose, gen_docker_compose_debug, gen_dockerfile
from compose_scaffold.launcher.debugpy_helper import LauncherNotFoundError
from compose_scaffold.models import PackageInfo, PlatformOS

render_app = typer.Typer(help="Print a generated file to stdout.")
console = Console()
err_console = Console(stderr=True)

_ServiceOption = Annotated[str, typer.Option("--service", help="Module to run, also used as service name.")]
_PortOption = Annotated[list[int] | None, typer.Option("--port", "-p", help="Container port to expose (repeatable).")]


def _ports(port: list[int] | None) -> list[int]:
    return port if port else list(PYTHON_GENERATOR.default_ports)


def _emit(text: str) -> None:
    console.print(text, markup=False, highlight=False, soft_wrap=True)


@render_app.command("dockerfile")
def dockerfile(service: _ServiceOption = "app", port: _PortOption = None) -> None:
    """Render the Dockerfile."""
    _emit(gen_dockerfile(service, "python", PlatformOS.LINUX, _ports(port), PackageInfo()))


@render_app.command("compose")
def compose(service: _ServiceOption = "app", port: _PortOption = None) -> None:
    """Render docker-compose.yml."""
    _emit(gen_docker_compose(service, "python", PlatformOS.LINUX, _ports(port)))


@render_app.command("compose-debug")
def compose_debug(service: _ServiceOption = "app", port: _PortOption = None) -> None:
    """Render docker-compose.debug.yml."""
    try:
        text = gen_docker_compose_debug(
            service, "python", PlatformOS.LINUX, _ports(port), PackageInfo(), helper=get_helper()
        )
    except LauncherNotFoundError as exc:
        err_console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1) from exc
    _emit(text)
