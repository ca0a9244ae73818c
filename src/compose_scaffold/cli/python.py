import asyncio
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from compose_scaffold.config import Settings
from compose_scaffold.core.configure import service_name_from_folder
from compose_scaffold.core.python import PYTHON_GENERATOR, UserCancelledError
from compose_scaffold.core.scaffold import scaffold_python
from compose_scaffold.debugging.vscode import VsCodeDebugScaffoldingProvider
from compose_scaffold.launcher.debugpy_helper import DebugpyExtensionHelper, LauncherNotFoundError
from compose_scaffold.models import PlatformOS
from compose_scaffold.ui.console import ConsoleInputBox

console = Console()


def get_helper() -> DebugpyExtensionHelper:
    return DebugpyExtensionHelper(Settings.from_env().launcher_folder)


def python(
    folder: Annotated[Path, typer.Argument(help="Project folder to scaffold.")] = Path("."),
    service: Annotated[
        str | None, typer.Option(help="Module to run, also used as service name. Defaults to the folder name.")
    ] = None,
    port: Annotated[list[int] | None, typer.Option("--port", "-p", help="Container port to expose (repeatable).")] = None,
    os: Annotated[PlatformOS, typer.Option("--os", help="Target container OS.")] = PlatformOS.LINUX,
    compose: Annotated[bool, typer.Option(help="Also generate docker-compose files.")] = True,
    debug: Annotated[bool, typer.Option(help="Set up VS Code debugging in the container.")] = True,
    force: Annotated[bool, typer.Option("--force", "-f", help="Overwrite existing files.")] = False,
) -> None:
    """Add Docker files to a Python project."""
    folder = folder.resolve()
    ports = port if port else list(PYTHON_GENERATOR.default_ports)

    async def _run() -> list[Path]:
        return await scaffold_python(
            folder,
            service or service_name_from_folder(folder),
            ports,
            helper=get_helper(),
            platform_os=os,
            generate_compose_files=compose,
            overwrite=force,
            debug=debug,
            ui=ConsoleInputBox(console),
            provider=VsCodeDebugScaffoldingProvider(),
        )

    try:
        written = asyncio.run(_run())
    except UserCancelledError:
        console.print("[yellow]Cancelled.[/yellow]")
        raise typer.Exit(1) from None
    except (FileExistsError, LauncherNotFoundError, ValueError) as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1) from exc

    for path in written:
        console.print(f"[green]Created[/green] {path}")
    if debug:
        console.print(f"[green]Updated[/green] {folder / '.vscode'}")
