"""Remote launcher built on debugpy, mounted into the container at ``/pydbg``."""

from __future__ import annotations

import importlib.util
import logging
import shlex
from pathlib import Path

from compose_scaffold.models import DebugLaunchOptions, FileTarget, ModuleTarget

logger = logging.getLogger(__name__)

_CONTAINER_LAUNCHER_PATH = "/pydbg/debugpy"


class LauncherNotFoundError(RuntimeError):
    pass


class DebugpyExtensionHelper:
    """Build debugpy launcher commands for a container.

    Implements the ``PythonExtensionHelper`` protocol. The launcher folder is
    the directory holding the ``debugpy`` package; it is mounted into the
    container so ``python /pydbg/debugpy ...`` runs the launcher.
    """

    def __init__(self, launcher_folder: str | Path | None = None) -> None:
        self._launcher_folder = str(launcher_folder) if launcher_folder else None

    def get_remote_launcher_command(
        self,
        target: ModuleTarget | FileTarget,
        args: list[str] | None = None,
        options: DebugLaunchOptions | None = None,
    ) -> str:
        options = options or DebugLaunchOptions()
        parts = [_CONTAINER_LAUNCHER_PATH, "--listen", f"{options.host}:{options.port}"]
        if options.wait:
            parts.append("--wait-for-client")
        if isinstance(target, ModuleTarget):
            parts.extend(["-m", target.module])
        else:
            parts.append(target.file)
        parts.extend(args or [])
        return shlex.join(parts)

    def get_launcher_folder_path(self) -> str:
        if self._launcher_folder:
            return self._launcher_folder
        folder = _find_installed_debugpy()
        if folder is None:
            raise LauncherNotFoundError(
                "debugpy is not installed; install it or set COMPOSE_SCAFFOLD_LAUNCHER_FOLDER"
            )
        logger.debug("Using debugpy launcher from %s", folder)
        return folder


def _find_installed_debugpy() -> str | None:
    spec = importlib.util.find_spec("debugpy")
    if spec is None or spec.origin is None:
        return None
    return str(Path(spec.origin).parent.parent)
