"""Materialize Docker debug tasks and launch configurations for VS Code."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import json5

from compose_scaffold.core.configure import service_name_from_folder
from compose_scaffold.models import DockerDebugScaffoldContext, PythonScaffoldingOptions

logger = logging.getLogger(__name__)

_BUILD_TASK_LABEL = "docker-build"
_RUN_TASK_LABEL = "docker-run: debug"
_COMPOSE_TASK_LABEL = "docker-compose up: debug"
_LAUNCH_CONFIG_NAME = "Docker: Python - General"
_REMOTE_ROOT = "/app"


def _python_run_target(file_path: str) -> dict[str, str]:
    """Scripts run as files, anything else as a module."""
    if file_path.endswith(".py"):
        return {"file": file_path}
    return {"module": file_path}


def _build_task(context: DockerDebugScaffoldContext, image: str) -> dict[str, Any]:
    dockerfile = Path(context.dockerfile)
    if dockerfile.is_absolute():
        dockerfile = dockerfile.relative_to(context.folder)
    return {
        "type": "docker-build",
        "label": _BUILD_TASK_LABEL,
        "platform": context.platform,
        "dockerBuild": {
            "tag": f"{image}:latest",
            "dockerfile": f"${{workspaceFolder}}/{dockerfile.as_posix()}",
            "context": "${workspaceFolder}",
            "pull": True,
        },
    }


def _run_task(options: PythonScaffoldingOptions) -> dict[str, Any]:
    return {
        "type": "docker-run",
        "label": _RUN_TASK_LABEL,
        "dependsOn": [_BUILD_TASK_LABEL],
        "python": _python_run_target(options.file_path),
    }


def _compose_task() -> dict[str, Any]:
    return {
        "type": "docker-compose",
        "label": _COMPOSE_TASK_LABEL,
        "dockerCompose": {
            "up": {"detached": True, "build": True},
            "files": ["${workspaceFolder}/docker-compose.debug.yml"],
        },
    }


def _launch_configuration(options: PythonScaffoldingOptions) -> dict[str, Any]:
    return {
        "name": _LAUNCH_CONFIG_NAME,
        "type": "docker",
        "request": "launch",
        "preLaunchTask": _RUN_TASK_LABEL,
        "python": {
            "pathMappings": [{"localRoot": "${workspaceFolder}", "remoteRoot": _REMOTE_ROOT}],
            "projectType": options.project_type,
        },
    }


def _load(path: Path, list_key: str, version: str) -> dict[str, Any]:
    if not path.exists():
        return {"version": version, list_key: []}
    try:
        data = json5.loads(path.read_text(encoding="utf-8"))
    except ValueError as exc:
        raise ValueError(f"Cannot update {path}: invalid JSON ({exc})") from exc
    if not isinstance(data, dict) or not isinstance(data.setdefault(list_key, []), list):
        raise ValueError(f"Cannot update {path}: expected an object with a '{list_key}' list")
    return data


def _upsert(entries: list[dict[str, Any]], new: dict[str, Any], key: str) -> None:
    """Replace the entry sharing ``key`` with ``new``, or append it."""
    for i, entry in enumerate(entries):
        if entry.get(key) == new[key]:
            entries[i] = new
            return
    entries.append(new)


def _write(path: Path, data: dict[str, Any]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=4) + "\n", encoding="utf-8")


class VsCodeDebugScaffoldingProvider:
    """Write ``.vscode/tasks.json`` and ``.vscode/launch.json`` entries.

    Implements the ``DebugScaffoldingProvider`` protocol. Existing entries
    with a different label or name are left untouched. Both files may
    contain comments; they are not kept when the file is rewritten.
    """

    async def initialize_python_for_debugging(
        self, context: DockerDebugScaffoldContext, options: PythonScaffoldingOptions
    ) -> None:
        vscode_dir = context.folder / ".vscode"
        image = context.service or service_name_from_folder(context.folder)
        tasks_path = vscode_dir / "tasks.json"
        launch_path = vscode_dir / "launch.json"

        # Both files are parsed before either is rewritten.
        tasks = _load(tasks_path, "tasks", "2.0.0")
        launch = _load(launch_path, "configurations", "0.2.0")

        _upsert(tasks["tasks"], _build_task(context, image), "label")
        _upsert(tasks["tasks"], _run_task(options), "label")
        if context.generate_compose_task:
            _upsert(tasks["tasks"], _compose_task(), "label")
        _upsert(launch["configurations"], _launch_configuration(options), "name")

        _write(tasks_path, tasks)
        logger.info("Wrote %s", tasks_path)
        _write(launch_path, launch)
        logger.info("Wrote %s", launch_path)
