"""Shared pieces used by the per-platform scaffold generators."""

from collections.abc import Callable, Coroutine, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from compose_scaffold.models import ScaffoldFile


def get_expose_statements(ports: Sequence[int] | None) -> str:
    if not ports:
        return ""
    return "\n".join(f"EXPOSE {port}" for port in ports)


def get_compose_ports(ports: Sequence[int] | None, debug_port: int | None = None) -> str:
    """Render the ``ports:`` section of a compose service.

    Ports map one-to-one onto the host. Returns an empty string when there is
    nothing to publish.
    """
    mappings = [f"      - {port}:{port}" for port in ports or []]
    if debug_port is not None:
        mappings.append(f"      - {debug_port}:{debug_port}")
    if not mappings:
        return ""
    return "    ports:\n" + "\n".join(mappings)


@dataclass(frozen=True)
class PlatformGeneratorInfo:
    gen_dockerfile: Callable[..., str]
    gen_docker_compose: Callable[..., str]
    gen_docker_compose_debug: Callable[..., str]
    default_ports: list[int] = field(default_factory=list)
    initialize_for_debugging: Callable[..., Coroutine[Any, Any, None]] | None = None
    gen_additional_files: Callable[[], Coroutine[Any, Any, list[ScaffoldFile]]] | None = None


def service_name_from_folder(folder: Path) -> str:
    """Derive a compose-safe service name from a folder name."""
    name = "".join(ch if ch.isalnum() or ch in "-_" else "-" for ch in folder.resolve().name.lower())
    name = name.strip("-_")
    if not name:
        raise ValueError(f"Cannot derive a service name from folder '{folder}'")
    return name
