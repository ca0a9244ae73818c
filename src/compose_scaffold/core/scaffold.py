import logging
from collections.abc import Sequence
from pathlib import Path

from compose_scaffold.core.configure import PlatformGeneratorInfo
from compose_scaffold.core.ports.debug_scaffolding import DebugScaffoldingProvider
from compose_scaffold.core.ports.python_extension import PythonExtensionHelper
from compose_scaffold.core.ports.ui import InputBox
from compose_scaffold.core.python import PYTHON_GENERATOR
from compose_scaffold.models import PackageInfo, PlatformOS, ScaffoldFile

logger = logging.getLogger(__name__)

DOCKERFILE_NAME = "Dockerfile"
COMPOSE_FILE_NAME = "docker-compose.yml"
COMPOSE_DEBUG_FILE_NAME = "docker-compose.debug.yml"


def render_scaffold_files(
    service: str,
    ports: Sequence[int],
    helper: PythonExtensionHelper,
    platform_os: PlatformOS = PlatformOS.LINUX,
    package_info: PackageInfo | None = None,
    generate_compose_files: bool = True,
    generator: PlatformGeneratorInfo = PYTHON_GENERATOR,
) -> list[ScaffoldFile]:
    """Render the container files for ``service`` without touching the disk."""
    package_info = package_info or PackageInfo()
    files = [
        ScaffoldFile(
            file_name=DOCKERFILE_NAME,
            contents=generator.gen_dockerfile(service, "python", platform_os, ports, package_info),
        )
    ]
    if generate_compose_files:
        files.append(
            ScaffoldFile(
                file_name=COMPOSE_FILE_NAME,
                contents=generator.gen_docker_compose(service, "python", platform_os, ports),
            )
        )
        files.append(
            ScaffoldFile(
                file_name=COMPOSE_DEBUG_FILE_NAME,
                contents=generator.gen_docker_compose_debug(
                    service, "python", platform_os, ports, package_info, helper=helper
                ),
            )
        )
    return files


def _write_files(folder: Path, files: Sequence[ScaffoldFile], overwrite: bool) -> list[Path]:
    targets = [folder / f.file_name for f in files]
    if not overwrite:
        existing = [str(t) for t in targets if t.exists()]
        if existing:
            raise FileExistsError(f"Refusing to overwrite existing files: {', '.join(existing)}")

    folder.mkdir(parents=True, exist_ok=True)
    for target, scaffold_file in zip(targets, files, strict=True):
        target.write_text(scaffold_file.contents, encoding="utf-8")
        logger.info("Wrote %s", target)
    return targets


async def scaffold_python(
    folder: Path,
    service: str,
    ports: Sequence[int],
    *,
    helper: PythonExtensionHelper,
    platform_os: PlatformOS = PlatformOS.LINUX,
    package_info: PackageInfo | None = None,
    generate_compose_files: bool = True,
    overwrite: bool = False,
    debug: bool = False,
    ui: InputBox | None = None,
    provider: DebugScaffoldingProvider | None = None,
) -> list[Path]:
    """Write the Python container scaffold into ``folder``.

    Auxiliary files such as ``requirements.txt`` are only created when
    missing. With ``debug`` set, the launch configuration is handed to
    ``provider`` after the files are written.

    Returns the paths that were written.
    """
    if debug and (ui is None or provider is None):
        raise ValueError("Debug scaffolding needs both an input box and a scaffolding provider.")

    generator = PYTHON_GENERATOR
    files = render_scaffold_files(
        service,
        ports,
        helper,
        platform_os=platform_os,
        package_info=package_info,
        generate_compose_files=generate_compose_files,
        generator=generator,
    )
    written = _write_files(folder, files, overwrite)

    if generator.gen_additional_files is not None:
        extra = [f for f in await generator.gen_additional_files() if not (folder / f.file_name).exists()]
        written.extend(_write_files(folder, extra, overwrite=False))

    if debug:
        assert ui is not None and provider is not None
        assert generator.initialize_for_debugging is not None
        await generator.initialize_for_debugging(
            folder,
            platform_os,
            DOCKERFILE_NAME,
            package_info,
            ports,
            generate_compose_files,
            ui=ui,
            provider=provider,
            service=service,
        )

    return written
