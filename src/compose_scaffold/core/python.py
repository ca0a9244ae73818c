"""Scaffold generators for general Python applications."""

import logging
from collections.abc import Sequence
from pathlib import Path

from compose_scaffold.core.configure import PlatformGeneratorInfo, get_compose_ports, get_expose_statements
from compose_scaffold.core.ports.debug_scaffolding import DebugScaffoldingProvider
from compose_scaffold.core.ports.python_extension import PythonExtensionHelper
from compose_scaffold.core.ports.ui import InputBox
from compose_scaffold.models import (
    DebugLaunchOptions,
    DockerDebugScaffoldContext,
    InputBoxOptions,
    ModuleTarget,
    PackageInfo,
    PlatformOS,
    PythonScaffoldingOptions,
    ScaffoldFile,
)

logger = logging.getLogger(__name__)

DEFAULT_DEBUG_PORT = 5678
LAUNCHER_MOUNT_PATH = "/pydbg"
INVALID_LAUNCH_FILE_MESSAGE = "Enter a valid Python file path."
LAUNCH_FILE_PROMPT = "Enter the path to the application, e.g. 'app.py' or 'app'"
DEFAULT_LAUNCH_FILE = "app.py"


class UserCancelledError(Exception):
    """The user dismissed a prompt without answering."""


def validate_launch_file(value: str) -> str | None:
    if value and value.strip():
        return None
    return INVALID_LAUNCH_FILE_MESSAGE


async def prompt_for_launch_file(ui: InputBox, prompt: str, default_file: str) -> str | None:
    options = InputBoxOptions(
        place_holder=default_file,
        prompt=prompt,
        value=default_file,
        validate_input=validate_launch_file,
    )
    return await ui.show_input_box(options)


def gen_dockerfile(
    service_name_and_path: str,
    platform: str,
    os: PlatformOS | None,
    ports: Sequence[int],
    package_info: PackageInfo | None = None,
) -> str:
    expose_statements = get_expose_statements(ports)

    return f"""# For more information, please refer to https://aka.ms/vscode-docker-python
FROM python:alpine

{expose_statements}

# Install pip requirements
ADD requirements.txt .
RUN python3 -m pip install -r requirements.txt

WORKDIR /app
ADD . /app

CMD ["python3", "-m", "{service_name_and_path}"]
"""


def gen_docker_compose(
    service_name_and_path: str,
    platform: str,
    os: PlatformOS | None,
    ports: Sequence[int],
) -> str:
    return f"""version: '2.1'

services:
  {service_name_and_path}:
    image: {service_name_and_path}
    build:
      context: .
      dockerfile: Dockerfile
{get_compose_ports(ports)}"""


def gen_docker_compose_debug(
    service_name_and_path: str,
    platform: str,
    os: PlatformOS | None,
    ports: Sequence[int],
    package_info: PackageInfo | None = None,
    *,
    helper: PythonExtensionHelper,
) -> str:
    # package_info.full_command is not part of the debug entrypoint.
    debug_options = DebugLaunchOptions(host="0.0.0.0", port=DEFAULT_DEBUG_PORT, wait=True)
    target = ModuleTarget(module=service_name_and_path)

    launcher_command = helper.get_remote_launcher_command(target, None, debug_options)
    entrypoint = "python " + launcher_command

    return f"""version: '2.1'

services:
  {service_name_and_path}:
    image: {service_name_and_path}
    build:
      context: .
      dockerfile: Dockerfile
    volumes:
      - {helper.get_launcher_folder_path()}:{LAUNCHER_MOUNT_PATH}
    entrypoint: {entrypoint}
{get_compose_ports(ports, DEFAULT_DEBUG_PORT)}"""


async def gen_additional_files() -> list[ScaffoldFile]:
    return [ScaffoldFile(file_name="requirements.txt", contents="# Add requirements when needed")]


async def initialize_for_debugging(
    folder: Path,
    platform_os: PlatformOS,
    dockerfile: str,
    package_info: PackageInfo | None,
    ports: Sequence[int],
    generate_compose_files: bool,
    *,
    ui: InputBox,
    provider: DebugScaffoldingProvider,
    service: str | None = None,
) -> None:
    """Collect the launch file and hand the debug setup to ``provider``.

    Raises ``UserCancelledError`` when the launch-file prompt is dismissed.
    """
    context = DockerDebugScaffoldContext(
        folder=folder,
        platform="python",
        dockerfile=dockerfile,
        generate_compose_task=generate_compose_files,
        service=service,
    )

    file_path = await prompt_for_launch_file(ui, LAUNCH_FILE_PROMPT, DEFAULT_LAUNCH_FILE)
    if file_path is None:
        raise UserCancelledError("Launch file prompt was cancelled")

    options = PythonScaffoldingOptions(
        project_type="general",
        platform_os=platform_os,
        file_path=file_path,
    )

    logger.debug("Initializing Python debugging for %s (launch file %s)", folder, file_path)
    await provider.initialize_python_for_debugging(context, options)


PYTHON_GENERATOR = PlatformGeneratorInfo(
    gen_dockerfile=gen_dockerfile,
    gen_docker_compose=gen_docker_compose,
    gen_docker_compose_debug=gen_docker_compose_debug,
    default_ports=[3000],
    initialize_for_debugging=initialize_for_debugging,
    gen_additional_files=gen_additional_files,
)
