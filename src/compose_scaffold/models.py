from collections.abc import Callable
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class PlatformOS(str, Enum):
    LINUX = "Linux"
    WINDOWS = "Windows"


class PackageInfo(BaseModel):
    cmd: str | None = None
    author: str | None = None
    version: str | None = None
    artifact_name: str | None = None
    full_command: str | None = None


class DebugLaunchOptions(BaseModel):
    host: str = "0.0.0.0"
    port: int = 5678
    wait: bool = True


class ModuleTarget(BaseModel):
    module: str


class FileTarget(BaseModel):
    file: str


class ScaffoldFile(BaseModel):
    file_name: str
    contents: str


class DockerDebugScaffoldContext(BaseModel):
    folder: Path
    platform: str
    dockerfile: str
    generate_compose_task: bool = False
    service: str | None = None


class PythonScaffoldingOptions(BaseModel):
    """Python-specific options handed to the debug scaffolding provider.

    Dumped with ``by_alias=True`` the keys match the editor's camelCase names.
    """

    model_config = ConfigDict(populate_by_name=True)

    project_type: str = Field(alias="projectType")
    platform_os: PlatformOS = Field(alias="platformOS")
    file_path: str = Field(alias="filePath")


class InputBoxOptions(BaseModel):
    place_holder: str | None = None
    prompt: str | None = None
    value: str | None = None
    validate_input: Callable[[str], str | None] | None = None
