from typing import Protocol

from compose_scaffold.models import DebugLaunchOptions, FileTarget, ModuleTarget


class PythonExtensionHelper(Protocol):
    def get_remote_launcher_command(
        self,
        target: ModuleTarget | FileTarget,
        args: list[str] | None = None,
        options: DebugLaunchOptions | None = None,
    ) -> str: ...

    def get_launcher_folder_path(self) -> str: ...
