from typing import Protocol

from compose_scaffold.models import DockerDebugScaffoldContext, PythonScaffoldingOptions


class DebugScaffoldingProvider(Protocol):
    async def initialize_python_for_debugging(
        self, context: DockerDebugScaffoldContext, options: PythonScaffoldingOptions
    ) -> None: ...
