"""Shared fixtures and helpers for tests."""

from pathlib import Path
from unittest.mock import AsyncMock

import pytest

from compose_scaffold.launcher.debugpy_helper import DebugpyExtensionHelper
from compose_scaffold.models import InputBoxOptions

_REPO_ROOT = Path(__file__).parent.parent


# ---------------------------------------------------------------------------
# Auto-marker: tag tests as "unit" or "integration" based on directory
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        test_path = Path(str(item.fspath))
        rel = test_path.relative_to(_REPO_ROOT / "tests")
        parts = rel.parts
        if parts and parts[0] == "integration":
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# Shared unit-test fixtures
# ---------------------------------------------------------------------------


class ScriptedInputBox:
    """Input box that replays canned answers and records the options it saw."""

    def __init__(self, *answers: str | None) -> None:
        self._answers = list(answers)
        self.seen: list[InputBoxOptions] = []

    async def show_input_box(self, options: InputBoxOptions) -> str | None:
        self.seen.append(options)
        return self._answers.pop(0)


@pytest.fixture
def launcher_folder() -> str:
    return "/opt/launchers/python"


@pytest.fixture
def helper(launcher_folder: str) -> DebugpyExtensionHelper:
    """Return a launcher helper pinned to a fixed folder."""
    return DebugpyExtensionHelper(launcher_folder)


@pytest.fixture
def provider() -> AsyncMock:
    """Return a mock debug scaffolding provider."""
    return AsyncMock()


@pytest.fixture
def scripted_input_box() -> type[ScriptedInputBox]:
    return ScriptedInputBox
