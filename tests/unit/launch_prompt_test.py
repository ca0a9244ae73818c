"""Tests for the launch-file prompt and the debugging initializer."""

from __future__ import annotations

from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock

import pytest

from compose_scaffold.core.python import (
    DEFAULT_LAUNCH_FILE,
    INVALID_LAUNCH_FILE_MESSAGE,
    LAUNCH_FILE_PROMPT,
    UserCancelledError,
    initialize_for_debugging,
    prompt_for_launch_file,
    validate_launch_file,
)
from compose_scaffold.models import DockerDebugScaffoldContext, PackageInfo, PlatformOS, PythonScaffoldingOptions


class TestValidateLaunchFile:
    @pytest.mark.parametrize("value", ["", " ", "   ", "\t", "\n", " \t\n "])
    def test_rejects_empty_and_whitespace(self, value: str) -> None:
        assert validate_launch_file(value) == INVALID_LAUNCH_FILE_MESSAGE

    @pytest.mark.parametrize("value", ["app.py", "app", " app.py ", "src/main.py", "."])
    def test_accepts_other_values(self, value: str) -> None:
        assert validate_launch_file(value) is None


class TestPromptForLaunchFile:
    @pytest.mark.asyncio
    async def test_shows_prefilled_input_box(self, scripted_input_box: Any) -> None:
        ui = scripted_input_box("main.py")
        result = await prompt_for_launch_file(ui, "Which file?", "app.py")

        assert result == "main.py"
        options = ui.seen[0]
        assert options.place_holder == "app.py"
        assert options.value == "app.py"
        assert options.prompt == "Which file?"
        assert options.validate_input is validate_launch_file

    @pytest.mark.asyncio
    async def test_returns_answer_untrimmed(self, scripted_input_box: Any) -> None:
        ui = scripted_input_box("  app.py  ")
        assert await prompt_for_launch_file(ui, "Which file?", "app.py") == "  app.py  "

    @pytest.mark.asyncio
    async def test_cancellation_returns_none(self, scripted_input_box: Any) -> None:
        ui = scripted_input_box(None)
        assert await prompt_for_launch_file(ui, "Which file?", "app.py") is None


class TestInitializeForDebugging:
    @pytest.mark.asyncio
    async def test_forwards_python_context_and_options(
        self, tmp_path: Path, provider: AsyncMock, scripted_input_box: Any
    ) -> None:
        ui = scripted_input_box("server.py")

        await initialize_for_debugging(
            tmp_path, PlatformOS.LINUX, "Dockerfile", PackageInfo(), [3000], True, ui=ui, provider=provider
        )

        provider.initialize_python_for_debugging.assert_awaited_once()
        context, options = provider.initialize_python_for_debugging.call_args.args
        assert context == DockerDebugScaffoldContext(
            folder=tmp_path, platform="python", dockerfile="Dockerfile", generate_compose_task=True
        )
        assert options == PythonScaffoldingOptions(
            project_type="general", platform_os=PlatformOS.LINUX, file_path="server.py"
        )

    @pytest.mark.asyncio
    async def test_uses_fixed_prompt_text(self, tmp_path: Path, provider: AsyncMock, scripted_input_box: Any) -> None:
        ui = scripted_input_box("app.py")

        await initialize_for_debugging(
            tmp_path, PlatformOS.WINDOWS, "Dockerfile", None, [], False, ui=ui, provider=provider
        )

        assert ui.seen[0].prompt == LAUNCH_FILE_PROMPT
        assert ui.seen[0].value == DEFAULT_LAUNCH_FILE

    @pytest.mark.parametrize("platform_os", [PlatformOS.LINUX, PlatformOS.WINDOWS])
    @pytest.mark.parametrize("compose", [True, False])
    @pytest.mark.asyncio
    async def test_platform_and_project_type_are_fixed(
        self, tmp_path: Path, provider: AsyncMock, scripted_input_box: Any, platform_os: PlatformOS, compose: bool
    ) -> None:
        ui = scripted_input_box("app")

        await initialize_for_debugging(
            tmp_path, platform_os, "docker/Dockerfile", PackageInfo(cmd="x"), [1, 2], compose, ui=ui, provider=provider
        )

        context, options = provider.initialize_python_for_debugging.call_args.args
        assert context.platform == "python"
        assert options.model_dump(by_alias=True)["projectType"] == "general"
        assert options.platform_os == platform_os

    @pytest.mark.asyncio
    async def test_cancelled_prompt_skips_provider(
        self, tmp_path: Path, provider: AsyncMock, scripted_input_box: Any
    ) -> None:
        ui = scripted_input_box(None)

        with pytest.raises(UserCancelledError):
            await initialize_for_debugging(
                tmp_path, PlatformOS.LINUX, "Dockerfile", None, [3000], False, ui=ui, provider=provider
            )

        provider.initialize_python_for_debugging.assert_not_called()

    @pytest.mark.asyncio
    async def test_provider_failure_propagates(self, tmp_path: Path, scripted_input_box: Any) -> None:
        ui = scripted_input_box("app.py")
        provider = AsyncMock()
        provider.initialize_python_for_debugging.side_effect = RuntimeError("boom")

        with pytest.raises(RuntimeError, match="boom"):
            await initialize_for_debugging(
                tmp_path, PlatformOS.LINUX, "Dockerfile", None, [3000], False, ui=ui, provider=provider
            )
