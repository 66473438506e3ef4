"""Unit tests for the flutter CLI wrapper (flutter_architect.flutter_ops)."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest
from pydantic import ValidationError

from flutter_architect.config import ArchitectConfig
from flutter_architect.flutter_ops import (
    OUTPUT_PREVIEW_CHARS,
    FlutterCommand,
    ToolResult,
    run_flutter,
)

pytestmark = pytest.mark.unit

_RUN = "flutter_architect.flutter_ops.run_command"


class TestFlutterCommand:
    def test_build_command(self):
        assert FlutterCommand(project_name="shop").build_command() == [
            "flutter",
            "create",
            "shop",
        ]

    def test_build_command_with_org(self):
        cmd = FlutterCommand(project_name="shop", org="com.example")
        assert cmd.build_command("/opt/flutter") == [
            "/opt/flutter",
            "create",
            "shop",
            "--org",
            "com.example",
        ]

    def test_empty_org_omitted(self):
        assert "--org" not in FlutterCommand(project_name="shop", org="").build_command()

    def test_only_create_supported(self):
        with pytest.raises(ValidationError):
            FlutterCommand(command="build", project_name="shop")

    def test_project_name_required(self):
        with pytest.raises(ValidationError):
            FlutterCommand(project_name="")


class TestRunFlutter:
    async def test_success_truncates_output(self, tmp_path: Path):
        mock = AsyncMock(return_value=(0, "x" * 1000, ""))
        with patch(_RUN, mock):
            result = await run_flutter(FlutterCommand(project_name="shop"), cwd=tmp_path)
        assert result.ok
        assert result.output == "x" * OUTPUT_PREVIEW_CHARS + "..."
        mock.assert_awaited_once_with(
            ["flutter", "create", "shop"], cwd=tmp_path, timeout=300
        )

    async def test_uses_config(self, tmp_path: Path):
        config = ArchitectConfig(flutter_bin="fvm", flutter_timeout=20)
        mock = AsyncMock(return_value=(0, "", ""))
        with patch(_RUN, mock):
            await run_flutter(
                FlutterCommand(project_name="shop", org="io.acme"), cwd=tmp_path, config=config
            )
        mock.assert_awaited_once_with(
            ["fvm", "create", "shop", "--org", "io.acme"], cwd=tmp_path, timeout=20
        )

    async def test_failure_prefers_stderr(self, tmp_path: Path):
        with patch(_RUN, AsyncMock(return_value=(1, "some stdout", "bad name"))):
            result = await run_flutter(FlutterCommand(project_name="shop"), cwd=tmp_path)
        assert result == ToolResult(status="error", message="bad name")

    async def test_failure_falls_back_to_stdout(self, tmp_path: Path):
        with patch(_RUN, AsyncMock(return_value=(1, "some stdout", ""))):
            result = await run_flutter(FlutterCommand(project_name="shop"), cwd=tmp_path)
        assert result.message == "some stdout"

    async def test_failure_without_output(self, tmp_path: Path):
        with patch(_RUN, AsyncMock(return_value=(64, "", ""))):
            result = await run_flutter(FlutterCommand(project_name="shop"), cwd=tmp_path)
        assert not result.ok
        assert result.message == "flutter exited with code 64"

    async def test_timeout_reported(self, tmp_path: Path):
        mock = AsyncMock(return_value=(-1, "", "Command timed out after 300s: flutter create shop"))
        with patch(_RUN, mock):
            result = await run_flutter(FlutterCommand(project_name="shop"), cwd=tmp_path)
        assert not result.ok
        assert "timed out" in result.message

    async def test_missing_binary(self, tmp_path: Path):
        config = ArchitectConfig(flutter_bin="definitely-not-a-real-flutter-xyz")
        result = await run_flutter(
            FlutterCommand(project_name="shop"), cwd=tmp_path, config=config
        )
        assert not result.ok
        assert result.message.startswith("Could not run definitely-not-a-real-flutter-xyz")
