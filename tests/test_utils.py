"""Unit tests for utility functions (flutter_architect.utils).

Tests cover:
- run_command (success, failure, timeout, cwd, env vars, missing program)
- load_json
- format_duration
- Rich output helpers
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest

from flutter_architect.utils import (
    format_duration,
    load_json,
    print_error,
    print_success,
    print_summary_table,
    print_warning,
    run_command,
)


# ---------------------------------------------------------------------------
# run_command
# ---------------------------------------------------------------------------


class TestRunCommand:
    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_successful_command(self):
        returncode, stdout, stderr = await run_command(
            [sys.executable, "-c", "print('hello')"]
        )
        assert returncode == 0
        assert stdout == "hello"
        assert stderr == ""

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_failing_command(self):
        returncode, _, stderr = await run_command(
            [sys.executable, "-c", "import sys; sys.stderr.write('bad'); sys.exit(3)"]
        )
        assert returncode == 3
        assert stderr == "bad"

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_timeout(self):
        returncode, stdout, stderr = await run_command(
            [sys.executable, "-c", "import time; time.sleep(10)"], timeout=1
        )
        assert returncode == -1
        assert stdout == ""
        assert "timed out after 1s" in stderr

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_cwd(self, tmp_path: Path):
        _, stdout, _ = await run_command(
            [sys.executable, "-c", "import os; print(os.getcwd())"], cwd=tmp_path
        )
        assert Path(stdout).resolve() == tmp_path.resolve()

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_env_vars_merged(self):
        _, stdout, _ = await run_command(
            [sys.executable, "-c", "import os; print(os.environ['FA_TEST_VALUE'])"],
            env={"FA_TEST_VALUE": "42"},
        )
        assert stdout == "42"

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_missing_program_raises(self):
        with pytest.raises(FileNotFoundError):
            await run_command(["definitely-not-a-real-program-xyz"])


# ---------------------------------------------------------------------------
# JSON I/O
# ---------------------------------------------------------------------------


class TestLoadJson:
    @pytest.mark.unit
    def test_load_json_dict(self, tmp_path: Path):
        filepath = tmp_path / "descriptor.json"
        filepath.write_text(json.dumps({"project_name": "shop"}))
        assert load_json(filepath) == {"project_name": "shop"}

    @pytest.mark.unit
    def test_load_json_list_wraps_in_dict(self, tmp_path: Path):
        filepath = tmp_path / "list.json"
        filepath.write_text(json.dumps([1, 2]))
        assert load_json(filepath) == {"_root": [1, 2]}

    @pytest.mark.unit
    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            load_json(tmp_path / "missing.json")

    @pytest.mark.unit
    def test_invalid_json(self, tmp_path: Path):
        filepath = tmp_path / "bad.json"
        filepath.write_text("{not json")
        with pytest.raises(json.JSONDecodeError):
            load_json(filepath)


# ---------------------------------------------------------------------------
# format_duration
# ---------------------------------------------------------------------------


class TestFormatDuration:
    @pytest.mark.unit
    @pytest.mark.parametrize(
        "seconds, expected",
        [(0, "0.0s"), (3.7, "3.7s"), (59.9, "59.9s"), (65.2, "1m 5s"), (-1, "0.0s")],
    )
    def test_format(self, seconds: float, expected: str):
        assert format_duration(seconds) == expected


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


class TestRichOutput:
    @pytest.mark.unit
    def test_print_summary_table(self, capsys):
        print_summary_table({"Project": "shop", "Files written": "18"}, title="Scaffold")
        out = capsys.readouterr().out
        assert "Scaffold" in out
        assert "shop" in out
        assert "18" in out

    @pytest.mark.unit
    def test_print_success(self, capsys):
        print_success("All files written")
        assert "All files written" in capsys.readouterr().out

    @pytest.mark.unit
    def test_print_error(self, capsys):
        print_error("Something failed")
        assert "Something failed" in capsys.readouterr().out

    @pytest.mark.unit
    def test_print_warning(self, capsys):
        print_warning("Check your config")
        assert "Check your config" in capsys.readouterr().out
