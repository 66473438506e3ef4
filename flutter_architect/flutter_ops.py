"""Thin wrapper around the ``flutter`` CLI.

Only project creation is supported: ``flutter create <name> [--org <domain>]``
run in the output directory.  Everything else about the Flutter toolchain is
left to the user.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, Field

from .config import ArchitectConfig
from .utils import console, run_command

OUTPUT_PREVIEW_CHARS = 300


class FlutterCommand(BaseModel):
    """A validated ``flutter`` invocation."""

    command: Literal["create"] = Field(default="create", description="The command to run")
    project_name: str = Field(..., min_length=1, description="The project folder name")
    org: Optional[str] = Field(
        default=None, description="Organization domain, e.g. 'com.example'"
    )

    def build_command(self, flutter_bin: str = "flutter") -> list[str]:
        """Return the argv for this command."""
        argv = [flutter_bin, self.command, self.project_name]
        if self.org:
            argv.extend(["--org", self.org])
        return argv


class ToolResult(BaseModel):
    """Outcome of a ``flutter`` invocation."""

    status: Literal["success", "error"]
    output: str = Field(default="", description="Truncated stdout on success")
    message: str = Field(default="", description="Error message on failure")

    @property
    def ok(self) -> bool:
        return self.status == "success"


async def run_flutter(
    command: FlutterCommand,
    cwd: str | Path,
    config: ArchitectConfig | None = None,
) -> ToolResult:
    """Run *command* in *cwd* and report the outcome.

    Stdout is truncated to a short preview; the full log belongs to the
    user's terminal, not to the result.
    """
    config = config or ArchitectConfig()
    argv = command.build_command(config.flutter_bin)
    console.print(f"  [dim]Running:[/dim] {' '.join(argv)}")

    try:
        returncode, stdout, stderr = await run_command(
            argv, cwd=cwd, timeout=config.flutter_timeout
        )
    except OSError as exc:
        return ToolResult(status="error", message=f"Could not run {argv[0]}: {exc}")

    if returncode != 0:
        return ToolResult(
            status="error",
            message=stderr or stdout or f"{argv[0]} exited with code {returncode}",
        )
    return ToolResult(status="success", output=stdout[:OUTPUT_PREVIEW_CHARS] + "...")
