"""Flutter Architect configuration.

Typed settings for the scaffolder and the ``flutter`` toolchain wrapper.
Settings are Pydantic v2 models so they are validated at construction time
and can be serialised to/from JSON or read from environment variables.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field


_TRUE_VALUES = {"1", "true", "yes", "on"}


class ArchitectConfig(BaseModel):
    """Global Flutter Architect configuration.

    Instances are typically created once by the CLI entry point and then
    passed to the generator and the toolchain wrapper.
    """

    output_dir: Path = Field(
        default=Path("."),
        description="Directory that receives the generated project folder",
    )
    flutter_bin: str = Field(default="flutter", description="Flutter executable")
    flutter_timeout: int = Field(
        default=300, ge=10, description="'flutter create' timeout in seconds"
    )
    theme_seed_color: str = Field(
        default="blue",
        pattern=r"^[a-zA-Z]+$",
        description="Material ``Colors`` member used to seed the app theme",
    )
    create_project: bool = Field(
        default=False,
        description="Run 'flutter create' before scaffolding",
    )
    cleanup_on_failure: bool = Field(
        default=False,
        description="Remove files and folders written by a failed run",
    )

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file.

        Returns:
            The path where the file was written.
        """
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "ArchitectConfig":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "ArchitectConfig":
        """Build an ``ArchitectConfig`` from environment variables.

        Recognised variables (all optional):
            FA_OUTPUT_DIR, FA_FLUTTER_BIN, FA_FLUTTER_TIMEOUT,
            FA_THEME_SEED_COLOR, FA_CREATE_PROJECT, FA_CLEANUP_ON_FAILURE.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("FA_OUTPUT_DIR"):
            kwargs["output_dir"] = Path(os.environ["FA_OUTPUT_DIR"])
        if os.environ.get("FA_FLUTTER_BIN"):
            kwargs["flutter_bin"] = os.environ["FA_FLUTTER_BIN"]
        if os.environ.get("FA_FLUTTER_TIMEOUT"):
            kwargs["flutter_timeout"] = int(os.environ["FA_FLUTTER_TIMEOUT"])
        if os.environ.get("FA_THEME_SEED_COLOR"):
            kwargs["theme_seed_color"] = os.environ["FA_THEME_SEED_COLOR"]
        if os.environ.get("FA_CREATE_PROJECT"):
            kwargs["create_project"] = os.environ["FA_CREATE_PROJECT"].lower() in _TRUE_VALUES
        if os.environ.get("FA_CLEANUP_ON_FAILURE"):
            kwargs["cleanup_on_failure"] = (
                os.environ["FA_CLEANUP_ON_FAILURE"].lower() in _TRUE_VALUES
            )
        return cls(**kwargs)
