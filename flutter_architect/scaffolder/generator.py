"""Main scaffolding orchestrator.

Takes a ``ProjectDescriptor`` and generates the layered ``lib/src`` tree of a
Flutter project: core and shared folders, one data/domain/presentation slice
per feature, the navigation wiring and the ``main.dart`` entry point.

Every file is rendered in memory before anything touches the disk, so a
descriptor or template problem never leaves a half-written project behind.
Filesystem errors during the write pass abort the run; partial output stays
in place unless ``cleanup_on_failure`` is enabled.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any

from ..config import ArchitectConfig
from .bundle import render_feature_bundle
from .models import (
    FileArtifact,
    NavigationType,
    ProjectDescriptor,
    ScaffoldError,
    ScaffoldResult,
    TemplateLinkError,
    parse_descriptor,
)
from .navigation import SRC_DIR, render_navigation, resolve_navigation
from .planner import DirectoryPlan, create_directories, plan_directories
from .templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Core files (template -> project-relative output path)
# ---------------------------------------------------------------------------

CORE_TEMPLATES: tuple[tuple[str, str], ...] = (
    ("core/constants.dart.j2", f"{SRC_DIR}/core/constants/constants.dart"),
    ("core/app_theme.dart.j2", f"{SRC_DIR}/core/theme/app_theme.dart"),
    ("core/app.dart.j2", f"{SRC_DIR}/core/app/app.dart"),
)

ENTRY_POINT = ("main.dart.j2", "lib/main.dart")


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class ProjectGenerator:
    """Main scaffolding orchestrator.

    Given a ``ProjectDescriptor``, generates below ``<output_dir>/<project_name>``:
    - ``lib/src/core``: app widget, constants, theme, route table and router
    - ``lib/src/shared``: widgets, utils, extensions and shared screens
    - ``lib/src/features/<slug>``: entity, repository, screen and notifier
    - ``lib/main.dart``
    """

    def __init__(
        self,
        descriptor: ProjectDescriptor,
        config: ArchitectConfig | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.descriptor = descriptor
        self.config = config or ArchitectConfig()
        self.renderer = renderer or TemplateRenderer()

    # -- Public API --------------------------------------------------------

    def plan(self) -> DirectoryPlan:
        """Return the directories this run will create, relative to ``lib/src``."""
        return plan_directories(self.descriptor)

    def render_artifacts(self) -> list[FileArtifact]:
        """Render every project file in memory, in write order.

        Core files (navigation first), then each feature bundle in input
        order, then the entry point.
        """
        context = self._build_context()
        artifacts = render_navigation(self.renderer, self.descriptor)
        for template, rel in CORE_TEMPLATES:
            artifacts.append(self.renderer.render_artifact(template, rel, context))
        with_drawer = self.descriptor.navigation_type is NavigationType.DRAWER
        for feature in self.descriptor.feature_names():
            artifacts.extend(render_feature_bundle(self.renderer, feature, with_drawer))
        artifacts.append(self.renderer.render_artifact(*ENTRY_POINT, context))
        return artifacts

    async def generate(self, output_dir: str | Path | None = None) -> ScaffoldResult:
        """Generate the project structure.

        Args:
            output_dir: Parent directory of the project folder.  Defaults
                to ``config.output_dir``.

        Returns:
            A ``success`` result with a one-line summary, or an ``error``
            result carrying the failure message.
        """
        base = Path(output_dir) if output_dir is not None else self.config.output_dir
        project_root = base / self.descriptor.project_name

        try:
            plan = self.plan()
            artifacts = self.render_artifacts()
            check_links(self.descriptor, artifacts)
        except ScaffoldError as exc:
            return ScaffoldResult.failure(str(exc), project_path=str(project_root))

        created_dirs: list[Path] = []
        created_files: list[Path] = []
        written: list[str] = []
        try:
            await create_directories(project_root / SRC_DIR, plan, created=created_dirs)
            for artifact in artifacts:
                target = project_root / artifact.relative_path
                if not target.exists():
                    created_files.append(target)
                await self.renderer.write_artifact(artifact, project_root)
                written.append(artifact.relative_path)
        except (OSError, ValueError) as exc:
            # ValueError covers paths the OS layer refuses to encode
            if self.config.cleanup_on_failure:
                await asyncio.to_thread(_rollback, created_files, created_dirs)
            return ScaffoldResult.failure(
                f"{type(exc).__name__}: {exc}", project_path=str(project_root)
            )

        summary = (
            f"Clean architecture (mode: {self.descriptor.navigation_type.value}) "
            f"generated for {self.descriptor.project_name}: "
            f"{len(self.descriptor.features)} feature(s), {len(written)} file(s)."
        )
        return ScaffoldResult.success(
            summary, project_path=str(project_root), files_written=written
        )

    # -- Context building --------------------------------------------------

    def _build_context(self) -> dict[str, Any]:
        """Build the Jinja2 template context shared by the core files."""
        return {
            "project_name": self.descriptor.project_name,
            "app_name": _display_name(self.descriptor.project_name),
            "seed_color": self.config.theme_seed_color,
            "navigation_type": self.descriptor.navigation_type.value,
        }


async def scaffold_project(
    descriptor: ProjectDescriptor | dict[str, Any],
    output_dir: str | Path | None = None,
    config: ArchitectConfig | None = None,
) -> ScaffoldResult:
    """Validate *descriptor* and scaffold it below *output_dir*.

    Invalid descriptors are reported as an ``error`` result before any
    directory is created.
    """
    try:
        parsed = parse_descriptor(descriptor)
    except ScaffoldError as exc:
        return ScaffoldResult.failure(str(exc))
    return await ProjectGenerator(parsed, config).generate(output_dir)


# ---------------------------------------------------------------------------
# Consistency check
# ---------------------------------------------------------------------------


def check_links(descriptor: ProjectDescriptor, artifacts: list[FileArtifact]) -> None:
    """Ensure every screen imported by the router is among *artifacts*.

    Raises:
        TemplateLinkError: If the router would import a file that is not
            generated.
    """
    rendered = {a.relative_path for a in artifacts}
    missing = [
        path
        for path in resolve_navigation(descriptor).referenced_screen_files()
        if path not in rendered
    ]
    if missing:
        raise TemplateLinkError(
            "Router references screens that were not rendered: " + ", ".join(missing)
        )


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _display_name(project_name: str) -> str:
    """``my_shop`` -> ``My Shop``."""
    return " ".join(part.capitalize() for part in project_name.split("_") if part)


def _rollback(files: list[Path], dirs: list[Path]) -> None:
    """Remove files created by a failed run, then any created folder left empty."""
    for path in reversed(files):
        path.unlink(missing_ok=True)
    for directory in reversed(dirs):
        if directory.is_dir() and not any(directory.iterdir()):
            directory.rmdir()
