"""Shared pytest fixtures for the Flutter Architect test suite.

Provides reusable fixtures for:
- Project descriptors for each navigation style
- A template renderer bound to the packaged templates
- Isolated output directories
- A clean ``FA_*`` environment
"""

from __future__ import annotations

from pathlib import Path

import pytest

from flutter_architect.config import ArchitectConfig
from flutter_architect.scaffolder.models import ProjectDescriptor
from flutter_architect.scaffolder.templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Environment
# ---------------------------------------------------------------------------

_FA_ENV_VARS = (
    "FA_OUTPUT_DIR",
    "FA_FLUTTER_BIN",
    "FA_FLUTTER_TIMEOUT",
    "FA_THEME_SEED_COLOR",
    "FA_CREATE_PROJECT",
    "FA_CLEANUP_ON_FAILURE",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure no ``FA_*`` variable from the host leaks into a test."""
    for name in _FA_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Empty directory that receives generated projects."""
    out = tmp_path / "output"
    out.mkdir()
    return out


@pytest.fixture
def config(output_dir: Path) -> ArchitectConfig:
    """Configuration pointing at the temporary output directory."""
    return ArchitectConfig(output_dir=output_dir)


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

@pytest.fixture
def renderer() -> TemplateRenderer:
    return TemplateRenderer()


# ---------------------------------------------------------------------------
# Descriptors
# ---------------------------------------------------------------------------

@pytest.fixture
def shop_descriptor() -> ProjectDescriptor:
    """Bottom navigation with two tabs and one ordinary route."""
    return ProjectDescriptor(
        project_name="shop",
        features=["auth", "products", "settings"],
        navigation_type="bottom_nav",
        tab_features=["auth", "products"],
    )


@pytest.fixture
def simple_descriptor() -> ProjectDescriptor:
    """Flat navigation with a single feature."""
    return ProjectDescriptor(
        project_name="onboard_app",
        features=["onboarding"],
        navigation_type="simple",
    )


@pytest.fixture
def drawer_descriptor() -> ProjectDescriptor:
    """Drawer navigation with a multi-word feature name."""
    return ProjectDescriptor(
        project_name="notes",
        features=["Notes", "User Profile"],
        navigation_type="drawer",
    )


@pytest.fixture
def empty_bottom_nav_descriptor() -> ProjectDescriptor:
    """Bottom navigation with neither features nor tabs."""
    return ProjectDescriptor(
        project_name="blank",
        features=[],
        navigation_type="bottom_nav",
        tab_features=[],
    )
