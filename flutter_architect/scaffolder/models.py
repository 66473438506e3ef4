"""Pydantic v2 models for the Flutter scaffolder.

Defines the project descriptor accepted at the boundary, the in-memory file
artifacts produced by the renderers, the tagged run result handed back to
the caller, and the scaffolder exception hierarchy.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Literal, Optional

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)

from .naming import FeatureName, normalize_feature, to_camel


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

SYNTHETIC_TAB = "home"
MAX_DEFAULT_TABS = 3

# Route keys already defined by the generated ``Routes`` class.
RESERVED_ROUTE_KEYS = frozenset({"splash"})

# Dart package names: lowercase letters, digits and underscores.
_PROJECT_NAME_RE = re.compile(r"^[a-z][a-z0-9_]*$")


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class ScaffoldError(Exception):
    """Base class for scaffolding failures."""


class DescriptorError(ScaffoldError):
    """Raised when a project descriptor fails validation."""

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None) -> None:
        self.errors = errors or []
        super().__init__(message)

    @classmethod
    def from_validation_error(cls, exc: ValidationError) -> "DescriptorError":
        details = exc.errors()
        parts = []
        for err in details:
            loc = ".".join(str(p) for p in err.get("loc", ())) or "descriptor"
            parts.append(f"{loc}: {err.get('msg', 'invalid value')}")
        return cls("Invalid project descriptor -- " + "; ".join(parts), details)


class TemplateLinkError(ScaffoldError):
    """Raised when a rendered file references a screen that was never rendered."""


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


class NavigationType(str, Enum):
    """Shape of the generated navigation shell."""
    BOTTOM_NAV = "bottom_nav"
    DRAWER = "drawer"
    SIMPLE = "simple"


# ---------------------------------------------------------------------------
# Project descriptor
# ---------------------------------------------------------------------------


class ProjectDescriptor(BaseModel):
    """Declarative description of the project to scaffold.

    Feature names are normalised to slugs on construction, so every
    downstream consumer sees the same spelling.  Both snake_case and the
    camelCase keys used by tool-calling clients are accepted.
    """

    model_config = ConfigDict(frozen=True)

    project_name: str = Field(
        ...,
        validation_alias=AliasChoices("project_name", "projectName"),
        description="Project folder and Dart package name",
    )
    features: list[str] = Field(
        ...,
        description="Ordered feature names; normalised to unique slugs",
    )
    navigation_type: NavigationType = Field(
        ...,
        validation_alias=AliasChoices("navigation_type", "navigationType"),
        description="Navigation shell style",
    )
    tab_features: Optional[list[str]] = Field(
        default=None,
        validation_alias=AliasChoices("tab_features", "tabFeatures", "bottomNavFeatures"),
        description="Features shown as tabs (bottom_nav only)",
    )

    @field_validator("project_name")
    @classmethod
    def _check_project_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("project name must not be empty")
        if not _PROJECT_NAME_RE.match(value):
            raise ValueError(
                f"project name {value!r} must be lowercase letters, digits and "
                "underscores, starting with a letter"
            )
        return value

    @field_validator("features", "tab_features")
    @classmethod
    def _normalise_names(cls, value: Optional[list[str]]) -> Optional[list[str]]:
        if value is None:
            return None
        slugs: list[str] = []
        route_keys: set[str] = set()
        for raw in value:
            slug = normalize_feature(raw)
            if not slug:
                raise ValueError("feature names must not be blank")
            _check_path_safe(slug)
            if not to_camel(slug):
                raise ValueError(f"feature {slug!r} has no letters or digits to name it by")
            if slug in slugs:
                raise ValueError(f"duplicate feature {slug!r} after normalisation")
            key = to_camel(slug)
            if key in RESERVED_ROUTE_KEYS:
                raise ValueError(f"feature {slug!r} collides with the built-in {key!r} route")
            if key in route_keys:
                raise ValueError(f"feature {slug!r} maps to an already used route key {key!r}")
            route_keys.add(key)
            slugs.append(slug)
        return slugs

    @model_validator(mode="after")
    def _check_tabs_subset(self) -> "ProjectDescriptor":
        if self.tab_features:
            unknown = [t for t in self.tab_features if t not in self.features]
            if unknown:
                raise ValueError(
                    f"tab features {unknown} are not listed in features"
                )
        return self

    # -- Derived views -----------------------------------------------------

    def feature_names(self) -> list[FeatureName]:
        """Return every feature with its identifier projections, in input order."""
        return [FeatureName.parse(f) for f in self.features]

    def effective_tabs(self) -> list[FeatureName]:
        """Return the tabs of the bottom navigation shell.

        Falls back to the first three features when no tabs were supplied,
        and to a single synthetic ``home`` tab when there are no features
        either.  Always empty for non-tabbed navigation styles.
        """
        if self.navigation_type is not NavigationType.BOTTOM_NAV:
            return []
        if self.tab_features:
            return [FeatureName.parse(t) for t in self.tab_features]
        if self.features:
            return self.feature_names()[:MAX_DEFAULT_TABS]
        return [FeatureName.parse(SYNTHETIC_TAB)]

    def uses_synthetic_home(self) -> bool:
        return self.navigation_type is NavigationType.BOTTOM_NAV and not self.features


def _check_path_safe(slug: str) -> None:
    """Reject slugs that cannot be used as a single folder or file name."""
    if "/" in slug or "\\" in slug:
        raise ValueError(f"feature {slug!r} must not contain path separators")
    if slug in (".", ".."):
        raise ValueError(f"feature {slug!r} is not a valid folder name")
    if any(ord(ch) < 0x20 or ord(ch) == 0x7F for ch in slug):
        raise ValueError(f"feature {slug!r} contains control characters")
    try:
        slug.encode("utf-8")
    except UnicodeEncodeError:
        raise ValueError(f"feature {slug!r} is not valid UTF-8 text") from None


def parse_descriptor(raw: ProjectDescriptor | dict[str, Any]) -> ProjectDescriptor:
    """Validate raw descriptor data, raising :class:`DescriptorError` on failure."""
    if isinstance(raw, ProjectDescriptor):
        return raw
    try:
        return ProjectDescriptor.model_validate(raw)
    except ValidationError as exc:
        raise DescriptorError.from_validation_error(exc) from exc


# ---------------------------------------------------------------------------
# Artifacts and results
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class FileArtifact:
    """A rendered file, addressed relative to the project root."""

    relative_path: str
    content: str


class ScaffoldResult(BaseModel):
    """Tagged outcome of a scaffolding run."""

    status: Literal["success", "error"]
    message: str
    project_path: Optional[str] = Field(default=None, description="Generated project root")
    files_written: list[str] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.status == "success"

    @classmethod
    def success(
        cls,
        message: str,
        project_path: str | None = None,
        files_written: list[str] | None = None,
    ) -> "ScaffoldResult":
        return cls(
            status="success",
            message=message,
            project_path=project_path,
            files_written=files_written or [],
        )

    @classmethod
    def failure(cls, message: str, project_path: str | None = None) -> "ScaffoldResult":
        return cls(status="error", message=message, project_path=project_path)
