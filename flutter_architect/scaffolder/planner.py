"""Directory planning for the layered ``lib/src`` tree."""

from __future__ import annotations

import asyncio
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath

from .models import ProjectDescriptor


CORE_FOLDERS: tuple[str, ...] = (
    "core/app",
    "core/assets",
    "core/config",
    "core/constants",
    "core/providers",
    "core/routing",
    "core/services",
    "core/theme",
)

SHARED_FOLDERS: tuple[str, ...] = (
    "shared/widgets",
    "shared/utils",
    "shared/extensions",
    "shared/presentation/screens",
)

FEATURE_FOLDERS: tuple[str, ...] = (
    "data/datasources",
    "data/mappers",
    "data/models",
    "data/repositories",
    "domain/entities",
    "domain/repositories",
    "presentation/providers",
    "presentation/screens",
    "presentation/widgets",
)


def feature_root(slug: str) -> str:
    """Return the ``lib/src``-relative folder of a feature."""
    return f"features/{slug}"


@dataclass(frozen=True)
class DirectoryPlan:
    """Immutable set of directories to create, relative to ``lib/src``.

    A plan starts with the fixed core and shared folders; features are added
    with :meth:`with_feature`, which returns a new plan.
    """

    base: tuple[str, ...] = CORE_FOLDERS + SHARED_FOLDERS
    features: tuple[tuple[str, tuple[str, ...]], ...] = field(default_factory=tuple)

    def with_feature(self, slug: str) -> "DirectoryPlan":
        root = feature_root(slug)
        folders = tuple(f"{root}/{sub}" for sub in FEATURE_FOLDERS)
        return DirectoryPlan(base=self.base, features=self.features + ((slug, folders),))

    def feature_paths(self, slug: str) -> tuple[str, ...]:
        for name, folders in self.features:
            if name == slug:
                return folders
        return ()

    def paths(self) -> Iterator[str]:
        """Yield every planned path in creation order."""
        yield from self.base
        for _, folders in self.features:
            yield from folders

    def __len__(self) -> int:
        return len(self.base) + sum(len(f) for _, f in self.features)

    def is_parent_ordered(self) -> bool:
        """Check that no planned path precedes a planned ancestor of itself.

        Ancestors that are not themselves in the plan are created implicitly
        together with their first descendant.
        """
        seen: set[str] = set()
        planned = set(self.paths())
        for path in self.paths():
            for parent in PurePosixPath(path).parents:
                key = str(parent)
                if key in planned and key not in seen:
                    return False
            seen.add(path)
        return True


def plan_directories(descriptor: ProjectDescriptor) -> DirectoryPlan:
    """Build the directory plan for *descriptor*.

    Eight core folders and four shared folders, then nine folders for every
    feature in input order.
    """
    plan = DirectoryPlan()
    for feature in descriptor.feature_names():
        plan = plan.with_feature(feature.slug)
    return plan


async def create_directories(
    src_root: Path,
    plan: DirectoryPlan,
    created: list[Path] | None = None,
) -> list[Path]:
    """Create every planned directory under *src_root*, in plan order.

    Existing directories are left alone.  Directories that did not exist
    before (including implicitly created ancestors) are appended to
    *created* ahead of each ``mkdir``, so the caller still knows what may
    have been created when a later one fails.
    """
    if created is None:
        created = []
    for rel in plan.paths():
        target = src_root / rel
        missing = [p for p in (target, *target.parents) if not p.exists()]
        created.extend(reversed(missing))
        await asyncio.to_thread(target.mkdir, parents=True, exist_ok=True)
    return created
