"""Navigation wiring: route table, router and drawer rendering.

The router is the only generated file whose shape depends on the descriptor
beyond name substitution:

* ``simple`` / ``drawer`` -- a flat ``GoRouter`` route list, one entry per
  feature in input order, starting at the first feature (or ``'/'`` when
  there are none);
* ``bottom_nav`` -- a ``StatefulShellRoute.indexedStack`` with one branch per
  tab, followed by the non-tab features as ordinary top-level routes,
  starting at the first tab.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .models import FileArtifact, NavigationType, ProjectDescriptor
from .naming import FeatureName
from .templates import TemplateRenderer

SRC_DIR = "lib/src"
ROUTES_FILE = f"{SRC_DIR}/core/routing/routes.dart"
ROUTER_FILE = f"{SRC_DIR}/core/routing/app_router.dart"
DRAWER_FILE = f"{SRC_DIR}/shared/widgets/app_drawer.dart"
SYNTHETIC_SCREEN_FILE = f"{SRC_DIR}/shared/presentation/screens/home_screen.dart"

EMPTY_STATE_LOCATION = "/"


def feature_screen_file(feature: FeatureName) -> str:
    """Project-relative path of a feature's screen."""
    return f"{SRC_DIR}/features/{feature.slug}/presentation/screens/{feature.slug}_screen.dart"


@dataclass(frozen=True)
class RouteEntry:
    """A screen reachable through the router."""

    name: FeatureName
    screen_file: str

    @property
    def import_path(self) -> str:
        # Imports are written relative to lib/src/core/routing/.
        return "../../" + self.screen_file[len(SRC_DIR) + 1:]


@dataclass(frozen=True)
class NavigationModel:
    """Resolved navigation layout for a descriptor."""

    navigation_type: NavigationType
    tabs: tuple[RouteEntry, ...]
    routes: tuple[RouteEntry, ...]
    screens: tuple[RouteEntry, ...]

    @property
    def uses_shell(self) -> bool:
        return self.navigation_type is NavigationType.BOTTOM_NAV

    @property
    def initial_route(self) -> FeatureName | None:
        first = self.tabs or self.routes
        return first[0].name if first else None

    @property
    def initial_location(self) -> str:
        """Dart expression for ``GoRouter.initialLocation``."""
        initial = self.initial_route
        if initial is None:
            return f"'{EMPTY_STATE_LOCATION}'"
        return f"Routes.{initial.camel}.path"

    def referenced_screen_files(self) -> list[str]:
        return [entry.screen_file for entry in self.screens]


def resolve_navigation(descriptor: ProjectDescriptor) -> NavigationModel:
    """Partition the descriptor's features into tabs and ordinary routes."""
    features = descriptor.feature_names()

    if descriptor.navigation_type is not NavigationType.BOTTOM_NAV:
        entries = tuple(RouteEntry(f, feature_screen_file(f)) for f in features)
        return NavigationModel(
            navigation_type=descriptor.navigation_type,
            tabs=(),
            routes=entries,
            screens=entries,
        )

    if descriptor.uses_synthetic_home():
        home = descriptor.effective_tabs()[0]
        entry = RouteEntry(home, SYNTHETIC_SCREEN_FILE)
        return NavigationModel(
            navigation_type=descriptor.navigation_type,
            tabs=(entry,),
            routes=(),
            screens=(entry,),
        )

    by_slug = {f.slug: RouteEntry(f, feature_screen_file(f)) for f in features}
    tabs = tuple(by_slug[t.slug] for t in descriptor.effective_tabs())
    tab_slugs = {t.name.slug for t in tabs}
    routes = tuple(by_slug[f.slug] for f in features if f.slug not in tab_slugs)
    return NavigationModel(
        navigation_type=descriptor.navigation_type,
        tabs=tabs,
        routes=routes,
        screens=tuple(by_slug[f.slug] for f in features),
    )


# ---------------------------------------------------------------------------
# Renderers
# ---------------------------------------------------------------------------


def _navigation_context(model: NavigationModel) -> dict[str, Any]:
    return {
        "navigation_type": model.navigation_type.value,
        "tabs": model.tabs,
        "routes": model.routes,
        "imports": model.screens,
        "route_names": [entry.name for entry in model.screens],
        "initial_location": model.initial_location,
    }


def render_routes(renderer: TemplateRenderer, model: NavigationModel) -> FileArtifact:
    """Render ``routes.dart``, the name/path table shared by every route."""
    return renderer.render_artifact(
        "core/routes.dart.j2", ROUTES_FILE, _navigation_context(model)
    )


def render_router(renderer: TemplateRenderer, model: NavigationModel) -> FileArtifact:
    """Render ``app_router.dart`` for the model's navigation style."""
    template = "core/app_router_shell.dart.j2" if model.uses_shell else "core/app_router_flat.dart.j2"
    return renderer.render_artifact(template, ROUTER_FILE, _navigation_context(model))


def render_navigation(
    renderer: TemplateRenderer, descriptor: ProjectDescriptor
) -> list[FileArtifact]:
    """Render every navigation file for *descriptor*.

    Always the route table and the router; the drawer widget for the
    ``drawer`` style; the placeholder screen for a synthetic ``home`` tab.
    """
    model = resolve_navigation(descriptor)
    artifacts = [render_routes(renderer, model), render_router(renderer, model)]

    if model.navigation_type is NavigationType.DRAWER:
        artifacts.append(
            renderer.render_artifact(
                "shared/app_drawer.dart.j2", DRAWER_FILE, _navigation_context(model)
            )
        )

    if descriptor.uses_synthetic_home():
        artifacts.append(
            renderer.render_artifact(
                "feature/screen.dart.j2",
                SYNTHETIC_SCREEN_FILE,
                {"feature": model.tabs[0].name, "with_drawer": False},
            )
        )

    return artifacts
