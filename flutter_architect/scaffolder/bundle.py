"""Per-feature file bundle rendering.

Each feature receives the same four files -- entity, repository interface,
screen and state notifier -- differing only in the substituted names.
"""

from __future__ import annotations

from .models import FileArtifact
from .naming import FeatureName
from .navigation import SRC_DIR
from .templates import TemplateRenderer

# template -> path below the feature folder; ``{slug}`` is substituted.
FEATURE_TEMPLATES: tuple[tuple[str, str], ...] = (
    ("feature/entity.dart.j2", "domain/entities/{slug}.dart"),
    ("feature/repository.dart.j2", "domain/repositories/{slug}_repository.dart"),
    ("feature/screen.dart.j2", "presentation/screens/{slug}_screen.dart"),
    ("feature/provider.dart.j2", "presentation/providers/{slug}_provider.dart"),
)


def render_feature_bundle(
    renderer: TemplateRenderer, feature: FeatureName, with_drawer: bool = False
) -> list[FileArtifact]:
    """Render the layered files of a single feature.

    With *with_drawer* the screen mounts the shared ``AppDrawer``.
    """
    base = f"{SRC_DIR}/features/{feature.slug}"
    context = {"feature": feature, "with_drawer": with_drawer}
    return [
        renderer.render_artifact(template, f"{base}/{rel.format(slug=feature.slug)}", context)
        for template, rel in FEATURE_TEMPLATES
    ]
