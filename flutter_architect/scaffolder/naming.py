"""Feature name normalisation and identifier projections.

Every generated Dart file refers to a feature through one of three forms:

* the *slug* (``user_profile``) -- folder and file names, route paths;
* the *PascalCase* projection (``UserProfile``) -- class and widget names;
* the *camelCase* projection (``userProfile``) -- ``Routes`` getters.

Files import each other by these exact names, so all three must come from
the same pure functions.  Templates read them from a
:class:`FeatureName` rather than deriving them again.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

_WHITESPACE_RE = re.compile(r"\s+")


def normalize_feature(raw: str) -> str:
    """Convert a raw feature name to its slug.

    Lowercases the input and collapses whitespace runs to a single
    underscore.  Characters outside ``[a-z0-9_]`` are passed through
    unchanged.

    Examples::

        normalize_feature("User Profile") -> "user_profile"
        normalize_feature("  Cart  ")     -> "cart"
        normalize_feature("user_profile") -> "user_profile"
    """
    return _WHITESPACE_RE.sub("_", raw.strip().lower())


def to_pascal(slug: str) -> str:
    """Convert ``some_thing`` to ``SomeThing``."""
    return "".join(part[0].upper() + part[1:] for part in slug.split("_") if part)


def to_camel(slug: str) -> str:
    """Convert ``some_thing`` to ``someThing``."""
    pascal = to_pascal(slug)
    if pascal:
        return pascal[0].lower() + pascal[1:]
    return ""


@dataclass(frozen=True)
class FeatureName:
    """A normalised feature name with its two identifier projections."""

    slug: str
    pascal: str
    camel: str

    @classmethod
    def parse(cls, raw: str) -> "FeatureName":
        slug = normalize_feature(raw)
        return cls(slug=slug, pascal=to_pascal(slug), camel=to_camel(slug))

    @property
    def screen_class(self) -> str:
        return f"{self.pascal}Screen"

    @property
    def route_path(self) -> str:
        return f"/{self.slug}"
