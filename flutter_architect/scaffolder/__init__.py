"""Flutter Architect scaffolder -- generates layered Flutter project skeletons.

This module takes a ``ProjectDescriptor`` as input and renders the
``lib/src/{core,shared,features}`` tree of a Riverpod + GoRouter project,
with one data/domain/presentation slice per feature and a navigation shell
matching the chosen navigation style.

Quick usage::

    from flutter_architect.scaffolder import ProjectDescriptor, ProjectGenerator

    descriptor = ProjectDescriptor(
        project_name="shop",
        features=["auth", "products", "settings"],
        navigation_type="bottom_nav",
        tab_features=["auth", "products"],
    )
    result = await ProjectGenerator(descriptor).generate("/tmp/output")
"""

from flutter_architect.scaffolder.generator import ProjectGenerator, scaffold_project
from flutter_architect.scaffolder.models import (
    DescriptorError,
    FileArtifact,
    NavigationType,
    ProjectDescriptor,
    ScaffoldError,
    ScaffoldResult,
    TemplateLinkError,
    parse_descriptor,
)
from flutter_architect.scaffolder.naming import FeatureName
from flutter_architect.scaffolder.templates import TemplateRenderer

__all__ = [
    "DescriptorError",
    "FeatureName",
    "FileArtifact",
    "NavigationType",
    "ProjectDescriptor",
    "ProjectGenerator",
    "ScaffoldError",
    "ScaffoldResult",
    "TemplateLinkError",
    "TemplateRenderer",
    "parse_descriptor",
    "scaffold_project",
]
