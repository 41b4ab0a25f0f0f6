"""Dependency graph and POM metadata resolvers."""

from pom_license_analyzer.resolvers.graph import (
    DependencyResolutionResult,
    load_dependency_coordinates,
)
from pom_license_analyzer.resolvers.pom import PomInheritanceResolver, RawModelSource
from pom_license_analyzer.resolvers.pom_xml import MavenRepository, parse_pom

__all__ = [
    "DependencyResolutionResult",
    "MavenRepository",
    "PomInheritanceResolver",
    "RawModelSource",
    "load_dependency_coordinates",
    "parse_pom",
]
