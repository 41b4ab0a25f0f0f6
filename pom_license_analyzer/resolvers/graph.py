"""Dependency graph traversal with ignore rules.

Walks a resolved dependency graph and collects the coordinates whose
licenses need checking. Ignore rules remove artifacts from the result and,
when transitive, everything reachable only through them. Rules that never
match, and artifact rules already covered by a group rule, are reported so
the policy can be kept tidy.
"""

from __future__ import annotations

import logging
from typing import NamedTuple, Optional

from pom_license_analyzer.exceptions import GraphError
from pom_license_analyzer.models.config import DependencyConfig, IgnoredDependency
from pom_license_analyzer.models.coordinates import Coordinate
from pom_license_analyzer.models.graph import DependencyGraph, ResolvedComponent
from pom_license_analyzer.models.ids import Id, literal_id, matches, subsumes

logger = logging.getLogger(__name__)


class DependencyResolutionResult(NamedTuple):
    """Result of walking a dependency graph.

    Attributes:
        coordinates: Distinct coordinates to analyze, in first-visit order.
        config_warnings: Messages about redundant or unused ignore rules.
    """

    coordinates: list[Coordinate]
    config_warnings: list[str]


def _find_group_rule(
    config: DependencyConfig, group: str
) -> Optional[tuple[Id, IgnoredDependency]]:
    exact = literal_id(group)
    if exact in config.ignored_groups:
        return exact, config.ignored_groups[exact]
    for matcher, rule in config.ignored_groups.items():
        if matches(matcher, group):
            return matcher, rule
    return None


def _find_coordinate_rule(
    config: DependencyConfig, group: str, artifact: str
) -> Optional[tuple[tuple[Id, Id], IgnoredDependency]]:
    exact = (literal_id(group), literal_id(artifact))
    if exact in config.ignored_coordinates:
        return exact, config.ignored_coordinates[exact]
    for key, rule in config.ignored_coordinates.items():
        group_matcher, artifact_matcher = key
        if matches(group_matcher, group) and matches(artifact_matcher, artifact):
            return key, rule
    return None


def _ignore_suffix(rule: IgnoredDependency) -> str:
    suffix = " ignoring"
    if rule.transitive:
        suffix += " [transitive=true]"
    if rule.reason is not None:
        suffix += f" because {rule.reason}"
    return suffix


def load_dependency_coordinates(
    graph: DependencyGraph,
    config: DependencyConfig,
) -> DependencyResolutionResult:
    """Collect the coordinates to analyze from a resolved graph.

    The graph is walked depth-first in pre-order. Each component is
    processed once, however many paths lead to it. Project, platform and
    flat-directory components are never reported but their dependencies
    are still walked. A module matched by an ignore rule is left out; a
    transitive rule also stops the walk below it.

    Args:
        graph: Resolved dependency graph.
        config: Ignore rules by group and by group and artifact.

    Returns:
        DependencyResolutionResult with coordinates and policy warnings.

    Raises:
        GraphError: If a component has an unknown kind or an edge points
            at a missing component.
    """
    warnings: list[str] = []

    unused_groups: dict[Id, None] = dict.fromkeys(config.ignored_groups)
    unused_coordinates: dict[tuple[Id, Id], None] = {}
    for group_matcher, artifact_matcher in config.ignored_coordinates:
        covering = next(
            (g for g in config.ignored_groups if subsumes(g, group_matcher)),
            None,
        )
        if covering is not None:
            warnings.append(
                f"Ignore for {group_matcher}:{artifact_matcher} is redundant "
                f"as {covering} is also ignored"
            )
        else:
            unused_coordinates[(group_matcher, artifact_matcher)] = None

    coordinates: dict[Coordinate, None] = {}
    seen: set[str] = set()
    stack: list[tuple[ResolvedComponent, int]] = [(graph.root_component(), 1)]
    while stack:
        component, depth = stack.pop()
        if component.id in seen:
            continue
        seen.add(component.id)

        descend = True
        suffix = ""
        if component.is_project:
            suffix = " ignoring because project dependency"
        elif component.is_platform:
            suffix = " ignoring because platform dependency"
        elif component.is_module:
            if not component.has_metadata:
                suffix = " ignoring because flat-dir repository artifact has no metadata"
            else:
                rule: Optional[IgnoredDependency] = None
                group_match = _find_group_rule(config, component.group)
                if group_match is not None:
                    unused_groups.pop(group_match[0], None)
                    rule = group_match[1]
                else:
                    coordinate_match = _find_coordinate_rule(
                        config, component.group, component.artifact
                    )
                    if coordinate_match is not None:
                        unused_coordinates.pop(coordinate_match[0], None)
                        rule = coordinate_match[1]
                if rule is not None:
                    suffix = _ignore_suffix(rule)
                    descend = not rule.transitive
                else:
                    coordinates.setdefault(component.coordinate(), None)
        else:
            raise GraphError(f"Unknown dependency {component.kind}: {component.id}")

        logger.debug("%s%s%s", "  " * depth, component.id, suffix)

        if descend:
            for child in reversed(graph.children(component)):
                if child.id not in seen:
                    stack.append((child, depth + 1))

    for group_matcher in unused_groups:
        warnings.append(f"Dependency ignore for {group_matcher} is unused")
    for group_matcher, artifact_matcher in unused_coordinates:
        warnings.append(f"Dependency ignore for {group_matcher}:{artifact_matcher} is unused")

    return DependencyResolutionResult(
        coordinates=list(coordinates),
        config_warnings=warnings,
    )
