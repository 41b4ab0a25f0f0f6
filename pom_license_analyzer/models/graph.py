"""Resolved dependency graph models.

The graph is produced by a build tool after dependency resolution. Every
component appears once, keyed by ``id``, and edges reference the selected
component of each dependency by that id.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, Field, PrivateAttr, model_validator

from pom_license_analyzer.exceptions import GraphError
from pom_license_analyzer.models.coordinates import Coordinate

KIND_PROJECT = "project"
KIND_PLATFORM = "platform"
KIND_MODULE = "module"


class ResolvedComponent(BaseModel):
    """A component selected during dependency resolution.

    ``kind`` is plain text rather than an enum: classifying a component is
    the walker's job, and an unknown kind is reported there.
    """

    model_config = {"extra": "forbid"}

    id: str = Field(description="Unique component identity")
    kind: str = Field(description="One of 'project', 'platform' or 'module'")
    group: str = Field(default="", description="Module groupId")
    artifact: str = Field(default="", description="Module artifactId")
    version: str = Field(default="", description="Module version")
    dependencies: list[str] = Field(
        default_factory=list,
        description="Ids of selected dependency components, in declaration order",
    )

    @property
    def is_project(self) -> bool:
        """True for components built by the current build (local projects)."""
        return self.kind == KIND_PROJECT

    @property
    def is_platform(self) -> bool:
        """True for platform/BOM components, which carry no code."""
        return self.kind == KIND_PLATFORM

    @property
    def is_module(self) -> bool:
        return self.kind == KIND_MODULE

    @property
    def has_metadata(self) -> bool:
        """False for flat-directory artifacts, which have no group or version."""
        return not (self.group == "" and self.version == "")

    def coordinate(self) -> Coordinate:
        return Coordinate(group=self.group, artifact=self.artifact, version=self.version)


class DependencyGraph(BaseModel):
    """A resolved dependency graph with a single root component."""

    model_config = {"extra": "forbid"}

    root: str = Field(description="Id of the root component")
    components: list[ResolvedComponent] = Field(
        default_factory=list,
        description="All components reachable from the root",
    )

    _by_id: dict[str, ResolvedComponent] = PrivateAttr(default_factory=dict)

    @model_validator(mode="after")
    def _check_unique_ids(self) -> DependencyGraph:
        seen: set[str] = set()
        for component in self.components:
            if component.id in seen:
                raise ValueError(f"Duplicate component id '{component.id}'")
            seen.add(component.id)
        return self

    def model_post_init(self, __context: Any) -> None:
        self._by_id = {component.id: component for component in self.components}

    def component(self, component_id: str) -> ResolvedComponent:
        """Look up a component by id.

        Raises:
            GraphError: If no component has that id.
        """
        found: Optional[ResolvedComponent] = self._by_id.get(component_id)
        if found is None:
            raise GraphError(f"Dependency graph references unknown component '{component_id}'")
        return found

    def root_component(self) -> ResolvedComponent:
        return self.component(self.root)

    def children(self, component: ResolvedComponent) -> list[ResolvedComponent]:
        """Return the selected dependencies of a component, in order."""
        return [self.component(dep_id) for dep_id in component.dependencies]
