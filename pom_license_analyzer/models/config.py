"""Policy configuration models for pom-license-analyzer."""

from __future__ import annotations

import re
from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType
from typing import Any, NamedTuple, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from pom_license_analyzer.models.coordinates import Coordinate
from pom_license_analyzer.models.ids import Id, literal_id, regex_id


class ViolationAction(Enum):
    """What to do when artifacts fail validation."""

    FAIL = "fail"
    LOG = "log"
    IGNORE = "ignore"


class UnusedAction(Enum):
    """How to report an allow rule that matched nothing."""

    LOG = "log"
    IGNORE = "ignore"


class AllowedUrl(BaseModel):
    """A license URL accepted even when it matches no SPDX identifier."""

    model_config = {"extra": "forbid", "frozen": True}

    url: str = Field(description="Exact license URL")
    reason: Optional[str] = Field(default=None, description="Why the URL is allowed")


class AllowedDependency(BaseModel):
    """A dependency accepted regardless of its license data.

    Useful for artifacts with missing or invalid license metadata.
    """

    model_config = {"extra": "forbid", "frozen": True}

    group: str = Field(description="Maven groupId")
    artifact: str = Field(description="Maven artifactId")
    version: str = Field(description="Exact version")
    reason: Optional[str] = Field(default=None, description="Why the dependency is allowed")

    def coordinate(self) -> Coordinate:
        return Coordinate(group=self.group, artifact=self.artifact, version=self.version)


class IgnoredDependency(BaseModel):
    """A group, or group and artifact, left out of license analysis.

    Ignored artifacts are not analyzed and do not appear in any report.
    A transitive ignore also cuts off everything reachable only through
    the ignored artifact; since that hides arbitrary code, it requires a
    reason.
    """

    model_config = {"extra": "forbid", "frozen": True}

    group: str = Field(description="groupId, or a regex when regex is true")
    artifact: Optional[str] = Field(
        default=None,
        description="artifactId, or a regex when regex is true. None ignores the whole group.",
    )
    regex: bool = Field(default=False, description="Treat group and artifact as regexes")
    reason: Optional[str] = Field(default=None, description="Why the dependency is ignored")
    transitive: bool = Field(default=False, description="Also ignore its dependencies")

    @model_validator(mode="after")
    def _check_rule(self) -> IgnoredDependency:
        if self.regex:
            for pattern in (self.group, self.artifact):
                if pattern is None:
                    continue
                try:
                    re.compile(pattern)
                except re.error as e:
                    raise ValueError(f"Invalid regular expression '{pattern}': {e}") from e
        if self.transitive and self.reason is None:
            raise ValueError(
                f"Transitive dependency ignore on '{self.display_name}' "
                "is dangerous and requires a reason string"
            )
        return self

    @property
    def display_name(self) -> str:
        if self.artifact is None:
            return self.group
        return f"{self.group}:{self.artifact}"

    def group_id(self) -> Id:
        return regex_id(self.group) if self.regex else literal_id(self.group)

    def artifact_id(self) -> Optional[Id]:
        if self.artifact is None:
            return None
        return regex_id(self.artifact) if self.regex else literal_id(self.artifact)


class DependencyConfig(NamedTuple):
    """Ignore rules in the shape the graph walker consumes.

    Attributes:
        ignored_groups: Group matcher to rule, in declaration order.
        ignored_coordinates: (group, artifact) matchers to rule, in
            declaration order.
    """

    ignored_groups: dict[Id, IgnoredDependency]
    ignored_coordinates: dict[tuple[Id, Id], IgnoredDependency]


class ValidationConfig(NamedTuple):
    """Allow rules in the shape the validation engine consumes.

    Attributes:
        allowed_identifiers: Allowed SPDX identifiers, in declaration order.
        allowed_urls: Allowed license URL to optional reason.
        allowed_coordinates: Allowed coordinate to optional reason.
        unused_allow_action: Reporting for unused identifiers.
        unused_allow_url_action: Reporting for unused URLs.
        unused_allow_dependency_action: Reporting for unused coordinates.
    """

    allowed_identifiers: tuple[str, ...] = ()
    allowed_urls: Mapping[str, Optional[str]] = MappingProxyType({})
    allowed_coordinates: Mapping[Coordinate, Optional[str]] = MappingProxyType({})
    unused_allow_action: UnusedAction = UnusedAction.LOG
    unused_allow_url_action: UnusedAction = UnusedAction.LOG
    unused_allow_dependency_action: UnusedAction = UnusedAction.LOG


class LicensePolicy(BaseModel):
    """License policy for a run.

    All fields have defaults so a policy file may set any subset of them.
    The policy is immutable once loaded.
    """

    model_config = {"extra": "forbid", "frozen": True}

    allow: list[str] = Field(
        default_factory=list,
        description="Allowed SPDX license identifiers.",
    )
    allow_urls: list[AllowedUrl] = Field(
        default_factory=list,
        description="Allowed license URLs for licenses without an SPDX identifier.",
    )
    allow_dependencies: list[AllowedDependency] = Field(
        default_factory=list,
        description="Dependencies allowed regardless of their license data.",
    )
    ignore_dependencies: list[IgnoredDependency] = Field(
        default_factory=list,
        description="Groups or artifacts skipped during graph traversal.",
    )
    violation_action: ViolationAction = Field(
        default=ViolationAction.FAIL,
        description="Behavior when a license violation is found.",
    )
    unused_allow_action: UnusedAction = Field(
        default=UnusedAction.LOG,
        description="Reporting for allowed identifiers that matched nothing.",
    )
    unused_allow_url_action: UnusedAction = Field(
        default=UnusedAction.LOG,
        description="Reporting for allowed URLs that matched nothing.",
    )
    unused_allow_dependency_action: UnusedAction = Field(
        default=UnusedAction.LOG,
        description="Reporting for allowed dependencies that matched nothing.",
    )

    @field_validator("allow_urls", mode="before")
    @classmethod
    def _coerce_url_strings(cls, value: Any) -> Any:
        # Plain strings are shorthand for an entry without a reason.
        if isinstance(value, list):
            return [{"url": item} if isinstance(item, str) else item for item in value]
        return value

    def to_dependency_config(self) -> DependencyConfig:
        """Build walker input; later duplicates replace earlier ones in place."""
        groups: dict[Id, IgnoredDependency] = {}
        coordinates: dict[tuple[Id, Id], IgnoredDependency] = {}
        for rule in self.ignore_dependencies:
            artifact = rule.artifact_id()
            if artifact is None:
                groups[rule.group_id()] = rule
            else:
                coordinates[(rule.group_id(), artifact)] = rule
        return DependencyConfig(ignored_groups=groups, ignored_coordinates=coordinates)

    def to_validation_config(self) -> ValidationConfig:
        """Build validation engine input; duplicates collapse to the first entry."""
        urls: dict[str, Optional[str]] = {}
        for allowed_url in self.allow_urls:
            urls.setdefault(allowed_url.url, allowed_url.reason)
        coordinates: dict[Coordinate, Optional[str]] = {}
        for dependency in self.allow_dependencies:
            coordinates.setdefault(dependency.coordinate(), dependency.reason)
        return ValidationConfig(
            allowed_identifiers=tuple(dict.fromkeys(self.allow)),
            allowed_urls=urls,
            allowed_coordinates=coordinates,
            unused_allow_action=self.unused_allow_action,
            unused_allow_url_action=self.unused_allow_url_action,
            unused_allow_dependency_action=self.unused_allow_dependency_action,
        )
