"""Dependency coordinate model."""

from __future__ import annotations

from pydantic import BaseModel, Field


class Coordinate(BaseModel):
    """A resolved dependency identified by group, artifact and version.

    Coordinates are immutable and compare by value, so they can key
    dictionaries of POM data and allow rules.
    """

    model_config = {"extra": "forbid", "frozen": True}

    group: str = Field(description="Maven groupId")
    artifact: str = Field(description="Maven artifactId")
    version: str = Field(description="Resolved version")

    def pom_coordinate(self) -> str:
        """Return the notation used to request this artifact's POM file."""
        return f"{self.group}:{self.artifact}:{self.version}@pom"

    def sort_key(self) -> tuple[str, str, str]:
        return (self.group, self.artifact, self.version)

    def __str__(self) -> str:
        return f"{self.group}:{self.artifact}:{self.version}"
