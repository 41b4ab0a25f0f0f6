"""POM metadata models."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from pom_license_analyzer.models.coordinates import Coordinate


class RawLicense(BaseModel):
    """A license entry exactly as declared in a POM, not yet classified."""

    model_config = {"extra": "forbid", "frozen": True}

    name: Optional[str] = Field(default=None, description="Declared license name")
    url: Optional[str] = Field(default=None, description="Declared license URL")


class RawModel(BaseModel):
    """The uninterpolated contents of a single POM document.

    Only the parts used for license reporting are kept. Values are not
    merged with the parent POM.
    """

    model_config = {"extra": "forbid", "frozen": True}

    group_id: Optional[str] = Field(default=None, description="Declared or parent groupId")
    artifact_id: str = Field(description="Declared artifactId")
    version: Optional[str] = Field(default=None, description="Declared or parent version")
    name: Optional[str] = Field(default=None, description="Project display name")
    licenses: list[RawLicense] = Field(
        default_factory=list,
        description="Declared licenses, in document order",
    )
    scm_url: Optional[str] = Field(default=None, description="<scm><url> value")
    child_scm_url_inherit_append_path: Optional[bool] = Field(
        default=None,
        description="Value of the scm child.scm.url.inherit.append.path attribute",
    )
    parent: Optional[Coordinate] = Field(default=None, description="Parent POM coordinate")


class PomInfo(BaseModel):
    """License-relevant metadata for one artifact after parent merging."""

    model_config = {"extra": "forbid", "frozen": True}

    name: Optional[str] = Field(default=None, description="Project display name")
    licenses: list[RawLicense] = Field(
        default_factory=list,
        description="Declared licenses (own, or inherited when none declared)",
    )
    scm_url: Optional[str] = Field(default=None, description="Source repository URL")

    @classmethod
    def empty(cls) -> PomInfo:
        """PomInfo for an artifact whose POM could not be found."""
        return cls()
