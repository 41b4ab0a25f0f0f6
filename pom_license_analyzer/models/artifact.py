"""Normalized per-artifact license models."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from pom_license_analyzer.models.coordinates import Coordinate
from pom_license_analyzer.models.pom import RawLicense


class SpdxLicense(BaseModel):
    """A license record from the SPDX license list."""

    model_config = {"extra": "forbid", "frozen": True}

    identifier: str = Field(description="SPDX license identifier")
    name: str = Field(description="Full license name")
    url: str = Field(description="Canonical license URL (https)")


class ArtifactDetail(BaseModel):
    """License information for one dependency, ready for validation.

    Licenses that matched the SPDX table are kept separately from raw
    declarations that matched nothing. Both collections keep declaration
    order and contain no duplicates.
    """

    model_config = {"extra": "forbid", "frozen": True}

    coordinate: Coordinate = Field(description="Dependency coordinate")
    name: Optional[str] = Field(default=None, description="Declared project name")
    spdx_licenses: list[SpdxLicense] = Field(
        default_factory=list,
        description="Licenses matched to SPDX records",
    )
    unknown_licenses: list[RawLicense] = Field(
        default_factory=list,
        description="Declared licenses that matched no SPDX record",
    )
    scm_url: Optional[str] = Field(default=None, description="Source repository URL")

    @property
    def has_licenses(self) -> bool:
        return bool(self.spdx_licenses or self.unknown_licenses)
