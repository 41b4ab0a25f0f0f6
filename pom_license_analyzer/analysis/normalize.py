"""License normalization against the SPDX table."""

from __future__ import annotations

from collections.abc import Mapping

from pom_license_analyzer.models.artifact import ArtifactDetail, SpdxLicense
from pom_license_analyzer.models.coordinates import Coordinate
from pom_license_analyzer.models.pom import PomInfo, RawLicense
from pom_license_analyzer.spdx.table import SpdxLicenses


def normalize_license_info(
    coordinate_to_pom_info: Mapping[Coordinate, PomInfo],
    spdx: SpdxLicenses,
) -> list[ArtifactDetail]:
    """Classify each artifact's declared licenses.

    Every SPDX record a declared license matches is attached to the
    artifact; declared licenses that match nothing are kept as unknown
    licenses with their raw name and URL. Both collections keep the
    declaration order without duplicates.

    Args:
        coordinate_to_pom_info: Merged POM data per coordinate.
        spdx: License table to match against.

    Returns:
        Artifact details sorted by group, artifact and version.
    """
    details: list[ArtifactDetail] = []
    for coordinate, pom_info in coordinate_to_pom_info.items():
        spdx_licenses: dict[SpdxLicense, None] = {}
        unknown_licenses: dict[RawLicense, None] = {}
        for declared in pom_info.licenses:
            matched = spdx.match(declared)
            if matched:
                for record in matched:
                    spdx_licenses.setdefault(record, None)
            else:
                unknown_licenses.setdefault(declared, None)

        details.append(
            ArtifactDetail(
                coordinate=coordinate,
                name=pom_info.name,
                spdx_licenses=list(spdx_licenses),
                unknown_licenses=list(unknown_licenses),
                scm_url=pom_info.scm_url,
            )
        )

    details.sort(key=lambda detail: detail.coordinate.sort_key())
    return details
