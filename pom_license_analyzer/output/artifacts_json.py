"""JSON output formatter for normalized artifact license data."""
import json
from typing import Any

from pom_license_analyzer.models.artifact import ArtifactDetail


class ArtifactsJsonFormatter:
    """Format artifact details as the ``artifacts.json`` report.

    The report is a JSON array of artifacts sorted by coordinate. Absent
    names, empty license lists and a missing SCM URL are left out of each
    entry so the file only carries declared data.
    """

    def format_artifacts(self, artifacts: list[ArtifactDetail]) -> str:
        """Format artifacts as a JSON string.

        Args:
            artifacts: Normalized artifact details.

        Returns:
            Pretty-printed JSON array ending with a newline.
        """
        ordered = sorted(artifacts, key=lambda artifact: artifact.coordinate.sort_key())
        output = [self._build_artifact(artifact) for artifact in ordered]
        return json.dumps(output, indent=2) + "\n"

    def _build_artifact(self, artifact: ArtifactDetail) -> dict[str, Any]:
        entry: dict[str, Any] = {
            "groupId": artifact.coordinate.group,
            "artifactId": artifact.coordinate.artifact,
            "version": artifact.coordinate.version,
        }
        if artifact.name is not None:
            entry["name"] = artifact.name
        if artifact.spdx_licenses:
            entry["spdxLicenses"] = [
                {
                    "identifier": record.identifier,
                    "name": record.name,
                    "url": record.url,
                }
                for record in artifact.spdx_licenses
            ]
        if artifact.unknown_licenses:
            unknown: list[dict[str, str]] = []
            for declared in artifact.unknown_licenses:
                item: dict[str, str] = {}
                if declared.name is not None:
                    item["name"] = declared.name
                if declared.url is not None:
                    item["url"] = declared.url
                unknown.append(item)
            entry["unknownLicenses"] = unknown
        if artifact.scm_url is not None:
            entry["scm"] = {"url": artifact.scm_url}
        return entry
