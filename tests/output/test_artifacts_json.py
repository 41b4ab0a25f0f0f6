"""Tests for the artifacts JSON formatter."""

import json

from pom_license_analyzer.models.artifact import ArtifactDetail, SpdxLicense
from pom_license_analyzer.models.coordinates import Coordinate
from pom_license_analyzer.models.pom import RawLicense
from pom_license_analyzer.output.artifacts_json import ArtifactsJsonFormatter

MIT = SpdxLicense(identifier="MIT", name="MIT License", url="https://opensource.org/license/mit/")


class TestArtifactsJsonFormatter:
    """Tests for ArtifactsJsonFormatter class."""

    def test_full_entry(self) -> None:
        """Test the keys of an artifact with every field present."""
        artifact = ArtifactDetail(
            coordinate=Coordinate(group="com.example", artifact="lib", version="1.0"),
            name="Example",
            spdx_licenses=[MIT],
            unknown_licenses=[RawLicense(name="Custom", url="https://example.com/L"), RawLicense(name="X")],
            scm_url="https://github.com/example/lib",
        )
        data = json.loads(ArtifactsJsonFormatter().format_artifacts([artifact]))
        assert data == [
            {
                "groupId": "com.example",
                "artifactId": "lib",
                "version": "1.0",
                "name": "Example",
                "spdxLicenses": [
                    {
                        "identifier": "MIT",
                        "name": "MIT License",
                        "url": "https://opensource.org/license/mit/",
                    }
                ],
                "unknownLicenses": [
                    {"name": "Custom", "url": "https://example.com/L"},
                    {"name": "X"},
                ],
                "scm": {"url": "https://github.com/example/lib"},
            }
        ]

    def test_absent_fields_omitted(self) -> None:
        """Test that missing name, licenses and SCM are left out."""
        artifact = ArtifactDetail(coordinate=Coordinate(group="g", artifact="a", version="1"))
        data = json.loads(ArtifactsJsonFormatter().format_artifacts([artifact]))
        assert data == [{"groupId": "g", "artifactId": "a", "version": "1"}]

    def test_sorted_and_newline_terminated(self) -> None:
        """Test ordering by coordinate and the trailing newline."""
        artifacts = [
            ArtifactDetail(coordinate=Coordinate(group="org", artifact="b", version="1")),
            ArtifactDetail(coordinate=Coordinate(group="com", artifact="a", version="1")),
        ]
        output = ArtifactsJsonFormatter().format_artifacts(artifacts)
        assert output.endswith("]\n")
        assert [entry["groupId"] for entry in json.loads(output)] == ["com", "org"]

    def test_empty_list(self) -> None:
        """Test output with no artifacts."""
        assert ArtifactsJsonFormatter().format_artifacts([]) == "[]\n"

    def test_key_order(self) -> None:
        """Test that keys appear in a stable order."""
        artifact = ArtifactDetail(
            coordinate=Coordinate(group="g", artifact="a", version="1"),
            name="A",
            scm_url="u",
        )
        output = ArtifactsJsonFormatter().format_artifacts([artifact])
        assert list(json.loads(output)[0]) == ["groupId", "artifactId", "version", "name", "scm"]
