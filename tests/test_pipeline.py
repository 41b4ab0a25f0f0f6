"""Tests for the license check pipeline."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from pom_license_analyzer.constants import ARTIFACTS_JSON_NAME, VALIDATION_REPORT_NAME
from pom_license_analyzer.exceptions import ConfigurationError, ValidationFailedError
from pom_license_analyzer.models.config import (
    AllowedDependency,
    IgnoredDependency,
    LicensePolicy,
    ViolationAction,
)
from pom_license_analyzer.models.graph import DependencyGraph, ResolvedComponent
from pom_license_analyzer.models.validation import Severity
from pom_license_analyzer.pipeline import FAILURE_MESSAGE, analyze, enforce, write_reports
from pom_license_analyzer.resolvers.pom_xml import MavenRepository

APACHE = ("The Apache Software License, Version 2.0", "http://www.apache.org/licenses/LICENSE-2.0.txt")
MIT = ("MIT", "https://opensource.org/licenses/MIT")


def _graph(*modules: str) -> DependencyGraph:
    components = [ResolvedComponent(id=":app", kind="project", dependencies=list(modules))]
    for text in modules:
        group, artifact, version = text.split(":")
        components.append(
            ResolvedComponent(id=text, kind="module", group=group, artifact=artifact, version=version)
        )
    return DependencyGraph(root=":app", components=components)


@pytest.fixture
def project(maven_repo):
    """Provide a small repository: an Apache library whose parent declares the license."""
    maven_repo.add("org.example:parent:1", licenses=(APACHE,), scm_url="https://github.com/example/project")
    maven_repo.add("org.example:lib:1", name="Lib", parent="org.example:parent:1")
    maven_repo.add("com.other:tool:2", licenses=(MIT,))
    maven_repo.add("com.other:nolicense:3")
    return maven_repo


class TestAnalyze:
    """Tests for analyze function."""

    def test_end_to_end(self, project) -> None:
        """Test graph walk, POM merge, normalization and validation together."""
        graph = _graph(
            "org.example:lib:1",
            "com.other:tool:2",
            "com.other:nolicense:3",
            "com.internal:secret:1",
        )
        policy = LicensePolicy(
            allow=["Apache-2.0"],
            allow_dependencies=[
                AllowedDependency(group="com.other", artifact="nolicense", version="3", reason="vendored")
            ],
            ignore_dependencies=[IgnoredDependency(group="com.internal"), IgnoredDependency(group="unused")],
        )

        result = analyze(graph, policy, MavenRepository(project.root))

        assert [str(a.coordinate) for a in result.artifacts] == [
            "com.other:nolicense:3",
            "com.other:tool:2",
            "org.example:lib:1",
        ]
        lib = result.artifacts[2]
        assert lib.name == "Lib"
        assert [r.identifier for r in lib.spdx_licenses] == ["Apache-2.0"]
        assert lib.scm_url == "https://github.com/example/project"

        validation = result.validation
        assert [r.message for r in validation.config_results] == [
            "Dependency ignore for unused is unused"
        ]
        by_coordinate = {str(e.artifact.coordinate): e.results for e in validation.artifact_results}
        assert [r.severity for r in by_coordinate["com.other:nolicense:3"]] == [Severity.INFO, Severity.INFO]
        assert [r.message for r in by_coordinate["com.other:tool:2"]] == [
            "SPDX identifier 'MIT' is NOT allowed"
        ]
        assert [r.message for r in by_coordinate["org.example:lib:1"]] == [
            "SPDX identifier 'Apache-2.0' allowed"
        ]
        assert validation.contains_errors

    def test_walk_warnings_lead_config_results(self, project) -> None:
        """Test that ignore-rule warnings come before unused allow rules."""
        policy = LicensePolicy(allow=["MIT", "ISC"], ignore_dependencies=[IgnoredDependency(group="nothing")])
        result = analyze(_graph("com.other:tool:2"), policy, MavenRepository(project.root))
        assert [r.message for r in result.validation.config_results] == [
            "Dependency ignore for nothing is unused",
            "Allowed SPDX identifier 'ISC' is unused",
        ]
        assert not result.validation.contains_errors

    def test_missing_pom_is_license_free(self, project) -> None:
        """Test that an artifact absent from the repository fails with no licenses."""
        result = analyze(_graph("com.gone:missing:1"), LicensePolicy(), MavenRepository(project.root))
        assert [r.message for r in result.validation.artifact_results[0].results] == [
            "Artifact declares no licenses!"
        ]

    def test_invalid_allowed_identifier(self, project) -> None:
        """Test that an unknown allowed identifier stops the run before the walk."""
        with pytest.raises(ConfigurationError, match="Apache 2 is not a valid SPDX id."):
            analyze(_graph(), LicensePolicy(allow=["Apache 2"]), MavenRepository(project.root))


class TestWriteReports:
    """Tests for write_reports function."""

    def test_writes_both_reports(self, project, tmp_path: Path) -> None:
        """Test that both files are written to a new directory."""
        result = analyze(
            _graph("org.example:lib:1"),
            LicensePolicy(allow=["Apache-2.0"]),
            MavenRepository(project.root),
        )
        output_dir = tmp_path / "reports" / "licenses"

        artifacts_path, validation_path = write_reports(result, output_dir)

        assert artifacts_path == output_dir / ARTIFACTS_JSON_NAME
        assert validation_path == output_dir / VALIDATION_REPORT_NAME
        assert json.loads(artifacts_path.read_text())[0]["artifactId"] == "lib"
        assert validation_path.read_text() == (
            "org.example:lib:1\n - SPDX identifier 'Apache-2.0' allowed\n"
        )

    def test_reports_are_reproducible(self, project, tmp_path: Path) -> None:
        """Test that two runs over the same input give identical bytes."""
        graph = _graph("com.other:tool:2", "org.example:lib:1", "com.other:nolicense:3")
        policy = LicensePolicy(allow=["MIT"])
        first = write_reports(analyze(graph, policy, MavenRepository(project.root)), tmp_path / "a")
        second = write_reports(analyze(graph, policy, MavenRepository(project.root)), tmp_path / "b")
        for one, other in zip(first, second):
            assert one.read_bytes() == other.read_bytes()

    def test_unwritable_output(self, project, tmp_path: Path) -> None:
        """Test that a file in place of the directory raises ConfigurationError."""
        blocker = tmp_path / "blocker"
        blocker.write_text("")
        result = analyze(_graph(), LicensePolicy(), MavenRepository(project.root))
        with pytest.raises(ConfigurationError, match="Cannot write reports"):
            write_reports(result, blocker / "out")


class TestEnforce:
    """Tests for enforce function."""

    def _failing(self, project):
        return analyze(_graph("com.other:nolicense:3"), LicensePolicy(), MavenRepository(project.root))

    def test_fail_action_raises(self, project) -> None:
        """Test that errors under the fail action raise."""
        with pytest.raises(ValidationFailedError, match=FAILURE_MESSAGE):
            enforce(self._failing(project), ViolationAction.FAIL)

    @pytest.mark.parametrize("action", [ViolationAction.LOG, ViolationAction.IGNORE])
    def test_other_actions_pass(self, project, action: ViolationAction) -> None:
        """Test that log and ignore never raise."""
        enforce(self._failing(project), action)

    def test_clean_result_passes(self, project) -> None:
        """Test that a result without errors passes under fail."""
        result = analyze(_graph("com.other:tool:2"), LicensePolicy(allow=["MIT"]), MavenRepository(project.root))
        enforce(result, ViolationAction.FAIL)
