"""Tests for validation result models."""

from pom_license_analyzer.models.artifact import ArtifactDetail
from pom_license_analyzer.models.coordinates import Coordinate
from pom_license_analyzer.models.validation import (
    ArtifactValidation,
    Severity,
    ValidationResult,
    ValidationResults,
)


def _artifact() -> ArtifactDetail:
    return ArtifactDetail(coordinate=Coordinate(group="g", artifact="a", version="1"))


class TestValidationResult:
    """Tests for ValidationResult constructors."""

    def test_constructors_set_severity(self) -> None:
        """Test that the named constructors set the severity."""
        assert ValidationResult.info("m").severity == Severity.INFO
        assert ValidationResult.warning("m").severity == Severity.WARNING
        assert ValidationResult.error("m").severity == Severity.ERROR

    def test_is_error(self) -> None:
        """Test the is_error helper."""
        assert ValidationResult.error("m").is_error
        assert not ValidationResult.warning("m").is_error


class TestValidationResults:
    """Tests for ValidationResults.contains_errors."""

    def test_empty_results_have_no_errors(self) -> None:
        """Test that empty results contain no errors."""
        assert not ValidationResults().contains_errors

    def test_warnings_only(self) -> None:
        """Test that warnings do not count as errors."""
        results = ValidationResults(
            config_results=[ValidationResult.warning("unused")],
            artifact_results=[
                ArtifactValidation(
                    artifact=_artifact(), results=[ValidationResult.warning("w")]
                )
            ],
        )
        assert not results.contains_errors

    def test_artifact_error(self) -> None:
        """Test that an artifact error is detected."""
        results = ValidationResults(
            artifact_results=[
                ArtifactValidation(artifact=_artifact(), results=[ValidationResult.error("e")])
            ],
        )
        assert results.contains_errors

    def test_config_error(self) -> None:
        """Test that a policy-level error is detected."""
        results = ValidationResults(config_results=[ValidationResult.error("e")])
        assert results.contains_errors


class TestArtifactDetail:
    """Tests for ArtifactDetail."""

    def test_has_licenses(self) -> None:
        """Test that an artifact without licenses reports so."""
        assert not _artifact().has_licenses
