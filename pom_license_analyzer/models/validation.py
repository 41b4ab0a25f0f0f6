"""Validation result models."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, computed_field

from pom_license_analyzer.models.artifact import ArtifactDetail


class Severity(Enum):
    """Severity of a validation result."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class ValidationResult(BaseModel):
    """A single validation message."""

    model_config = {"extra": "forbid", "frozen": True}

    severity: Severity = Field(description="Result severity")
    message: str = Field(description="Human-readable message")

    @classmethod
    def info(cls, message: str) -> ValidationResult:
        return cls(severity=Severity.INFO, message=message)

    @classmethod
    def warning(cls, message: str) -> ValidationResult:
        return cls(severity=Severity.WARNING, message=message)

    @classmethod
    def error(cls, message: str) -> ValidationResult:
        return cls(severity=Severity.ERROR, message=message)

    @property
    def is_error(self) -> bool:
        return self.severity == Severity.ERROR


class ArtifactValidation(BaseModel):
    """All validation results for one artifact."""

    model_config = {"extra": "forbid"}

    artifact: ArtifactDetail = Field(description="The validated artifact")
    results: list[ValidationResult] = Field(
        default_factory=list,
        description="Results in the order they were produced",
    )


class ValidationResults(BaseModel):
    """Policy-level and per-artifact validation results for one run."""

    model_config = {"extra": "forbid"}

    config_results: list[ValidationResult] = Field(
        default_factory=list,
        description="Results about the policy itself (unused or redundant rules)",
    )
    artifact_results: list[ArtifactValidation] = Field(
        default_factory=list,
        description="Per-artifact results, sorted by coordinate",
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def contains_errors(self) -> bool:
        """True if any policy-level or per-artifact result is an error."""
        return any(r.is_error for r in self.config_results) or any(
            r.is_error for entry in self.artifact_results for r in entry.results
        )
