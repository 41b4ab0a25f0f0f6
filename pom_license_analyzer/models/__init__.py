"""Pydantic data models for pom-license-analyzer."""

from pom_license_analyzer.models.artifact import ArtifactDetail, SpdxLicense
from pom_license_analyzer.models.config import (
    AllowedDependency,
    AllowedUrl,
    DependencyConfig,
    IgnoredDependency,
    LicensePolicy,
    UnusedAction,
    ValidationConfig,
    ViolationAction,
)
from pom_license_analyzer.models.coordinates import Coordinate
from pom_license_analyzer.models.graph import DependencyGraph, ResolvedComponent
from pom_license_analyzer.models.ids import Id, LiteralId, RegexId
from pom_license_analyzer.models.options import CheckOptions, Verbosity
from pom_license_analyzer.models.pom import PomInfo, RawLicense, RawModel
from pom_license_analyzer.models.validation import (
    ArtifactValidation,
    Severity,
    ValidationResult,
    ValidationResults,
)

__all__ = [
    "AllowedDependency",
    "AllowedUrl",
    "ArtifactDetail",
    "ArtifactValidation",
    "CheckOptions",
    "Coordinate",
    "DependencyConfig",
    "DependencyGraph",
    "Id",
    "IgnoredDependency",
    "LicensePolicy",
    "LiteralId",
    "PomInfo",
    "RawLicense",
    "RawModel",
    "RegexId",
    "ResolvedComponent",
    "Severity",
    "SpdxLicense",
    "UnusedAction",
    "ValidationConfig",
    "ValidationResult",
    "ValidationResults",
    "Verbosity",
    "ViolationAction",
]
