"""License check pipeline.

Runs the analysis steps in order: walk the dependency graph, resolve POM
metadata, normalize licenses against the SPDX table and validate them
against the policy. Reports are written separately so callers can decide
where they go.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field

from pom_license_analyzer.analysis.normalize import normalize_license_info
from pom_license_analyzer.analysis.validation import (
    check_allowed_identifiers,
    validate_artifacts,
)
from pom_license_analyzer.constants import ARTIFACTS_JSON_NAME, VALIDATION_REPORT_NAME
from pom_license_analyzer.exceptions import ConfigurationError, ValidationFailedError
from pom_license_analyzer.models.artifact import ArtifactDetail
from pom_license_analyzer.models.config import (
    LicensePolicy,
    ValidationConfig,
    ViolationAction,
)
from pom_license_analyzer.models.coordinates import Coordinate
from pom_license_analyzer.models.graph import DependencyGraph
from pom_license_analyzer.models.pom import PomInfo
from pom_license_analyzer.models.validation import ValidationResult, ValidationResults
from pom_license_analyzer.output.artifacts_json import ArtifactsJsonFormatter
from pom_license_analyzer.output.validation_report import ValidationReportFormatter
from pom_license_analyzer.resolvers.graph import load_dependency_coordinates
from pom_license_analyzer.resolvers.pom import PomInheritanceResolver, RawModelSource
from pom_license_analyzer.spdx.table import SpdxLicenses

logger = logging.getLogger(__name__)

FAILURE_MESSAGE = "Artifacts failed validation. See output above."


class AnalysisResult(BaseModel):
    """Everything one analysis run produced."""

    model_config = {"extra": "forbid"}

    artifacts: list[ArtifactDetail] = Field(
        default_factory=list,
        description="Normalized artifacts, sorted by coordinate",
    )
    validation: ValidationResults = Field(
        default_factory=ValidationResults,
        description="Policy-level and per-artifact validation results",
    )


def _log_step(title: str) -> None:
    logger.info("")
    logger.info(title)
    logger.info("")


def _log_validation_config(config: ValidationConfig) -> None:
    logger.info("Allowed identifiers:")
    logger.info("  %s", ", ".join(config.allowed_identifiers) or "None")
    logger.info("Allowed URLs:")
    if not config.allowed_urls:
        logger.info("  None")
    for url, reason in config.allowed_urls.items():
        logger.info("  %s%s", url, f" because {reason}" if reason is not None else "")
    logger.info("Allowed coordinates:")
    if not config.allowed_coordinates:
        logger.info("  None")
    for coordinate, reason in config.allowed_coordinates.items():
        logger.info("  %s%s", coordinate, f" because {reason}" if reason is not None else "")


def analyze(
    graph: DependencyGraph,
    policy: LicensePolicy,
    raw_models: RawModelSource,
    spdx: Optional[SpdxLicenses] = None,
) -> AnalysisResult:
    """Run the full license analysis for one dependency graph.

    Args:
        graph: Resolved dependency graph.
        policy: Allow and ignore rules.
        raw_models: Source of unmerged POM models per coordinate.
        spdx: License table. Defaults to the bundled SPDX data.

    Returns:
        AnalysisResult with normalized artifacts and validation results.
        Ignore-rule warnings from the graph walk lead the policy-level
        results.

    Raises:
        ConfigurationError: If the policy allows an unknown SPDX identifier.
        GraphError: If the graph is malformed.
        PomInheritanceError: If a POM parent chain is cyclic.
        PomParseError: If a POM document cannot be parsed.
    """
    if spdx is None:
        spdx = SpdxLicenses.embedded()
    check_allowed_identifiers(policy.allow, spdx)

    _log_step("STEP 1: Walk dependency graph")
    resolution = load_dependency_coordinates(graph, policy.to_dependency_config())

    _log_step("STEP 2: Read POM metadata")
    resolver = PomInheritanceResolver(raw_models)
    pom_infos: dict[Coordinate, PomInfo] = {}
    for coordinate in resolution.coordinates:
        pom_infos[coordinate] = resolver.resolve(coordinate)

    _log_step("STEP 3: Normalize license information")
    artifacts = normalize_license_info(pom_infos, spdx)
    for artifact in artifacts:
        logger.info(
            "%s %s %s",
            artifact.coordinate,
            [record.identifier for record in artifact.spdx_licenses],
            [declared.url or declared.name for declared in artifact.unknown_licenses],
        )

    _log_step("STEP 4: Validate license information")
    validation_config = policy.to_validation_config()
    _log_validation_config(validation_config)
    validation = validate_artifacts(validation_config, artifacts)

    walk_results = [ValidationResult.warning(message) for message in resolution.config_warnings]
    return AnalysisResult(
        artifacts=artifacts,
        validation=ValidationResults(
            config_results=walk_results + validation.config_results,
            artifact_results=validation.artifact_results,
        ),
    )


def write_reports(result: AnalysisResult, output_dir: Path) -> tuple[Path, Path]:
    """Write ``artifacts.json`` and ``validation.txt``.

    Args:
        result: Output of :func:`analyze`.
        output_dir: Directory to write into; created when missing.

    Returns:
        Paths of the artifacts report and the validation report.

    Raises:
        ConfigurationError: If the directory or files cannot be written.
    """
    artifacts_path = output_dir / ARTIFACTS_JSON_NAME
    validation_path = output_dir / VALIDATION_REPORT_NAME
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
        artifacts_path.write_text(
            ArtifactsJsonFormatter().format_artifacts(result.artifacts),
            encoding="utf-8",
        )
        validation_path.write_text(
            ValidationReportFormatter().format_results(result.validation),
            encoding="utf-8",
        )
    except OSError as e:
        raise ConfigurationError(f"Cannot write reports to '{output_dir}': {e}") from e
    logger.info("Reports written to %s", output_dir)
    return artifacts_path, validation_path


def enforce(result: AnalysisResult, action: ViolationAction) -> None:
    """Fail the run when validation errors exist and the action is ``fail``.

    Raises:
        ValidationFailedError: If the action is ``fail`` and any result is
            an error.
    """
    if action == ViolationAction.FAIL and result.validation.contains_errors:
        raise ValidationFailedError(FAILURE_MESSAGE)
