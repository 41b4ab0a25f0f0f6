"""Validation of artifact licenses against the allow policy."""

from __future__ import annotations

from collections.abc import Iterable

from pom_license_analyzer.exceptions import ConfigurationError
from pom_license_analyzer.models.artifact import ArtifactDetail
from pom_license_analyzer.models.config import UnusedAction, ValidationConfig
from pom_license_analyzer.models.coordinates import Coordinate
from pom_license_analyzer.models.validation import (
    ArtifactValidation,
    Severity,
    ValidationResult,
    ValidationResults,
)
from pom_license_analyzer.spdx.table import SpdxLicenses


def check_allowed_identifiers(identifiers: Iterable[str], spdx: SpdxLicenses) -> None:
    """Reject allowed identifiers that are not in the SPDX table.

    Raises:
        ConfigurationError: For the first unknown identifier.
    """
    for identifier in identifiers:
        if identifier not in spdx:
            raise ConfigurationError(f"{identifier} is not a valid SPDX id.")


def _because(reason: str | None) -> str:
    return f" because {reason}" if reason is not None else ""


def _unused(action: UnusedAction, message: str) -> ValidationResult:
    if action is UnusedAction.IGNORE:
        return ValidationResult.info(message)
    return ValidationResult.warning(message)


def _validate_licenses(
    config: ValidationConfig,
    artifact: ArtifactDetail,
    used_identifiers: set[str],
    used_urls: set[str],
) -> list[ValidationResult]:
    # Several licenses are a choice between them: one acceptable license
    # validates the artifact. Identifiers are tried across all licenses
    # before any URL.
    for record in artifact.spdx_licenses:
        if record.identifier in config.allowed_identifiers:
            used_identifiers.add(record.identifier)
            return [ValidationResult.info(f"SPDX identifier '{record.identifier}' allowed")]

    for record in artifact.spdx_licenses:
        if record.url in config.allowed_urls:
            used_urls.add(record.url)
            return [
                ValidationResult.warning(
                    f"License URL '{record.url}' was allowed but could use "
                    f"SPDX identifier '{record.identifier}'"
                )
            ]

    for unknown in artifact.unknown_licenses:
        if unknown.url is not None and unknown.url in config.allowed_urls:
            used_urls.add(unknown.url)
            reason = config.allowed_urls[unknown.url]
            return [
                ValidationResult.info(
                    f"Unknown license URL '{unknown.url}' allowed{_because(reason)}"
                )
            ]

    results: list[ValidationResult] = []
    for record in artifact.spdx_licenses:
        results.append(
            ValidationResult.error(f"SPDX identifier '{record.identifier}' is NOT allowed")
        )
    for unknown in artifact.unknown_licenses:
        if unknown.url is not None:
            message = f"Unknown license URL '{unknown.url}' is NOT allowed"
        elif unknown.name is not None:
            message = f"Unknown license name '{unknown.name}' with no URL is NOT allowed"
        else:
            message = "Unknown license with no name or URL is NOT allowed"
        results.append(ValidationResult.error(message))
    if not artifact.has_licenses:
        results.append(ValidationResult.error("Artifact declares no licenses!"))
    return results


def validate_artifacts(
    config: ValidationConfig,
    artifacts: list[ArtifactDetail],
) -> ValidationResults:
    """Validate every artifact and audit the allow rules.

    An artifact passes when one of its licenses is allowed by identifier
    or URL. A failing artifact whose exact coordinate is allowed has its
    errors downgraded to info; one whose group and artifact match an
    allowed coordinate of another version gets a warning instead. Allow
    rules that validated nothing are reported at the end, as warnings or,
    when their unused action is ``ignore``, as info.

    Args:
        config: Allow rules and unused-rule actions.
        artifacts: Artifacts to validate, in report order.

    Returns:
        ValidationResults with policy-level and per-artifact results.
    """
    used_identifiers: set[str] = set()
    used_urls: set[str] = set()
    used_coordinates: set[Coordinate] = set()
    artifact_results: list[ArtifactValidation] = []

    for artifact in artifacts:
        results = _validate_licenses(config, artifact, used_identifiers, used_urls)

        if any(result.is_error for result in results):
            coordinate = artifact.coordinate
            if coordinate in config.allowed_coordinates:
                used_coordinates.add(coordinate)
                reason = config.allowed_coordinates[coordinate]
                results.append(
                    ValidationResult.info(f"Coordinate version is allowed{_because(reason)}")
                )
                results = [
                    ValidationResult.info(result.message)
                    if result.severity is Severity.ERROR
                    else result
                    for result in results
                ]
            else:
                candidate = next(
                    (
                        allowed
                        for allowed in config.allowed_coordinates
                        if allowed.group == coordinate.group
                        and allowed.artifact == coordinate.artifact
                    ),
                    None,
                )
                if candidate is not None:
                    results.append(
                        ValidationResult.warning(
                            "Coordinates match an allowed dependency but version does "
                            f"not match ({candidate.version} != {coordinate.version})"
                        )
                    )

        artifact_results.append(ArtifactValidation(artifact=artifact, results=results))

    config_results: list[ValidationResult] = []
    for identifier in config.allowed_identifiers:
        if identifier not in used_identifiers:
            config_results.append(
                _unused(
                    config.unused_allow_action,
                    f"Allowed SPDX identifier '{identifier}' is unused",
                )
            )
    for url in config.allowed_urls:
        if url not in used_urls:
            config_results.append(
                _unused(
                    config.unused_allow_url_action,
                    f"Allowed license URL '{url}' is unused",
                )
            )
    for coordinate in config.allowed_coordinates:
        if coordinate not in used_coordinates:
            config_results.append(
                _unused(
                    config.unused_allow_dependency_action,
                    f"Allowed dependency '{coordinate}' is unused",
                )
            )

    return ValidationResults(config_results=config_results, artifact_results=artifact_results)
