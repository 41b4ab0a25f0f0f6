"""License analysis logic for pom-license-analyzer."""
from pom_license_analyzer.analysis.normalize import normalize_license_info
from pom_license_analyzer.analysis.validation import (
    check_allowed_identifiers,
    validate_artifacts,
)

__all__ = [
    "check_allowed_identifiers",
    "normalize_license_info",
    "validate_artifacts",
]
