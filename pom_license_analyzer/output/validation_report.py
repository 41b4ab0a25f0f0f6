"""Plain-text formatter for the validation report."""
from pom_license_analyzer.models.validation import (
    Severity,
    ValidationResult,
    ValidationResults,
)

ARTIFACT_RESULT_PREFIX = " - "

_SEVERITY_LABELS = {
    Severity.ERROR: "ERROR: ",
    Severity.WARNING: "WARNING: ",
    Severity.INFO: "",
}


def format_result(result: ValidationResult, prefix: str = "") -> str:
    """Render one result as a report line, e.g. ``" - ERROR: ..."``."""
    return f"{prefix}{_SEVERITY_LABELS[result.severity]}{result.message}"


class ValidationReportFormatter:
    """Format validation results as the ``validation.txt`` report.

    Policy-level results come first, one per line. When there are also
    artifact results, a blank line separates the two sections. Each
    artifact then gets a ``group:artifact:version`` header followed by its
    results prefixed with ``" - "``.
    """

    def format_results(self, results: ValidationResults) -> str:
        """Format results as report text.

        Args:
            results: Validation results for one run.

        Returns:
            Report text ending with a newline.
        """
        lines = [format_result(result) for result in results.config_results]
        if results.config_results and results.artifact_results:
            lines.append("")
        for entry in results.artifact_results:
            lines.append(str(entry.artifact.coordinate))
            lines.extend(
                format_result(result, prefix=ARTIFACT_RESULT_PREFIX) for result in entry.results
            )
        return "\n".join(lines) + "\n"
