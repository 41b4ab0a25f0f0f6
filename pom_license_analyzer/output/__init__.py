"""Output formatters for pom-license-analyzer."""

from pom_license_analyzer.output.artifacts_json import ArtifactsJsonFormatter
from pom_license_analyzer.output.terminal import TerminalFormatter
from pom_license_analyzer.output.validation_report import (
    ValidationReportFormatter,
    format_result,
)

__all__ = [
    "ArtifactsJsonFormatter",
    "TerminalFormatter",
    "ValidationReportFormatter",
    "format_result",
]
