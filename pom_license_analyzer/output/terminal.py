"""Terminal output formatter using Rich."""
from typing import Optional

from rich.console import Console
from rich.markup import escape

from pom_license_analyzer.models.config import ViolationAction
from pom_license_analyzer.models.options import Verbosity
from pom_license_analyzer.models.validation import (
    Severity,
    ValidationResult,
    ValidationResults,
)
from pom_license_analyzer.output.validation_report import (
    ARTIFACT_RESULT_PREFIX,
    format_result,
)

_STYLES = {
    Severity.ERROR: "red",
    Severity.WARNING: "yellow",
    Severity.INFO: "dim",
}


class TerminalFormatter:
    """Display validation results on the terminal using Rich.

    Lines mirror the validation report. Errors and warnings are shown (only
    errors in quiet mode); artifact headers are shown for artifacts with a
    shown line; info lines only appear in verbose mode. Under the ``ignore``
    violation action everything is demoted to info, so a normal run only
    prints the summary line.
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        verbosity: Verbosity = Verbosity.NORMAL,
        violation_action: ViolationAction = ViolationAction.FAIL,
    ) -> None:
        """Initialize the formatter with a Rich console.

        Args:
            console: Optional Rich Console instance. If not provided,
                a new Console will be created.
            verbosity: Output verbosity level.
            violation_action: Action configured for violations.
        """
        self._console = console if console is not None else Console()
        self._verbosity = verbosity
        self._violation_action = violation_action

    def format_results(self, results: ValidationResults) -> None:
        """Display validation results.

        Args:
            results: Validation results for one run.
        """
        config_shown = False
        for result in results.config_results:
            config_shown = self._print_result(result) or config_shown

        separated = False
        for entry in results.artifact_results:
            shown = [result for result in entry.results if self._is_shown(result)]
            if not shown and self._verbosity != Verbosity.VERBOSE:
                continue
            if config_shown and not separated:
                self._console.print()
                separated = True
            self._console.print(f"[bold]{escape(str(entry.artifact.coordinate))}[/bold]")
            for result in entry.results:
                self._print_result(result, prefix=ARTIFACT_RESULT_PREFIX)

        if self._verbosity != Verbosity.QUIET:
            self._print_summary(results)

    def _effective_severity(self, result: ValidationResult) -> Severity:
        if self._violation_action == ViolationAction.IGNORE:
            return Severity.INFO
        return result.severity

    def _is_shown(self, result: ValidationResult) -> bool:
        severity = self._effective_severity(result)
        if self._verbosity == Verbosity.VERBOSE:
            return True
        if self._verbosity == Verbosity.QUIET:
            return severity == Severity.ERROR
        return severity != Severity.INFO

    def _print_result(self, result: ValidationResult, prefix: str = "") -> bool:
        if not self._is_shown(result):
            return False
        style = _STYLES[self._effective_severity(result)]
        self._console.print(
            f"[{style}]{escape(format_result(result, prefix))}[/{style}]", soft_wrap=True
        )
        return True

    def _print_summary(self, results: ValidationResults) -> None:
        failed = sum(
            1
            for entry in results.artifact_results
            if any(result.is_error for result in entry.results)
        )
        total = len(results.artifact_results)
        if failed and self._violation_action != ViolationAction.IGNORE:
            self._console.print(
                f"\n[red]VALIDATION FAILED[/red] - {failed} of {total} artifact(s) "
                "failed validation"
            )
        else:
            self._console.print(f"\n[green]{total} artifact(s) checked[/green]")
