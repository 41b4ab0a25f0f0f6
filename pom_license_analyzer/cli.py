"""CLI entry point for pom-license-analyzer."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from pom_license_analyzer import __version__
from pom_license_analyzer.config import load_config, load_graph
from pom_license_analyzer.constants import (
    DEFAULT_OUTPUT_DIR,
    EXIT_ERROR,
    EXIT_ISSUES,
    EXIT_SUCCESS,
)
from pom_license_analyzer.exceptions import (
    PomLicenseAnalyzerError,
    ValidationFailedError,
)
from pom_license_analyzer.models.config import ViolationAction
from pom_license_analyzer.models.options import CheckOptions, Verbosity
from pom_license_analyzer.output.terminal import TerminalFormatter
from pom_license_analyzer.pipeline import analyze, enforce, write_reports
from pom_license_analyzer.resolvers.pom_xml import MavenRepository
from pom_license_analyzer.spdx.table import SpdxLicenses, UrlCollisionPolicy

# Module-level console for consistent output
_console = Console()
# Separate console for logs and errors (writes to stderr)
_error_console = Console(stderr=True)

_COLLISION_CHOICES = [policy.value for policy in UrlCollisionPolicy]


@click.group()
@click.version_option(version=__version__)
def main() -> None:
    """POM License Analyzer - Check dependency licenses against a policy.

    Reads a resolved dependency graph, looks up each artifact's POM in a
    local Maven repository, matches the declared licenses to SPDX
    identifiers and validates them against the allow rules in the policy.

    \b
    Examples:
        pom-license-analyzer check graph.json --repository ~/.m2/repository
        pom-license-analyzer check graph.json -r repo --violation-action log
        pom-license-analyzer identify https://opensource.org/licenses/MIT
    """
    pass


@main.command()
@click.argument("graph_path", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--repository",
    "-r",
    "repository_path",
    type=click.Path(exists=True, file_okay=False),
    required=True,
    help="Local Maven repository holding the POM files.",
)
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to license policy file.",
)
@click.option(
    "--output-dir",
    "-o",
    "output_dir",
    type=click.Path(file_okay=False),
    default=DEFAULT_OUTPUT_DIR,
    show_default=True,
    help="Directory for artifacts.json and validation.txt.",
)
@click.option(
    "--spdx-database",
    "spdx_database",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="SPDX licenses.json to use instead of the bundled license list.",
)
@click.option(
    "--url-collision",
    "url_collision",
    type=click.Choice(_COLLISION_CHOICES, case_sensitive=False),
    default=UrlCollisionPolicy.ALL.value,
    show_default=True,
    help="Records to keep when several SPDX licenses share a URL.",
)
@click.option(
    "--violation-action",
    "violation_action",
    type=click.Choice([action.value for action in ViolationAction], case_sensitive=False),
    default=None,
    help="Override the policy's violation action.",
)
@click.option(
    "--verbose",
    "-v",
    "verbose_flag",
    is_flag=True,
    default=False,
    help="Show info results and analysis steps.",
)
@click.option(
    "--quiet",
    "-q",
    "quiet_flag",
    is_flag=True,
    default=False,
    help="Show only errors.",
)
@click.option(
    "--debug",
    "debug_flag",
    is_flag=True,
    default=False,
    help="Log graph traversal and POM lookups.",
)
def check(
    graph_path: str,
    repository_path: str,
    config_path: str | None,
    output_dir: str,
    spdx_database: str | None,
    url_collision: str,
    violation_action: str | None,
    verbose_flag: bool,
    quiet_flag: bool,
    debug_flag: bool,
) -> None:
    """Check the licenses of a resolved dependency graph.

    Writes artifacts.json and validation.txt to the output directory and
    prints the validation results. Exits with 1 when artifacts fail
    validation and the violation action is 'fail'.

    \b
    Examples:
        pom-license-analyzer check graph.json -r ~/.m2/repository
        pom-license-analyzer check graph.json -r repo -o reports --verbose
        pom-license-analyzer check graph.json -r repo --config policy.yaml
    """
    if verbose_flag and quiet_flag:
        raise click.UsageError("--verbose and --quiet are mutually exclusive.")

    if quiet_flag:
        verbosity = Verbosity.QUIET
    elif verbose_flag:
        verbosity = Verbosity.VERBOSE
    else:
        verbosity = Verbosity.NORMAL

    options = CheckOptions(
        output_dir=output_dir,
        verbosity=verbosity,
        violation_action=ViolationAction(violation_action.lower()) if violation_action else None,
    )
    _configure_logging(options.verbosity, debug_flag)

    try:
        policy = load_config(config_path)
        action = options.violation_action or policy.violation_action
        spdx = _load_spdx(spdx_database, UrlCollisionPolicy(url_collision.lower()))
        graph = load_graph(Path(graph_path))

        result = analyze(graph, policy, MavenRepository(Path(repository_path)), spdx)
        write_reports(result, Path(options.output_dir))

        TerminalFormatter(
            console=_console,
            verbosity=options.verbosity,
            violation_action=action,
        ).format_results(result.validation)

        enforce(result, action)
        sys.exit(EXIT_SUCCESS)

    except ValidationFailedError as e:
        _error_console.print(f"[red bold]{escape(str(e))}[/red bold]")
        sys.exit(EXIT_ISSUES)
    except PomLicenseAnalyzerError as e:
        _display_error(e)
        sys.exit(EXIT_ERROR)


@main.command()
@click.argument("value")
@click.option(
    "--spdx-database",
    "spdx_database",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="SPDX licenses.json to use instead of the bundled license list.",
)
@click.option(
    "--url-collision",
    "url_collision",
    type=click.Choice(_COLLISION_CHOICES, case_sensitive=False),
    default=UrlCollisionPolicy.ALL.value,
    show_default=True,
    help="Records to keep when several SPDX licenses share a URL.",
)
def identify(value: str, spdx_database: str | None, url_collision: str) -> None:
    """Show the SPDX licenses a license URL or identifier resolves to.

    Uses the same matching as 'check': exact URL, then known historical
    URL variants. Exits with 1 when nothing matches.

    \b
    Examples:
        pom-license-analyzer identify Apache-2.0
        pom-license-analyzer identify http://www.opensource.org/licenses/mit-license.php
    """
    try:
        spdx = _load_spdx(spdx_database, UrlCollisionPolicy(url_collision.lower()))
    except PomLicenseAnalyzerError as e:
        _display_error(e)
        sys.exit(EXIT_ERROR)

    records = spdx.lookup(value)
    if not records:
        _console.print(f"[yellow]No SPDX license matches '{escape(value)}'[/yellow]")
        sys.exit(EXIT_ISSUES)

    table = Table(title="SPDX Licenses")
    table.add_column("Identifier", style="cyan", no_wrap=True)
    table.add_column("Name", style="green")
    table.add_column("URL", style="magenta")
    for record in records:
        table.add_row(record.identifier, record.name, record.url)
    _console.print(table)
    sys.exit(EXIT_SUCCESS)


def _configure_logging(verbosity: Verbosity, debug: bool) -> None:
    """Route package logs to stderr through Rich.

    Args:
        verbosity: INFO logs are shown in verbose mode, WARNING otherwise.
        debug: Show DEBUG logs regardless of verbosity.
    """
    if debug:
        level = logging.DEBUG
    elif verbosity == Verbosity.VERBOSE:
        level = logging.INFO
    else:
        level = logging.WARNING

    package_logger = logging.getLogger("pom_license_analyzer")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    package_logger.addHandler(
        RichHandler(console=_error_console, show_time=False, show_path=False)
    )
    package_logger.setLevel(level)


def _load_spdx(spdx_database: str | None, collision: UrlCollisionPolicy) -> SpdxLicenses:
    if spdx_database is None:
        return SpdxLicenses.embedded(collision)
    return SpdxLicenses.load_database(Path(spdx_database), collision)


def _display_error(error: PomLicenseAnalyzerError) -> None:
    """Display error message to user.

    All errors are written to stderr for consistent CI/CD behavior.

    Args:
        error: The exception that occurred.
    """
    error_type = type(error).__name__
    _error_console.print(f"[red bold]Error: {error_type}: {escape(str(error))}[/red bold]")


if __name__ == "__main__":
    main()
