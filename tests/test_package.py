"""Basic package tests for pom-license-analyzer."""

import pytest


def test_package_version() -> None:
    """Test that the package exposes its version."""
    import pom_license_analyzer

    assert pom_license_analyzer.__version__ == "0.1.0"


def test_cli_commands_registered() -> None:
    """Test that the CLI group carries the check and identify commands."""
    from pom_license_analyzer.cli import main

    assert set(main.commands) == {"check", "identify"}


def test_error_hierarchy() -> None:
    """Test that every package error derives from the base error."""
    from pom_license_analyzer import exceptions

    for name in ("ConfigurationError", "GraphError", "PomParseError", "SpdxDatabaseError"):
        assert issubclass(getattr(exceptions, name), exceptions.PomLicenseAnalyzerError)


@pytest.mark.parametrize(
    "module_name",
    [
        "pom_license_analyzer.analysis",
        "pom_license_analyzer.config",
        "pom_license_analyzer.models",
        "pom_license_analyzer.output",
        "pom_license_analyzer.resolvers",
        "pom_license_analyzer.spdx",
    ],
)
def test_subpackage_exports(module_name: str) -> None:
    """Test that each subpackage provides every name it lists in __all__."""
    import importlib

    module = importlib.import_module(module_name)
    for name in module.__all__:
        assert hasattr(module, name), f"{module_name} is missing {name}"
