"""Policy and graph file loading for pom-license-analyzer."""
from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from pom_license_analyzer.config.defaults import DEFAULT_CONFIG_NAMES, get_default_config
from pom_license_analyzer.exceptions import (
    ConfigurationError,
    GraphError,
    PomLicenseAnalyzerError,
)
from pom_license_analyzer.models.config import LicensePolicy
from pom_license_analyzer.models.graph import DependencyGraph


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Find a policy file in a directory.

    Names are tried in order: `.pom-license-analyzer.yaml`, then
    `.pom-license-analyzer.yml`.

    Args:
        start_dir: Directory to search. Defaults to current working directory.

    Returns:
        Path to the first policy file found, None otherwise.
    """
    search_dir = start_dir or Path.cwd()
    candidates = (search_dir / name for name in DEFAULT_CONFIG_NAMES)
    return next((path for path in candidates if path.exists()), None)


def _read(path: Path, what: str, error: type[PomLicenseAnalyzerError]) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        raise error(f"Cannot read {what} '{path}': {e}") from e


def _format_validation_errors(error: ValidationError) -> str:
    """Join pydantic errors as ``loc: msg`` pairs separated by ``; ``."""
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc']) or 'root'}: {err['msg']}"
        for err in error.errors()
    )


def _parse_policy(data: Any, path: Path) -> LicensePolicy:
    # Blank files and files holding only comments load as None.
    if data is None:
        return get_default_config()
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Invalid configuration in '{path}': "
            f"expected a mapping at root level, got {type(data).__name__}"
        )
    try:
        return LicensePolicy.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid configuration in '{path}': {_format_validation_errors(e)}"
        ) from e


def load_config_file(path: Path) -> LicensePolicy:
    """Load and validate a license policy from a YAML file.

    Args:
        path: Path to the policy file.

    Returns:
        Validated LicensePolicy; the default policy for an empty file.

    Raises:
        ConfigurationError: If the file cannot be read, is not valid YAML,
            or does not describe a policy.
    """
    content = _read(path, "configuration file", ConfigurationError)
    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML syntax in '{path}': {e}") from e
    return _parse_policy(data, path)


def load_config(config_path: str | None = None) -> LicensePolicy:
    """Load the license policy for a run.

    An explicit path is always used. Otherwise a policy file in the current
    directory is picked up, and without one the default policy applies.

    Args:
        config_path: Optional path to a policy file.

    Returns:
        The policy to apply.

    Raises:
        ConfigurationError: If the chosen policy file is invalid.
    """
    if config_path is not None:
        return load_config_file(Path(config_path))

    discovered = find_config_file()
    if discovered is None:
        return get_default_config()
    return load_config_file(discovered)


def load_graph(path: Path) -> DependencyGraph:
    """Load a resolved dependency graph from a JSON file.

    Args:
        path: Path to the graph document.

    Returns:
        Validated DependencyGraph.

    Raises:
        GraphError: If the file cannot be read, is not valid JSON, or does
            not describe a graph.
    """
    content = _read(path, "dependency graph", GraphError)
    try:
        return DependencyGraph.model_validate_json(content)
    except ValidationError as e:
        raise GraphError(
            f"Invalid dependency graph in '{path}': {_format_validation_errors(e)}"
        ) from e
