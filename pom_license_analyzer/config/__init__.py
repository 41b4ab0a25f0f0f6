"""Configuration handling for pom-license-analyzer."""
from __future__ import annotations

from pom_license_analyzer.config.defaults import DEFAULT_CONFIG_NAMES, get_default_config
from pom_license_analyzer.config.loader import (
    find_config_file,
    load_config,
    load_config_file,
    load_graph,
)
from pom_license_analyzer.models.config import LicensePolicy

__all__ = [
    "DEFAULT_CONFIG_NAMES",
    "LicensePolicy",
    "find_config_file",
    "get_default_config",
    "load_config",
    "load_config_file",
    "load_graph",
]
