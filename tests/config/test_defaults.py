"""Tests for the default license policy."""
from __future__ import annotations

from pom_license_analyzer.config.defaults import DEFAULT_CONFIG_NAMES, get_default_config
from pom_license_analyzer.models.config import UnusedAction, ViolationAction


class TestGetDefaultConfig:
    """Tests for get_default_config function."""

    def test_allows_and_ignores_nothing(self) -> None:
        """Test that the default policy has no allow or ignore rules."""
        policy = get_default_config()
        assert policy.allow == []
        assert policy.allow_urls == []
        assert policy.allow_dependencies == []
        assert policy.ignore_dependencies == []

    def test_actions(self) -> None:
        """Test that violations fail the run and unused rules are logged."""
        policy = get_default_config()
        assert policy.violation_action == ViolationAction.FAIL
        assert policy.unused_allow_action == UnusedAction.LOG
        assert policy.unused_allow_url_action == UnusedAction.LOG
        assert policy.unused_allow_dependency_action == UnusedAction.LOG

    def test_engine_inputs_are_empty(self) -> None:
        """Test that the default policy gives the walker and validator no rules."""
        policy = get_default_config()
        dependency_config = policy.to_dependency_config()
        assert dependency_config.ignored_groups == {}
        assert dependency_config.ignored_coordinates == {}
        validation_config = policy.to_validation_config()
        assert validation_config.allowed_identifiers == ()
        assert validation_config.allowed_urls == {}
        assert validation_config.allowed_coordinates == {}

    def test_yaml_name_searched_first(self) -> None:
        """Test the order of policy file names."""
        assert DEFAULT_CONFIG_NAMES == [".pom-license-analyzer.yaml", ".pom-license-analyzer.yml"]
