"""Custom exceptions for pom-license-analyzer."""


class PomLicenseAnalyzerError(Exception):
    """Base exception for all pom-license-analyzer errors."""

    pass


class ConfigurationError(PomLicenseAnalyzerError):
    """Exception raised when policy configuration is invalid."""

    pass


class GraphError(PomLicenseAnalyzerError):
    """Exception raised when the dependency graph breaks its contract.

    An unrecognized component classification or a dangling edge points to a
    bug in whatever produced the graph, not to a user mistake.
    """

    pass


class PomParseError(PomLicenseAnalyzerError):
    """Exception raised when a POM document cannot be parsed."""

    pass


class PomInheritanceError(PomLicenseAnalyzerError):
    """Exception raised when a POM parent chain is cyclic."""

    pass


class SpdxDatabaseError(PomLicenseAnalyzerError):
    """Exception raised when the SPDX license database is malformed."""

    pass


class ValidationFailedError(PomLicenseAnalyzerError):
    """Exception raised when artifacts fail validation under the fail action."""

    pass
