"""POM License Analyzer - validate dependency licenses against a policy."""

__version__ = "0.1.0"
