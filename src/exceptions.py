class SuggestSettingsException(Exception):
    """Exception raised when suggest settings cannot be loaded or applied."""


class OpenSearchException(Exception):
    """Base exception for OpenSearch-related errors."""


class UndefinedAnalyzerError(OpenSearchException):
    """Exception raised when the engine has no analyzer with the requested name."""

    def __init__(self, analyzer_name: str, reason: str = ""):
        self.analyzer_name = analyzer_name
        self.reason = reason
        super().__init__(reason or f"Analyzer [{analyzer_name}] is not defined")


class ConfigurationError(Exception):
    """Exception raised when configuration is invalid."""
