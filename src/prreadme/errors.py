"""Custom exception types for the PR README generator."""


class ReadmeGeneratorError(Exception):
    """Base exception for all expected README generator failures."""


class ConfigurationError(ReadmeGeneratorError):
    """Raised when runtime configuration values or input files are missing or invalid."""


class AuthenticationError(ReadmeGeneratorError):
    """Raised when GitHub credentials are unavailable or rejected."""


class ApiError(ReadmeGeneratorError):
    """Raised when a GitHub API request fails or returns an unexpected response."""


class DataValidationError(ReadmeGeneratorError):
    """Raised when API payloads or pull request records do not meet expected constraints."""


class RepositoryReferenceError(DataValidationError):
    """Raised when a repository API URL cannot be parsed into owner and name."""
