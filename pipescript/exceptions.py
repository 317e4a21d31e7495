"""
Custom exceptions for pipescript.
"""


class BaseAppError(Exception):
    """Base exception class for pipescript errors."""

    pass


class StreamError(BaseAppError):
    """Exception raised for pipeline and stream errors."""

    pass


class FileRepositoryError(BaseAppError):
    """Exception raised for file repository errors."""

    pass


class ConfigurationError(BaseAppError):
    """Exception raised for configuration errors."""

    pass
