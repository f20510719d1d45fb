"""
Custom exceptions for the application.
"""


class BaseAppError(Exception):
    """Base exception class for application errors."""

    pass


class DirectoryError(BaseAppError):
    """Exception raised when the working directory cannot be read or used."""

    pass


class DirectoryChangeError(DirectoryError):
    """Exception raised when a scoped directory change cannot be entered."""

    pass


class ToolArgumentError(BaseAppError):
    """Exception raised when a tool is invoked with invalid arguments."""

    pass


class ConfigurationError(BaseAppError):
    """Exception raised for configuration errors."""

    pass
