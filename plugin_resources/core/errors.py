"""Core error types for plugin resource loading."""

from pathlib import Path


class PluginResourceError(Exception):
    """Base exception for all plugin resource errors."""

    def __init__(self, message: str, cause: Exception | None = None):
        """Initialize with a message and optional cause.

        Args:
            message: The error message
            cause: The underlying exception that caused this error
        """
        super().__init__(message)
        self.cause = cause
        if cause:
            self.__cause__ = cause


class ResourceLoadError(PluginResourceError):
    """Error raised when a resource file cannot be read."""

    def __init__(
        self,
        message: str,
        path: str | Path | None = None,
        cause: Exception | None = None,
    ):
        """Initialize with a message, resource path, and cause.

        Args:
            message: The error message
            path: The resource file that failed to load
            cause: The underlying exception
        """
        super().__init__(message, cause)
        self.path = path


class ResourceParseError(ResourceLoadError):
    """Error raised when a resource file cannot be parsed."""


class InvalidPluginError(PluginResourceError):
    """Error raised for a plugin identifier that cannot name a plugin directory."""

    def __init__(
        self,
        message: str,
        plugin_uid: str | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message, cause)
        self.plugin_uid = plugin_uid
