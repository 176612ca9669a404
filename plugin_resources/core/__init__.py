"""Core abstractions for plugin_resources."""

from plugin_resources.core.errors import (
    InvalidPluginError,
    PluginResourceError,
    ResourceLoadError,
    ResourceParseError,
)


__all__ = [
    "InvalidPluginError",
    "PluginResourceError",
    "ResourceLoadError",
    "ResourceParseError",
]
