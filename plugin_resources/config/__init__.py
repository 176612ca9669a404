"""Configuration module for plugin_resources."""

from .settings import (
    ConfigurationError,
    LoaderSettings,
    LocalizationSettings,
    LoggingSettings,
    Settings,
    get_settings,
    normalize_locale,
)


__all__ = [
    "Settings",
    "get_settings",
    "ConfigurationError",
    "LoaderSettings",
    "LocalizationSettings",
    "LoggingSettings",
    "normalize_locale",
]
