"""Plugin resource loaders and the driver that runs them."""

from .base import LoadContext, LoaderContext, PluginResourceLoader
from .driver import ResourceLoadingDriver
from .localization import PluginLocalizationLoader


__all__ = [
    "LoadContext",
    "LoaderContext",
    "PluginLocalizationLoader",
    "PluginResourceLoader",
    "ResourceLoadingDriver",
]
