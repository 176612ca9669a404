"""Utility helpers for plugin_resources."""

from .file_utils import FileFilter, get_file_extension_filter
from .plugin_utils import (
    get_plugin_path,
    get_plugins_dir,
    get_public_path,
    list_installed_plugins,
)


__all__ = [
    "FileFilter",
    "get_file_extension_filter",
    "get_plugin_path",
    "get_plugins_dir",
    "get_public_path",
    "list_installed_plugins",
]
