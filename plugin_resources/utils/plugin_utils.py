"""Resolve where an installed plugin keeps its files."""

from pathlib import Path

from plugin_resources.config.settings import Settings, get_settings
from plugin_resources.core.errors import InvalidPluginError


PUBLIC_DIR_NAME = "public"


def _validate_plugin_uid(plugin_uid: str) -> str:
    if not plugin_uid or not plugin_uid.strip():
        raise InvalidPluginError("Plugin identifier must not be empty", plugin_uid)
    if "/" in plugin_uid or "\\" in plugin_uid or plugin_uid in (".", ".."):
        raise InvalidPluginError(
            f"Plugin identifier {plugin_uid!r} is not a directory name", plugin_uid
        )
    return plugin_uid


def get_plugins_dir(settings: Settings | None = None) -> Path:
    """Return the absolute directory holding all installed plugins."""
    settings = settings or get_settings()
    return settings.plugins_dir.expanduser().resolve()


def get_plugin_path(plugin_uid: str, settings: Settings | None = None) -> Path:
    """Return the root directory of one plugin."""
    return get_plugins_dir(settings) / _validate_plugin_uid(plugin_uid)


def get_public_path(plugin_uid: str, settings: Settings | None = None) -> Path:
    """Return the directory of the plugin's public resources.

    Args:
        plugin_uid: Plugin identifier, which is also its directory name
        settings: Settings to read ``plugins_dir`` from; defaults to the
            process-wide settings

    Returns:
        ``<plugins dir>/<plugin_uid>/public``

    Raises:
        InvalidPluginError: If ``plugin_uid`` is empty or path-like
    """
    return get_plugin_path(plugin_uid, settings) / PUBLIC_DIR_NAME


def list_installed_plugins(settings: Settings | None = None) -> list[str]:
    """List plugin directory names, skipping hidden and private entries."""
    plugins_dir = get_plugins_dir(settings)
    if not plugins_dir.is_dir():
        return []

    return sorted(
        entry.name
        for entry in plugins_dir.iterdir()
        if entry.is_dir() and not entry.name.startswith(("_", "."))
    )
