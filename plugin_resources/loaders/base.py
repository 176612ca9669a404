"""Abstract interfaces for plugin resource loaders.

A loader describes one kind of plugin resource: where its files live, which
files qualify, how a file is named and parsed, and what happens to each parsed
resource. Walking the directory is left to
:class:`~plugin_resources.loaders.driver.ResourceLoadingDriver`, which works
with any loader.
"""

import json
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from plugin_resources.core.errors import ResourceLoadError, ResourceParseError
from plugin_resources.utils.file_utils import FileFilter


@dataclass(frozen=True)
class LoaderContext:
    """Construction context shared by every loader of one plugin."""

    plugin_uid: str
    site: str | None = None


@dataclass(frozen=True)
class LoadContext:
    """Per-file context passed to :meth:`PluginResourceLoader.init_resource`."""

    path: Path
    register: bool = False


class PluginResourceLoader(ABC):
    """Base implementation of a plugin resource loader."""

    def __init__(self, context: LoaderContext):
        """Initialize loader for one plugin.

        Args:
            context: Loader context naming the plugin
        """
        if not context.plugin_uid:
            raise ValueError("LoaderContext.plugin_uid is required")
        self.plugin_uid = context.plugin_uid

    @abstractmethod
    async def init_resource(self, resource: Any, context: LoadContext) -> Any:
        """Initialize a parsed resource.

        Args:
            resource: Parsed resource contents
            context: Originating path and whether to register the resource

        Returns:
            The initialized resource
        """
        ...

    @abstractmethod
    def get_file_filter(self) -> FileFilter:
        """Create the predicate selecting candidate files in the resource directory."""
        ...

    @abstractmethod
    def get_base_resource_path(self) -> Path:
        """Absolute path to the directory containing the resources to load."""
        ...

    def get_resource_name(self, path_to_resource: str | Path, resource: Any) -> str:
        """Derive the unique name of a resource."""
        return PluginResourceLoader.resource_name_from_path(path_to_resource)

    def parse_resource(self, path: Path) -> Any:
        """Read and parse one resource file as UTF-8 JSON.

        Raises:
            ResourceLoadError: If the file cannot be read
            ResourceParseError: If the file is not valid JSON
        """
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ResourceLoadError(f"Cannot read resource {path}", path, e) from e

        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise ResourceParseError(f"Invalid JSON in {path}: {e}", path, e) from e

    @staticmethod
    def resource_name_from_path(path_to_resource: str | Path) -> str:
        """File base name without its extension (``a/en-us.json`` -> ``en-us``)."""
        return Path(path_to_resource).stem
