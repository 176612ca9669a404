"""Directory-walking driver shared by all plugin resource loaders."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from plugin_resources.config.settings import get_settings
from plugin_resources.core.async_utils import gather_with_concurrency, run_in_executor
from plugin_resources.core.errors import ResourceLoadError
from plugin_resources.core.logging import get_logger
from plugin_resources.loaders.base import LoadContext, PluginResourceLoader


logger = get_logger(__name__)


class ResourceLoadingDriver:
    """Enumerate, parse and initialize the resource files of one loader."""

    def __init__(
        self, loader: PluginResourceLoader, concurrency: int | None = None
    ) -> None:
        self.loader = loader
        self.concurrency = concurrency or get_settings().loader.concurrency

    def list_resource_files(self) -> list[Path]:
        """Files directly inside the loader's base path accepted by its filter."""
        base_path = self.loader.get_base_resource_path()
        if not base_path.is_dir():
            logger.debug(
                "resource_directory_missing",
                plugin=self.loader.plugin_uid,
                path=str(base_path),
            )
            return []

        file_filter = self.loader.get_file_filter()
        paths = []
        for entry in base_path.iterdir():
            try:
                stats = entry.stat()
            except OSError as e:
                logger.warning(
                    "resource_load_failed",
                    plugin=self.loader.plugin_uid,
                    path=str(entry),
                    error=str(e),
                )
                continue
            if file_filter(entry.name, stats):
                paths.append(entry)
        return sorted(paths)

    async def load(self, path: Path, register: bool = False) -> Any:
        """Parse one resource file and hand it to the loader."""
        resource = await run_in_executor(self.loader.parse_resource, path)
        return await self.loader.init_resource(
            resource, LoadContext(path=path, register=register)
        )

    async def load_all(self, register: bool = False) -> dict[str, Any]:
        """Load every resource file.

        Files that cannot be read or parsed are logged and skipped.

        Returns:
            Mapping of resource name to initialized resource, in file order
        """
        paths = self.list_resource_files()
        results = await gather_with_concurrency(
            self.concurrency,
            *(self.load(path, register=register) for path in paths),
            return_exceptions=True,
        )

        resources: dict[str, Any] = {}
        for path, result in zip(paths, results, strict=True):
            if isinstance(result, ResourceLoadError):
                logger.warning(
                    "resource_load_failed",
                    plugin=self.loader.plugin_uid,
                    path=str(path),
                    error=str(result),
                )
                continue
            if isinstance(result, BaseException):
                raise result
            resources[self.loader.get_resource_name(path, result)] = result

        logger.debug(
            "resources_loaded",
            plugin=self.loader.plugin_uid,
            loader=type(self.loader).__name__,
            count=len(resources),
            register=register,
        )
        return resources
