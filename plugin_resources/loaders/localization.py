"""Loader registering a plugin's localization bundles."""

from pathlib import Path
from typing import Any

from plugin_resources.core.async_utils import defer
from plugin_resources.core.logging import get_logger
from plugin_resources.loaders.base import LoadContext, LoaderContext, PluginResourceLoader
from plugin_resources.localization.registry import (
    LocalizationRegistry,
    RegistrationOptions,
    get_localization_registry,
)
from plugin_resources.utils.file_utils import FileFilter, get_file_extension_filter
from plugin_resources.utils.plugin_utils import get_public_path


logger = get_logger(__name__)


class PluginLocalizationLoader(PluginResourceLoader):
    """Loads ``<plugin public path>/localization/*.json`` into the localization registry.

    Each file holds one locale; its base name is the locale name.
    """

    def __init__(
        self,
        context: LoaderContext,
        registry: LocalizationRegistry | None = None,
    ):
        super().__init__(context)
        self.site = context.site
        self.registry = registry or get_localization_registry()

    async def init_resource(
        self, resource: dict[str, Any], context: LoadContext
    ) -> dict[str, Any]:
        """Register the bundle when ``context.register`` is set.

        Returns:
            The bundle, unchanged
        """
        if not context.register:
            return resource

        await self.register(resource, context)
        return resource

    async def register(self, localization: dict[str, Any], context: LoadContext) -> None:
        """Register one bundle under this loader's site and plugin.

        A rejected registration is logged and does not raise, so one
        unsupported locale does not stop the remaining files from loading.
        """
        locale = self.get_resource_name(context.path, localization)
        logger.debug(
            "registering_localizations", plugin=self.plugin_uid, locale=locale
        )

        options = RegistrationOptions(site=self.site, plugin=self.plugin_uid)
        if not self.registry.register_locale(locale, localization, options):
            logger.debug(
                "locale_registration_rejected",
                plugin=self.plugin_uid,
                locale=locale,
                hint="Is the locale supported in your configuration?",
            )
        await defer()

    def get_resource_name(self, path_to_resource: str | Path, resource: Any) -> str:
        return PluginResourceLoader.resource_name_from_path(path_to_resource)

    def get_file_filter(self) -> FileFilter:
        return get_file_extension_filter("json")

    def get_base_resource_path(self) -> Path:
        return PluginLocalizationLoader.get_path_to_localizations(self.plugin_uid)

    @staticmethod
    def get_path_to_localizations(plugin_uid: str) -> Path:
        """Directory where a plugin's localization files live."""
        return get_public_path(plugin_uid) / "localization"
