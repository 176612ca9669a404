"""Central registry for plugin localizations"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from functools import lru_cache
from typing import Any

import structlog

from plugin_resources.config.settings import get_settings, normalize_locale


GLOBAL_SITE = "global"

# (locale, site, plugin); plugin is None for bundles not owned by a plugin
_BundleKey = tuple[str, str, str | None]


@dataclass(frozen=True)
class RegistrationOptions:
    """Scope of a registered bundle."""

    site: str | None = None
    plugin: str | None = None


def flatten_bundle(bundle: Mapping[str, Any], prefix: str = "") -> dict[str, Any]:
    """Flatten nested translation mappings into dotted keys.

    ``{"generic": {"SAVE": "Save"}}`` becomes ``{"generic.SAVE": "Save"}``.
    Leaves that are not mappings are kept as they are.
    """
    flat: dict[str, Any] = {}
    for key, value in bundle.items():
        full_key = f"{prefix}{key}"
        if isinstance(value, Mapping):
            flat.update(flatten_bundle(value, prefix=f"{full_key}."))
        else:
            flat[full_key] = value
    return flat


class LocalizationRegistry:
    """Process-wide store of localization bundles keyed by locale, site and plugin."""

    def __init__(
        self, supported_locales: Iterable[str], default_locale: str
    ) -> None:
        self._supported = [normalize_locale(locale) for locale in supported_locales]
        self.default_locale = normalize_locale(default_locale)
        self._bundles: dict[_BundleKey, dict[str, Any]] = {}
        self._logger = structlog.get_logger(__name__)

    @classmethod
    def from_settings(cls) -> "LocalizationRegistry":
        settings = get_settings().localization
        return cls(settings.supported_locales, settings.default_locale)

    @property
    def supported_locales(self) -> list[str]:
        return list(self._supported)

    def is_supported(self, locale: str) -> bool:
        return normalize_locale(locale) in self._supported

    @staticmethod
    def _key(locale: str, options: RegistrationOptions | None) -> _BundleKey:
        options = options or RegistrationOptions()
        return (normalize_locale(locale), options.site or GLOBAL_SITE, options.plugin)

    def register_locale(
        self,
        locale: str,
        bundle: Mapping[str, Any],
        options: RegistrationOptions | None = None,
    ) -> bool:
        """Register a bundle for a locale, replacing any earlier one in the same scope.

        Returns:
            False when the locale is not supported or the bundle is not a mapping
        """
        if not self.is_supported(locale):
            self._logger.debug("locale_not_supported", locale=locale)
            return False
        if not isinstance(bundle, Mapping):
            self._logger.debug(
                "locale_bundle_invalid",
                locale=locale,
                bundle_type=type(bundle).__name__,
            )
            return False

        key = self._key(locale, options)
        flat = flatten_bundle(bundle)
        self._bundles[key] = flat
        self._logger.debug(
            "locale_registered",
            locale=key[0],
            site=key[1],
            plugin=key[2],
            key_count=len(flat),
        )
        return True

    def unregister_locale(
        self, locale: str, options: RegistrationOptions | None = None
    ) -> bool:
        """Remove the bundle for a locale in the given scope."""
        key = self._key(locale, options)
        if self._bundles.pop(key, None) is None:
            return False
        self._logger.debug(
            "locale_unregistered", locale=key[0], site=key[1], plugin=key[2]
        )
        return True

    def get_bundle(
        self, locale: str, options: RegistrationOptions | None = None
    ) -> dict[str, Any] | None:
        bundle = self._bundles.get(self._key(locale, options))
        return dict(bundle) if bundle is not None else None

    def get(
        self,
        key: str,
        locale: str | None = None,
        site: str | None = None,
        plugin: str | None = None,
        default: Any = None,
    ) -> Any:
        """Look up a translation.

        Scopes are tried most specific first: site and plugin, global site and
        plugin, site without plugin, global site without plugin. The requested
        locale is searched before the default locale.
        """
        site = site or GLOBAL_SITE
        scopes: list[tuple[str, str | None]] = [(site, plugin), (GLOBAL_SITE, plugin)]
        if plugin is not None:
            scopes += [(site, None), (GLOBAL_SITE, None)]

        locales = [normalize_locale(locale or self.default_locale)]
        if self.default_locale not in locales:
            locales.append(self.default_locale)

        for candidate in locales:
            for scope_site, scope_plugin in dict.fromkeys(scopes):
                bundle = self._bundles.get((candidate, scope_site, scope_plugin))
                if bundle is not None and key in bundle:
                    return bundle[key]
        return default

    def get_registered_locales(
        self, site: str | None = None, plugin: str | None = None
    ) -> list[str]:
        """List locales with a bundle, optionally limited to a site and/or plugin."""
        return sorted(
            {
                locale
                for locale, bundle_site, bundle_plugin in self._bundles
                if (site is None or bundle_site == site)
                and (plugin is None or bundle_plugin == plugin)
            }
        )

    def clear(self) -> None:
        self._bundles.clear()


@lru_cache
def get_localization_registry() -> LocalizationRegistry:
    """Return the process-wide registry, built from settings on first use."""
    return LocalizationRegistry.from_settings()


def register_locale(
    locale: str,
    bundle: Mapping[str, Any],
    options: RegistrationOptions | None = None,
) -> bool:
    """Register a bundle with the process-wide registry."""
    return get_localization_registry().register_locale(locale, bundle, options)
