"""Process-wide localization registry."""

from .registry import (
    GLOBAL_SITE,
    LocalizationRegistry,
    RegistrationOptions,
    flatten_bundle,
    get_localization_registry,
    register_locale,
)


__all__ = [
    "GLOBAL_SITE",
    "LocalizationRegistry",
    "RegistrationOptions",
    "flatten_bundle",
    "get_localization_registry",
    "register_locale",
]
