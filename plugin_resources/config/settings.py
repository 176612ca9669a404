from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


__all__ = [
    "Settings",
    "LocalizationSettings",
    "LoaderSettings",
    "LoggingSettings",
    "ConfigurationError",
    "get_settings",
    "normalize_locale",
]


class ConfigurationError(Exception):
    """Raised when configuration loading or validation fails."""

    pass


def normalize_locale(locale: str) -> str:
    """Return the canonical registry form of a locale name (``en_US`` -> ``en-us``)."""
    return locale.strip().replace("_", "-").lower()


class LoggingSettings(BaseModel):
    """Logging configuration settings."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Log level for plugin_resources loggers",
    )

    json_logs: bool = Field(
        default=False,
        description="Render log lines as JSON instead of console output",
    )

    @field_validator("level", mode="before")
    @classmethod
    def _upper_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value


class LocalizationSettings(BaseModel):
    """Locales accepted by the localization registry."""

    supported_locales: list[str] = Field(
        default_factory=lambda: ["en-us"],
        description="Locales the registry accepts; others are rejected",
    )

    default_locale: str = Field(
        default="en-us",
        description="Locale used when a translation is missing in the requested one",
    )

    @field_validator("supported_locales")
    @classmethod
    def _normalize_supported(cls, value: list[str]) -> list[str]:
        normalized: list[str] = []
        for locale in value:
            locale = normalize_locale(locale)
            if locale and locale not in normalized:
                normalized.append(locale)
        if not normalized:
            raise ValueError("at least one supported locale is required")
        return normalized

    @field_validator("default_locale")
    @classmethod
    def _normalize_default(cls, value: str) -> str:
        return normalize_locale(value)

    @model_validator(mode="after")
    def _default_is_supported(self) -> "LocalizationSettings":
        if self.default_locale not in self.supported_locales:
            raise ValueError(
                f"default locale {self.default_locale!r} is not in supported_locales"
            )
        return self


class LoaderSettings(BaseModel):
    """Resource loading driver settings."""

    concurrency: int = Field(
        default=8,
        ge=1,
        description="Maximum number of resource files read at the same time",
    )


class Settings(BaseSettings):
    """
    Configuration settings for plugin resource loading.

    Settings are loaded from environment variables prefixed with
    ``PLUGIN_RESOURCES_`` and from a ``.env`` file. Nested values use ``__``,
    e.g. ``PLUGIN_RESOURCES_LOCALIZATION__DEFAULT_LOCALE=fr``.
    """

    model_config = SettingsConfigDict(
        env_prefix="PLUGIN_RESOURCES_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_nested_delimiter="__",
    )

    plugins_dir: Path = Field(
        default=Path("plugins"),
        description="Directory holding one sub-directory per installed plugin",
    )

    localization: LocalizationSettings = Field(
        default_factory=LocalizationSettings,
        description="Localization registry configuration",
    )

    loader: LoaderSettings = Field(
        default_factory=LoaderSettings,
        description="Resource loading configuration",
    )

    logging: LoggingSettings = Field(
        default_factory=LoggingSettings,
        description="Logging configuration",
    )

    @classmethod
    def from_env(cls, **overrides: object) -> "Settings":
        """Build settings from the environment, wrapping validation failures."""
        try:
            return cls(**overrides)  # type: ignore[arg-type]
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings.from_env()
