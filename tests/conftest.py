"""Shared test fixtures for plugin_resources tests.

Fixtures build real loaders, drivers and registries on top of a temporary
plugins directory; only the registry is swapped for a stub where a test
needs to control its answer.
"""

import json
from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any

import pytest

from plugin_resources.config.settings import Settings, get_settings
from plugin_resources.localization.registry import (
    LocalizationRegistry,
    get_localization_registry,
)


WriteLocale = Callable[..., Path]


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom settings."""
    # Ensure async tests work properly
    config.option.asyncio_mode = "auto"


@pytest.fixture
def plugins_dir(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> Generator[Path, None, None]:
    """Point the process-wide settings and registry at an empty plugins directory."""
    directory = tmp_path / "plugins"
    directory.mkdir()
    monkeypatch.setenv("PLUGIN_RESOURCES_PLUGINS_DIR", str(directory))
    monkeypatch.setenv(
        "PLUGIN_RESOURCES_LOCALIZATION__SUPPORTED_LOCALES", '["en-us", "fr"]'
    )
    get_settings.cache_clear()
    get_localization_registry.cache_clear()
    yield directory
    get_settings.cache_clear()
    get_localization_registry.cache_clear()


@pytest.fixture
def test_settings(plugins_dir: Path) -> Settings:
    return get_settings()


@pytest.fixture
def registry() -> LocalizationRegistry:
    """Fresh registry accepting ``en-us`` and ``fr``."""
    return LocalizationRegistry(["en-us", "fr"], "en-us")


@pytest.fixture
def write_locale(plugins_dir: Path) -> WriteLocale:
    """Write ``<plugins>/<plugin>/public/localization/<name>`` and return its path."""

    def _write(plugin: str, name: str, data: Any) -> Path:
        localization_dir = plugins_dir / plugin / "public" / "localization"
        localization_dir.mkdir(parents=True, exist_ok=True)
        path = localization_dir / name
        if isinstance(data, str):
            path.write_text(data, encoding="utf-8")
        else:
            path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write
