"""Directory walking, parsing and aggregation in the resource loading driver."""

import json
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from structlog.testing import capture_logs

from plugin_resources.core.errors import ResourceParseError
from plugin_resources.loaders.base import LoadContext, LoaderContext
from plugin_resources.loaders.driver import ResourceLoadingDriver
from plugin_resources.loaders.localization import PluginLocalizationLoader
from plugin_resources.localization.registry import (
    LocalizationRegistry,
    RegistrationOptions,
)


def _driver(
    registry: LocalizationRegistry, plugin: str = "blog", site: str | None = "main"
) -> ResourceLoadingDriver:
    loader = PluginLocalizationLoader(
        LoaderContext(plugin_uid=plugin, site=site), registry=registry
    )
    return ResourceLoadingDriver(loader, concurrency=2)


@pytest.mark.unit
def test_missing_localization_directory_lists_nothing(
    plugins_dir: Path, registry: LocalizationRegistry
) -> None:
    with capture_logs() as logs:
        files = _driver(registry, plugin="absent").list_resource_files()

    assert files == []
    assert any(e["event"] == "resource_directory_missing" for e in logs)


@pytest.mark.unit
def test_list_resource_files_applies_filter(
    write_locale, registry: LocalizationRegistry
) -> None:
    fr = write_locale("blog", "fr.json", {"title": "Titre"})
    en = write_locale("blog", "en-us.json", {"title": "Title"})
    write_locale("blog", "notes.txt", "not a locale")
    (fr.parent / "nested.json").mkdir()

    assert _driver(registry).list_resource_files() == [en, fr]


@pytest.mark.unit
def test_list_resource_files_matches_extension_case_sensitively(
    write_locale, registry: LocalizationRegistry
) -> None:
    fr = write_locale("blog", "fr.json", {"title": "Titre"})
    write_locale("blog", "de.JSON", {"title": "Titel"})

    assert _driver(registry).list_resource_files() == [fr]


@pytest.mark.unit
@pytest.mark.asyncio
async def test_dangling_symlink_is_skipped_and_logged(
    write_locale, registry: LocalizationRegistry
) -> None:
    fr = write_locale("blog", "fr.json", {"title": "Titre"})
    stale = fr.parent / "old.json"
    stale.symlink_to(fr.parent / "gone.json")

    with capture_logs() as logs:
        bundles = await _driver(registry).load_all(register=True)

    assert list(bundles) == ["fr"]
    assert registry.get("title", locale="fr", site="main", plugin="blog") == "Titre"
    failures = [e for e in logs if e["event"] == "resource_load_failed"]
    assert len(failures) == 1
    assert failures[0]["log_level"] == "warning"
    assert failures[0]["path"].endswith("old.json")


@pytest.mark.unit
@pytest.mark.asyncio
async def test_load_all_dry_run_returns_bundles_without_registering(
    write_locale, registry: LocalizationRegistry
) -> None:
    write_locale("blog", "fr.json", {"title": "Titre"})
    write_locale("blog", "en-us.json", {"title": "Title"})

    bundles = await _driver(registry).load_all()

    assert bundles == {"en-us": {"title": "Title"}, "fr": {"title": "Titre"}}
    assert registry.get_registered_locales() == []


@pytest.mark.unit
@pytest.mark.asyncio
async def test_load_all_registers_each_bundle(
    write_locale, registry: LocalizationRegistry
) -> None:
    write_locale("blog", "fr.json", {"title": "Titre"})
    write_locale("blog", "en-us.json", {"title": "Title"})

    await _driver(registry).load_all(register=True)

    assert registry.get_registered_locales(site="main", plugin="blog") == [
        "en-us",
        "fr",
    ]
    assert registry.get("title", locale="fr", site="main", plugin="blog") == "Titre"


@pytest.mark.unit
@pytest.mark.asyncio
async def test_unsupported_locale_does_not_stop_other_files(
    write_locale, registry: LocalizationRegistry
) -> None:
    write_locale("blog", "de.json", {"title": "Titel"})
    write_locale("blog", "fr.json", {"title": "Titre"})

    bundles = await _driver(registry).load_all(register=True)

    assert set(bundles) == {"de", "fr"}
    assert registry.get_registered_locales() == ["fr"]


@pytest.mark.unit
@pytest.mark.asyncio
async def test_malformed_file_is_skipped_and_logged(
    write_locale, registry: LocalizationRegistry
) -> None:
    write_locale("blog", "broken.json", "{not json")
    write_locale("blog", "fr.json", {"title": "Titre"})

    with capture_logs() as logs:
        bundles = await _driver(registry).load_all(register=True)

    assert list(bundles) == ["fr"]
    failures = [e for e in logs if e["event"] == "resource_load_failed"]
    assert len(failures) == 1
    assert failures[0]["log_level"] == "warning"
    assert failures[0]["path"].endswith("broken.json")


@pytest.mark.unit
@pytest.mark.asyncio
async def test_load_single_file_raises_parse_error(
    write_locale, registry: LocalizationRegistry
) -> None:
    path = write_locale("blog", "broken.json", "[1, 2")

    with pytest.raises(ResourceParseError) as exc_info:
        await _driver(registry).load(path)

    assert exc_info.value.path == path
    assert isinstance(exc_info.value.__cause__, json.JSONDecodeError)


@pytest.mark.unit
@pytest.mark.asyncio
async def test_driver_passes_load_context_to_loader(
    write_locale, plugins_dir: Path
) -> None:
    path = write_locale("blog", "fr.json", {"title": "Titre"})
    stub = MagicMock(spec=LocalizationRegistry)
    stub.register_locale.return_value = True

    bundle = await _driver(stub).load(path, register=True)  # type: ignore[arg-type]

    assert bundle == {"title": "Titre"}
    stub.register_locale.assert_called_once_with(
        "fr", {"title": "Titre"}, RegistrationOptions(site="main", plugin="blog")
    )


@pytest.mark.unit
@pytest.mark.asyncio
async def test_later_load_replaces_bundle_for_same_scope(
    write_locale, registry: LocalizationRegistry
) -> None:
    path = write_locale("blog", "fr.json", {"title": "Titre"})
    driver = _driver(registry)
    await driver.load(path, register=True)

    path.write_text(json.dumps({"title": "Nouveau titre"}), encoding="utf-8")
    await driver.load(path, register=True)

    assert registry.get("title", locale="fr", site="main", plugin="blog") == (
        "Nouveau titre"
    )


@pytest.mark.unit
def test_load_context_defaults_to_no_registration() -> None:
    assert LoadContext(path=Path("fr.json")).register is False
