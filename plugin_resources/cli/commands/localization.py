"""CLI commands for loading plugin localizations."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Annotated, Any

import typer
from rich.console import Console
from rich.table import Table

from plugin_resources.config.settings import get_settings
from plugin_resources.core.errors import InvalidPluginError
from plugin_resources.loaders.base import LoaderContext
from plugin_resources.loaders.driver import ResourceLoadingDriver
from plugin_resources.loaders.localization import PluginLocalizationLoader
from plugin_resources.localization.registry import (
    RegistrationOptions,
    flatten_bundle,
    get_localization_registry,
)


app = typer.Typer(
    name="locales", help="Load and inspect plugin localizations.", no_args_is_help=True
)


@dataclass(frozen=True)
class LocaleLoadResult:
    """Outcome of loading one locale file."""

    locale: str
    key_count: int
    status: str


async def load_plugin_localizations(
    plugin: str, site: str | None, register: bool
) -> tuple[LocaleLoadResult, ...]:
    """Load a plugin's localization files and report what happened to each."""
    loader = PluginLocalizationLoader(LoaderContext(plugin_uid=plugin, site=site))
    driver = ResourceLoadingDriver(loader)
    bundles: dict[str, Any] = await driver.load_all(register=register)

    results = []
    options = RegistrationOptions(site=site, plugin=plugin)
    for locale, bundle in bundles.items():
        if not register:
            status = "dry run"
        elif loader.registry.get_bundle(locale, options) is not None:
            status = "registered"
        else:
            status = "rejected"
        key_count = len(flatten_bundle(bundle)) if isinstance(bundle, dict) else 0
        results.append(LocaleLoadResult(locale, key_count, status))
    return tuple(results)


def _load_or_exit(
    console: Console, plugin: str, site: str | None, register: bool
) -> tuple[LocaleLoadResult, ...]:
    try:
        return asyncio.run(load_plugin_localizations(plugin, site, register))
    except InvalidPluginError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1) from e


@app.command(name="load")
def load_locales(
    plugin: Annotated[str, typer.Argument(help="Plugin identifier")],
    site: Annotated[
        str | None, typer.Option("--site", help="Site to scope the bundles to")
    ] = None,
    register: Annotated[
        bool,
        typer.Option(
            "--register/--dry-run",
            help="Register bundles with the localization registry",
        ),
    ] = False,
) -> None:
    """Load a plugin's localization files and show one row per locale."""

    console = Console()
    results = _load_or_exit(console, plugin, site, register)
    if not results:
        console.print(f"No localizations found for plugin '{plugin}'.")
        return

    table = Table(
        title=f"Localizations: {plugin}",
        show_header=True,
        header_style="bold magenta",
    )
    table.add_column("Locale", style="bold")
    table.add_column("Keys", style="cyan")
    table.add_column("Status", style="green")

    for result in results:
        table.add_row(result.locale, str(result.key_count), result.status)

    console.print(table)


@app.command()
def translate(
    plugin: Annotated[str, typer.Argument(help="Plugin identifier")],
    key: Annotated[str, typer.Argument(help="Translation key, dotted for nested keys")],
    locale: Annotated[
        str | None, typer.Option("--locale", "-l", help="Locale to translate into")
    ] = None,
    site: Annotated[
        str | None, typer.Option("--site", help="Site to translate for")
    ] = None,
) -> None:
    """Register a plugin's localizations and print one translation."""

    console = Console()
    _load_or_exit(console, plugin, site, register=True)

    text = get_localization_registry().get(
        key,
        locale=locale or get_settings().localization.default_locale,
        site=site,
        plugin=plugin,
    )
    if text is None:
        console.print(f"[yellow]No translation for '{key}'.[/yellow]")
        raise typer.Exit(1)
    console.print(str(text), markup=False)
