"""CLI commands for inspecting installed plugins."""

from __future__ import annotations

from dataclasses import dataclass

import typer
from rich.console import Console
from rich.table import Table

from plugin_resources.config.settings import Settings, get_settings
from plugin_resources.loaders.base import LoaderContext
from plugin_resources.loaders.driver import ResourceLoadingDriver
from plugin_resources.loaders.localization import PluginLocalizationLoader
from plugin_resources.utils.plugin_utils import list_installed_plugins


app = typer.Typer(
    name="plugins", help="Inspect installed plugins.", no_args_is_help=True
)


@dataclass(frozen=True)
class PluginSummary:
    """Renderable summary of one installed plugin."""

    name: str
    locales: tuple[str, ...]


def gather_plugin_summaries(settings: Settings) -> tuple[PluginSummary, ...]:
    """Collect installed plugins and the locale files each one ships."""
    summaries = []
    for name in list_installed_plugins(settings):
        driver = ResourceLoadingDriver(
            PluginLocalizationLoader(LoaderContext(plugin_uid=name)),
            concurrency=settings.loader.concurrency,
        )
        locales = tuple(
            PluginLocalizationLoader.resource_name_from_path(path)
            for path in driver.list_resource_files()
        )
        summaries.append(PluginSummary(name=name, locales=locales))
    return tuple(summaries)


@app.command(name="list")
def list_plugins() -> None:
    """List installed plugins and the locales they provide."""

    console = Console()
    settings = get_settings()

    plugins = gather_plugin_summaries(settings)
    if not plugins:
        console.print(f"No plugins found in {settings.plugins_dir}.")
        return

    table = Table(
        title="Installed Plugins",
        show_header=True,
        header_style="bold magenta",
    )
    table.add_column("Plugin", style="bold")
    table.add_column("Locales", style="cyan")

    for plugin in plugins:
        table.add_row(plugin.name, ", ".join(plugin.locales) or "-")

    console.print(table)
