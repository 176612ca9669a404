"""Main entry point for the plugin-resources CLI."""

from typing import Annotated

import typer
from rich.console import Console

from plugin_resources import __version__
from plugin_resources.config.settings import ConfigurationError, get_settings
from plugin_resources.core.logging import get_logger, setup_logging

from .commands.localization import app as locales_app
from .commands.plugins import app as plugins_app


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        Console().print(f"plugin-resources {__version__}")
        raise typer.Exit()


app = typer.Typer(
    rich_markup_mode="rich",
    add_completion=False,
    no_args_is_help=True,
    pretty_exceptions_enable=False,
)

app.add_typer(plugins_app)
app.add_typer(locales_app)

logger = get_logger(__name__)


@app.callback()
def main(
    log_level: Annotated[
        str | None,
        typer.Option("--log-level", help="Override the configured log level"),
    ] = None,
    json_logs: Annotated[
        bool | None,
        typer.Option("--json-logs/--console-logs", help="Render logs as JSON"),
    ] = None,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
) -> None:
    """Load plugin resources such as localization bundles."""
    try:
        settings = get_settings()
    except ConfigurationError as e:
        Console(stderr=True).print(f"[red]{e}[/red]")
        raise typer.Exit(2) from e

    setup_logging(
        json_logs=settings.logging.json_logs if json_logs is None else json_logs,
        log_level=log_level or settings.logging.level,
    )
    logger.debug("cli_started", plugins_dir=str(settings.plugins_dir))


if __name__ == "__main__":
    app()
