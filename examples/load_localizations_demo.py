#!/usr/bin/env python3
"""
Plugin Localization Loading Demo

Loads the localization bundles of the bundled ``blog`` example plugin for one
site and prints a few translations. ``de.json`` is not a supported locale in
this demo, so its registration is rejected and only shows up in debug logs.

Run from the repository root:

    python examples/load_localizations_demo.py --debug
"""

import argparse
import asyncio
import os
from pathlib import Path

from plugin_resources.core.logging import get_logger, setup_logging
from plugin_resources.loaders import (
    LoaderContext,
    PluginLocalizationLoader,
    ResourceLoadingDriver,
)
from plugin_resources.localization import get_localization_registry


EXAMPLE_PLUGINS_DIR = Path(__file__).parent / "plugins"


async def run(site: str) -> None:
    logger = get_logger(__name__)
    registry = get_localization_registry()

    loader = PluginLocalizationLoader(LoaderContext(plugin_uid="blog", site=site))
    bundles = await ResourceLoadingDriver(loader).load_all(register=True)
    logger.info("bundles_loaded", locales=sorted(bundles))

    for locale in ("en-us", "fr", "de"):
        print(
            f"{locale:>6}: "
            f"{registry.get('nav.home', locale=locale, site=site, plugin='blog')}"
        )


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument("--site", default="main", help="Site to register bundles for")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    os.environ.setdefault("PLUGIN_RESOURCES_PLUGINS_DIR", str(EXAMPLE_PLUGINS_DIR))
    os.environ.setdefault(
        "PLUGIN_RESOURCES_LOCALIZATION__SUPPORTED_LOCALES", '["en-us", "fr"]'
    )
    setup_logging(log_level="DEBUG" if args.debug else "INFO")

    asyncio.run(run(args.site))


if __name__ == "__main__":
    main()
