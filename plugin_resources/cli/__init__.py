"""Command line interface for plugin_resources."""
