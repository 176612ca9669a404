"""Load plugin resources, such as localization bundles, into process-wide registries."""

__version__ = "0.1.0"
