"""File selection helpers used while walking resource directories."""

import os
import stat as stat_module
from collections.abc import Callable
from pathlib import PurePath


FileFilter = Callable[[str, os.stat_result | None], bool]


def get_file_extension_filter(*extensions: str) -> FileFilter:
    """Create a predicate accepting files with one of the given extensions.

    Extensions may be given with or without the leading dot. Matching is
    case-sensitive, so ``.JSON`` does not match ``"json"``. Names without an
    extension are rejected, and when a stat result is supplied, so is anything
    that is not a regular file.

    Args:
        *extensions: Accepted extensions, e.g. ``"json"`` or ``".json"``

    Returns:
        Predicate over ``(filename, stat)``
    """
    if not extensions:
        raise ValueError("at least one extension is required")

    accepted = frozenset("." + ext.lstrip(".") for ext in extensions)

    def _filter(filename: str, stats: os.stat_result | None = None) -> bool:
        if stats is not None and not stat_module.S_ISREG(stats.st_mode):
            return False
        return PurePath(filename).suffix in accepted

    return _filter
