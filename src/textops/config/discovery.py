"""Locate textops.toml.

Lookup order: the ``TEXTOPS_CONFIG`` env var, then a walk up from the
starting directory to the filesystem root (the way git finds ``.git/``).
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "textops.toml"
CONFIG_ENV_VAR = "TEXTOPS_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file governing *start* (default: cwd), or None.

    A ``TEXTOPS_CONFIG`` pointing at a missing file disables the walk-up
    and yields None.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        explicit = Path(override)
        return explicit if explicit.is_file() else None

    origin = (start or Path.cwd()).resolve()
    for directory in (origin, *origin.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
