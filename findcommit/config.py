"""Locate the alias storage file."""

from __future__ import annotations

import os
from pathlib import Path

STORAGE_ENV_VAR = "FINDCOMMIT_STORAGE"
STORAGE_FILENAME = "alias-storage.json"

# The alias file lives beside the installed package unless overridden.
DEFAULT_STORAGE = Path(__file__).resolve().parent / STORAGE_FILENAME


def storage_path(override: str | Path | None = None) -> Path:
    """Return the alias file path: *override*, then ``$FINDCOMMIT_STORAGE``, then the default."""
    if override:
        return Path(override).expanduser()
    env = os.environ.get(STORAGE_ENV_VAR)
    if env:
        return Path(env).expanduser()
    return DEFAULT_STORAGE
