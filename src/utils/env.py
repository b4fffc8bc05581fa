"""Environment helpers for runtime configuration."""

import os
from functools import lru_cache
from pathlib import Path

DEFAULT_DATA_DIR_NAME = ".proctorLab"


@lru_cache
def is_dev_mode() -> bool:
    """Return True when the app runs in development mode."""
    value = os.environ.get("PROCTOR_ENV") or os.environ.get("PROCTOR_DEV_MODE")
    if not value:
        return False
    normalized = value.strip().lower()
    return normalized in {"dev", "development", "1", "true", "yes"}


def get_data_dir() -> Path:
    """Directory holding the settings database and logs.

    ``PROCTOR_DATA_DIR`` overrides the default ``~/.proctorLab``.
    """
    override = os.environ.get("PROCTOR_DATA_DIR", "").strip()
    if override:
        return Path(override).expanduser()
    return Path.home() / DEFAULT_DATA_DIR_NAME


__all__ = ["is_dev_mode", "get_data_dir"]
