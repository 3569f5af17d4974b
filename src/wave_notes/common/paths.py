"""Path discovery utilities for wave-notes."""

from __future__ import annotations

import os
from pathlib import Path

from .models import AppPaths


def get_home_directory() -> Path:
    """Return the invoking user's home directory.

    Reads HOME at call time so tests and wrappers can redirect it.
    """
    return Path.home()


def get_config_file_path(paths: AppPaths, override: Path | None = None) -> Path:
    if override is not None:
        return override.expanduser()
    return get_home_directory() / paths.config_filename


def get_default_notes_dir(paths: AppPaths) -> Path:
    return get_home_directory() / paths.default_notes_subpath


def get_default_bin_dir(paths: AppPaths) -> Path:
    return get_home_directory() / paths.default_bin_subpath


def get_data_directory(paths: AppPaths) -> Path:
    """Get XDG data directory for wave-notes.

    Returns ~/.local/share/{data_dir_name} (or XDG_DATA_HOME/{data_dir_name} if set).
    """
    xdg_data = os.getenv("XDG_DATA_HOME")
    base_dir = Path(xdg_data).expanduser() if xdg_data else get_home_directory() / ".local" / "share"
    return base_dir / paths.data_dir_name


def get_manifest_path(paths: AppPaths) -> Path:
    return get_data_directory(paths) / paths.manifest_filename


def is_within(path: Path, base: Path) -> bool:
    """Return True when path is base itself or lies below it, after resolving both."""
    try:
        resolved = path.resolve(strict=False)
        base_resolved = base.resolve(strict=False)
    except OSError:
        return False
    return resolved == base_resolved or base_resolved in resolved.parents
