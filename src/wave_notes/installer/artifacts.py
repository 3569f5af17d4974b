"""Filesystem primitives used by the installer.

Every write goes to a temporary sibling first and is moved into place with
os.replace, so overlapping installs converge on the same file contents.
"""

from __future__ import annotations

import json
import os
import shlex
import sys
import uuid
from collections.abc import Iterable
from contextlib import suppress
from pathlib import Path

from result import Err, Ok, Result

from wave_notes.common import create_logger
from wave_notes.constants import DISPLAY_NAME, HELPER_COMMAND, UNINSTALL_COMMAND, VERSION

from .models import FilesystemError, FilesystemPermissionError, ResolvedPaths

logger = create_logger("installer")

type FsError = FilesystemPermissionError | FilesystemError

HELPER_MODE = 0o755
MARKER_MODE = 0o644


def render_helper_script(python_executable: str | None = None) -> str:
    python = python_executable or sys.executable
    return (
        "#!/bin/sh\n"
        f"# Managed by {DISPLAY_NAME} v{VERSION}; removed by {UNINSTALL_COMMAND}.\n"
        f"exec {shlex.quote(python)} -m wave_notes.cli.notes \"$@\"\n"
    )


def render_notes_marker(paths: ResolvedPaths) -> str:
    payload = {
        "managed_by": DISPLAY_NAME,
        "version": VERSION,
        "helper": str(paths.bin_dir / HELPER_COMMAND),
        "notes_dir": str(paths.notes_dir),
    }
    return json.dumps(payload, indent=2, sort_keys=True) + "\n"


def os_error(path: Path, exc: OSError, action: str) -> FsError:
    if isinstance(exc, PermissionError):
        return FilesystemPermissionError(path=path, message=f"Permission denied: cannot {action} {path}")
    return FilesystemError(path=path, message=f"Failed to {action} {path}: {exc.strerror or exc}")


def ensure_directory(path: Path) -> Result[list[Path], FsError]:
    """Create path and any missing parents; return the directories that were created, outermost first."""
    missing: list[Path] = []
    current = path
    try:
        while not current.exists():
            missing.append(current)
            if current.parent == current:
                break
            current = current.parent
    except OSError as exc:
        return Err(os_error(current, exc, "inspect"))
    missing.reverse()

    created: list[Path] = []
    for directory in missing:
        try:
            directory.mkdir(exist_ok=True)
        except OSError as exc:
            remove_empty_directories(reversed(created))
            return Err(os_error(directory, exc, "create directory"))
        created.append(directory)
        logger.debug("Directory created", path=str(directory))

    if not path.is_dir():
        return Err(FilesystemError(path=path, message=f"Not a directory: {path}"))
    if not os.access(path, os.W_OK | os.X_OK):
        return Err(FilesystemPermissionError(path=path, message=f"Permission denied: {path} is not writable"))

    return Ok(created)


def write_file_atomic(path: Path, content: str, mode: int) -> Result[Path, FsError]:
    temp_path = path.with_name(f".{path.name}.{uuid.uuid4().hex}.tmp")
    try:
        temp_path.write_text(content, encoding="utf-8")
        temp_path.chmod(mode)
        os.replace(temp_path, path)
    except OSError as exc:
        with suppress(OSError):
            temp_path.unlink(missing_ok=True)
        return Err(os_error(path, exc, "write"))

    logger.debug("File written", path=str(path), mode=oct(mode))
    return Ok(path)


def remove_file(path: Path) -> Result[bool, FsError]:
    """Remove path if present. Ok(False) when there was nothing to remove."""
    try:
        path.unlink()
    except FileNotFoundError:
        return Ok(False)
    except OSError as exc:
        return Err(os_error(path, exc, "remove"))

    logger.debug("File removed", path=str(path))
    return Ok(True)


def remove_empty_directories(directories: Iterable[Path]) -> Result[tuple[list[Path], list[Path]], FsError]:
    """Remove each directory that exists and is empty; return (removed, kept).

    Directories are processed in the given order, so pass innermost first.
    Non-empty directories are kept, never emptied.
    """
    removed: list[Path] = []
    kept: list[Path] = []
    for directory in directories:
        if not directory.is_dir():
            continue
        try:
            if any(directory.iterdir()):
                kept.append(directory)
                continue
            directory.rmdir()
        except OSError as exc:
            return Err(os_error(directory, exc, "remove directory"))
        removed.append(directory)
        logger.debug("Directory removed", path=str(directory))
    return Ok((removed, kept))


def is_managed_file(path: Path) -> bool:
    """Return True when path carries the marker this tool writes into its own files."""
    try:
        with path.open(encoding="utf-8") as handle:
            head = handle.read(512)
    except (OSError, UnicodeDecodeError):
        return False
    return f"Managed by {DISPLAY_NAME}" in head or f'"managed_by": "{DISPLAY_NAME}"' in head
