"""Checks for external command-line utilities the installer relies on."""

from __future__ import annotations

import re
import shutil
import subprocess

from result import Err, Ok, Result, is_err

from .models import DependencyMissingError, DependencyVersionError, InstallerError


def is_dependency_installed(name: str, search_path: str | None = None) -> bool:
    """Check if a command is available on PATH (or on search_path when given)."""
    return shutil.which(name, path=search_path) is not None


def require_dependency(name: str, search_path: str | None = None) -> Result[str, DependencyMissingError]:
    executable = shutil.which(name, path=search_path)
    if executable is None:
        return Err(
            DependencyMissingError(
                dependency=name,
                message=f"Required dependency '{name}' was not found on PATH. Install it (e.g. `brew install {name}`) and retry.",
            )
        )
    return Ok(executable)


def get_dependency_version(name: str, search_path: str | None = None) -> Result[str, InstallerError]:
    executable_result = require_dependency(name, search_path)
    if is_err(executable_result):
        return executable_result

    try:
        result = subprocess.run(
            [executable_result.unwrap(), "--version"],
            capture_output=True,
            text=True,
            check=True,
            timeout=10,
        )
    except (subprocess.CalledProcessError, subprocess.TimeoutExpired, OSError) as e:
        return Err(DependencyVersionError(dependency=name, message=f"Failed to get {name} version: {e}"))

    output = (result.stdout or result.stderr).strip()
    if match := re.search(r"(\d+\.\d+(?:\.\d+)?)", output):
        return Ok(match.group(1))

    return Err(DependencyVersionError(dependency=name, message=f"Could not parse {name} version from: {output}"))
