"""Models for installed state, reports and installer errors."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class InstallState(str, Enum):
    UNINSTALLED = "uninstalled"
    INSTALLED = "installed"


class ResolvedPaths(BaseModel):
    model_config = ConfigDict(frozen=True)

    notes_dir: Path
    bin_dir: Path


class InstallManifest(BaseModel):
    """Record of everything an install wrote, read back by uninstall."""

    model_config = ConfigDict(extra="ignore")

    installer_version: str
    installed_at: datetime
    notes_dir: Path
    bin_dir: Path
    files: list[Path] = Field(default_factory=list)
    created_dirs: list[Path] = Field(default_factory=list)
    # Directories created to hold this manifest, pruned when empty on uninstall.
    state_dirs: list[Path] = Field(default_factory=list)


class InstallReport(BaseModel):
    paths: ResolvedPaths
    files: list[Path]
    created_dirs: list[Path]
    manifest_path: Path
    dependency_version: str | None = None


class UninstallReport(BaseModel):
    paths: ResolvedPaths | None
    removed_files: list[Path] = Field(default_factory=list)
    removed_dirs: list[Path] = Field(default_factory=list)
    kept_dirs: list[Path] = Field(default_factory=list)


class InstallerError(BaseModel):
    """Base error for installer operations."""

    message: str


class FilesystemPermissionError(InstallerError):
    """A target path could not be created, written or removed."""

    path: Path


class FilesystemError(InstallerError):
    """Any other OS-level failure while touching the filesystem."""

    path: Path


class DependencyMissingError(InstallerError):
    """A required external utility is not on PATH."""

    dependency: str


class DependencyVersionError(InstallerError):
    """The dependency exists but its version could not be determined."""

    dependency: str


class ManifestError(InstallerError):
    """The install manifest exists but cannot be read or validated."""

    path: Path
