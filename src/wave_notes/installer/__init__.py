"""Installer/uninstaller for the wave-notes setup."""

from .dependencies import get_dependency_version, is_dependency_installed, require_dependency
from .installer import Installer, SetupError, version_string
from .integration import NullIntegration, TerminalIntegration
from .manifest import ManifestStore
from .models import (
    DependencyMissingError,
    DependencyVersionError,
    FilesystemError,
    FilesystemPermissionError,
    InstallerError,
    InstallManifest,
    InstallReport,
    InstallState,
    ManifestError,
    ResolvedPaths,
    UninstallReport,
)

__all__ = [
    "DependencyMissingError",
    "DependencyVersionError",
    "FilesystemError",
    "FilesystemPermissionError",
    "InstallManifest",
    "InstallReport",
    "InstallState",
    "Installer",
    "InstallerError",
    "ManifestError",
    "ManifestStore",
    "NullIntegration",
    "ResolvedPaths",
    "SetupError",
    "TerminalIntegration",
    "UninstallReport",
    "get_dependency_version",
    "is_dependency_installed",
    "require_dependency",
    "version_string",
]
