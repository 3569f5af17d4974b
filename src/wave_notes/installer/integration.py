"""Terminal integration sink.

The installer hands the resolved paths to a TerminalIntegration after placing
its own artifacts. Whatever files the integration reports are recorded in the
install manifest so uninstall can remove them.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from result import Ok, Result

from .models import InstallerError, ResolvedPaths


class TerminalIntegration(Protocol):
    def apply(self, paths: ResolvedPaths) -> Result[list[Path], InstallerError]:
        """Hook the notes setup into the terminal and return the files written."""
        ...

    def remove(self, paths: ResolvedPaths) -> Result[None, InstallerError]:
        """Undo anything apply() did beyond the files it returned."""
        ...


class NullIntegration:
    """Integration that writes nothing."""

    def apply(self, paths: ResolvedPaths) -> Result[list[Path], InstallerError]:
        return Ok([])

    def remove(self, paths: ResolvedPaths) -> Result[None, InstallerError]:
        return Ok(None)
