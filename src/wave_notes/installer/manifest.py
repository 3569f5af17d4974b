"""Persistence of the install manifest."""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import ValidationError
from result import Err, Ok, Result

from wave_notes.common import create_logger

from .artifacts import FsError, ensure_directory, remove_file, write_file_atomic
from .models import InstallManifest, ManifestError

logger = create_logger("manifest")


class ManifestStore:
    """Reads and writes the manifest that lists installer-owned artifacts."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def exists(self) -> bool:
        return self.path.is_file()

    def load(self) -> Result[InstallManifest | None, ManifestError]:
        """Load the manifest.

        Returns:
            Ok(InstallManifest) when a manifest is present.
            Ok(None) when there is no manifest.
            Err(ManifestError) when it cannot be read or validated.
        """
        if not self.path.is_file():
            return Ok(None)

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
            manifest = InstallManifest.model_validate(data)
        except (OSError, json.JSONDecodeError, ValidationError) as e:
            logger.error("Manifest load failed", path=str(self.path), error=str(e))
            return Err(ManifestError(path=self.path, message=f"Failed to read install manifest: {e}"))

        return Ok(manifest)

    def prepare(self) -> Result[list[Path], FsError]:
        """Create the manifest directory; return the directories that did not exist before, outermost first."""
        return ensure_directory(self.path.parent)

    def save(self, manifest: InstallManifest) -> Result[Path, FsError]:
        payload = json.dumps(manifest.model_dump(mode="json"), indent=2) + "\n"
        return write_file_atomic(self.path, payload, 0o644)

    def delete(self) -> Result[bool, FsError]:
        return remove_file(self.path)
