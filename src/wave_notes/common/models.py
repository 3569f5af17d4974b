"""Common models used across wave-notes."""

from typing import Literal

from pydantic import BaseModel

from wave_notes.constants import DISPLAY_NAME, VERSION


class AppInfo(BaseModel):
    project_name: str = DISPLAY_NAME
    version: str = VERSION
    environment: Literal["test", "dev", "prod"] = "prod"


class AppPaths(BaseModel):
    config_filename: str = ".wave-notes.conf"
    default_notes_subpath: str = "Documents/WaveNotes"
    default_bin_subpath: str = "bin"
    data_dir_name: str = "wave-notes"
    manifest_filename: str = "manifest.json"
    notes_marker_filename: str = ".wave-notes"
