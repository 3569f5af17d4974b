"""Pydantic models for the wave-notes configuration file and its errors."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, field_validator

RECOGNIZED_KEYS = ("NOTES_DIR", "BIN_DIR")


class ConfigParseError(BaseModel):
    """Configuration file present but not in KEY=value form."""

    model_config = ConfigDict(extra="forbid")

    path: Path
    line: int | None = None
    message: str


class ConfigValidationError(BaseModel):
    """A recognized key has an unusable value."""

    model_config = ConfigDict(extra="forbid")

    path: Path | None = None
    field: str | None = None
    message: str


class ConfigIOError(BaseModel):
    """File I/O error reading configuration."""

    model_config = ConfigDict(extra="forbid")

    path: Path
    message: str


type ConfigError = ConfigParseError | ConfigValidationError | ConfigIOError


class NotesConfig(BaseModel):
    """Effective configuration: user overrides applied over defaults."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    notes_dir: Path
    bin_dir: Path
    source: Path | None = None

    @field_validator("notes_dir", "bin_dir", mode="before")
    @classmethod
    def _expand_user(cls, value: object) -> object:
        if isinstance(value, str):
            if not value.strip():
                raise ValueError("path must not be empty")
            return Path(value).expanduser()
        if isinstance(value, Path):
            return value.expanduser()
        return value

    @field_validator("notes_dir", "bin_dir")
    @classmethod
    def _require_absolute(cls, value: Path) -> Path:
        if not value.is_absolute():
            raise ValueError(f"path must be absolute, got '{value}'")
        return value
