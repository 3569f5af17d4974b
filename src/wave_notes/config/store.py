"""File-based loader for ~/.wave-notes.conf."""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

from pydantic import ValidationError
from result import Err, Ok, Result, is_err

from wave_notes.common import AppPaths, create_logger, get_config_file_path, get_default_bin_dir, get_default_notes_dir

from .models import RECOGNIZED_KEYS, ConfigError, ConfigIOError, ConfigValidationError, NotesConfig
from .parser import parse_config_text

logger = create_logger("config")


class FileConfigStore:
    def __init__(
        self,
        paths: AppPaths,
        config_file: Path | None = None,
        env: Mapping[str, str] | None = None,
    ) -> None:
        self.paths = paths
        self.config_file = config_file
        self._env = env

    @property
    def path(self) -> Path:
        return get_config_file_path(self.paths, self.config_file)

    def exists(self) -> bool:
        return self.path.is_file()

    def load(self) -> Result[NotesConfig, ConfigError]:
        path = self.path
        logger.debug("Loading config", path=str(path))

        overrides: dict[str, str] = {}
        if path.is_file():
            result = self._read_overrides(path)
            if is_err(result):
                return result
            overrides = result.unwrap()
        else:
            logger.debug("Config file not found, using defaults", path=str(path))

        data = {
            "notes_dir": overrides.get("NOTES_DIR", str(get_default_notes_dir(self.paths))),
            "bin_dir": overrides.get("BIN_DIR", str(get_default_bin_dir(self.paths))),
            "source": path if path.is_file() else None,
        }

        try:
            config = NotesConfig.model_validate(data)
        except ValidationError as exc:
            first = exc.errors()[0]
            field = ".".join(str(part) for part in first.get("loc") or ()) or None
            message = first.get("msg", str(exc))
            logger.error("Config validation error", path=str(path), field=field, error=message)
            return Err(ConfigValidationError(path=path, field=_to_config_key(field), message=message))

        logger.debug("Config resolved", notes_dir=str(config.notes_dir), bin_dir=str(config.bin_dir))
        return Ok(config)

    def _read_overrides(self, path: Path) -> Result[dict[str, str], ConfigError]:
        try:
            raw_text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.error("Config file read error", path=str(path), error=str(exc))
            return Err(ConfigIOError(path=path, message=str(exc)))

        env = self._env if self._env is not None else os.environ
        return (
            parse_config_text(raw_text, path, env)
            .map(lambda values: {key: value for key, value in values.items() if key in RECOGNIZED_KEYS})
            .inspect_err(lambda error: logger.error("Config parse error", path=str(path), line=error.line))
        )


def _to_config_key(field: str | None) -> str | None:
    if field is None:
        return None
    return field.upper()
