"""Public configuration API for wave-notes."""

from __future__ import annotations

from .models import (
    RECOGNIZED_KEYS,
    ConfigError,
    ConfigIOError,
    ConfigParseError,
    ConfigValidationError,
    NotesConfig,
)
from .parser import expand_variables, parse_config_text
from .store import FileConfigStore

__all__ = [
    "RECOGNIZED_KEYS",
    "ConfigError",
    "ConfigIOError",
    "ConfigParseError",
    "ConfigValidationError",
    "FileConfigStore",
    "NotesConfig",
    "expand_variables",
    "parse_config_text",
]
