"""Logging utilities for wave-notes using Loguru.

- CLI usage: warnings on stderr, plus an opt-in file log opened lazily on the first record
- Library usage: logging disabled by default, can be enabled by library users
"""

import os
import sys
from pathlib import Path
from typing import Literal

import loguru
from loguru import logger
from pydantic import BaseModel, ConfigDict, Field

from wave_notes.constants import APP_NAME

from .models import AppInfo, AppPaths
from .paths import get_data_directory


class LoggingConfig(BaseModel):
    """File logging for the installer commands.

    Disabled by default: a one-shot installer should leave nothing behind
    unless asked to. Enable with WAVE_NOTES_LOGGING__ENABLED=true.
    """

    model_config = ConfigDict(extra="forbid")

    enabled: bool = Field(default=False)
    log_level: Literal["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"] = Field(default="INFO")
    log_file: str | None = Field(default=None)
    rotation: str = Field(default="1 MB")
    retention: str = Field(default="7 days")
    format: Literal["json", "text"] = Field(default="text")


def setup_cli_logging(
    app_info: AppInfo,
    config: LoggingConfig,
    paths: AppPaths,
    command: str,
    *,
    file_sink: bool = True,
) -> int | None:
    """Show warnings on stderr and, when enabled, route records for `command` to the log file.

    Returns the file handler id, or None when file logging is off or the log
    directory cannot be created. The file and its directories are only created
    once a record at or above the configured level is emitted.
    """
    logger.enable(APP_NAME)
    logger.remove()
    logger.configure(extra={"scope": command, "env": app_info.environment, "version": app_info.version})
    logger.add(sys.stderr, level="WARNING", format=f"{app_info.project_name}: {{level}}: {{message}}", colorize=False)

    if not (config.enabled and file_sink):
        return None

    log_file = Path(config.log_file).expanduser() if config.log_file else get_default_log_file_path(paths)
    if not _is_creatable(log_file.parent):
        logger.warning("Cannot write log file {log_file}; file logging disabled", log_file=str(log_file))
        return None

    try:
        handler_id = logger.add(
            log_file,
            level=config.log_level,
            rotation=config.rotation,
            retention=config.retention,
            serialize=(config.format == "json"),
            format=_get_text_format(),
            diagnose=(app_info.environment == "dev"),
            delay=True,
        )
    except OSError as exc:
        logger.warning(
            "Cannot write log file {log_file}: {error}; file logging disabled", log_file=str(log_file), error=str(exc)
        )
        return None

    logger.debug("CLI logging initialized", log_file=str(log_file), level=config.log_level, command=command)
    return handler_id


def disable_library_logging() -> None:
    logger.disable(APP_NAME)


def enable_library_logging(level: str = "INFO") -> int:
    logger.enable(APP_NAME)
    logger.remove()
    logger.configure(extra={"scope": "library"})

    return logger.add(
        sys.stderr,
        level=level,
        format=_get_text_format(),
        colorize=False,
    )


def create_logger(scope: str) -> "loguru.Logger":
    return logger.bind(scope=scope)


def get_default_log_file_path(paths: AppPaths) -> Path:
    return get_data_directory(paths) / "logs" / "wave-notes.log"


def _is_creatable(directory: Path) -> bool:
    """True when directory exists and is writable, or its nearest existing ancestor is."""
    current = directory
    try:
        while not current.exists():
            if current.parent == current:
                return False
            current = current.parent
    except OSError:
        return False
    return current.is_dir() and os.access(current, os.W_OK | os.X_OK)


def _get_text_format() -> str:
    return "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | [{extra[scope]}] {name}:{function}:{line} - {message} | {extra}\n{exception}"
