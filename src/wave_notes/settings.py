from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from wave_notes.common import AppInfo, AppPaths, LoggingConfig


class Settings(BaseSettings):
    """Process settings, read from WAVE_NOTES_* environment variables.

    Built once per CLI invocation so the environment of that invocation applies.
    """

    app: AppInfo = AppInfo()
    paths: AppPaths = AppPaths()
    logging: LoggingConfig = LoggingConfig()
    config_file: Path | None = None

    model_config = SettingsConfigDict(
        env_prefix="WAVE_NOTES_",
        env_nested_delimiter="__",
        case_sensitive=False,
        nested_model_default_partial_update=True,
    )


__all__ = [
    "AppInfo",
    "AppPaths",
    "Settings",
]
