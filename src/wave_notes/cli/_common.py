"""Shared plumbing for the wave-notes command-line entry points."""

from __future__ import annotations

import typer

from wave_notes.common import get_manifest_path, setup_cli_logging
from wave_notes.config import FileConfigStore
from wave_notes.constants import DISPLAY_NAME
from wave_notes.installer import Installer, ManifestStore, SetupError, version_string
from wave_notes.settings import Settings


def load_settings() -> Settings:
    return Settings()


def setup_logging(settings: Settings, command: str, *, file_sink: bool = True) -> None:
    """Set up logging for a command body.

    Called after option parsing so eager options such as --version never touch the filesystem.
    """
    setup_cli_logging(
        app_info=settings.app,
        config=settings.logging,
        paths=settings.paths,
        command=command,
        file_sink=file_sink,
    )


def build_config_store(settings: Settings) -> FileConfigStore:
    return FileConfigStore(paths=settings.paths, config_file=settings.config_file)


def build_installer(settings: Settings) -> Installer:
    return Installer(
        config_store=build_config_store(settings),
        manifest_store=ManifestStore(get_manifest_path(settings.paths)),
        paths=settings.paths,
    )


def version_callback(value: bool) -> None:
    if value:
        typer.echo(version_string())
        raise typer.Exit()


def handle_error(error: SetupError) -> None:
    field = getattr(error, "field", None)
    message = f"{DISPLAY_NAME}: {field}: {error.message}" if field else f"{DISPLAY_NAME}: {error.message}"
    line = getattr(error, "line", None)
    error_path = getattr(error, "path", None)
    dependency = getattr(error, "dependency", None)
    if error_path is not None and line is not None:
        message = f"{message} ({error_path}:{line})"
    elif error_path is not None and str(error_path) not in message:
        message = f"{message} ({error_path})"
    elif dependency is not None and dependency not in message:
        message = f"{message} (missing: {dependency})"

    typer.secho(message, err=True, fg=typer.colors.RED)
