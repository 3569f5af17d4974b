"""wave-notes-setup: install the notes directory and helper."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Annotated

import typer
from result import is_err

from wave_notes.constants import HELPER_COMMAND, SETUP_COMMAND, UNINSTALL_COMMAND
from wave_notes.installer import InstallReport, version_string

from ._common import build_config_store, build_installer, handle_error, load_settings, setup_logging, version_callback

app = typer.Typer(help="Configure Wave Terminal with a Warp-like notes system.", add_completion=False)

CONFIG_HINT = """\
For custom configuration, create ~/.wave-notes.conf:
  NOTES_DIR="$HOME/Documents/WaveNotes"
  BIN_DIR="$HOME/bin"
"""


@app.command()
def setup(
    version: Annotated[
        bool,
        typer.Option("--version", callback=version_callback, is_eager=True, help="Show the version and exit."),
    ] = False,
) -> None:
    """Create the notes directory and install the helper into BIN_DIR."""
    settings = load_settings()
    setup_logging(settings, SETUP_COMMAND)

    result = build_installer(settings).install()
    if is_err(result):
        handle_error(result.err())
        raise typer.Exit(code=1)

    _print_report(result.unwrap())

    if not build_config_store(settings).exists():
        typer.echo("")
        typer.echo(CONFIG_HINT, nl=False)


def _print_report(report: InstallReport) -> None:
    typer.secho(f"{version_string()}: setup complete", fg=typer.colors.GREEN)
    typer.echo(f"  Notes directory:  {report.paths.notes_dir}")
    typer.echo(f"  Binary directory: {report.paths.bin_dir}")
    typer.echo(f"  Helper:           {report.paths.bin_dir / HELPER_COMMAND}")
    if report.dependency_version:
        typer.echo(f"  jq:               {report.dependency_version}")

    if not _is_on_path(report.paths.bin_dir):
        typer.echo("")
        typer.echo(f"Add {report.paths.bin_dir} to your PATH to use `{HELPER_COMMAND}`.")

    typer.echo("")
    typer.echo(f"To uninstall the Wave configuration:\n  {UNINSTALL_COMMAND}")


def _is_on_path(directory: Path) -> bool:
    entries = [Path(entry) for entry in os.environ.get("PATH", "").split(os.pathsep) if entry]
    return directory in entries


def main() -> None:
    """Entrypoint for wave-notes-setup."""
    app()
