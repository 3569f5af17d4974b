"""wave-notes-uninstall: remove what wave-notes-setup installed."""

from __future__ import annotations

from typing import Annotated

import typer
from result import is_err

from wave_notes.constants import UNINSTALL_COMMAND
from wave_notes.installer import InstallState, UninstallReport, version_string

from ._common import build_installer, handle_error, load_settings, setup_logging, version_callback

app = typer.Typer(help="Remove the Wave notes configuration.", add_completion=False)


@app.command()
def uninstall(
    version: Annotated[
        bool,
        typer.Option("--version", callback=version_callback, is_eager=True, help="Show the version and exit."),
    ] = False,
) -> None:
    """Remove the helper and marker files; directories are removed only when empty."""
    settings = load_settings()
    installer = build_installer(settings)
    # A no-op uninstall must not leave a log file behind.
    setup_logging(settings, UNINSTALL_COMMAND, file_sink=installer.state() is InstallState.INSTALLED)

    result = installer.uninstall()
    if is_err(result):
        handle_error(result.err())
        raise typer.Exit(code=1)

    _print_report(result.unwrap())


def _print_report(report: UninstallReport) -> None:
    if not report.removed_files and not report.removed_dirs:
        typer.echo(f"{version_string()}: nothing to uninstall")
        return

    typer.secho(f"{version_string()}: uninstall complete", fg=typer.colors.GREEN)
    for path in report.removed_files:
        typer.echo(f"  Removed {path}")
    for path in report.removed_dirs:
        typer.echo(f"  Removed directory {path}")
    for path in report.kept_dirs:
        typer.echo(f"  Kept {path} (not empty)")


def main() -> None:
    """Entrypoint for wave-notes-uninstall."""
    app()
