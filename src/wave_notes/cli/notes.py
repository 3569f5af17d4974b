"""wave-notes: helper installed into BIN_DIR by wave-notes-setup."""

from __future__ import annotations

import json
from typing import Annotated, Literal

import typer
import yaml
from result import is_err

from wave_notes.common import get_manifest_path
from wave_notes.constants import REQUIRED_DEPENDENCY
from wave_notes.installer import get_dependency_version, version_string

from ._common import build_config_store, build_installer, handle_error, load_settings, version_callback

FormatOption = Annotated[
    Literal["yaml", "json"],
    typer.Option("--format", "-f", show_default=True, case_sensitive=False, help="Output format (yaml or json)."),
]

app = typer.Typer(help="Wave notes helper.", add_completion=False)


@app.callback(invoke_without_command=True)
def _root_callback(
    ctx: typer.Context,
    version: Annotated[
        bool,
        typer.Option("--version", callback=version_callback, is_eager=True, help="Show the version and exit."),
    ] = False,
) -> None:
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("path")
def path() -> None:
    """Print the resolved notes directory."""
    result = build_installer(load_settings()).resolve_paths()
    if is_err(result):
        handle_error(result.err())
        raise typer.Exit(code=1)

    typer.echo(str(result.unwrap().notes_dir))


@app.command("status")
def status(format: FormatOption = "yaml") -> None:
    """Show install state, resolved paths and the jq version."""
    settings = load_settings()
    installer = build_installer(settings)
    config_store = build_config_store(settings)

    paths_result = installer.resolve_paths()
    if is_err(paths_result):
        handle_error(paths_result.err())
        raise typer.Exit(code=1)
    paths = paths_result.unwrap()

    payload = {
        "version": version_string(),
        "state": installer.state().value,
        "config_file": str(config_store.path),
        "config_present": config_store.exists(),
        "notes_dir": str(paths.notes_dir),
        "bin_dir": str(paths.bin_dir),
        "manifest": str(get_manifest_path(settings.paths)),
        "dependency": {
            "name": REQUIRED_DEPENDENCY,
            "version": get_dependency_version(REQUIRED_DEPENDENCY).unwrap_or(None),
        },
    }
    typer.echo(_format_payload(payload, format.lower()))


def _format_payload(payload: dict[str, object], format: str) -> str:
    if format == "json":
        return json.dumps(payload, indent=2, sort_keys=True)
    return yaml.safe_dump(payload, sort_keys=True)


def main() -> None:
    """Entrypoint for the wave-notes helper."""
    app()


if __name__ == "__main__":
    main()
