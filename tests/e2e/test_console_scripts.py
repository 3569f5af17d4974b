from __future__ import annotations

import os
import shutil
import subprocess
from pathlib import Path

import pytest

pytestmark = pytest.mark.e2e

SETUP = shutil.which("wave-notes-setup")
UNINSTALL = shutil.which("wave-notes-uninstall")


def _create_env(base: Path, path_dir: Path) -> dict[str, str]:
    """Environment with a fresh HOME and XDG_DATA_HOME unset."""
    home = base / "home"
    home.mkdir(parents=True, exist_ok=True)
    env = {
        key: value
        for key, value in os.environ.items()
        if not key.startswith("WAVE_NOTES_") and key != "XDG_DATA_HOME"
    }
    return env | {
        "HOME": str(home),
        "PATH": os.pathsep.join([str(path_dir), os.path.dirname(SETUP or "")]),
    }


def _run(command: str, env: dict[str, str], *args: str) -> subprocess.CompletedProcess[str]:
    return subprocess.run([command, *args], env=env, capture_output=True, text=True, check=False)


@pytest.mark.skipif(SETUP is None, reason="wave-notes-setup is not installed")
def test_version_matches_package_manager_smoke_test(tmp_path: Path, empty_path: Path) -> None:
    env = _create_env(tmp_path, empty_path) | {"WAVE_NOTES_LOGGING__ENABLED": "true"}

    result = _run(SETUP, env, "--version")

    assert result.returncode == 0
    assert "wave-notes-setup v" in result.stdout
    assert list(Path(env["HOME"]).iterdir()) == []


@pytest.mark.skipif(SETUP is None or UNINSTALL is None, reason="console scripts are not installed")
def test_install_and_uninstall_round_trip(tmp_path: Path, fake_jq: Path) -> None:
    env = _create_env(tmp_path, fake_jq)
    home = Path(env["HOME"])

    installed = _run(SETUP, env)
    assert installed.returncode == 0, installed.stderr
    helper = home / "bin" / "wave-notes"
    assert helper.is_file()

    helper_run = subprocess.run([str(helper), "path"], env=env, capture_output=True, text=True, check=False)
    assert helper_run.returncode == 0, helper_run.stderr
    assert helper_run.stdout.strip() == str(home / "Documents" / "WaveNotes")

    removed = _run(UNINSTALL, env)
    assert removed.returncode == 0, removed.stderr
    assert not helper.exists()
    assert not (home / "bin").exists()
    assert list(home.iterdir()) == []


@pytest.mark.skipif(SETUP is None or UNINSTALL is None, reason="console scripts are not installed")
def test_uninstall_on_clean_system_changes_nothing(tmp_path: Path, empty_path: Path) -> None:
    env = _create_env(tmp_path, empty_path) | {"WAVE_NOTES_LOGGING__ENABLED": "true"}

    result = _run(UNINSTALL, env)

    assert result.returncode == 0, result.stderr
    assert list(Path(env["HOME"]).iterdir()) == []


@pytest.mark.skipif(SETUP is None, reason="wave-notes-setup is not installed")
def test_setup_writes_log_file_when_enabled(tmp_path: Path, fake_jq: Path) -> None:
    env = _create_env(tmp_path, fake_jq) | {
        "XDG_DATA_HOME": str(tmp_path / "xdg-data"),
        "WAVE_NOTES_LOGGING__ENABLED": "true",
    }

    result = _run(SETUP, env)

    assert result.returncode == 0, result.stderr
    assert (tmp_path / "xdg-data" / "wave-notes" / "logs" / "wave-notes.log").is_file()


@pytest.mark.skipif(SETUP is None, reason="wave-notes-setup is not installed")
def test_missing_jq_exits_non_zero(tmp_path: Path, empty_path: Path) -> None:
    env = _create_env(tmp_path, empty_path)
    if shutil.which("jq", path=env["PATH"]):
        pytest.skip("jq is installed next to the console scripts")

    result = _run(SETUP, env)

    assert result.returncode != 0
    assert "jq" in result.stderr
    assert not (Path(env["HOME"]) / "bin").exists()
