from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest
from loguru import logger

from wave_notes.constants import APP_NAME


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    """Drop sinks a CLI run added, so log files are closed before tmp_path is removed."""
    yield
    logger.remove()
    logger.disable(APP_NAME)


@pytest.fixture
def fake_jq(tmp_path: Path) -> Path:
    """Directory holding a stand-in `jq` executable, for use as PATH."""
    bin_dir = tmp_path / "fake-bin"
    bin_dir.mkdir()
    jq = bin_dir / "jq"
    jq.write_text("#!/bin/sh\necho jq-1.7.1\n")
    jq.chmod(0o755)
    return bin_dir


@pytest.fixture
def empty_path(tmp_path: Path) -> Path:
    """Directory with no executables, for use as PATH."""
    bin_dir = tmp_path / "empty-bin"
    bin_dir.mkdir()
    return bin_dir


@pytest.fixture
def home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    home_dir = tmp_path / "home"
    home_dir.mkdir()
    monkeypatch.setenv("HOME", str(home_dir))
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "xdg-data"))
    monkeypatch.delenv("WAVE_NOTES_CONFIG_FILE", raising=False)
    return home_dir


@pytest.fixture
def bare_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """A fresh HOME with XDG_DATA_HOME unset, so data lands under HOME itself."""
    home_dir = tmp_path / "bare-home"
    home_dir.mkdir()
    monkeypatch.setenv("HOME", str(home_dir))
    monkeypatch.delenv("XDG_DATA_HOME", raising=False)
    monkeypatch.delenv("WAVE_NOTES_CONFIG_FILE", raising=False)
    monkeypatch.delenv("WAVE_NOTES_LOGGING__LOG_FILE", raising=False)
    return home_dir
