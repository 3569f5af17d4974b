from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path

from result import is_err, is_ok

from wave_notes.installer import InstallManifest, ManifestError, ManifestStore


def _manifest(tmp_path: Path) -> InstallManifest:
    return InstallManifest(
        installer_version="1.0.0",
        installed_at=datetime(2026, 1, 2, 3, 4, 5, tzinfo=UTC),
        notes_dir=tmp_path / "notes",
        bin_dir=tmp_path / "bin",
        files=[tmp_path / "bin" / "wave-notes"],
        created_dirs=[tmp_path / "bin"],
    )


def test_load_returns_none_when_missing(tmp_path: Path) -> None:
    store = ManifestStore(tmp_path / "data" / "manifest.json")

    result = store.load()

    assert is_ok(result)
    assert result.unwrap() is None
    assert store.exists() is False


def test_save_then_load(tmp_path: Path) -> None:
    store = ManifestStore(tmp_path / "data" / "manifest.json")
    manifest = _manifest(tmp_path)
    assert store.prepare().unwrap() == [tmp_path / "data"]

    assert is_ok(store.save(manifest))

    assert store.load().unwrap() == manifest


def test_corrupt_manifest_is_reported(tmp_path: Path) -> None:
    path = tmp_path / "manifest.json"
    path.write_text("{not json")

    result = ManifestStore(path).load()

    assert is_err(result)
    assert isinstance(result.err(), ManifestError)
    assert result.err().path == path


def test_delete_is_idempotent(tmp_path: Path) -> None:
    store = ManifestStore(tmp_path / "manifest.json")
    store.save(_manifest(tmp_path))

    assert store.delete().unwrap() is True
    assert store.delete().unwrap() is False


def test_prepare_reports_only_new_directories(tmp_path: Path) -> None:
    store = ManifestStore(tmp_path / "share" / "wave-notes" / "manifest.json")

    first = store.prepare()
    second = store.prepare()

    assert first.unwrap() == [tmp_path / "share", tmp_path / "share" / "wave-notes"]
    assert second.unwrap() == []


def test_save_does_not_create_directories(tmp_path: Path) -> None:
    store = ManifestStore(tmp_path / "missing" / "manifest.json")

    result = store.save(_manifest(tmp_path))

    assert is_err(result)
    assert not (tmp_path / "missing").exists()
