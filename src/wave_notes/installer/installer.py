"""Install/uninstall API for wave-notes."""

from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path

from result import Ok, Result, is_err

from wave_notes.common import AppPaths, create_logger, is_within
from wave_notes.config import ConfigError, FileConfigStore
from wave_notes.constants import DISPLAY_NAME, HELPER_COMMAND, REQUIRED_DEPENDENCY, VERSION

from .artifacts import (
    HELPER_MODE,
    MARKER_MODE,
    FsError,
    ensure_directory,
    is_managed_file,
    remove_empty_directories,
    remove_file,
    render_helper_script,
    render_notes_marker,
    write_file_atomic,
)
from .dependencies import get_dependency_version, require_dependency
from .integration import NullIntegration, TerminalIntegration
from .manifest import ManifestStore
from .models import (
    InstallerError,
    InstallManifest,
    InstallReport,
    InstallState,
    ResolvedPaths,
    UninstallReport,
)

logger = create_logger("installer")

type SetupError = InstallerError | ConfigError


def version_string() -> str:
    return f"{DISPLAY_NAME} v{VERSION}"


class Installer:
    """Places and removes the notes setup for the invoking user.

    Installed state is whatever is on disk: the manifest plus the artifacts it
    lists. Nothing is kept in process-wide flags.
    """

    def __init__(
        self,
        config_store: FileConfigStore,
        manifest_store: ManifestStore,
        paths: AppPaths,
        integration: TerminalIntegration | None = None,
        *,
        dependency: str = REQUIRED_DEPENDENCY,
        search_path: str | None = None,
        python_executable: str | None = None,
    ) -> None:
        self._config_store = config_store
        self._manifest_store = manifest_store
        self._paths = paths
        self._integration = integration or NullIntegration()
        self._dependency = dependency
        self._search_path = search_path
        self._python_executable = python_executable

    def resolve_paths(self) -> Result[ResolvedPaths, ConfigError]:
        return self._config_store.load().map(
            lambda config: ResolvedPaths(notes_dir=config.notes_dir, bin_dir=config.bin_dir)
        )

    def helper_path(self, paths: ResolvedPaths) -> Path:
        return paths.bin_dir / HELPER_COMMAND

    def marker_path(self, paths: ResolvedPaths) -> Path:
        return paths.notes_dir / self._paths.notes_marker_filename

    def state(self) -> InstallState:
        manifest_result = self._manifest_store.load()
        manifest = manifest_result.unwrap_or(None)
        if manifest is not None:
            helper = manifest.bin_dir / HELPER_COMMAND
            return InstallState.INSTALLED if helper.is_file() else InstallState.UNINSTALLED

        paths_result = self.resolve_paths()
        if is_err(paths_result):
            return InstallState.UNINSTALLED
        helper = self.helper_path(paths_result.unwrap())
        return InstallState.INSTALLED if is_managed_file(helper) else InstallState.UNINSTALLED

    def install(self) -> Result[InstallReport, SetupError]:
        logger.info("Install requested", version=VERSION)

        dependency_result = require_dependency(self._dependency, self._search_path)
        if is_err(dependency_result):
            logger.error("Dependency missing", dependency=self._dependency)
            return dependency_result

        paths_result = self.resolve_paths()
        if is_err(paths_result):
            return paths_result
        paths = paths_result.unwrap()

        previous = self._manifest_store.load()
        if is_err(previous):
            logger.warning("Ignoring unreadable manifest", error=previous.err().message)
        previous_manifest = previous.unwrap_or(None)

        created_dirs: list[Path] = []
        new_files: list[Path] = []

        result = self._place_artifacts(paths, created_dirs, new_files)
        if is_err(result):
            logger.error("Install failed, rolling back", error=result.err().message)
            self._rollback(new_files, created_dirs)
            return result
        files = result.unwrap()

        state_result = self._manifest_store.prepare()
        if is_err(state_result):
            logger.error("Manifest directory unavailable, rolling back", error=state_result.err().message)
            self._rollback(new_files, created_dirs)
            return state_result
        state_dirs = state_result.unwrap()

        manifest = self._build_manifest(paths, files, created_dirs, state_dirs, previous_manifest)
        save_result = self._manifest_store.save(manifest)
        if is_err(save_result):
            logger.error("Manifest write failed, rolling back", error=save_result.err().message)
            self._rollback(new_files, [*created_dirs, *state_dirs])
            return save_result

        if previous_manifest is not None:
            self._remove_stale(previous_manifest, manifest)

        dependency_version = get_dependency_version(self._dependency, self._search_path).unwrap_or(None)
        logger.info(
            "Install complete",
            notes_dir=str(paths.notes_dir),
            bin_dir=str(paths.bin_dir),
            dependency_version=dependency_version,
        )
        return Ok(
            InstallReport(
                paths=paths,
                files=files,
                created_dirs=created_dirs,
                manifest_path=self._manifest_store.path,
                dependency_version=dependency_version,
            )
        )

    def uninstall(self) -> Result[UninstallReport, SetupError]:
        logger.debug("Uninstall requested", version=VERSION)

        manifest_result = self._manifest_store.load()
        if is_err(manifest_result):
            logger.warning("Falling back to configured paths", error=manifest_result.err().message)
        manifest = manifest_result.unwrap_or(None)

        if manifest is not None:
            paths = ResolvedPaths(notes_dir=manifest.notes_dir, bin_dir=manifest.bin_dir)
            files = list(manifest.files)
            created_dirs = list(manifest.created_dirs)
            state_dirs = list(manifest.state_dirs)
        else:
            paths_result = self.resolve_paths()
            if is_err(paths_result):
                return paths_result
            paths = paths_result.unwrap()
            # Without a manifest, only files that identify themselves as ours are removed,
            # and no directory is known to have been created by us.
            files = [path for path in (self.helper_path(paths), self.marker_path(paths)) if is_managed_file(path)]
            created_dirs = []
            state_dirs = []

        integration_result = self._integration.remove(paths)
        if is_err(integration_result):
            return integration_result

        removed_files: list[Path] = []
        for path in files:
            if not self._is_owned_location(path, paths):
                logger.warning("Refusing to remove file outside managed directories", path=str(path))
                continue
            removal = remove_file(path)
            if is_err(removal):
                logger.error("Uninstall failed", path=str(path), error=removal.err().message)
                return removal
            if removal.unwrap():
                removed_files.append(path)

        dirs_result = remove_empty_directories(_innermost_first(created_dirs))
        if is_err(dirs_result):
            return dirs_result
        removed_dirs, kept_dirs = dirs_result.unwrap()

        if self._manifest_store.exists():
            manifest_removal = self._manifest_store.delete()
            if is_err(manifest_removal):
                return manifest_removal

        state_dirs_result = remove_empty_directories(_innermost_first(state_dirs))
        if is_err(state_dirs_result):
            return state_dirs_result
        removed_state, kept_state = state_dirs_result.unwrap()
        removed_dirs.extend(removed_state)
        kept_dirs.extend(kept_state)

        if not removed_files and manifest is None:
            logger.debug("Nothing to uninstall", notes_dir=str(paths.notes_dir), bin_dir=str(paths.bin_dir))
        else:
            logger.info("Uninstall complete", removed_files=len(removed_files), kept_dirs=[str(d) for d in kept_dirs])

        return Ok(
            UninstallReport(
                paths=paths,
                removed_files=removed_files,
                removed_dirs=removed_dirs,
                kept_dirs=kept_dirs,
            )
        )

    def _place_artifacts(
        self,
        paths: ResolvedPaths,
        created_dirs: list[Path],
        new_files: list[Path],
    ) -> Result[list[Path], SetupError]:
        """Create directories and files, recording what did not exist before into the given lists."""
        for directory in (paths.bin_dir, paths.notes_dir):
            dir_result = ensure_directory(directory)
            if is_err(dir_result):
                return dir_result
            created_dirs.extend(dir_result.unwrap())

        planned = [
            (self.helper_path(paths), render_helper_script(self._python_executable), HELPER_MODE),
            (self.marker_path(paths), render_notes_marker(paths), MARKER_MODE),
        ]
        files: list[Path] = []
        for path, content, mode in planned:
            existed = path.exists()
            write_result = write_file_atomic(path, content, mode)
            if is_err(write_result):
                return write_result
            if not existed:
                new_files.append(path)
            files.append(path)

        integration_result = self._integration.apply(paths)
        if is_err(integration_result):
            return integration_result
        integration_files = integration_result.unwrap()
        new_files.extend(integration_files)
        files.extend(integration_files)

        return Ok(files)

    def _build_manifest(
        self,
        paths: ResolvedPaths,
        files: list[Path],
        created_dirs: list[Path],
        state_dirs: list[Path],
        previous: InstallManifest | None,
    ) -> InstallManifest:
        installed_at = datetime.now(UTC).replace(microsecond=0)
        all_created = list(created_dirs)
        all_state = list(state_dirs)
        if previous is not None:
            installed_at = previous.installed_at
            # Keep directories an earlier run created, as long as they are still in use.
            for directory in previous.created_dirs:
                if directory not in all_created and directory.is_dir() and _is_ancestor_or_self(directory, paths):
                    all_created.append(directory)
            for directory in previous.state_dirs:
                if directory not in all_state and directory.is_dir():
                    all_state.append(directory)

        return InstallManifest(
            installer_version=VERSION,
            installed_at=installed_at,
            notes_dir=paths.notes_dir,
            bin_dir=paths.bin_dir,
            files=files,
            created_dirs=sorted(all_created, key=lambda d: len(d.parts)),
            state_dirs=sorted(all_state, key=lambda d: len(d.parts)),
        )

    def _remove_stale(self, previous: InstallManifest, current: InstallManifest) -> None:
        """Remove artifacts of an earlier install whose configured paths have since changed."""
        old_paths = ResolvedPaths(notes_dir=previous.notes_dir, bin_dir=previous.bin_dir)
        stale_files = [path for path in previous.files if path not in current.files]
        stale_dirs = [directory for directory in previous.created_dirs if directory not in current.created_dirs]
        if not stale_files and not stale_dirs:
            return

        logger.info("Removing artifacts from previous install", files=[str(p) for p in stale_files])
        for path in stale_files:
            if self._is_owned_location(path, old_paths):
                remove_file(path).inspect_err(
                    lambda error: logger.warning("Could not remove stale file", path=str(path), error=error.message)
                )
        remove_empty_directories(_innermost_first(stale_dirs)).inspect_err(
            lambda error: logger.warning("Could not remove stale directory", error=error.message)
        )

    def _rollback(self, new_files: list[Path], created_dirs: list[Path]) -> None:
        for path in reversed(new_files):
            remove_file(path).inspect_err(
                lambda error: logger.warning("Rollback could not remove file", path=str(path), error=error.message)
            )
        remove_empty_directories(_innermost_first(created_dirs)).inspect_err(
            lambda error: logger.warning("Rollback could not remove directory", error=error.message)
        )

    def _is_owned_location(self, path: Path, paths: ResolvedPaths) -> bool:
        return (
            is_within(path, paths.bin_dir)
            or is_within(path, paths.notes_dir)
            or is_within(path, self._manifest_store.path.parent)
        )


def _innermost_first(directories: list[Path]) -> list[Path]:
    return sorted(directories, key=lambda d: len(d.parts), reverse=True)


def _is_ancestor_or_self(directory: Path, paths: ResolvedPaths) -> bool:
    return any(target == directory or directory in target.parents for target in (paths.bin_dir, paths.notes_dir))


__all__ = [
    "FsError",
    "Installer",
    "SetupError",
    "version_string",
]
