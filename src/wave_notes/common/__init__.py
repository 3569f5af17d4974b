"""Common models and helpers used across wave-notes modules."""

from .logging import (
    LoggingConfig,
    create_logger,
    disable_library_logging,
    enable_library_logging,
    get_default_log_file_path,
    setup_cli_logging,
)
from .models import AppInfo, AppPaths
from .paths import (
    get_config_file_path,
    get_data_directory,
    get_default_bin_dir,
    get_default_notes_dir,
    get_home_directory,
    get_manifest_path,
    is_within,
)

__all__ = [
    "AppInfo",
    "AppPaths",
    "LoggingConfig",
    "create_logger",
    "disable_library_logging",
    "enable_library_logging",
    "get_config_file_path",
    "get_data_directory",
    "get_default_bin_dir",
    "get_default_log_file_path",
    "get_default_notes_dir",
    "get_home_directory",
    "get_manifest_path",
    "is_within",
    "setup_cli_logging",
]
