"""wave-notes - set up a notes directory and helpers for the Wave terminal.

Internal logging is disabled when the package is used as a library.
Library users can enable it by calling wave_notes.enable_logging().
"""

from wave_notes.common import disable_library_logging, enable_library_logging
from wave_notes.constants import VERSION

disable_library_logging()

enable_logging = enable_library_logging
__version__ = VERSION

__all__ = [
    "__version__",
    "enable_logging",
]
