APP_NAME = "wave_notes"
DISPLAY_NAME = "wave-notes-setup"

# Reported by --version; independent of the package-manager release tag.
VERSION = "1.0.0"

SETUP_COMMAND = "wave-notes-setup"
UNINSTALL_COMMAND = "wave-notes-uninstall"
HELPER_COMMAND = "wave-notes"

REQUIRED_DEPENDENCY = "jq"
