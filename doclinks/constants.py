"""Shared constants for doclinks state directories and defaults."""

DOCLINKS_HOME_EXT = ".doclinks"  # user-level state directory suffix

DOCLINKS_HOME_ENV = "DOCLINKS_HOME"

# Escape hatch honored by the check command
SKIP_ENV_FLAG = "BUILD_SKIP_LINK_CHECK"

# Config files searched in the working directory, in order
CONFIG_FILE_NAMES = (".linkcheckerrc.json", ".linkcheckerrc", "linkchecker.config.json")

USER_AGENT = "doclinks/1.0 (markdown link checker)"

# Default timestamp format for display
DEFAULT_TIMESTAMP_FORMAT = "%H:%M:%S"
