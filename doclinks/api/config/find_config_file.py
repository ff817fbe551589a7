"""Locate a link checker config file in a directory."""

from pathlib import Path

from ...constants import CONFIG_FILE_NAMES


def find_config_file(cwd: Path) -> Path | None:
    """Return the first existing config file under cwd, in search order."""
    for name in CONFIG_FILE_NAMES:
        candidate = cwd / name
        if candidate.is_file():
            return candidate
    return None
