"""Get doclinks home directory path or path under it."""

import os
from pathlib import Path

from ..constants import DOCLINKS_HOME_ENV, DOCLINKS_HOME_EXT


def get_home_dir(*parts: str) -> Path:
    """Get doclinks home directory path or path under it.

    Checks DOCLINKS_HOME environment variable first, defaults to ~/.doclinks if not set.

    Args:
        *parts: Optional path components to join (e.g., "doclinks.log")

    Returns:
        Absolute path to the home directory or subpath under it

    Examples:
        >>> get_home_dir()
        Path("/Users/user/.doclinks")
        >>> get_home_dir("doclinks.log")
        Path("/Users/user/.doclinks/doclinks.log")
    """
    home_env = os.environ.get(DOCLINKS_HOME_ENV)
    if home_env:
        home = Path(home_env).expanduser().resolve()
    else:
        home = Path.home() / DOCLINKS_HOME_EXT

    return home / Path(*parts) if parts else home
