"""Glob pattern matching helper for base-relative POSIX paths."""

import re
from functools import lru_cache


@lru_cache(maxsize=256)
def glob_to_regex(pattern: str) -> re.Pattern[str]:
    """Compile a glob to a regex.

    ``**/`` matches zero or more leading directories, ``**`` matches anything,
    ``*`` and ``?`` never cross ``/``.
    """
    parts: list[str] = []
    i = 0
    while i < len(pattern):
        if pattern.startswith("**/", i):
            parts.append("(?:.*/)?")
            i += 3
        elif pattern.startswith("**", i):
            parts.append(".*")
            i += 2
        elif pattern[i] == "*":
            parts.append("[^/]*")
            i += 1
        elif pattern[i] == "?":
            parts.append("[^/]")
            i += 1
        else:
            parts.append(re.escape(pattern[i]))
            i += 1
    return re.compile("^" + "".join(parts) + "$")


def matches_glob(patterns: list[str], rel_path: str) -> bool:
    """Check if a base-relative POSIX path matches any of the glob patterns.

    Args:
        patterns: List of glob patterns to match against
        rel_path: Path relative to the scan root, using ``/`` separators

    Returns:
        True if path matches any pattern, False otherwise
    """
    return any(pattern and glob_to_regex(pattern).match(rel_path) for pattern in patterns)
