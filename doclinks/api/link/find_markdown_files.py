"""Discover documents to check under a base directory."""

import os
from pathlib import Path

from .matches_glob import matches_glob


def find_markdown_files(base_dir: Path, include: list[str], exclude: list[str]) -> list[Path]:
    """Find files under base_dir matching include globs and no exclude glob.

    Directories matched by an exclude glob (``**/node_modules/**``) are not
    descended into.

    Returns:
        Sorted absolute paths
    """
    base_dir = Path(base_dir).resolve()
    found: list[Path] = []

    for root, dirnames, filenames in os.walk(base_dir):
        rel_root = Path(root).relative_to(base_dir).as_posix()
        prefix = "" if rel_root == "." else f"{rel_root}/"

        dirnames[:] = sorted(d for d in dirnames if not matches_glob(exclude, f"{prefix}{d}/"))

        for name in filenames:
            rel_path = f"{prefix}{name}"
            if matches_glob(include, rel_path) and not matches_glob(exclude, rel_path):
                found.append(Path(root, name))

    return sorted(found)
