"""Map internal link references to files on disk."""

import os
from collections.abc import Sequence
from pathlib import Path

from .LinkResolutionError import LinkResolutionError


def split_link_url(url: str) -> tuple[str, str | None]:
    """Split a URL on the first ``#`` into (path part, anchor or None).

    Examples:
        >>> split_link_url("guide.md#install")
        ('guide.md', 'install')
        >>> split_link_url("#intro")
        ('', 'intro')
        >>> split_link_url("guide.md")
        ('guide.md', None)
    """
    path_part, sep, anchor = url.partition("#")
    return path_part, (anchor if sep else None)


def _normalize(path: Path) -> Path:
    # Lexical normalization; symlinks are left alone
    return Path(os.path.normpath(os.path.abspath(path)))


def _probe(target: Path, valid_extensions: Sequence[str]) -> Path | None:
    if target.is_file():
        return target

    for ext in valid_extensions:
        candidate = Path(f"{target}{ext}")
        if candidate.is_file():
            return candidate

    if target.is_dir():
        for ext in valid_extensions:
            index = target / f"index{ext}"
            if index.is_file():
                return index

    return None


def resolve_link_path(
    url: str,
    source_file: Path,
    base_dir: Path,
    valid_extensions: Sequence[str] = (".md", ".mdx"),
    static_dirs: Sequence[Path] = (),
) -> Path:
    """Resolve an internal link to an existing file.

    Order of attempts: the path as written, the path with each extension
    appended, then ``index<ext>`` inside the path when it is a directory.
    A leading ``/`` is relative to base_dir (after checking static_dirs), any
    other path is relative to the source file's directory. An empty path part
    (anchor-only link) resolves to the source file itself.

    Args:
        url: Raw link URL, possibly with a ``#fragment``
        source_file: Absolute path of the document holding the link
        base_dir: Docs root for ``/``-style links
        valid_extensions: Extensions tried in order
        static_dirs: Asset directories searched first for ``/``-style links

    Returns:
        Path of the file the link points at

    Raises:
        LinkResolutionError: If nothing matched; carries the attempted path
    """
    path_part, _ = split_link_url(url)
    source_file = Path(source_file)

    if not path_part:
        return source_file

    if path_part.startswith("/"):
        relative = path_part.lstrip("/")
        for static_dir in static_dirs:
            static_path = _normalize(Path(static_dir) / relative)
            if static_path.is_file():
                return static_path
        target = _normalize(Path(base_dir) / relative)
    else:
        target = _normalize(source_file.parent / path_part)

    found = _probe(target, valid_extensions)
    if found is None:
        raise LinkResolutionError(target)
    return found
