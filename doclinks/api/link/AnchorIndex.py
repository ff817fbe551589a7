"""Anchor lookup for target documents."""

import re
from dataclasses import dataclass, field
from pathlib import Path

from .slugify_heading import normalize_anchor, slugify_heading

HEADING_PATTERN = re.compile(r"^#+\s+(.+)$", re.MULTILINE)
HTML_ANCHOR_PATTERN = re.compile(r'<a\s+(?:name|id)=["\']([^"\']+)["\']', re.IGNORECASE)


@dataclass
class FileAnchors:
    """Anchors defined by one document."""

    heading_slugs: set[str] = field(default_factory=set)
    html_anchors: set[str] = field(default_factory=set)

    @classmethod
    def from_text(cls, text: str) -> "FileAnchors":
        anchors = cls()
        seen: dict[str, int] = {}
        for match in HEADING_PATTERN.finditer(text):
            slug = slugify_heading(match.group(1))
            count = seen.get(slug, 0)
            seen[slug] = count + 1
            anchors.heading_slugs.add(slug)
            if count:
                # Repeated headings also answer to slug-1, slug-2, ...
                anchors.heading_slugs.add(f"{slug}-{count}")
        anchors.html_anchors.update(HTML_ANCHOR_PATTERN.findall(text))
        return anchors

    def contains(self, anchor: str) -> bool:
        """Headings match after normalization; explicit HTML anchors match literally."""
        return normalize_anchor(anchor) in self.heading_slugs or anchor in self.html_anchors


class AnchorIndex:
    """Per-run cache of the anchors each file defines."""

    def __init__(self) -> None:
        self._cache: dict[Path, FileAnchors | None] = {}

    def anchors_for(self, file_path: Path) -> FileAnchors | None:
        """Anchors of a file, or None when it cannot be read as UTF-8 text."""
        key = Path(file_path)
        if key not in self._cache:
            try:
                text = key.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError):
                self._cache[key] = None
            else:
                self._cache[key] = FileAnchors.from_text(text)
        return self._cache[key]

    def anchor_exists(self, file_path: Path, anchor: str) -> bool:
        """Check whether anchor (without ``#``) is defined in file_path.

        An unreadable file is reported as not defining the anchor.
        """
        anchors = self.anchors_for(file_path)
        return anchors is not None and anchors.contains(anchor)


def anchor_exists_in_file(file_path: Path, anchor: str) -> bool:
    """One-off anchor check without a shared cache."""
    return AnchorIndex().anchor_exists(file_path, anchor)
