"""Classify raw link URLs as external, anchor-only or internal."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .ExtractedLink import ExtractedLink

# http://, https:// (any case) or protocol-relative //
_EXTERNAL_PATTERN = re.compile(r"^(?:https?:)?//", re.IGNORECASE)


@dataclass(frozen=True)
class LinkClassification:
    """Flags derived from a raw URL."""

    is_external: bool
    is_anchor_only: bool

    @property
    def is_internal(self) -> bool:
        return not self.is_external


def is_external_url(url: str) -> bool:
    """Check if a URL points at a network resource.

    Examples:
        >>> is_external_url("https://example.com")
        True
        >>> is_external_url("//cdn.example.com/x.js")
        True
        >>> is_external_url("../README.md")
        False
    """
    return bool(_EXTERNAL_PATTERN.match(url))


def is_anchor_only(url: str) -> bool:
    """Check if a URL is just a fragment (``#section``)."""
    return url.startswith("#")


def classify_link(url: str) -> LinkClassification:
    """Classify a raw URL by literal prefix. Never fails."""
    return LinkClassification(is_external=is_external_url(url), is_anchor_only=is_anchor_only(url))


def group_links_by_type(links: Iterable[ExtractedLink]) -> dict[str, list[ExtractedLink]]:
    """Group links into internal, external and anchor lists.

    Anchor-only links are reported under ``anchor`` and not under ``internal``.
    """
    grouped: dict[str, list[ExtractedLink]] = {"internal": [], "external": [], "anchor": []}
    for link in links:
        if link.is_external:
            grouped["external"].append(link)
        elif link.is_anchor_only:
            grouped["anchor"].append(link)
        else:
            grouped["internal"].append(link)
    return grouped
