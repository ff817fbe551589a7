"""Heading text to anchor slug conversion."""

import re

_CLOSING_SEQUENCE = re.compile(r"\s+#+\s*$")
_STRIP_CHARS = re.compile(r"[^\w\s-]")
_WHITESPACE = re.compile(r"\s+")


def slugify_heading(text: str) -> str:
    """Convert heading text to its anchor slug.

    Lowercases, drops characters that are not word characters, whitespace or
    hyphens, then turns whitespace runs into single hyphens. A closing ``#``
    sequence (``## Title ##``) is ignored.

    Examples:
        >>> slugify_heading("Getting Started!")
        'getting-started'
        >>> slugify_heading("API v2.0 (beta)")
        'api-v20-beta'
    """
    text = _CLOSING_SEQUENCE.sub("", text.strip())
    slug = _STRIP_CHARS.sub("", text.lower())
    return _WHITESPACE.sub("-", slug)


def normalize_anchor(anchor: str) -> str:
    """Normalize a requested anchor the way callers commonly write it (``#My Section``)."""
    return _WHITESPACE.sub("-", anchor.lower())
