"""Extracted link dataclass."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .classify_link import is_anchor_only, is_external_url
from .LinkKind import LinkKind


@dataclass(frozen=True)
class ExtractedLink:
    """One occurrence of a link, image or HTML anchor reference in a document."""

    url: str
    text: str
    source_file: Path
    line: int
    kind: LinkKind
    column: int = 1

    @property
    def is_external(self) -> bool:
        return is_external_url(self.url)

    @property
    def is_anchor_only(self) -> bool:
        return is_anchor_only(self.url)

    @property
    def location(self) -> str:
        """Source location as ``file:line``."""
        return f"{self.source_file}:{self.line}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "url": self.url,
            "text": self.text,
            "sourceFile": str(self.source_file),
            "line": self.line,
            "column": self.column,
            "kind": self.kind.value,
            "isExternal": self.is_external,
            "isAnchorOnly": self.is_anchor_only,
        }
