"""Link reference dataclass."""

from dataclasses import dataclass

from ..LinkKind import LinkKind


@dataclass(frozen=True)
class LinkRef:
    """A reference to a link found in a text, before it is tied to a file."""

    line_number: int
    column_number: int
    raw_target: str
    kind: LinkKind
    text: str = ""
