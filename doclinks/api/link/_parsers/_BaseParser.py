"""Abstract base parser for link extraction."""

from abc import ABC, abstractmethod
from collections.abc import Iterator

from .LinkRef import LinkRef

_COMMENT_OPEN = "<!--"
_COMMENT_CLOSE = "-->"


def mask_html_comments(line: str, in_comment: bool) -> tuple[str, bool]:
    """Blank out HTML comment text on a line, keeping column positions.

    Args:
        line: Line to scan
        in_comment: Whether a comment opened on an earlier line is still open

    Returns:
        (masked line, whether a comment is still open at end of line)
    """
    pieces: list[str] = []
    pos = 0
    while pos < len(line):
        if in_comment:
            end = line.find(_COMMENT_CLOSE, pos)
            if end == -1:
                pieces.append(" " * (len(line) - pos))
                pos = len(line)
            else:
                stop = end + len(_COMMENT_CLOSE)
                pieces.append(" " * (stop - pos))
                pos = stop
                in_comment = False
        else:
            start = line.find(_COMMENT_OPEN, pos)
            if start == -1:
                pieces.append(line[pos:])
                pos = len(line)
            else:
                pieces.append(line[pos:start])
                pos = start
                in_comment = True
    return "".join(pieces), in_comment


def inside_inline_code(line: str, column_index: int) -> bool:
    """True when an odd number of backticks precede column_index on the line."""
    return line.count("`", 0, column_index) % 2 == 1


class BaseParser(ABC):
    """Abstract interface for file parsers."""

    @abstractmethod
    def parse(self, text: str) -> Iterator[LinkRef]:
        """Parse text and yield found links in document order."""
        pass
