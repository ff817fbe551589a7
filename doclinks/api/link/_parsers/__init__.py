"""Link parsers package."""

from pathlib import Path

from ._BaseParser import BaseParser
from ._HTMLParser import HTMLParser
from ._MarkdownParser import MarkdownParser
from .LinkRef import LinkRef

_PARSERS: dict[str, type[BaseParser]] = {
    "markdown": MarkdownParser,
    "html": HTMLParser,
}

_EXTENSIONS: dict[str, str] = {
    ".md": "markdown",
    ".mdx": "markdown",
    ".markdown": "markdown",
    ".html": "html",
    ".htm": "html",
}


def get_parser(parser_name: str | None = None, file_path: Path | None = None) -> BaseParser:
    """Get a parser instance by name or file extension.

    Unknown extensions fall back to the markdown parser.

    Raises:
        ValueError: If parser_name is given but unknown
    """
    parser_cls = None

    if parser_name:
        parser_cls = _PARSERS.get(parser_name)
        if not parser_cls:
            raise ValueError(f"Unknown parser: {parser_name}")
    elif file_path:
        name = _EXTENSIONS.get(file_path.suffix.lower())
        if name:
            parser_cls = _PARSERS[name]

    if not parser_cls:
        parser_cls = MarkdownParser

    return parser_cls()


__all__ = ["BaseParser", "HTMLParser", "LinkRef", "MarkdownParser", "get_parser"]
