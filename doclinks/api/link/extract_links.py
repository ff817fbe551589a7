"""Extract links from markdown documents."""

from collections.abc import Iterable
from pathlib import Path

from ...utils.logger import get_logger
from ._parsers import BaseParser, get_parser
from .ExtractedLink import ExtractedLink

logger = get_logger("link.extract")


def extract_links_from_text(text: str, source_file: Path, parser: BaseParser | None = None) -> list[ExtractedLink]:
    """Extract links from document text, in document order.

    Args:
        text: Raw document text
        source_file: Path recorded on each link (and used to pick a parser)
        parser: Explicit parser, otherwise chosen by source_file extension

    Returns:
        Links ordered by line, then by column within the line
    """
    parser = parser or get_parser(file_path=source_file)
    return [
        ExtractedLink(
            url=ref.raw_target,
            text=ref.text,
            source_file=source_file,
            line=ref.line_number,
            kind=ref.kind,
            column=ref.column_number,
        )
        for ref in parser.parse(text)
    ]


def extract_links_from_file(file_path: Path) -> list[ExtractedLink]:
    """Read a file as UTF-8 and extract its links.

    Raises:
        OSError: If the file cannot be read
        UnicodeDecodeError: If the file is not valid UTF-8
    """
    file_path = Path(file_path).resolve()
    text = file_path.read_text(encoding="utf-8")
    return extract_links_from_text(text, file_path)


def extract_links_from_files(file_paths: Iterable[Path], errors: list[str] | None = None) -> list[ExtractedLink]:
    """Extract links from many files, isolating per-file failures.

    A file that cannot be read or parsed contributes no links; the failure is
    logged and, when an ``errors`` list is given, appended to it.
    """
    links: list[ExtractedLink] = []
    for file_path in file_paths:
        try:
            links.extend(extract_links_from_file(file_path))
        except Exception as e:
            message = f"Error extracting links from {file_path}: {e}"
            logger.error(message)
            if errors is not None:
                errors.append(message)
    return links
