"""Unit test fixtures.

Most helpers are in tests/conftest.py. This file holds builders for link
records and mock HTTP clients.
"""

from pathlib import Path

import httpx

from doclinks.api.link.ExtractedLink import ExtractedLink
from doclinks.api.link.LinkKind import LinkKind
from tests.conftest import run_cmd, write_files

__all__ = ["make_link", "mock_client", "run_cmd", "write_files"]


def make_link(url: str, source_file: Path | str = "/docs/page.md", line: int = 1, kind=LinkKind.LINK) -> ExtractedLink:
    """Build an ExtractedLink with sensible defaults."""
    return ExtractedLink(url=url, text="", source_file=Path(source_file), line=line, kind=kind)


def mock_client(handler) -> httpx.AsyncClient:
    """AsyncClient that answers every request with handler (sync or async)."""
    return httpx.AsyncClient(transport=httpx.MockTransport(handler), follow_redirects=True)
