"""HTML link parser."""

import re
from collections.abc import Iterator

from ..LinkKind import LinkKind
from ._BaseParser import BaseParser, LinkRef, mask_html_comments

# Simple regex for finding href and src
# Note: This is not a full HTML parser but sufficient for link checking
HREF_PATTERN = re.compile(r'<a\s+(?:[^>]*?\s+)?href=["\']([^"\']+)["\']', re.IGNORECASE)
SRC_PATTERN = re.compile(r'<img\s+(?:[^>]*?\s+)?src=["\']([^"\']+)["\']', re.IGNORECASE)
ALT_PATTERN = re.compile(r'\salt=["\']([^"\']*)["\']', re.IGNORECASE)


class HTMLParser(BaseParser):
    """Parser for HTML files: ``<a href>`` and ``<img src>`` outside comments."""

    def parse(self, text: str) -> Iterator[LinkRef]:
        in_comment = False
        for line_num, line in enumerate(text.split("\n"), start=1):
            visible, in_comment = mask_html_comments(line, in_comment)
            refs = [
                LinkRef(line_num, m.start() + 1, m.group(1).strip(), LinkKind.HTML)
                for m in HREF_PATTERN.finditer(visible)
            ]
            for m in SRC_PATTERN.finditer(visible):
                tag_end = visible.find(">", m.start())
                alt = ALT_PATTERN.search(visible, m.start(), tag_end if tag_end != -1 else len(visible))
                refs.append(
                    LinkRef(line_num, m.start() + 1, m.group(1).strip(), LinkKind.IMAGE, alt.group(1) if alt else "")
                )
            yield from sorted(refs, key=lambda ref: ref.column_number)
