"""Markdown link parser."""

import re
from collections.abc import Iterator

from ..LinkKind import LinkKind
from ._BaseParser import BaseParser, LinkRef, inside_inline_code, mask_html_comments
from ._HTMLParser import HREF_PATTERN

# Destination plus optional "title" or 'title'
_DESTINATION = r"\(\s*([^)\s]+)(?:\s+\"[^\"]*\"|\s+'[^']*')?\s*\)"

# ![alt](url)
IMAGE_PATTERN = re.compile(r"!\[([^\]]*)\]" + _DESTINATION)

# [text](url), not preceded by "!"; text may wrap an image badge: [![alt](img)](url)
LINK_PATTERN = re.compile(r"(?<!!)\[((?:!\[[^\[\]]*\]\([^()]*\)|[^\[\]])*)\]" + _DESTINATION)

FENCE_MARKER = "```"


class MarkdownParser(BaseParser):
    """Parser for Markdown and MDX files.

    Skips fenced code blocks, inline code spans and HTML comments.
    """

    def parse(self, text: str) -> Iterator[LinkRef]:
        in_fence = False
        in_comment = False
        # Line numbers count "\n" only, as editors do
        for line_num, line in enumerate(text.split("\n"), start=1):
            if not in_comment and line.strip().startswith(FENCE_MARKER):
                in_fence = not in_fence
                continue
            if in_fence:
                continue

            visible, in_comment = mask_html_comments(line, in_comment)
            yield from self._parse_line(visible, line_num)

    def _parse_line(self, line: str, line_num: int) -> Iterator[LinkRef]:
        refs: list[LinkRef] = []
        for pattern, kind in ((LINK_PATTERN, LinkKind.LINK), (IMAGE_PATTERN, LinkKind.IMAGE)):
            for match in pattern.finditer(line):
                if inside_inline_code(line, match.start()):
                    continue
                refs.append(LinkRef(line_num, match.start() + 1, match.group(2), kind, match.group(1).strip()))

        for match in HREF_PATTERN.finditer(line):
            if inside_inline_code(line, match.start()):
                continue
            refs.append(LinkRef(line_num, match.start() + 1, match.group(1).strip(), LinkKind.HTML))

        refs.sort(key=lambda ref: ref.column_number)
        return iter(refs)
