"""Unit tests for doclinks.api.link.find_markdown_files and matches_glob."""

import pytest

from doclinks.api.link.find_markdown_files import find_markdown_files
from doclinks.api.link.matches_glob import matches_glob
from tests.unit.conftest import write_files

pytestmark = pytest.mark.link

INCLUDE = ["**/*.md", "**/*.mdx"]
EXCLUDE = ["**/node_modules/**", "**/dist/**", "**/.git/**"]


@pytest.mark.parametrize(
    ("patterns", "path", "expected"),
    [
        (["**/*.md"], "README.md", True),
        (["**/*.md"], "a/b/c.md", True),
        (["*.md"], "a/b.md", False),
        (["*.md"], "b.md", True),
        (["docs/**"], "docs/a/b.txt", True),
        (["**/node_modules/**"], "node_modules/pkg/README.md", True),
        (["**/node_modules/**"], "a/node_modules/x.md", True),
        (["**/node_modules/**"], "a/node_modules_old/x.md", False),
        (["guide/?.md"], "guide/a.md", True),
        (["guide/?.md"], "guide/ab.md", False),
        (["**/*.md"], "notes.md.bak", False),
        ([], "a.md", False),
    ],
)
def test_matches_glob(patterns, path, expected):
    assert matches_glob(patterns, path) is expected


def test_find_markdown_files(tmp_path):
    root = write_files(
        tmp_path,
        {
            "README.md": "",
            "docs/guide.md": "",
            "docs/deep/page.mdx": "",
            "docs/notes.txt": "",
            "node_modules/pkg/README.md": "",
            "site/dist/out.md": "",
            ".git/HEAD.md": "",
        },
    ).resolve()

    found = find_markdown_files(root, INCLUDE, EXCLUDE)

    assert found == [root / "README.md", root / "docs" / "deep" / "page.mdx", root / "docs" / "guide.md"]
    assert all(path.is_absolute() for path in found)


def test_find_markdown_files_with_custom_pattern(tmp_path):
    root = write_files(tmp_path, {"a.md": "", "sub/b.md": "", "sub/c.mdx": ""}).resolve()

    assert find_markdown_files(root, ["*.md"], []) == [root / "a.md"]
    assert find_markdown_files(root, ["sub/*"], ["**/*.mdx"]) == [root / "sub" / "b.md"]


def test_find_markdown_files_empty_directory(tmp_path):
    assert find_markdown_files(tmp_path, INCLUDE, EXCLUDE) == []
