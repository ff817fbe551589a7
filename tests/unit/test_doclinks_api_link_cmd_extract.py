"""Unit tests for doclinks.api.link.cmd_extract."""

import pytest

from doclinks.api.link.cmd_extract import cmd_extract
from tests.unit.conftest import run_cmd, write_files

pytestmark = pytest.mark.link


def test_extract_counts_by_type(doc_tree):
    write_files(doc_tree, {"ext.md": "[site](https://example.org) [self](#top)\n"})

    result = run_cmd(cmd_extract, base_dir=str(doc_tree))

    assert result.success is True
    assert result.output["files_checked"] == 5
    assert result.output["counts"] == {"total": 8, "internal": 5, "external": 1, "anchor": 2}
    assert {link["url"] for link in result.output["links"]} >= {"https://example.org", "#top", "api"}


def test_extract_without_files(tmp_path):
    result = run_cmd(cmd_extract, base_dir=str(tmp_path))

    assert result.success is False
    assert result.output["errors"] == [result.result]


def test_extract_missing_config(tmp_path):
    result = run_cmd(cmd_extract, base_dir=str(tmp_path), config_path="nope.json")

    assert result.success is False
    assert result.output["errors"]
