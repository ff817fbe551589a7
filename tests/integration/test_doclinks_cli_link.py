"""Integration tests for the doclinks link CLI."""

import json

import pytest

from doclinks.cli import main
from doclinks.constants import SKIP_ENV_FLAG
from tests.conftest import write_files

pytestmark = pytest.mark.integration


def test_check_all_valid_exits_zero(runner, app, doc_tree):
    result = runner.invoke(app, ["link", "check", "--base-dir", str(doc_tree)])

    assert result.exit_code == 0
    assert "Link Validation Results" in result.output
    assert "All links are valid!" in result.output


def test_check_broken_link_json(runner, app, doc_tree):
    write_files(doc_tree, {"broken.md": "[missing](missing.md)\n"})

    result = runner.invoke(app, ["link", "check", "--base-dir", str(doc_tree), "--json"])

    assert result.exit_code == 1
    data = json.loads(result.output)
    broken = [entry for entry in data if not entry["isValid"]]
    assert len(broken) == 1
    assert "not found" in broken[0]["error"]
    assert len(data) == 7


def test_check_human_report_lists_broken_link(runner, app, doc_tree):
    write_files(doc_tree, {"broken.md": "[missing](missing.md)\n"})

    result = runner.invoke(app, ["link", "check", "--base-dir", str(doc_tree)])

    assert result.exit_code == 1
    assert "✗ Files Not Found (1):" in result.output
    assert "broken.md:1 missing.md" in result.output
    assert "Found 1 broken link(s)" in result.output


def test_check_quiet(runner, app, doc_tree):
    write_files(doc_tree, {"broken.md": "[missing](missing.md)\n"})

    result = runner.invoke(app, ["link", "check", "--base-dir", str(doc_tree), "--quiet"])

    assert result.exit_code == 1
    lines = [line for line in result.output.splitlines() if line]
    assert len(lines) == 1
    assert " - missing.md - File not found: " in lines[0]


def test_check_no_files_exits_one(runner, app, tmp_path):
    empty = tmp_path / "empty"
    empty.mkdir()

    result = runner.invoke(app, ["link", "check", "--base-dir", str(empty)])

    assert result.exit_code == 1
    assert "No markdown files found" in result.output


def test_check_skip_flag(runner, app, tmp_path, monkeypatch):
    monkeypatch.setenv(SKIP_ENV_FLAG, "1")

    result = runner.invoke(app, ["link", "check", "--base-dir", str(tmp_path)])

    assert result.exit_code == 0
    assert "skipped" in result.output


def test_extract_outputs_json(runner, app, doc_tree):
    result = runner.invoke(app, ["--display", "json", "link", "extract", "--base-dir", str(doc_tree)])

    assert result.exit_code == 0
    assert '"anchor": 1' in result.output
    assert '"url": "guide/index.md"' in result.output


def test_main_returns_exit_codes(doc_tree, capsys):
    assert main(["link", "check", "--base-dir", str(doc_tree), "--quiet"]) == 0

    write_files(doc_tree, {"broken.md": "[missing](missing.md)\n"})
    assert main(["link", "check", "--base-dir", str(doc_tree), "--quiet"]) == 1
    assert "missing.md" in capsys.readouterr().out


def test_check_json_still_reports_errors(tmp_path, capsys):
    empty = tmp_path / "empty"
    empty.mkdir()

    assert main(["link", "check", "--base-dir", str(empty), "--json"]) == 1

    captured = capsys.readouterr()
    assert json.loads(captured.out) == []
    assert "No markdown files found" in captured.err


def test_check_json_reports_invalid_config(tmp_path, capsys):
    assert main(["link", "check", "--config", str(tmp_path / "nope.json"), "--json"]) == 1

    captured = capsys.readouterr()
    assert json.loads(captured.out) == []
    assert "Configuration file not found" in captured.err
