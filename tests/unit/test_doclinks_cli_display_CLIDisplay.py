"""Unit tests for doclinks.cli.display.CLIDisplay."""

import json

from doclinks.cli.display import CLIDisplay


def test_report_writes_lines_to_stdout_verbatim(capsys):
    CLIDisplay().report(["Link Validation Results", "  docs/a.md:3 [x](y)", "✗ Files Not Found (1):"])

    out, err = capsys.readouterr()
    assert out.splitlines() == ["Link Validation Results", "  docs/a.md:3 [x](y)", "✗ Files Not Found (1):"]
    assert err == ""


def test_status_messages_go_to_stderr(capsys):
    display = CLIDisplay()
    display.status("Checking [links]")
    display.error("Found 1 broken link(s)")

    out, err = capsys.readouterr()
    assert out == ""
    assert "Checking [links]" in err
    assert "✗ Found 1 broken link(s)" in err


def test_json_output_formats(capsys):
    display = CLIDisplay()
    display.json_output({"a": [1, 2]}, format="json")
    assert json.loads(capsys.readouterr().out) == {"a": [1, 2]}

    display.json_output({"a": [1, 2]}, format="yaml")
    assert capsys.readouterr().out == "a:\n- 1\n- 2\n"
