"""Unit tests for doclinks.cli._handle_stage_result."""

from types import SimpleNamespace

import pytest

from doclinks.cli._handle_stage_result import _get_display_format


def _ctx(obj=None, parent=None):
    return SimpleNamespace(obj=obj, parent=parent)


def test_display_format_read_from_parent_context():
    root = _ctx({"display_format": "json"})
    sub_app = _ctx(None, root)
    command = _ctx(None, sub_app)

    assert _get_display_format(command) == "json"


def test_nearest_context_wins():
    root = _ctx({"display_format": "json"})

    assert _get_display_format(_ctx({"display_format": "yaml"}, root)) == "yaml"


@pytest.mark.parametrize("ctx", [None, _ctx(), _ctx({"other": 1}, _ctx([]))])
def test_display_format_defaults_to_yaml(ctx):
    assert _get_display_format(ctx) == "yaml"


def test_invalid_display_format_raises():
    with pytest.raises(ValueError, match="Invalid display_format"):
        _get_display_format(_ctx({"display_format": "xml"}))
