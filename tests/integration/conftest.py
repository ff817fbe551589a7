"""Integration test fixtures."""

import pytest
from typer.testing import CliRunner

from doclinks.cli._create_app import _create_app


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def app():
    return _create_app()
