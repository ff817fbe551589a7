"""Shared pytest configuration and fixtures for all tests."""

from pathlib import Path

import pytest

from doclinks.constants import DOCLINKS_HOME_ENV, SKIP_ENV_FLAG
from doclinks.utils.logger import reset_logging


def pytest_configure(config):
    for marker in ("unit", "integration", "link", "config"):
        config.addinivalue_line("markers", f"{marker}: {marker} tests")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def doclinks_home(tmp_path: Path, monkeypatch) -> Path:
    """Point DOCLINKS_HOME at a temp dir and run from an empty working directory.

    Returns:
        Path to the doclinks home directory
    """
    home = tmp_path / ".doclinks"
    workdir = tmp_path / "cwd"
    workdir.mkdir()
    monkeypatch.setenv(DOCLINKS_HOME_ENV, str(home))
    monkeypatch.delenv(SKIP_ENV_FLAG, raising=False)
    monkeypatch.chdir(workdir)
    reset_logging()
    yield home
    reset_logging()


def write_files(root: Path, files: dict[str, str | bytes]) -> Path:
    """Create files under root from a {relative path: content} mapping."""
    for rel_path, content in files.items():
        path = root / rel_path
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
    return root


@pytest.fixture
def doc_tree(tmp_path: Path) -> Path:
    """A small documentation tree in which every internal link resolves.

    Returns:
        Path to the docs root
    """
    return write_files(
        tmp_path / "docs",
        {
            "README.md": "# Docs\n\nSee the [guide](guide/index.md) and [API](api).\n",
            "guide/index.md": "# Guide\n\n## Getting Started!\n\nBack to [home](../README.md#docs).\n",
            "guide/install.mdx": "# Install\n\nJump to [start](./index.md#getting-started) or [top](#install).\n",
            "api.md": "# API\n\n![diagram](img/diagram.png)\n",
            "img/diagram.png": b"\x89PNG\r\n",
        },
    )


# =============================================================================
# Test Helpers
# =============================================================================


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result
