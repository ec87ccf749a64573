"""Shared pytest fixtures."""

import tempfile
from pathlib import Path

import pytest


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test data."""
    with tempfile.TemporaryDirectory() as d:
        yield Path(d)


@pytest.fixture
def mock_linemenu_dir(temp_dir, monkeypatch):
    """Set up a mock ~/.config/linemenu directory."""
    linemenu_dir = temp_dir / ".linemenu"
    linemenu_dir.mkdir()
    monkeypatch.setenv("LINEMENU_DIR", str(linemenu_dir))
    return linemenu_dir


@pytest.fixture(autouse=True)
def isolated_config(mock_linemenu_dir, monkeypatch):
    """Keep tests away from the user's config and LINEMENU_* settings."""
    import os

    from linemenu.utils.debug import reload_config

    for key in list(os.environ):
        if key.startswith("LINEMENU_") and key != "LINEMENU_DIR":
            monkeypatch.delenv(key)
    reload_config()
    yield
    reload_config()
