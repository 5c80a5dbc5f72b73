"""Pytest configuration and shared fixtures for termdash tests."""

import pytest

import termdash.io.logging_setup
from termdash.core.buffer import CellBuffer
from termdash.core.renderer import Renderer


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Keep settings and logs inside tmp_path for every test."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("TERMDASH_LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.delenv("TERMDASH_LOG_FILE", raising=False)
    monkeypatch.delenv("TERMDASH_LOG_LEVEL", raising=False)
    monkeypatch.delenv("TERMDASH_DEBUG", raising=False)
    yield
    termdash.io.logging_setup.reset()


@pytest.fixture
def buffer():
    return CellBuffer(40, 10)


@pytest.fixture
def renderer():
    return Renderer()
