"""Pytest configuration and fixtures for supertoml tests."""

import os
import shutil
import tempfile
import textwrap
from pathlib import Path

import pytest


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    temp = tempfile.mkdtemp()
    yield Path(temp)
    shutil.rmtree(temp)


@pytest.fixture
def write_document(temp_dir):
    """Write a document into the temporary directory and return its path."""

    def _write(content: str, name: str = "config.toml") -> Path:
        path = temp_dir / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(textwrap.dedent(content))
        return path

    return _write


@pytest.fixture
def env_vars(monkeypatch):
    """Helper to set environment variables."""

    def _set_env(**kwargs):
        for key, value in kwargs.items():
            monkeypatch.setenv(key, str(value))

    return _set_env


@pytest.fixture
def clear_env(monkeypatch):
    """Clear all SUPERTOML_ environment variables."""
    for key in list(os.environ.keys()):
        if key.startswith("SUPERTOML_"):
            monkeypatch.delenv(key)
