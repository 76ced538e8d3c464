"""
Unit test fixtures for news_build.
"""

import textwrap

import pytest


@pytest.fixture
def write_config(tmp_path):
    """Write a build.yaml into tmp_path and return its path."""
    def _write(content: str, name: str = "build.yaml"):
        path = tmp_path / name
        path.write_text(textwrap.dedent(content))
        return path
    return _write


@pytest.fixture
def root_dir(tmp_path):
    """Root project directory nested one level down, so ../build stays inside tmp_path."""
    path = tmp_path / "android"
    path.mkdir()
    return path
