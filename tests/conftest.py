"""Shared pytest fixtures."""

from pathlib import Path

import pytest

from cachedir import TAG_FILENAME


@pytest.fixture
def directory(tmp_path: Path) -> Path:
    """Create a fresh, empty directory for each test."""
    path = tmp_path / "cache"
    path.mkdir()
    return path


@pytest.fixture
def missing_directory(tmp_path: Path) -> Path:
    """Return a path that doesn't exist."""
    return tmp_path / "this directory does not exist"


@pytest.fixture
def tag_file(directory: Path) -> Path:
    """Path of the tag file inside the test directory."""
    return directory / TAG_FILENAME
