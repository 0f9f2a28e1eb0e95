"""Shared pytest fixtures for all tests."""

from datetime import datetime

import pytest

from filemeta.models import AgeBreakdown, FileMetadata


@pytest.fixture
def sample_file(tmp_path):
    """
    Create a 2048-byte text file.

    Args:
        tmp_path: pytest tmp_path fixture

    Returns:
        Path to the file
    """
    path = tmp_path / "sample.txt"
    path.write_bytes(b"x" * 2048)
    return path


@pytest.fixture
def empty_file(tmp_path):
    """Create an empty file with a .log extension."""
    path = tmp_path / "empty.log"
    path.touch()
    return path


@pytest.fixture
def no_extension_file(tmp_path):
    """Create a file whose name has no extension."""
    path = tmp_path / "Makefile"
    path.write_text("all:\n\ttrue\n")
    return path


@pytest.fixture
def missing_path(tmp_path):
    """Path inside tmp_path that does not exist."""
    return str(tmp_path / "does-not-exist.txt")


@pytest.fixture
def sample_metadata():
    """A FileMetadata instance with fixed values."""
    return FileMetadata(
        path="docs/report.pdf",
        name="report.pdf",
        extension=".pdf",
        size=1536,
        created=datetime(2024, 3, 1, 9, 30, 0),
        modified=datetime(2024, 3, 2, 17, 45, 10),
        age=AgeBreakdown(days=12, hours=3, minutes=7),
        checksum="ab" * 32,
    )
