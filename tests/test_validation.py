"""Tests for lexical path validation."""

import pathlib

import pytest

from filemeta.exceptions import InvalidPathError
from filemeta.handler import FileMetadataHandler
from filemeta.validation import has_invalid_characters, has_traversal, validate_path


@pytest.mark.parametrize("value", ["", None, 0])
def test_empty_path_is_rejected(value):
    with pytest.raises(InvalidPathError, match="File path is required"):
        validate_path(value)


@pytest.mark.parametrize("value", [123, b"notes.txt", pathlib.Path("notes.txt"), ["a"]])
def test_non_string_path_is_rejected(value):
    with pytest.raises(InvalidPathError, match="must be a string"):
        validate_path(value)


@pytest.mark.parametrize(
    "value",
    ["../secret.txt", "a/../../secret.txt", "./..", "docs/../../etc/passwd", ".."],
)
def test_traversal_is_rejected(value):
    with pytest.raises(InvalidPathError, match="traversal"):
        validate_path(value)


@pytest.mark.parametrize("value", ["docs/../notes.txt", "file..txt", "./notes.txt", "/tmp/a/b.txt"])
def test_paths_without_traversal_after_normalization_pass(value):
    assert not has_traversal(value)
    assert validate_path(value) == value


@pytest.mark.parametrize("char", list('<>:"|?*'))
def test_invalid_characters_are_rejected(char):
    path = f"reports/q1{char}final.txt"
    assert has_invalid_characters(path)
    with pytest.raises(InvalidPathError, match="invalid characters"):
        validate_path(path)


def test_traversal_checked_before_characters():
    with pytest.raises(InvalidPathError, match="traversal"):
        validate_path("../bad?.txt")


def test_validation_does_not_touch_filesystem(missing_path):
    assert validate_path(missing_path) == missing_path


def test_handler_construction_validates():
    with pytest.raises(InvalidPathError):
        FileMetadataHandler("../outside.txt")


def test_invalid_path_error_is_value_error():
    with pytest.raises(ValueError):
        FileMetadataHandler("")


def test_handler_path_is_read_only(sample_file):
    handler = FileMetadataHandler(str(sample_file))
    assert handler.file_path == str(sample_file)
    with pytest.raises(AttributeError):
        handler.file_path = "other.txt"
