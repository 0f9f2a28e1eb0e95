"""Lexical validation of file paths."""

import logging
import os
import pathlib

from filemeta.constants import INVALID_PATH_CHARACTERS
from filemeta.exceptions import InvalidPathError

logger = logging.getLogger(__name__)


def has_traversal(file_path: str) -> bool:
    """Check whether a path still climbs to a parent directory once normalized.

    Args:
        file_path: Path to inspect

    Returns:
        True if a ``..`` segment survives normalization

    Examples:
        >>> has_traversal("../etc/passwd")
        True
        >>> has_traversal("docs/../README.md")
        False
    """
    normalized = os.path.normpath(file_path)
    return ".." in pathlib.PurePath(normalized).parts


def has_invalid_characters(file_path: str) -> bool:
    """Check whether a path contains any of the characters ``< > : " | ? *``."""
    return any(char in INVALID_PATH_CHARACTERS for char in file_path)


def validate_path(file_path) -> str:
    """Validate a file path without touching the filesystem.

    Args:
        file_path: Candidate path, expected to be a non-empty string

    Returns:
        The path, unchanged

    Raises:
        InvalidPathError: If the path is empty, not a string, traverses to a
            parent directory or contains invalid characters
    """
    if not file_path:
        raise InvalidPathError("File path is required")

    if not isinstance(file_path, str):
        raise InvalidPathError("File path must be a string")

    if has_traversal(file_path):
        raise InvalidPathError("File path cannot contain relative path traversal", file_path)

    if has_invalid_characters(file_path):
        raise InvalidPathError("File path contains invalid characters", file_path)

    logger.debug("Validated path %s", file_path)
    return file_path
