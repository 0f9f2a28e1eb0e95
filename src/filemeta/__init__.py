"""filemeta: report metadata about a single file.

This package validates a file path and exposes asynchronous accessors for its
creation time, extension, name, size, last-modified date, age and SHA-256
checksum.
"""

from filemeta.cli import main
from filemeta.exceptions import (
    AgeComputationError,
    FileMetadataError,
    InvalidPathError,
    NoExtensionError,
    NoFileNameError,
    NotFoundError,
    ReadError,
    StatError,
)
from filemeta.handler import FileMetadataHandler, compute_age
from filemeta.models import AgeBreakdown, FileMetadata

__version__ = "0.1.0"
__all__ = [
    "main",
    "FileMetadataHandler",
    "compute_age",
    "AgeBreakdown",
    "FileMetadata",
    "FileMetadataError",
    "InvalidPathError",
    "NotFoundError",
    "StatError",
    "NoExtensionError",
    "NoFileNameError",
    "ReadError",
    "AgeComputationError",
]
