"""Exception hierarchy for filemeta."""


class FileMetadataError(Exception):
    """Base exception class for filemeta.

    Attributes:
        path: The file path the failure refers to, if any
    """

    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.path = path


class InvalidPathError(FileMetadataError, ValueError):
    """Raised when a file path fails lexical validation."""


class NotFoundError(FileMetadataError, FileNotFoundError):
    """Raised when the file does not exist or cannot be accessed."""

    def __init__(self, path: str):
        super().__init__(f"File not found: {path}", path)


class StatError(FileMetadataError, OSError):
    """Raised when a stat call fails after the file was found."""

    def __init__(self, path: str):
        super().__init__(f"Unable to get file stats: {path}", path)


class NoExtensionError(FileMetadataError):
    """Raised when the file name has no extension."""

    def __init__(self, path: str):
        super().__init__("No file extension found", path)


class NoFileNameError(FileMetadataError):
    """Raised when the path has no final name segment."""

    def __init__(self, path: str):
        super().__init__("No file name found", path)


class ReadError(FileMetadataError, OSError):
    """Raised when the file cannot be read while computing a checksum."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Error reading file: {reason}", path)


class AgeComputationError(FileMetadataError):
    """Raised when the age of a file cannot be derived."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Error getting file age: {reason}", path)
