"""Data models for filemeta."""

from dataclasses import asdict, dataclass
from datetime import datetime


@dataclass(frozen=True)
class AgeBreakdown:
    """Elapsed time since a file was created.

    Attributes:
        days: Whole days
        hours: Remaining hours (0-23)
        minutes: Remaining minutes (0-59)
    """

    days: int
    hours: int
    minutes: int


@dataclass
class FileMetadata:
    """Metadata for a single file.

    Attributes:
        path: Path the handler was constructed with
        name: Final path segment
        extension: Extension with leading dot, None if the name has none
        size: File size in bytes
        created: Creation (birth) timestamp, local time, no timezone
        modified: Last modification timestamp, local time, no timezone
        age: Time elapsed since creation
        checksum: Optional SHA-256 hex digest of file contents
    """

    path: str
    name: str
    extension: str | None
    size: int
    created: datetime
    modified: datetime
    age: AgeBreakdown
    checksum: str | None = None

    def to_dict(self) -> dict:
        """Return a JSON-serializable dictionary of the metadata."""
        data = asdict(self)
        data["created"] = self.created.isoformat()
        data["modified"] = self.modified.isoformat()
        return data
