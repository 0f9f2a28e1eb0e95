"""Asynchronous metadata queries against a single file."""

import asyncio
import hashlib
import logging
import os
from collections.abc import Callable
from datetime import datetime, timedelta

import aiofiles
import aiofiles.os

from filemeta.constants import (
    CHUNK_SIZE,
    DEFAULT_UNIT,
    INVALID_UNIT_MESSAGE,
    MS_PER_DAY,
    MS_PER_HOUR,
    MS_PER_MINUTE,
)
from filemeta.exceptions import (
    AgeComputationError,
    FileMetadataError,
    NoExtensionError,
    NoFileNameError,
    NotFoundError,
    ReadError,
    StatError,
)
from filemeta.models import AgeBreakdown, FileMetadata
from filemeta.units import describe_size, is_valid_unit
from filemeta.validation import validate_path

logger = logging.getLogger(__name__)


def compute_age(created: datetime, now: datetime) -> AgeBreakdown:
    """Break the time between two timestamps into days, hours and minutes.

    Args:
        created: Earlier timestamp
        now: Later timestamp

    Returns:
        AgeBreakdown with floor-divided components. A negative span counts as zero.

    Examples:
        >>> compute_age(datetime(2024, 1, 1), datetime(2024, 1, 2, 1, 1, 1))
        AgeBreakdown(days=1, hours=1, minutes=1)
    """
    elapsed_ms = max((now - created) // timedelta(milliseconds=1), 0)
    return AgeBreakdown(
        days=elapsed_ms // MS_PER_DAY,
        hours=(elapsed_ms % MS_PER_DAY) // MS_PER_HOUR,
        minutes=(elapsed_ms % MS_PER_HOUR) // MS_PER_MINUTE,
    )


class FileMetadataHandler:
    """Reports metadata for one file.

    The path is validated when the handler is built and cannot be changed
    afterwards. Every accessor checks that the file exists before querying it,
    and no file handles are kept open between calls.

    Args:
        file_path: Path to the file

    Raises:
        InvalidPathError: If the path fails validation
    """

    def __init__(self, file_path: str):
        self._file_path = validate_path(file_path)

    @property
    def file_path(self) -> str:
        return self._file_path

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._file_path!r})"

    async def _ensure_exists(self) -> None:
        if not await aiofiles.os.path.exists(self._file_path):
            raise NotFoundError(self._file_path)

    async def _stat(self) -> os.stat_result:
        await self._ensure_exists()
        try:
            stat = await aiofiles.os.stat(self._file_path)
        except OSError as e:
            raise StatError(self._file_path) from e
        logger.debug("Stat %s: size=%d mtime=%s", self._file_path, stat.st_size, stat.st_mtime)
        return stat

    def _to_datetime(self, timestamp: float) -> datetime:
        try:
            return datetime.fromtimestamp(timestamp)
        except (OverflowError, ValueError, OSError) as e:
            raise StatError(self._file_path) from e

    async def get_file_creation_time(self) -> datetime:
        """Get the creation (birth) time of the file.

        Falls back to ``st_ctime`` on platforms whose stat does not report a
        birth time, such as Linux. There ``st_ctime`` is the inode change time:
        writing to the file or changing its permissions or owner moves it, and
        with it the age reported by :meth:`get_file_age`.

        Raises:
            NotFoundError: If the file does not exist
            StatError: If the stat call fails or the timestamp is out of range
        """
        stat = await self._stat()
        birthtime = getattr(stat, "st_birthtime", None)
        if birthtime is None:
            logger.debug("No birth time for %s, using ctime", self._file_path)
            birthtime = stat.st_ctime
        return self._to_datetime(birthtime)

    async def get_file_extension(self) -> str:
        """Get the file extension, including the leading dot.

        Raises:
            NotFoundError: If the file does not exist
            NoExtensionError: If the file name has no extension
        """
        await self._ensure_exists()
        extension = os.path.splitext(self._file_path)[1]
        if not extension:
            raise NoExtensionError(self._file_path)
        return extension

    async def get_file_name(self) -> str:
        """Get the final segment of the path.

        Raises:
            NotFoundError: If the file does not exist
            NoFileNameError: If the path ends with a separator
        """
        await self._ensure_exists()
        file_name = os.path.basename(self._file_path)
        if not file_name:
            raise NoFileNameError(self._file_path)
        return file_name

    async def get_file_size(self, unit: str = DEFAULT_UNIT) -> str:
        """Get the file size expressed in ``unit``.

        An invalid or unsupported unit, or an empty file, yields an advisory
        string instead of an error.

        Args:
            unit: One of bit, byte, kilobyte, megabyte or gigabyte, singular or
                plural, any case

        Returns:
            ``"<size> <unit>"`` or an advisory message

        Raises:
            NotFoundError: If the file does not exist
            StatError: If the stat call fails
        """
        if not is_valid_unit(unit):
            return INVALID_UNIT_MESSAGE
        stat = await self._stat()
        return describe_size(stat.st_size, unit)

    async def get_last_modified_date(self) -> datetime:
        """Get the last modification time of the file.

        Raises:
            NotFoundError: If the file does not exist
            StatError: If the stat call fails or the timestamp is out of range
        """
        stat = await self._stat()
        return self._to_datetime(stat.st_mtime)

    async def get_file_age(self) -> AgeBreakdown:
        """Get the time elapsed since the file was created.

        Raises:
            AgeComputationError: If the file is missing or its creation time
                cannot be read
        """
        try:
            await self._ensure_exists()
            created = await self.get_file_creation_time()
        except FileMetadataError as e:
            raise AgeComputationError(self._file_path, str(e)) from e
        return compute_age(created, datetime.now())

    async def compute_checksum(self, progress: Callable[[int], object] | None = None) -> str:
        """Compute the SHA-256 digest of the file contents.

        The file is read in chunks so it is never held in memory at once.

        Args:
            progress: Optional callable receiving the size of each chunk read

        Returns:
            Lowercase hexadecimal digest

        Raises:
            NotFoundError: If the file does not exist
            ReadError: If the file cannot be opened or read
        """
        await self._ensure_exists()
        hash_sha256 = hashlib.sha256()
        try:
            async with aiofiles.open(self._file_path, "rb") as f:
                while chunk := await f.read(CHUNK_SIZE):
                    hash_sha256.update(chunk)
                    if progress is not None:
                        progress(len(chunk))
        except OSError as e:
            raise ReadError(self._file_path, str(e)) from e

        digest = hash_sha256.hexdigest()
        logger.debug("SHA-256 of %s: %s", self._file_path, digest)
        return digest

    async def _extension_or_none(self) -> str | None:
        try:
            return await self.get_file_extension()
        except NoExtensionError:
            return None

    async def describe(
        self,
        include_checksum: bool = False,
        progress: Callable[[int], object] | None = None,
    ) -> FileMetadata:
        """Collect every piece of metadata into a single report.

        Args:
            include_checksum: Whether to compute the SHA-256 digest
            progress: Passed through to :meth:`compute_checksum`

        Returns:
            FileMetadata for the file
        """
        name, extension, stat, created, modified, age = await asyncio.gather(
            self.get_file_name(),
            self._extension_or_none(),
            self._stat(),
            self.get_file_creation_time(),
            self.get_last_modified_date(),
            self.get_file_age(),
        )
        checksum = await self.compute_checksum(progress) if include_checksum else None

        return FileMetadata(
            path=self._file_path,
            name=name,
            extension=extension,
            size=stat.st_size,
            created=created,
            modified=modified,
            age=age,
            checksum=checksum,
        )
