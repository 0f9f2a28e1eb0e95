"""Command-line interface for filemeta."""

import argparse
import asyncio
import sys

from tqdm import tqdm

from filemeta.constants import DEFAULT_UNIT
from filemeta.exceptions import FileMetadataError
from filemeta.handler import FileMetadataHandler
from filemeta.logging_config import setup_logging
from filemeta.models import FileMetadata
from filemeta.output_generators import render


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the filemeta CLI."""
    parser = argparse.ArgumentParser(
        prog="filemeta",
        description=(
            "Report creation time, extension, name, size, last-modified date, "
            "age and SHA-256 checksum of a file."
        ),
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("path", help="The file to inspect.")
    parser.add_argument(
        "-u",
        "--unit",
        default=DEFAULT_UNIT,
        help="Size unit: bit, byte, kilobyte, megabyte or gigabyte (singular or plural).",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=["text", "markdown", "json"],
        default="text",
        help="Output format.",
    )
    parser.add_argument(
        "--checksum",
        action="store_true",
        help="Include the SHA-256 checksum of the file (reads the whole file).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show debug logging on stderr.",
    )
    return parser


async def collect(handler: FileMetadataHandler, include_checksum: bool) -> FileMetadata:
    """Collect metadata, showing a progress bar while hashing.

    Args:
        handler: Handler for the target file
        include_checksum: Whether to compute the SHA-256 checksum

    Returns:
        FileMetadata for the file
    """
    if not include_checksum:
        return await handler.describe()
    with tqdm(desc="Hashing", unit="B", unit_scale=True, leave=False) as pbar:
        return await handler.describe(include_checksum=True, progress=pbar.update)


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the filemeta CLI."""
    args = build_parser().parse_args(argv)
    setup_logging(log_level="DEBUG" if args.verbose else None)

    try:
        handler = FileMetadataHandler(args.path)
        meta = asyncio.run(collect(handler, args.checksum))
    except FileMetadataError as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        return 1

    sys.stdout.write(render(meta, args.format, args.unit))
    return 0


if __name__ == "__main__":
    sys.exit(main())
