"""Rendering of file metadata reports."""

import json

from filemeta.models import AgeBreakdown, FileMetadata
from filemeta.units import convert_size, describe_size

# Largest first; sizes under a kilobyte stay in bytes
DISPLAY_UNITS = [("gigabyte", "GB"), ("megabyte", "MB"), ("kilobyte", "KB")]


def format_size(size_bytes: int) -> str:
    """Format a byte count with the largest unit that keeps it at or above 1.

    Args:
        size_bytes: Size in bytes

    Returns:
        Formatted string like "1.5 MB"
    """
    for unit, label in DISPLAY_UNITS:
        converted = convert_size(size_bytes, unit)
        if converted >= 1:
            return f"{converted:.1f} {label}"
    return f"{size_bytes:.1f} B"


def format_age(age: AgeBreakdown) -> str:
    """Format an age breakdown like "3d 4h 12m"."""
    return f"{age.days}d {age.hours}h {age.minutes}m"


def _rows(meta: FileMetadata, unit: str) -> list[tuple[str, str]]:
    rows = [
        ("Name", meta.name),
        ("Extension", meta.extension or "-"),
        ("Size", f"{describe_size(meta.size, unit)} ({format_size(meta.size)})"),
        ("Created", meta.created.strftime("%Y-%m-%d %H:%M:%S")),
        ("Last Modified", meta.modified.strftime("%Y-%m-%d %H:%M:%S")),
        ("Age", format_age(meta.age)),
    ]
    if meta.checksum:
        rows.append(("SHA-256", meta.checksum))
    return rows


def generate_text(meta: FileMetadata, unit: str = "bytes") -> str:
    """Generate a plain-text report, one field per line.

    Args:
        meta: Metadata to render
        unit: Unit used for the size field

    Returns:
        Report as a string
    """
    rows = _rows(meta, unit)
    width = max(len(label) for label, _ in rows)
    lines = [f"📄 {meta.path}"]
    lines.extend(f"  {label.ljust(width)} : {value}" for label, value in rows)
    return "\n".join(lines) + "\n"


def generate_metadata_table(meta: FileMetadata, unit: str = "bytes") -> str:
    """Generate a markdown table with file metadata.

    Args:
        meta: Metadata to render
        unit: Unit used for the size field

    Returns:
        Markdown-formatted report as a string
    """
    table = f"## 📋 File Metadata: `{meta.path}`\n\n"
    table += "| Field | Value |\n"
    table += "|-------|-------|\n"
    for label, value in _rows(meta, unit):
        if label in ("Name", "Extension", "SHA-256"):
            value = f"`{value}`"
        table += f"| {label} | {value} |\n"
    return table


def generate_json(meta: FileMetadata) -> str:
    """Generate a JSON document with file metadata."""
    return json.dumps(meta.to_dict(), indent=2) + "\n"


def render(meta: FileMetadata, output_format: str = "text", unit: str = "bytes") -> str:
    """Render metadata in the requested format.

    Args:
        meta: Metadata to render
        output_format: One of "text", "markdown" or "json"
        unit: Unit used for the size field of text and markdown output

    Returns:
        Rendered report

    Raises:
        ValueError: If the format is unknown
    """
    if output_format == "text":
        return generate_text(meta, unit)
    if output_format == "markdown":
        return generate_metadata_table(meta, unit)
    if output_format == "json":
        return generate_json(meta)
    raise ValueError(f"Unknown output format: {output_format}")
