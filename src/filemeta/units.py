"""Byte-count conversion between size units."""

from decimal import Decimal

from filemeta.constants import (
    INVALID_UNIT_MESSAGE,
    SIZE_UNITS,
    UNKNOWN_SIZE_MESSAGE,
    UNSUPPORTED_UNIT_MESSAGE,
)


def is_valid_unit(unit) -> bool:
    """Return True if ``unit`` is a non-empty, non-whitespace string."""
    return isinstance(unit, str) and bool(unit.strip())


def convert_size(size_bytes: int, unit: str) -> int | float | None:
    """Convert a byte count to the given unit.

    Args:
        size_bytes: Size in bytes
        unit: Unit name, case-insensitive, singular or plural

    Returns:
        The converted size, or None if the unit is not supported

    Examples:
        >>> convert_size(2048, "Kilobytes")
        2.0
        >>> convert_size(3, "bits")
        24
    """
    factor = SIZE_UNITS.get(unit.lower())
    if factor is None:
        return None
    return size_bytes * factor


def format_number(value: int | float) -> str:
    """Render a converted size for display.

    Integral values lose their ``.0``. Fractions from 1e-6 up to 1e21 are
    written out in full decimal form; anything outside that range uses an
    exponent without zero padding.

    Examples:
        >>> format_number(2.0)
        '2'
        >>> format_number(9.5367431640625e-06)
        '0.0000095367431640625'
        >>> format_number(9.313225746154785e-10)
        '9.313225746154785e-10'
    """
    if not isinstance(value, float):
        return str(value)
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    if 1e-6 <= abs(value) < 1e21:
        return format(Decimal(repr(value)), "f")

    mantissa, _, exponent = repr(value).partition("e")
    return f"{mantissa}e{int(exponent):+d}"


def describe_size(size_bytes: int, unit) -> str:
    """Build the caller-facing size string for a byte count.

    Invalid or unsupported units produce advisory text rather than an error.
    The unit is echoed back exactly as given.

    Args:
        size_bytes: Size in bytes
        unit: Requested unit

    Returns:
        ``"<size> <unit>"`` or one of the advisory messages
    """
    if not is_valid_unit(unit):
        return INVALID_UNIT_MESSAGE
    if not size_bytes:
        return UNKNOWN_SIZE_MESSAGE

    converted = convert_size(size_bytes, unit)
    if converted is None:
        return UNSUPPORTED_UNIT_MESSAGE
    return f"{format_number(converted)} {unit}"
