"""Tests for size unit conversion."""

import pytest

from filemeta.constants import (
    INVALID_UNIT_MESSAGE,
    UNKNOWN_SIZE_MESSAGE,
    UNSUPPORTED_UNIT_MESSAGE,
)
from filemeta.units import convert_size, describe_size, format_number, is_valid_unit


@pytest.mark.parametrize(
    "unit, expected",
    [
        ("bit", 8192),
        ("bits", 8192),
        ("byte", 1024),
        ("bytes", 1024),
        ("kilobyte", 1),
        ("kilobytes", 1),
        ("megabyte", 1 / 1024),
        ("gigabytes", 1 / (1024 * 1024)),
    ],
)
def test_convert_size(unit, expected):
    assert convert_size(1024, unit) == expected


def test_convert_size_is_case_insensitive():
    assert convert_size(3072, "KILOBYTE") == convert_size(3072, "Kilobyte") == 3


def test_convert_size_unknown_unit():
    assert convert_size(1024, "parsecs") is None


def test_format_number_drops_integral_fraction():
    assert format_number(2.0) == "2"
    assert format_number(1.5) == "1.5"
    assert format_number(16) == "16"


@pytest.mark.parametrize(
    "value, expected",
    [
        (0.0001, "0.0001"),
        (9.5367431640625e-06, "0.0000095367431640625"),
        (1e-06, "0.000001"),
        (1e-07, "1e-7"),
        (9.313225746154785e-10, "9.313225746154785e-10"),
        (1.5e16, "15000000000000000"),
        (1e21, "1e+21"),
    ],
)
def test_format_number_notation(value, expected):
    assert format_number(value) == expected


@pytest.mark.parametrize("unit", ["", "   ", None, 5, ["bytes"]])
def test_is_valid_unit_rejects(unit):
    assert not is_valid_unit(unit)


def test_describe_size_keeps_caller_unit_spelling():
    assert describe_size(1536, "KiloBytes") == "1.5 KiloBytes"


def test_describe_size_advisories():
    assert describe_size(10, "  ") == INVALID_UNIT_MESSAGE
    assert describe_size(0, "bytes") == UNKNOWN_SIZE_MESSAGE
    assert describe_size(10, "parsecs") == UNSUPPORTED_UNIT_MESSAGE
