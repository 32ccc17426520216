"""Tests for numeric coercion."""

import math

import pytest


class TestToNumber:
    """Test to_number."""

    @pytest.mark.parametrize("text,expected", [
        ("42", 42),
        ("-7", -7),
        ("+3", 3),
        ("3.5", 3.5),
        (".5", 0.5),
        ("5.", 5.0),
        ("1e3", 1000.0),
        ("-1.5E-2", -0.015),
        ("  12  ", 12),
        ("007", 7),
    ])
    def test_decimal_literals(self, text, expected):
        from arrays.safety.coerce import to_number

        assert to_number(text) == expected

    def test_integral_is_int(self):
        from arrays.safety.coerce import to_number

        assert isinstance(to_number("42"), int)
        assert isinstance(to_number("42.0"), float)

    def test_blank_is_zero(self):
        from arrays.safety.coerce import to_number

        assert to_number("") == 0
        assert to_number("   ") == 0
        assert to_number("\n\t") == 0

    @pytest.mark.parametrize("text", [
        "abc", "NaN", "inf", "1_000", "12px", "1,5", "--1", "0x", "0b2", "- 1",
        "\u0663", "\uff14\uff12", "1\u0663", "0x0x1", "0b0b1", "0o0o7", "0x_1",
    ])
    def test_not_numeric(self, text):
        from arrays.safety.coerce import to_number

        assert to_number(text) == 0

    def test_custom_default(self):
        from arrays.safety.coerce import to_number

        assert to_number("abc", default=-1) == -1

    def test_prefixed_integers(self):
        from arrays.safety.coerce import to_number

        assert to_number("0x1f") == 31
        assert to_number("0B101") == 5
        assert to_number("0o17") == 15
        assert to_number("-0x1f") == 0

    def test_infinity(self):
        from arrays.safety.coerce import to_number

        assert to_number("Infinity") == math.inf
        assert to_number("-Infinity") == -math.inf
        assert to_number("infinity") == 0

    def test_non_string(self):
        from arrays.safety.coerce import to_number

        assert to_number(None) == 0
        assert to_number(5) == 5


class TestFormatNumber:
    """Test format_number."""

    @pytest.mark.parametrize("value,expected", [
        (6, "6"),
        (-2, "-2"),
        (6.0, "6"),
        (1.5, "1.5"),
        (-0.5, "-0.5"),
        (0.1 + 0.2, "0.30000000000000004"),
        (-0.0, "0"),
        (1e16, "10000000000000000"),
        (1e21, "1e+21"),
        (1.5e-7, "1.5e-7"),
        (0.000001, "0.000001"),
        (0.00001, "0.00001"),
        (10 ** 21, "1e+21"),
        (-(10 ** 22), "-1e+22"),
        (10 ** 21 - 1, "999999999999999999999"),
    ])
    def test_render(self, value, expected):
        from arrays.safety.coerce import format_number

        assert format_number(value) == expected

    def test_non_finite(self):
        from arrays.safety.coerce import format_number

        assert format_number(math.inf) == "Infinity"
        assert format_number(-math.inf) == "-Infinity"
        assert format_number(math.nan) == "NaN"

    def test_huge_int_is_infinity(self):
        from arrays.safety.coerce import format_number

        assert format_number(10 ** 400) == "Infinity"
