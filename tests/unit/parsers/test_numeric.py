import math

import pytest

from ghuser_kit.parsers.numeric import parse_float_prefix


class TestParseFloatPrefix:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("1", 1.0),
            ("-2.5", -2.5),
            ("+3", 3.0),
            (".5", 0.5),
            ("5.", 5.0),
            ("1e3", 1000.0),
            ("2E-2", 0.02),
            ("  42", 42.0),
            ("\t7\n", 7.0),
        ],
    )
    def test_plain_numbers(self, text: str, expected: float) -> None:
        assert parse_float_prefix(text) == pytest.approx(expected)

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("12abc", 12.0),
            ("1x", 1.0),
            ("3.14.15", 3.14),
            ("1e5x", 100000.0),
            ("1e", 1.0),
            ("1e+", 1.0),
            ("0x10", 0.0),
            ("7 apples", 7.0),
        ],
    )
    def test_trailing_garbage_is_ignored(self, text: str, expected: float) -> None:
        assert parse_float_prefix(text) == pytest.approx(expected)

    @pytest.mark.parametrize(
        "text", ["", "abc", ".", "-", "+", "e5", "x1", "NaN", "inf", " ", "$5"]
    )
    def test_no_numeric_prefix(self, text: str) -> None:
        assert parse_float_prefix(text) is None

    def test_infinity(self) -> None:
        assert parse_float_prefix("Infinity") == math.inf
        assert parse_float_prefix("-Infinityx") == -math.inf

    def test_leading_bom_and_nbsp_are_skipped(self) -> None:
        assert parse_float_prefix("\ufeff\u00a09") == 9.0
