"""Tests for the strict primitive parsers."""

import math

import pytest

from prop_config.coercion.infrastructure.errors import FormatError
from prop_config.coercion.infrastructure.parsers import (
    parse_boolean,
    parse_double,
    parse_int,
    parse_long,
)


class TestParseInt:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("42", 42), ("+7", 7), ("-3", -3), ("2147483647", 2**31 - 1)],
    )
    def test_valid_values(self, raw: str, expected: int) -> None:
        assert parse_int(raw) == expected

    @pytest.mark.parametrize("raw", ["2147483648", "1_000", " 1", "1.0", "abc", ""])
    def test_invalid_values_raise_format_error(self, raw: str) -> None:
        with pytest.raises(FormatError):
            parse_int(raw)

    def test_error_carries_key(self) -> None:
        with pytest.raises(FormatError) as exc_info:
            parse_int("x", key="port")

        assert exc_info.value.key == "port"
        assert exc_info.value.type_name == "int"


class TestParseLong:
    def test_accepts_values_beyond_32_bits(self) -> None:
        assert parse_long("9223372036854775807") == 2**63 - 1

    def test_rejects_values_beyond_64_bits(self) -> None:
        with pytest.raises(FormatError) as exc_info:
            parse_long("9223372036854775808")

        assert exc_info.value.type_name == "long"


class TestParseDouble:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("1.5", 1.5),
            ("1e3", 1000.0),
            ("-2.5E-1", -0.25),
            (".5", 0.5),
            ("5.", 5.0),
            ("2.5f", 2.5),
            ("7d", 7.0),
            ("-Infinity", float("-inf")),
        ],
    )
    def test_valid_values(self, raw: str, expected: float) -> None:
        assert parse_double(raw) == expected

    def test_nan(self) -> None:
        assert math.isnan(parse_double("NaN"))

    @pytest.mark.parametrize("raw", ["abc", "1.2.3", "nan", "1_0.0", " 1.0", ""])
    def test_invalid_values_raise_format_error(self, raw: str) -> None:
        with pytest.raises(FormatError):
            parse_double(raw)


class TestParseBoolean:
    @pytest.mark.parametrize("raw", ["true", "TRUE", "True"])
    def test_true_in_any_case(self, raw: str) -> None:
        assert parse_boolean(raw) is True

    @pytest.mark.parametrize("raw", ["false", "yes", "1", ""])
    def test_everything_else_is_false(self, raw: str) -> None:
        assert parse_boolean(raw) is False
