"""Strict primitive parsers shared by the typed getters and the property binder."""

import re

from prop_config.coercion.infrastructure.errors import FormatError

_INTEGER_PATTERN = re.compile(r"[+-]?\d+")
_FLOAT_PATTERN = re.compile(
    r"[+-]?(?:NaN|Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)[fFdD]?"
)

_INT_MIN, _INT_MAX = -(2**31), 2**31 - 1
_LONG_MIN, _LONG_MAX = -(2**63), 2**63 - 1


def parse_int(raw: str, key: str | None = None) -> int:
    """Parse a signed decimal integer that fits in 32 bits."""
    return _parse_bounded(
        raw=raw, key=key, low=_INT_MIN, high=_INT_MAX, type_name="int"
    )


def parse_long(raw: str, key: str | None = None) -> int:
    """Parse a signed decimal integer that fits in 64 bits."""
    return _parse_bounded(
        raw=raw, key=key, low=_LONG_MIN, high=_LONG_MAX, type_name="long"
    )


def parse_double(raw: str, key: str | None = None) -> float:
    """
    Parse a decimal or exponent-notation float.

    Accepts ``NaN``, ``Infinity`` (optionally signed) and a trailing
    ``f``/``d`` type suffix. Surrounding whitespace and ``_`` separators are
    rejected.
    """
    if not _FLOAT_PATTERN.fullmatch(raw):
        raise FormatError(value=raw, type_name="double", key=key)
    return float(raw.rstrip("fFdD"))


def parse_boolean(raw: str) -> bool:
    """Case-insensitive ``"true"`` is True; every other value is False."""
    return raw.lower() == "true"


def _parse_bounded(
    raw: str, key: str | None, low: int, high: int, type_name: str
) -> int:
    if not _INTEGER_PATTERN.fullmatch(raw):
        raise FormatError(value=raw, type_name=type_name, key=key)
    value = int(raw)
    if not low <= value <= high:
        raise FormatError(value=raw, type_name=type_name, key=key)
    return value
