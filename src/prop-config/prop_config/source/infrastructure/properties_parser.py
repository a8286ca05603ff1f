"""Properties-file parser — ``key=value`` lines, comments, continuations and escapes."""

import re
import string
from pathlib import Path

from prop_config.source.infrastructure.errors import ParseFailureError

_NATURAL_LINE_BREAK = re.compile(r"\r\n|\r|\n")
_BLANKS = " \t\f"
_SEPARATORS = "=:"
_COMMENT_MARKERS = "#!"
_SIMPLE_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}


def read_entries(path: Path) -> dict[str, str]:
    """
    Read a UTF-8 properties file and return its entries with every value trimmed.

    Raises:
        ParseFailureError: if the file cannot be read or decoded, or contains
            a malformed ``\\uxxxx`` escape.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ParseFailureError(name=str(path), reason=str(exc)) from exc

    entries = parse_properties(text=text, name=str(path))
    return {key: value.strip() for key, value in entries.items()}


def parse_properties(text: str, name: str = "<string>") -> dict[str, str]:
    """
    Parse properties-file text into a key/value dict. Later duplicate keys win.

    Values are returned exactly as decoded; trimming is left to the caller.

    Raises:
        ParseFailureError: if a ``\\uxxxx`` escape is malformed.
    """
    entries: dict[str, str] = {}
    for line in _logical_lines(text=text):
        key, value = _split_entry(line=line, name=name)
        entries[key] = value
    return entries


def _logical_lines(text: str) -> list[str]:
    """Join continued natural lines and drop blank and comment lines."""
    logical: list[str] = []
    pending: list[str] | None = None

    for natural in _NATURAL_LINE_BREAK.split(text):
        stripped = natural.lstrip(_BLANKS)
        if pending is None and (not stripped or stripped[0] in _COMMENT_MARKERS):
            continue

        parts = pending if pending is not None else []
        if _is_continued(stripped):
            parts.append(stripped[:-1])
            pending = parts
            continue

        parts.append(stripped)
        logical.append("".join(parts))
        pending = None

    if pending is not None:
        logical.append("".join(pending))
    return logical


def _is_continued(line: str) -> bool:
    """A line continues when it ends with an odd number of backslashes."""
    trailing = len(line) - len(line.rstrip("\\"))
    return trailing % 2 == 1


def _split_entry(line: str, name: str) -> tuple[str, str]:
    key_end = len(line)
    value_start = len(line)
    has_separator = False
    escaped = False

    for index, char in enumerate(line):
        if escaped:
            escaped = False
        elif char == "\\":
            escaped = True
        elif char in _SEPARATORS or char in _BLANKS:
            key_end = index
            value_start = index + 1
            has_separator = char in _SEPARATORS
            break

    while value_start < len(line):
        char = line[value_start]
        if char not in _BLANKS:
            if has_separator or char not in _SEPARATORS:
                break
            has_separator = True
        value_start += 1

    key = _unescape(raw=line[:key_end], name=name)
    value = _unescape(raw=line[value_start:], name=name)
    return key, value


def _unescape(raw: str, name: str) -> str:
    decoded: list[str] = []
    index = 0
    while index < len(raw):
        char = raw[index]
        index += 1
        if char != "\\":
            decoded.append(char)
            continue
        if index >= len(raw):
            break

        char = raw[index]
        index += 1
        if char == "u":
            digits = raw[index : index + 4]
            if len(digits) != 4 or any(d not in string.hexdigits for d in digits):
                raise ParseFailureError(
                    name=name, reason=f"malformed \\uxxxx encoding: \\u{digits}"
                )
            decoded.append(chr(int(digits, 16)))
            index += 4
        else:
            decoded.append(_SIMPLE_ESCAPES.get(char, char))
    return "".join(decoded)
