"""Classification and parsing of single INI lines."""
from __future__ import annotations

from enum import Enum

COMMENT_PREFIXES = ("#", ";")
# Patch and cheat code lines are stored verbatim rather than as entries.
RAW_LINE_PREFIXES = ("$", "+", "*")


class LineKind(Enum):
    BLANK = "blank"
    COMMENT = "comment"
    SECTION = "section"
    ENTRY = "entry"


def is_comment(line: str) -> bool:
    return line.lstrip().startswith(COMMENT_PREFIXES)


def is_raw_line(line: str) -> bool:
    return line.startswith(RAW_LINE_PREFIXES)


def parse_section_header(line: str) -> str | None:
    """Return the section name if *line* is a ``[name]`` header.

    Text after the closing bracket is ignored, so ``[Core] ; main`` is still
    the ``Core`` header.  A line with an opening bracket but no closing one is
    not a header.
    """
    stripped = line.strip()
    if not stripped.startswith("["):
        return None
    end = stripped.find("]")
    if end == -1:
        return None
    return stripped[1:end].strip()


def classify(line: str) -> LineKind:
    if not line.strip():
        return LineKind.BLANK
    if is_comment(line):
        return LineKind.COMMENT
    if parse_section_header(line) is not None:
        return LineKind.SECTION
    return LineKind.ENTRY


def strip_quotes(value: str) -> str:
    if len(value) >= 2 and value[0] == '"' and value[-1] == '"':
        return value[1:-1]
    return value


def quote_value(value: str) -> str:
    """Quote *value* when reading it back would otherwise change it."""
    if value != value.strip() or (len(value) >= 2 and value[0] == value[-1] == '"'):
        return f'"{value}"'
    return value


def parse_line(line: str) -> tuple[str, str]:
    """Split an assignment line into ``(key, value)``.

    Blank and comment lines give ``("", "")``.  The line is split on the first
    ``=``; both halves are trimmed and one pair of double quotes around the
    value is removed.  A line without ``=`` is a key with an empty value.
    """
    if not line.strip() or is_comment(line):
        return "", ""
    key, sep, value = line.partition("=")
    if not sep:
        return key.strip(), ""
    return key.strip(), strip_quotes(value.strip())
