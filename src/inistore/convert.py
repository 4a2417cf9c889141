"""Conversion between stored strings and Python values."""
from __future__ import annotations

import re
from collections.abc import Sequence
from enum import Enum
from typing import Any

from .errors import ConversionError

TRUE_TOKENS = frozenset({"true", "yes", "on", "1"})
FALSE_TOKENS = frozenset({"false", "no", "off", "0"})

_INT_RX = re.compile(r"[+-]?(?:0[xX][0-9a-fA-F]+|[0-9]+)")


def value_to_string(value: Any) -> str:
    """Return the canonical stored form of *value*.

    ``bool`` is checked before ``int`` since it is a subclass.  Floats use
    ``repr`` which is the shortest text that parses back to the same bits.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, Enum):
        return value.name
    if isinstance(value, bool):
        return "True" if value else "False"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return repr(value)
    if isinstance(value, Sequence) and all(isinstance(v, str) for v in value):
        return ",".join(value)
    raise ConversionError(f"Cannot store value of type {type(value).__name__}")


def parse_bool(text: str) -> bool | None:
    lower = text.strip().lower()
    if lower in TRUE_TOKENS:
        return True
    if lower in FALSE_TOKENS:
        return False
    return None


def parse_int(text: str) -> int | None:
    text = text.strip()
    if not _INT_RX.fullmatch(text):
        return None
    sign = -1 if text.startswith("-") else 1
    digits = text.lstrip("+-")
    if digits[:2].lower() == "0x":
        return sign * int(digits[2:], 16)
    return sign * int(digits)


def parse_float(text: str) -> float | None:
    try:
        return float(text)
    except ValueError:
        return None


def parse_enum(text: str, kind: type[Enum]) -> Enum | None:
    text = text.strip()
    for member in kind:
        if member.name.lower() == text.lower():
            return member
    for member in kind:
        if value_to_string(member.value) == text:
            return member
    return None


def parse_list(text: str) -> list[str]:
    return [item.strip() for item in text.split(",") if item.strip()]


def try_parse(text: str, kind: type) -> Any:
    """Parse *text* as *kind*, returning ``None`` when it does not fit."""
    if kind is str:
        return text
    if kind is bool:
        return parse_bool(text)
    if isinstance(kind, type) and issubclass(kind, Enum):
        return parse_enum(text, kind)
    if kind is int:
        return parse_int(text)
    if kind is float:
        return parse_float(text)
    if kind in (list, tuple):
        return kind(parse_list(text))
    raise ConversionError(f"Unsupported type {kind!r}")
