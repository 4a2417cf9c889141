from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, NamedTuple

from .convert import try_parse, value_to_string
from .errors import InvalidEntryError
from .lines import COMMENT_PREFIXES, is_comment


class Lookup(NamedTuple):
    """Result of a lookup: whether the stored value was usable, and the value.

    ``found`` is ``False`` both for a missing key and for a value that does
    not parse as the requested type; ``value`` is then the caller's default.
    """

    found: bool
    value: Any


_UNSET: Any = object()


def _check_entry(key: str, text: str) -> None:
    if (
        not key
        or key != key.strip()
        or key.startswith(("[", *COMMENT_PREFIXES))
        or any(ch in key for ch in "=\r\n")
    ):
        raise InvalidEntryError(f"Key {key!r} cannot be stored in an INI file")
    if "\n" in text or "\r" in text:
        raise InvalidEntryError(f"Value for {key!r} spans more than one line")


class Section:
    """A named group of key/value pairs, or of raw lines.

    Keys compare case-insensitively.  Entries keep insertion order and the
    spelling the key was first set with.
    """

    def __init__(self, name: str = "") -> None:
        self._name = name
        self._values: dict[str, tuple[str, str]] = {}
        self._lines: list[str] = []

    @property
    def name(self) -> str:
        return self._name

    def exists(self, key: str) -> bool:
        return key.lower() in self._values

    __contains__ = exists

    def delete(self, key: str) -> bool:
        return self._values.pop(key.lower(), None) is not None

    def set(self, key: str, value: Any, default: Any = _UNSET) -> None:
        """Store *value* under *key*.

        With *default* given, a value equal to it removes the key instead so
        that saved files only carry non-default settings.  ``None`` removes
        the key as well.  Keys or values that would not read back unchanged
        raise :class:`InvalidEntryError`.
        """
        if value is None or (default is not _UNSET and value == default):
            self.delete(key)
            return
        text = value_to_string(value)
        _check_entry(key, text)
        folded = key.lower()
        current = self._values.get(folded)
        self._values[folded] = (current[0] if current else key, text)

    def get(self, key: str, default: Any = None, kind: type | None = None) -> Lookup:
        if kind is None:
            kind = str if default is None else type(default)
        if default is None and kind is str:
            default = ""
        entry = self._values.get(key.lower())
        if entry is None:
            return Lookup(False, default)
        parsed = try_parse(entry[1], kind)
        if parsed is None:
            return Lookup(False, default)
        return Lookup(True, parsed)

    # ----- typed helper getters -----

    def get_str(self, key: str, default: str = "") -> str:
        return self.get(key, default, str).value

    def get_bool(self, key: str, default: bool = False) -> bool:
        return self.get(key, default, bool).value

    def get_int(self, key: str, default: int = 0) -> int:
        return self.get(key, default, int).value

    def get_float(self, key: str, default: float = 0.0) -> float:
        return self.get(key, default, float).value

    def get_list(self, key: str, default: list[str] | None = None) -> list[str]:
        return self.get(key, [] if default is None else default, list).value

    # ----- line payload -----

    def set_lines(self, lines: Iterable[str]) -> None:
        self._lines = list(lines)

    def get_lines(self, remove_comments: bool = True) -> list[str] | None:
        """Return the raw lines, or ``None`` if the section has none."""
        if not self._lines:
            return None
        if remove_comments:
            return [line for line in self._lines if not is_comment(line)]
        return list(self._lines)

    def has_lines(self) -> bool:
        return bool(self._lines)

    def add_lines(self, lines: Iterable[str]) -> None:
        self._lines.extend(lines)

    # ----- views -----

    def keys(self) -> list[str]:
        return [k for k, _ in self._values.values()]

    def items(self) -> list[tuple[str, str]]:
        return list(self._values.values())

    def values(self) -> dict[str, str]:
        return dict(self._values.values())

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def __len__(self) -> int:
        return len(self._values)

    def __bool__(self) -> bool:
        return True

    def __lt__(self, other: Section) -> bool:
        return self._name.lower() < other._name.lower()

    def __repr__(self) -> str:
        if self._lines:
            return f"Section({self._name!r}, lines={len(self._lines)})"
        return f"Section({self._name!r}, {self.values()!r})"
