from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Iterator
from typing import Any

from .errors import IniIOError, InvalidEntryError
from .fileio import read_file_to_string, write_string_to_file
from .lines import (
    LineKind,
    classify,
    is_comment,
    is_raw_line,
    parse_line,
    parse_section_header,
    quote_value,
)
from .section import _UNSET, Lookup, Section

logger = logging.getLogger(__name__)

_BOM = "\ufeff"

PathLike = str | os.PathLike[str]


def _is_line_body(body: list[str]) -> bool:
    """Tell whether a section body holds raw code lines rather than entries.

    It does when a patch or code marker line is present and no non-comment
    line is an assignment.
    """
    entries = [line for line in body if line.strip() and not is_comment(line)]
    return any(is_raw_line(line) for line in entries) and not any(
        "=" in line for line in entries
    )


class IniFile:
    """An INI document: an ordered collection of uniquely named sections."""

    def __init__(self, encoding: str | None = None) -> None:
        self.encoding = encoding
        self._sections: list[Section] = []

    # ----- section access -----

    @property
    def sections(self) -> tuple[Section, ...]:
        return tuple(self._sections)

    def get_section(self, name: str) -> Section | None:
        folded = name.lower()
        for section in self._sections:
            if section.name.lower() == folded:
                return section
        return None

    def get_or_create_section(self, name: str) -> Section:
        section = self.get_section(name)
        if section is None:
            section = Section(name)
            self._sections.append(section)
        return section

    def has_section(self, name: str) -> bool:
        return self.get_section(name) is not None

    def delete_section(self, name: str) -> bool:
        section = self.get_section(name)
        if section is None:
            return False
        self._sections.remove(section)
        return True

    def sort_sections(self) -> None:
        self._sections.sort()

    def clear(self) -> None:
        self._sections.clear()

    def __contains__(self, name: str) -> bool:
        return self.has_section(name)

    def __iter__(self) -> Iterator[Section]:
        return iter(list(self._sections))

    def __len__(self) -> int:
        return len(self._sections)

    # ----- keys and values -----

    def exists(self, section_name: str, key: str) -> bool:
        section = self.get_section(section_name)
        return section is not None and section.exists(key)

    def get(
        self,
        section_name: str,
        key: str,
        default: Any = None,
        kind: type | None = None,
    ) -> Lookup:
        """Look up *key* in *section_name* without creating the section."""
        section = self.get_section(section_name)
        if section is None:
            return Section().get(key, default, kind)
        return section.get(key, default, kind)

    def set(self, section_name: str, key: str, value: Any, default: Any = _UNSET) -> None:
        self.get_or_create_section(section_name).set(key, value, default)

    def get_keys(self, section_name: str) -> list[str]:
        section = self.get_section(section_name)
        return [] if section is None else section.keys()

    def delete_key(self, section_name: str, key: str) -> bool:
        section = self.get_section(section_name)
        return section is not None and section.delete(key)

    def set_lines(self, section_name: str, lines: Iterable[str]) -> None:
        self.get_or_create_section(section_name).set_lines(lines)

    def get_lines(self, section_name: str, remove_comments: bool = True) -> list[str] | None:
        section = self.get_section(section_name)
        if section is None:
            return None
        return section.get_lines(remove_comments)

    # ----- parsing -----

    def load(self, path: PathLike, keep_current_data: bool = False) -> bool:
        """Load sections and keys from *path*.

        With *keep_current_data* the file amends what is already loaded:
        existing sections gain or overwrite keys and keep the rest.  This is
        how a defaults file and a user file are layered.  Otherwise the
        current data is replaced, but only once the file has been read.
        """
        try:
            text = read_file_to_string(path, self.encoding)
        except IniIOError as exc:
            logger.warning("Failed to read config %s: %s", path, exc)
            return False
        self.loads(text, keep_current_data)
        return True

    def load_layers(self, paths: Iterable[PathLike]) -> bool:
        """Load *paths* in order, each one amending the previous ones."""
        ok = True
        keep = False
        for path in paths:
            if self.load(path, keep_current_data=keep):
                keep = True
            else:
                ok = False
        return ok

    def loads(self, text: str, keep_current_data: bool = False) -> None:
        if not keep_current_data:
            self.clear()
        if text.startswith(_BOM):
            text = text[len(_BOM):]
        current: Section | None = None
        body: list[str] = []
        for line in text.replace("\r\n", "\n").split("\n"):
            name = parse_section_header(line)
            if name is not None:
                if current is not None:
                    self._fill(current, body)
                current = self.get_or_create_section(name)
                body = []
            elif current is not None:
                body.append(line)
            elif line.strip():
                logger.debug("ignoring line outside any section: %r", line)
        if current is not None:
            self._fill(current, body)

    @staticmethod
    def _fill(section: Section, body: list[str]) -> None:
        while body and not body[-1].strip():
            body.pop()
        if _is_line_body(body):
            section.add_lines(body)
            return
        for line in body:
            kind = classify(line)
            if kind in (LineKind.BLANK, LineKind.COMMENT):
                continue
            if line.lstrip().startswith("["):
                logger.debug("ignoring malformed section header: %r", line)
                continue
            key, value = parse_line(line)
            if not key:
                logger.debug("ignoring line without a key: %r", line)
                continue
            try:
                section.set(key, value)
            except InvalidEntryError as exc:
                logger.debug("ignoring line %r: %s", line, exc)

    # ----- serialising -----

    def dumps(self) -> str:
        out: list[str] = []
        for section in self._sections:
            if section.has_lines():
                out.append(f"[{section.name}]")
                out.extend(section.get_lines(remove_comments=False))
            elif len(section):
                out.append(f"[{section.name}]")
                out.extend(f"{k} = {quote_value(v)}" for k, v in section.items())
        return "".join(f"{line}\n" for line in out)

    def save(self, path: PathLike) -> bool:
        try:
            write_string_to_file(path, self.dumps(), self.encoding)
        except IniIOError as exc:
            logger.warning("Failed to write config %s: %s", path, exc)
            return False
        return True

    def __repr__(self) -> str:
        return f"IniFile({[s.name for s in self._sections]!r})"
