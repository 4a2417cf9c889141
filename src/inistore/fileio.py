"""Whole-file text I/O used by :class:`inistore.IniFile`."""
from __future__ import annotations

import codecs
import logging
import os
from contextlib import suppress
from pathlib import Path

from chardet import detect as guess_codec

from .errors import IniIOError

logger = logging.getLogger(__name__)

DEFAULT_ENCODING = "utf-8"


def default_encoding() -> str:
    return os.getenv("INISTORE_ENCODING", DEFAULT_ENCODING)


def resolve_encoding(encoding: str | None) -> str:
    """Return the codec name to use, raising IniIOError for unknown codecs."""
    name = encoding or default_encoding()
    try:
        return codecs.lookup(name).name
    except LookupError as exc:
        raise IniIOError(str(exc)) from exc


def _decode(raw: bytes, encoding: str) -> str:
    try:
        return raw.decode(encoding)
    except UnicodeDecodeError:
        pass
    codec = guess_codec(raw)
    if codec.get("encoding") is None or codec.get("confidence", 0) < 0.8:
        codec = {"encoding": "latin-1"}
    logger.debug("falling back to %s for undecodable text", codec["encoding"])
    try:
        return raw.decode(codec["encoding"])
    except (UnicodeDecodeError, LookupError):
        return raw.decode("latin-1")


def read_file_to_string(path: str | os.PathLike[str], encoding: str | None = None) -> str:
    """Return the contents of *path* as text.

    Text that does not decode with *encoding* is decoded with a detected
    codec instead.
    """
    try:
        raw = Path(path).read_bytes()
    except OSError as exc:
        raise IniIOError(str(exc)) from exc
    return _decode(raw, resolve_encoding(encoding))


def write_string_to_file(
    path: str | os.PathLike[str], text: str, encoding: str | None = None
) -> None:
    codec = resolve_encoding(encoding)
    path = Path(path)
    tmp = path.with_suffix(path.suffix + ".tmp")
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with tmp.open("w", encoding=codec, newline="\n") as fh:
            fh.write(text)
        tmp.replace(path)
    except (OSError, UnicodeEncodeError, LookupError) as exc:
        with suppress(OSError):
            tmp.unlink(missing_ok=True)
        raise IniIOError(str(exc)) from exc
