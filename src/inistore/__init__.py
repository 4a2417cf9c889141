from .convert import try_parse, value_to_string
from .document import IniFile
from .errors import ConversionError, IniError, IniIOError, InvalidEntryError
from .lines import LineKind, classify, parse_line
from .section import Lookup, Section


__all__ = [
    "IniFile",
    "Section",
    "Lookup",
    "IniError",
    "IniIOError",
    "ConversionError",
    "InvalidEntryError",
    "LineKind",
    "classify",
    "parse_line",
    "try_parse",
    "value_to_string",
]
