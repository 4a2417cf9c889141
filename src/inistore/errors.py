class IniError(Exception):
    """Base class for inistore errors."""


class IniIOError(IniError):
    """Raised when an INI file cannot be read or written."""


class ConversionError(IniError, TypeError):
    """Raised when a value has no string form for storage."""


class InvalidEntryError(IniError, ValueError):
    """Raised when a key or value cannot be written as an INI line."""
