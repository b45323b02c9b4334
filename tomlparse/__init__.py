"""
tomlparse - TOML parser with a TOML-to-JSON command line tool.

Usage:
    >>> import tomlparse
    >>> doc = tomlparse.parse("[owner]\\nname = 'Tom'")
    >>> doc["owner"]["name"]
    'Tom'

    tomlparse config.toml         # print a TOML file as JSON
"""

from ._version import __version__, get_base_version, get_display_version
from .document import ArrayOfTables, InlineTable, Table
from .errors import (
    EmptyTableKeyError,
    EmptyValueError,
    FileAccessError,
    InvalidEscapeError,
    InvalidTableNameError,
    KeyRedefinitionError,
    MalformedArrayError,
    MalformedInlineTableError,
    MixedArrayTypeError,
    MultilineHeaderError,
    ParseError,
    TomlError,
    TomlSyntaxError,
    UnknownValueTypeError,
    UnterminatedBracketError,
    UnterminatedStringError,
)
from .loader import load, loads, parse, parse_file

__all__ = [
    "__version__",
    "get_base_version",
    "get_display_version",
    "parse",
    "parse_file",
    "load",
    "loads",
    "Table",
    "InlineTable",
    "ArrayOfTables",
    "TomlError",
    "ParseError",
    "TomlSyntaxError",
    "UnterminatedBracketError",
    "UnterminatedStringError",
    "MultilineHeaderError",
    "InvalidEscapeError",
    "InvalidTableNameError",
    "EmptyTableKeyError",
    "KeyRedefinitionError",
    "EmptyValueError",
    "UnknownValueTypeError",
    "MixedArrayTypeError",
    "MalformedArrayError",
    "MalformedInlineTableError",
    "FileAccessError",
]
