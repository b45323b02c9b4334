"""
Public entry points: parse TOML from a string, file object or path.
"""

from pathlib import Path
from typing import Union

from .builder import DocumentBuilder
from .document import Table
from .errors import FileAccessError
from .normalizer import normalize

_BOM = "\ufeff"


def parse(text: str, strict_arrays: bool = False) -> Table:
    """Parse TOML text into a nested Table.

    Args:
        text: TOML document.
        strict_arrays: reject arrays that mix any two kinds of value.

    Returns:
        The document root. Tables are dicts, arrays of tables are lists.

    Raises:
        ParseError: on the first malformed construct; nothing is returned.
    """
    builder = DocumentBuilder(strict_arrays=strict_arrays)
    return builder.build(normalize(text))


def parse_file(path: Union[str, Path], strict_arrays: bool = False) -> Table:
    """Read a UTF-8 TOML file, drop a leading BOM and parse it.

    Raises:
        FileAccessError: path is not a readable regular file, or its
            contents are not valid UTF-8.
        ParseError: the contents are not valid TOML.
    """
    path = Path(path)
    if not path.is_file():
        raise FileAccessError(f"Invalid file path: {path}")

    try:
        data = path.read_bytes()
    except OSError as e:
        raise FileAccessError(f"Could not read {path}: {e}")

    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise FileAccessError(f"{path} is not valid UTF-8: {e}")

    if text.startswith(_BOM):
        text = text[len(_BOM):]

    return parse(text, strict_arrays=strict_arrays)


def loads(text: str, strict_arrays: bool = False) -> Table:
    """Same as parse(), named like tomllib.loads."""
    return parse(text, strict_arrays=strict_arrays)


def load(fp, strict_arrays: bool = False) -> Table:
    """Parse a TOML text file object."""
    return parse(fp.read(), strict_arrays=strict_arrays)
