"""
Line-driven assembly of the document tree.

Each normalized line is one of: blank, [[array.of.tables]] header,
[table] header, key = value assignment. Anything else is an error.
"""

from typing import Callable, Iterator, List, Tuple

from .document import Cursor, Table
from .errors import (
    KeyRedefinitionError,
    TomlSyntaxError,
    UnterminatedStringError,
)
from .tablepath import decode_table_segment, split_dotted_key, split_table_name
from .values import ValueParser

_TRIPLE_QUOTES = ('"""', "'''")


class LineReader:
    """Iterates over lines and can pull extra lines for a multi-line value."""

    def __init__(self, text: str):
        self._lines = text.split("\n")
        self._index = 0

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        if self._index >= len(self._lines):
            raise StopIteration
        line = self._lines[self._index]
        self._index += 1
        return line

    def consume_until(self, predicate: Callable[[str], bool]) -> Tuple[str, int]:
        """Read lines up to and including the first one matching predicate.

        Returns the lines joined with newlines and how many were read.
        Raises EOFError if input ends first.
        """
        taken: List[str] = []
        for line in self:
            taken.append(line)
            if predicate(line):
                return "\n".join(taken), len(taken)
        raise EOFError("no matching line before end of input")


class DocumentBuilder:
    """Builds a Table from normalized TOML text."""

    def __init__(self, strict_arrays: bool = False):
        self._values = ValueParser(strict_arrays=strict_arrays)

    def build(self, text: str) -> Table:
        root = Table()
        cursor = Cursor(root)
        reader = LineReader(text)

        for raw in reader:
            line = raw.strip()

            if not line or line.startswith("#"):
                continue

            if line.startswith("[[") and line.endswith("]]"):
                self._array_table_header(cursor, line[2:-2])
            elif line.startswith("[") and line.endswith("]"):
                self._table_header(cursor, line[1:-1])
            elif line.find("=") > 0:
                self._assignment(cursor, line, reader)
            elif line.startswith("["):
                raise TomlSyntaxError(
                    f"Table headers must appear alone on a line: {line}"
                )
            else:
                raise TomlSyntaxError(f"Syntax error on: {line}")

        return root

    def _array_table_header(self, cursor: Cursor, name: str) -> None:
        cursor.reset()
        keys = [decode_table_segment(s) for s in split_table_name(name)]
        for key in keys[:-1]:
            cursor.enter_table(key)
        cursor.append_array_table(keys[-1])

    def _table_header(self, cursor: Cursor, name: str) -> None:
        cursor.reset()
        keys = [decode_table_segment(s) for s in split_table_name(name.strip())]
        for key in keys[:-1]:
            cursor.enter_table(key)
        cursor.create_table(keys[-1])

    def _assignment(self, cursor: Cursor, line: str, reader: LineReader) -> None:
        raw_key, _, raw_value = line.partition("=")
        raw_key = raw_key.strip()

        opener = raw_value.strip()[:3]
        if opener in _TRIPLE_QUOTES and _continues(raw_value, opener):
            try:
                rest, _ = reader.consume_until(lambda text: opener in text)
            except EOFError:
                raise UnterminatedStringError(
                    f"Unterminated multi-line string: {line}",
                    style="multiline basic" if opener == '"""' else "multiline literal",
                )
            raw_value = raw_value + "\n" + rest

        if raw_key in cursor:
            raise KeyRedefinitionError(f"Key overwrite previous keys: {line}")

        *parents, leaf = split_dotted_key(raw_key)
        target = cursor.fork()
        for key in parents:
            target.enter_dotted(key)
        target.assign(leaf, self._values.parse(raw_value))


def _continues(raw_value: str, opener: str) -> bool:
    """True if a triple-quoted value doesn't close on its first line."""
    value = raw_value.strip()
    return value == opener or not value.endswith(opener)
