"""
Document tree node types and the traversal cursor.

The tree is made of plain containers so that callers can treat a parsed
document like any other nested dict:

- Table: dict of key -> value (the document root is a Table)
- InlineTable: a Table written as a {...} literal; sealed once parsed
- ArrayOfTables: list of Table built up by [[header]] blocks

Arrays are plain lists, scalars are bool / int / float / str and the
datetime module's datetime, date and time.
"""

from typing import List, Optional, Union

from .errors import KeyRedefinitionError


class Table(dict):
    """A TOML table."""
    pass


class InlineTable(Table):
    """A table defined inline with braces."""
    pass


class ArrayOfTables(list):
    """Tables accumulated by repeated [[name]] headers, in order."""
    pass


PathStep = Union[str, int]


class Cursor:
    """Position inside a document, stored as a path from the root.

    The cursor never keeps a reference into the tree: every access walks
    the path again from the root, so moving it can't alias or corrupt
    nodes. Keys step into tables, integer indices into arrays of tables.
    """

    def __init__(self, root: Table, path: Optional[List[PathStep]] = None):
        self._root = root
        self._path = list(path or [])

    @property
    def path(self) -> List[PathStep]:
        return list(self._path)

    @property
    def table(self) -> Table:
        """The table the cursor currently points at."""
        node = self._root
        for step in self._path:
            node = node[step]
        return node

    def reset(self) -> None:
        """Move back to the document root."""
        self._path = []

    def fork(self) -> "Cursor":
        """Return an independent cursor at the same position."""
        return Cursor(self._root, self._path)

    def __contains__(self, key: str) -> bool:
        return key in self.table

    def enter_table(self, key: str) -> None:
        """Step into child table `key`, creating it if absent.

        An array of tables is entered at its last element.
        """
        node = self.table
        if key not in node:
            node[key] = Table()
        child = node[key]

        if isinstance(child, ArrayOfTables):
            self._path.extend([key, len(child) - 1])
        elif isinstance(child, Table) and not isinstance(child, InlineTable):
            self._path.append(key)
        else:
            raise KeyRedefinitionError(
                f"Key '{key}' is already defined as a value"
            )

    def create_table(self, key: str) -> None:
        """Create child table `key` and step into it.

        Raises KeyRedefinitionError if `key` already exists.
        """
        node = self.table
        if key in node:
            raise KeyRedefinitionError(f"Key overwrite previous keys: [{key}]")
        node[key] = Table()
        self._path.append(key)

    def append_array_table(self, key: str) -> None:
        """Append a new table to array of tables `key` and step into it."""
        node = self.table
        if key not in node:
            node[key] = ArrayOfTables()
        elif not isinstance(node[key], ArrayOfTables):
            raise KeyRedefinitionError(
                f"Key '{key}' is already defined and is not an array of tables"
            )
        tables = node[key]
        tables.append(Table())
        self._path.extend([key, len(tables) - 1])

    def enter_dotted(self, key: str) -> None:
        """Step into an intermediate table of a dotted key.

        Only regular tables can be extended this way; arrays of tables,
        inline tables and scalar values are rejected.
        """
        node = self.table
        if key not in node:
            node[key] = Table()
        child = node[key]
        if type(child) is not Table:
            raise KeyRedefinitionError(
                f"Key '{key}' is already defined and can't be extended"
            )
        self._path.append(key)

    def assign(self, key: str, value) -> None:
        """Store `value` under `key` in the current table."""
        node = self.table
        if key in node:
            raise KeyRedefinitionError(f"Key overwrite previous keys: {key}")
        node[key] = value
