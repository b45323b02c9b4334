"""
Recursive-descent parsing of TOML values.

ValueParser.parse() dispatches on the trimmed value text in a fixed
priority order (first match wins):

    true / false         -> bool
    '''...'''            -> multi-line literal string
    '...'                -> literal string
    \"\"\"...\"\"\"            -> multi-line basic string
    "..."                -> basic string
    numeric              -> int or float
    date / time token    -> datetime, date or time
    [...]                -> array
    {...}                -> inline table

Arrays and inline tables are split on their top-level commas and each
piece is fed back through parse().
"""

import re
from datetime import date, datetime, time
from typing import List

from .datetimes import parse_datetime
from .document import InlineTable
from .errors import (
    EmptyValueError,
    InvalidEscapeError,
    KeyRedefinitionError,
    MalformedArrayError,
    MalformedInlineTableError,
    MixedArrayTypeError,
    TomlSyntaxError,
    UnknownValueTypeError,
)

_ESCAPES = {
    "b": "\b",
    "t": "\t",
    "n": "\n",
    "f": "\f",
    "r": "\r",
    '"': '"',
    "\\": "\\",
}

_ESCAPE_RE = re.compile(r"\\(.?)", re.DOTALL)

# Decimal, fraction and exponent forms, matched after removing underscores
_NUMERIC_RE = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?$")
_INTEGER_RE = re.compile(r"^[+-]?(?:0|[1-9]\d*)$")

_INT_MIN = -(2 ** 63)
_INT_MAX = 2 ** 63 - 1


def decode_escapes(text: str) -> str:
    """Resolve backslash escapes of a basic string body.

    Raises InvalidEscapeError for anything outside
    \\b \\t \\n \\f \\r \\" \\\\ \\uXXXX \\UXXXXXXXX.
    """
    out = []
    pos = 0
    for match in _ESCAPE_RE.finditer(text):
        out.append(text[pos:match.start()])
        pos = match.end()

        char = match.group(1)
        if char in _ESCAPES:
            out.append(_ESCAPES[char])
            continue
        if char in ("u", "U"):
            width = 4 if char == "u" else 8
            digits = text[pos:pos + width]
            if len(digits) != width or not all(c in "0123456789abcdefABCDEF" for c in digits):
                raise InvalidEscapeError(f"Invalid unicode escape: \\{char}{digits}")
            code = int(digits, 16)
            # Surrogates and anything past U+10FFFF are not scalar values
            if 0xD800 <= code <= 0xDFFF or code > 0x10FFFF:
                raise InvalidEscapeError(f"Invalid unicode escape: \\{char}{digits}")
            out.append(chr(code))
            pos += width
            continue
        raise InvalidEscapeError(f"Invalid escape sequence: \\{char}")

    out.append(text[pos:])
    return "".join(out)


def parse_number(text: str):
    """Return an int or float for numeric text, or None if not numeric."""
    text = text.replace("_", "")
    if not _NUMERIC_RE.match(text):
        return None
    if _INTEGER_RE.match(text):
        value = int(text)
        if _INT_MIN <= value <= _INT_MAX:
            return value
    return float(text)


def type_category(value, strict: bool = False) -> str:
    """Category used to decide whether two array elements may mix.

    The default is coarse: containers, strings and all other scalars.
    With strict=True every kind of value is its own category.
    """
    if isinstance(value, (list, dict)):
        if not strict:
            return "container"
        return "array" if isinstance(value, list) else "table"
    if isinstance(value, str):
        return "string"
    if not strict:
        return "scalar"
    # bool before int, datetime before date: subclass order matters
    for kind, name in ((bool, "boolean"), (int, "integer"), (float, "float"),
                       (datetime, "datetime"), (date, "date"), (time, "time")):
        if isinstance(value, kind):
            return name
    return type(value).__name__


class ValueParser:
    """Parses the right-hand side of a TOML assignment.

    Args:
        strict_arrays: reject arrays mixing any two kinds of value
            instead of only containers, strings and other scalars.
    """

    def __init__(self, strict_arrays: bool = False):
        self.strict_arrays = strict_arrays

    def parse(self, text: str):
        val = text.strip()
        if not val:
            raise EmptyValueError("Empty value not allowed")

        if val == "true" or val == "false":
            return val == "true"

        if len(val) >= 6 and val.startswith("'''") and val.endswith("'''"):
            return _drop_first_newline(val[3:-3])

        if len(val) >= 2 and val[0] == "'" and val[-1] == "'":
            if "\n" in val:
                raise TomlSyntaxError(
                    f"New lines not allowed on single line string literals: {val}"
                )
            return val[1:-1]

        if len(val) >= 6 and val.startswith('"""') and val.endswith('"""'):
            return decode_escapes(_drop_first_newline(val[3:-3]))

        if len(val) >= 2 and val[0] == '"' and val[-1] == '"':
            body = val[1:-1]
            if _has_bare_quote(body):
                raise TomlSyntaxError(f"Unescaped quote inside string: {val}")
            return decode_escapes(body)

        number = parse_number(val)
        if number is not None:
            return number

        moment = parse_datetime(val)
        if moment is not None:
            return moment

        if val[0] == "[" and val[-1] == "]":
            return self.parse_array(val)

        if val[0] == "{" and val[-1] == "}":
            return self.parse_inline_table(val)

        raise UnknownValueTypeError(f"Unknown value type: {val}")

    def parse_array(self, val: str) -> list:
        """Parse a one-line '[...]' array, recursing into its elements."""
        result = []
        buf = []
        brackets = 0
        braces = 0
        basic = False
        literal = False
        escaped = False

        for i, ch in enumerate(val):
            if escaped:
                escaped = False
            elif basic and ch == "\\":
                escaped = True
            elif ch == '"' and not literal:
                basic = not basic
            elif ch == "'" and not basic:
                literal = not literal
            elif not basic and not literal:
                if ch == "[":
                    brackets += 1
                    if brackets == 1:
                        continue
                elif ch == "]":
                    brackets -= 1
                    if brackets == 0:
                        self._append_element(result, "".join(buf))
                        if val[i + 1:].strip():
                            raise MalformedArrayError(f"Wrong array definition: {val}")
                        return result
                elif ch == "{":
                    braces += 1
                elif ch == "}":
                    braces -= 1

                if ch in (",", "}") and brackets == 1 and braces == 0:
                    if ch == "}":
                        buf.append(ch)
                    self._append_element(result, "".join(buf))
                    buf = []
                    continue

            buf.append(ch)

        raise MalformedArrayError(f"Wrong array definition: {val}")

    def parse_inline_table(self, val: str) -> InlineTable:
        """Parse a one-line '{...}' inline table."""
        if not (val.startswith("{") and val.endswith("}")):
            raise MalformedInlineTableError(f"Invalid inline table definition: {val}")

        body = val[1:-1]
        result = InlineTable()
        if not body.strip():
            return result

        for entry in _split_top_level(body):
            key, sep, raw_value = entry.partition("=")
            key = _unquote_key(key.strip())
            if not sep or not key:
                raise MalformedInlineTableError(
                    f"Invalid inline table entry '{entry.strip()}' in: {val}"
                )
            if key in result:
                raise KeyRedefinitionError(f"Key overwrite previous keys: {key}")
            result[key] = self.parse(raw_value)

        return result

    def _append_element(self, result: list, raw: str) -> None:
        raw = raw.strip()
        if not raw:
            return
        result.append(self.parse(raw))
        check_homogeneous(result, strict=self.strict_arrays)


def check_homogeneous(values: List, strict: bool = False) -> None:
    """Compare the first and the last element of a growing array.

    Raises MixedArrayTypeError when their categories differ.
    """
    if len(values) < 2:
        return
    first = type_category(values[0], strict)
    last = type_category(values[-1], strict)
    if first != last:
        raise MixedArrayTypeError(
            f"Data types cannot be mixed in an array: {first} and {last}"
        )


def _split_top_level(body: str) -> List[str]:
    """Split inline table content on commas outside brackets, braces and strings.

    Raises MalformedInlineTableError if a bracket or brace closes the
    table early, as in '{a = 1} {b = 2}'.
    """
    parts = []
    buf = []
    depth = 0
    basic = False
    literal = False
    escaped = False

    for ch in body:
        if escaped:
            escaped = False
        elif basic and ch == "\\":
            escaped = True
        elif ch == '"' and not literal:
            basic = not basic
        elif ch == "'" and not basic:
            literal = not literal
        elif not basic and not literal:
            if ch in "[{":
                depth += 1
            elif ch in "]}":
                depth -= 1
                if depth < 0:
                    raise MalformedInlineTableError(
                        f"Invalid inline table definition: {{{body}}}"
                    )
            elif ch == "," and depth == 0:
                parts.append("".join(buf))
                buf = []
                continue
        buf.append(ch)

    parts.append("".join(buf))
    return parts


def _unquote_key(key: str) -> str:
    if len(key) >= 2 and key[0] == key[-1] == '"':
        return decode_escapes(key[1:-1])
    if len(key) >= 2 and key[0] == key[-1] == "'":
        return key[1:-1]
    return key


def _drop_first_newline(text: str) -> str:
    if text.startswith("\n"):
        return text[1:]
    return text


def _has_bare_quote(body: str) -> bool:
    escaped = False
    for ch in body:
        if escaped:
            escaped = False
        elif ch == "\\":
            escaped = True
        elif ch == '"':
            return True
    return False
