"""
Splitting of table names and dotted keys into path segments.
"""

import re
from typing import List

from .errors import EmptyTableKeyError, InvalidTableNameError
from .values import decode_escapes

_BARE_KEY_RE = re.compile(r"^[A-Za-z0-9_-]+$")


def split_table_name(name: str) -> List[str]:
    """Split a header name like 'a."b.c".d' into raw segments.

    Quotes are kept in the returned segments; dots inside quotes are
    literal. The final segment is always flushed, so 'a.' yields
    ['a', ''] and the caller rejects the empty segment.
    """
    segments = []
    buf = []
    quote = None

    for i, ch in enumerate(name):
        if quote is None:
            if ch in ('"', "'"):
                quote = ch
            elif ch == ".":
                segments.append("".join(buf))
                buf = []
                continue
        elif ch == quote and not (quote == '"' and _is_escaped(name, i)):
            quote = None
        buf.append(ch)

    segments.append("".join(buf))
    return segments


def decode_table_segment(segment: str) -> str:
    """Validate one raw header segment and return the key it names.

    Raises:
        EmptyTableKeyError: the segment is blank.
        InvalidTableNameError: a bare segment has characters outside
            letters, digits, '-' and '_'.
    """
    segment = segment.strip()
    if not segment:
        raise EmptyTableKeyError("Empty table keys aren't allowed")

    if len(segment) >= 2 and segment[0] == segment[-1] == '"':
        return decode_escapes(segment[1:-1])
    if len(segment) >= 2 and segment[0] == segment[-1] == "'":
        return segment[1:-1]
    if not _BARE_KEY_RE.match(segment):
        raise InvalidTableNameError(f"Invalid table name: {segment}")
    return segment


def split_dotted_key(key: str) -> List[str]:
    """Split a key expression like 'a."b.c"' into ['a', 'b.c'].

    Quote characters are delimiters and are not part of the segment.
    Whitespace outside quotes is ignored.
    """
    segments = []
    buf = []
    in_double = False
    in_single = False

    for ch in key:
        if ch == '"' and not in_single:
            in_double = not in_double
            continue
        if ch == "'" and not in_double:
            in_single = not in_single
            continue
        if in_double or in_single:
            buf.append(ch)
        elif ch == ".":
            segments.append("".join(buf))
            buf = []
        elif not ch.isspace():
            buf.append(ch)

    segments.append("".join(buf))
    return segments


def _is_escaped(text: str, index: int) -> bool:
    """True if text[index] is preceded by an odd run of backslashes."""
    count = 0
    index -= 1
    while index >= 0 and text[index] == "\\":
        count += 1
        index -= 1
    return count % 2 == 1
