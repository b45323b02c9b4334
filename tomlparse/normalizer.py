"""
Lexical normalization of raw TOML text.

A single character-by-character pass that prepares text for the
line-driven document builder:

- CRLF / LFCR line endings become LF, tabs become single spaces
- comments outside strings are dropped (the line break is kept)
- line breaks inside multi-line arrays are elided, so every array
  ends up on one line
- line folding (backslash + newline) inside multi-line basic strings
- bracket, quote and triple-quote balance is validated up front
"""

from .errors import (
    InvalidEscapeError,
    MultilineHeaderError,
    TomlSyntaxError,
    UnterminatedBracketError,
    UnterminatedStringError,
)

# Characters that may follow a backslash inside a basic string
ESCAPE_CHARS = frozenset('btnfruU"\\ ')

_FOLD_CHARS = (" ", "\n")


def normalize(text: str) -> str:
    """Return cleaned TOML text ready to be split into lines.

    Raises:
        UnterminatedStringError: a string is left open, or a single-line
            string runs into a line break.
        UnterminatedBracketError: a '[' is never closed.
        MultilineHeaderError: a table header spans lines.
        InvalidEscapeError: a bad escape inside a single-line basic string.
        TomlSyntaxError: a ']' with no matching '['.
    """
    text = text.replace("\r\n", "\n").replace("\n\r", "\n")
    text = text.replace("\t", " ")

    out = []
    line = []  # raw text of the current source line, for error messages

    basic = False
    literal = False
    ml_basic = False
    ml_literal = False
    depth = 0
    header = False

    i = 0
    n = len(text)
    while i < n:
        ch = text[i]

        if ch == "\n":
            if basic or literal:
                raise UnterminatedStringError(
                    f"Multi-line string not allowed on: {''.join(line)}",
                    style="basic" if basic else "literal",
                )
            if header:
                raise MultilineHeaderError(
                    f"Table header cannot span multiple lines: {''.join(line)}"
                )
            line = []
            # Arrays may span lines; collapse them onto one
            if depth == 0:
                out.append(ch)
            i += 1
            continue

        if basic or ml_basic:
            if ch == "\\":
                nxt = text[i + 1] if i + 1 < n else ""
                if not nxt:
                    # Trailing backslash: the string is left open
                    out.append(ch)
                    i += 1
                    continue
                if ml_basic and nxt in _FOLD_CHARS:
                    # Line folding: drop the backslash and the whitespace run
                    j = i + 1
                    while j < n and text[j] in _FOLD_CHARS:
                        j += 1
                    if "\n" in text[i:j]:
                        line = []
                    i = j
                    continue
                if nxt not in ESCAPE_CHARS:
                    if basic:
                        raise InvalidEscapeError(
                            f"Invalid escape sequence '\\{nxt}' in: {''.join(line)}"
                        )
                pair = text[i:i + 2]
                out.append(pair)
                line.extend(pair)
                i += len(pair)
                continue
            if ch == '"':
                if ml_basic and text.startswith('"""', i):
                    ml_basic = False
                    out.append('"""')
                    line.extend('"""')
                    i += 3
                    continue
                if basic:
                    basic = False
            out.append(ch)
            line.append(ch)
            i += 1
            continue

        if literal or ml_literal:
            if ch == "'":
                if ml_literal and text.startswith("'''", i):
                    ml_literal = False
                    out.append("'''")
                    line.extend("'''")
                    i += 3
                    continue
                if literal:
                    literal = False
            out.append(ch)
            line.append(ch)
            i += 1
            continue

        # Outside of any string
        if ch == '"':
            if text.startswith('"""', i):
                ml_basic = True
                out.append('"""')
                line.extend('"""')
                i += 3
                continue
            basic = True
        elif ch == "'":
            if text.startswith("'''", i):
                ml_literal = True
                out.append("'''")
                line.extend("'''")
                i += 3
                continue
            literal = True
        elif ch == "[":
            depth += 1
            if depth == 1 and not "".join(line).strip():
                header = True
        elif ch == "]":
            if depth == 0:
                raise TomlSyntaxError(f"Unexpected ']' on: {''.join(line)}]")
            depth -= 1
            if depth == 0:
                header = False
        elif ch == "#" and not header:
            end = text.find("\n", i)
            if end == -1:
                end = n
            line.extend(text[i:end])
            i = end
            continue

        out.append(ch)
        line.append(ch)
        i += 1

    if basic:
        raise UnterminatedStringError(
            "Missing closing string delimiter", style="basic")
    if ml_basic:
        raise UnterminatedStringError(
            "Missing closing multi-line string delimiter", style="multiline basic")
    if literal:
        raise UnterminatedStringError(
            "Missing closing literal string delimiter", style="literal")
    if ml_literal:
        raise UnterminatedStringError(
            "Missing closing multi-line literal string delimiter",
            style="multiline literal")
    if depth or header:
        raise UnterminatedBracketError("Missing closing bracket")

    return "".join(out)
