"""
Exception types raised by tomlparse.

Every parse failure is fatal for the current call: the first error aborts
the whole document and no partial result is returned. All parse errors
derive from ParseError, so callers that don't care about the specific
kind can catch that one class.
"""


class TomlError(Exception):
    """Base class for all tomlparse errors."""
    pass


class ParseError(TomlError):
    """Raised when TOML text cannot be parsed."""
    pass


class TomlSyntaxError(ParseError):
    """Raised for a malformed line that fits no other category."""
    pass


class UnterminatedBracketError(ParseError):
    """Raised when a '[' is never closed."""
    pass


class UnterminatedStringError(ParseError):
    """Raised when a string delimiter is never closed.

    The style attribute names the kind of string: "basic", "literal",
    "multiline basic" or "multiline literal".
    """

    def __init__(self, message: str, style: str = "basic"):
        super().__init__(message)
        self.style = style


class MultilineHeaderError(ParseError):
    """Raised when a table header spans more than one line."""
    pass


class InvalidEscapeError(ParseError):
    """Raised for a backslash escape outside the allowed set."""
    pass


class InvalidTableNameError(ParseError):
    """Raised when a table header segment contains invalid characters."""
    pass


class EmptyTableKeyError(ParseError):
    """Raised when a table header has an empty segment."""
    pass


class KeyRedefinitionError(ParseError):
    """Raised when a key or table is defined more than once."""
    pass


class EmptyValueError(ParseError):
    """Raised for an assignment with nothing after '='."""
    pass


class UnknownValueTypeError(ParseError):
    """Raised when a value matches none of the TOML value forms."""
    pass


class MixedArrayTypeError(ParseError):
    """Raised when array elements don't share one type category."""
    pass


class MalformedArrayError(ParseError):
    """Raised when array brackets don't close properly."""
    pass


class MalformedInlineTableError(ParseError):
    """Raised for an inline table entry that isn't a key = value pair."""
    pass


class FileAccessError(TomlError):
    """Raised when a TOML file can't be read."""
    pass
