"""
Lexer error types for minic.

Every error carries the byte offset where the scan stopped. The first error
ends the scan, so a lexer call produces either a full token list or exactly
one of these exceptions.
"""

from typing import Tuple, Union


class LexerError(Exception):
    """Base exception for lexer errors.

    Attributes:
        kind: Interchange tag of the error kind
        pos: Byte offset into the UTF-8 input
    """

    kind = "lexer_error"

    def __init__(self, pos: int):
        self.pos = pos
        # args mirror the constructor signature
        super().__init__(*self._fields())

    def _fields(self) -> tuple:
        return (self.pos,)

    def _format_message(self) -> str:
        return f"Lexer error at position {self.pos}"

    def __str__(self) -> str:
        return self._format_message()

    @property
    def message(self) -> str:
        return self._format_message()

    def location(self, source: Union[str, bytes]) -> Tuple[int, int]:
        """Convert the byte offset into a (line, column) pair.

        Both numbers are 1-indexed; the column counts bytes.

        Args:
            source: The input the error was raised for

        Returns:
            (line, column)
        """
        if isinstance(source, str):
            source = source.encode("utf-8", "surrogatepass")
        pos = min(self.pos, len(source))
        line = source.count(b"\n", 0, pos) + 1
        line_start = source.rfind(b"\n", 0, pos) + 1
        return line, pos - line_start + 1

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return self.args == other.args

    def __hash__(self):
        return hash((type(self), self.args))


class UnexpectedCharacterError(LexerError):
    """The character at ``pos`` does not start any token."""

    kind = "unexpected_character"

    def __init__(self, char: str, pos: int):
        self.char = char
        super().__init__(pos)

    def _fields(self) -> tuple:
        return (self.char, self.pos)

    def _format_message(self) -> str:
        return f"Unexpected character '{self.char}' at position {self.pos}"


class InvalidIntegerError(LexerError):
    """A digit run that does not fit in a signed 32-bit integer.

    ``value`` keeps the digits exactly as written.
    """

    kind = "invalid_integer"

    def __init__(self, value: str, pos: int):
        self.value = value
        super().__init__(pos)

    def _fields(self) -> tuple:
        return (self.value, self.pos)

    def _format_message(self) -> str:
        return f"Invalid integer constant '{self.value}' at position {self.pos}"


class NoMatchError(LexerError):
    """No token rule applies and no character could be read at ``pos``."""

    kind = "no_match"

    def _format_message(self) -> str:
        return f"No token matched at position {self.pos}"
