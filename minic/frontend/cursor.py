"""
Scan cursor for the minic lexer.

A Cursor pairs the input buffer with the byte offset of the next unread byte.
The buffer is only ever read; matchers are applied in place with
``pattern.match(buffer, pos)`` so the remainder is never sliced out.
"""

import re
from typing import Optional


def _utf8_width(lead: int) -> int:
    """Encoded length of the codepoint starting with byte ``lead``, 0 if invalid."""
    if lead < 0x80:
        return 1
    if 0xC2 <= lead <= 0xDF:
        return 2
    if 0xE0 <= lead <= 0xEF:
        return 3
    if 0xF0 <= lead <= 0xF4:
        return 4
    return 0


class Cursor:
    """Read position over an immutable UTF-8 buffer.

    The position only moves forward and never passes the end of the buffer.

    Example:
        >>> cursor = Cursor(b"int x;")
        >>> cursor.advance(3)
        >>> cursor.position
        3
    """

    __slots__ = ("_buffer", "_position")

    def __init__(self, buffer: bytes):
        """Initialize the cursor at offset 0.

        Args:
            buffer: UTF-8 encoded source
        """
        if not isinstance(buffer, bytes):
            raise TypeError(f"Cursor needs bytes, got {type(buffer).__name__}")
        self._buffer = buffer
        self._position = 0

    @property
    def buffer(self) -> bytes:
        return self._buffer

    @property
    def position(self) -> int:
        return self._position

    @property
    def remaining(self) -> int:
        """Number of unread bytes."""
        return len(self._buffer) - self._position

    def at_end(self) -> bool:
        return self._position >= len(self._buffer)

    def advance(self, count: int) -> None:
        """Move forward by ``count`` bytes.

        Raises:
            ValueError: If ``count`` is negative or runs past the end
        """
        if count < 0:
            raise ValueError(f"Cursor cannot move backwards (by {count})")
        if count > self.remaining:
            raise ValueError(
                f"Cannot advance {count} bytes from {self._position}, "
                f"only {self.remaining} left"
            )
        self._position += count

    def advance_to(self, offset: int) -> None:
        """Move forward to an absolute offset."""
        self.advance(offset - self._position)

    def match(self, pattern: "re.Pattern[bytes]") -> Optional["re.Match[bytes]"]:
        """Match ``pattern`` anchored at the current position.

        Returns:
            The match object, or None if the pattern does not start here
        """
        return pattern.match(self._buffer, self._position)

    def peek_char(self) -> Optional[str]:
        """Decode the full codepoint at the current position.

        Returns:
            The character, or None at end of input or on malformed UTF-8
        """
        if self.at_end():
            return None
        width = _utf8_width(self._buffer[self._position])
        if width == 0 or width > self.remaining:
            return None
        try:
            return self._buffer[self._position:self._position + width].decode("utf-8")
        except UnicodeDecodeError:
            return None

    def __repr__(self) -> str:
        return f"Cursor(position={self._position}, length={len(self._buffer)})"
