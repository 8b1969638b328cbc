"""
Token recognition for the minic lexer.
"""

from typing import Sequence

from .cursor import Cursor
from .errors import InvalidIntegerError, NoMatchError, UnexpectedCharacterError
from .patterns import PATTERN_TABLE, PatternKind, TokenPattern
from .tokens import INT32_MAX, INT32_MIN, KEYWORDS, Token


class TokenRecognizer:
    """Turns the bytes at the cursor into exactly one token.

    The pattern table is tried in order and the first matching entry wins.
    Matches are anchored at the cursor; nothing further ahead is considered.

    Example:
        >>> cursor = Cursor(b"return 0;")
        >>> TokenRecognizer().recognize(cursor)
        Token(KW_RETURN)
    """

    def __init__(self, patterns: Sequence[TokenPattern] = PATTERN_TABLE):
        self._patterns = tuple(patterns)

    def recognize(self, cursor: Cursor) -> Token:
        """Recognize the token starting at the cursor.

        The cursor must sit on a non-trivia byte. On success it is moved past
        the token.

        Args:
            cursor: Cursor positioned at the start of a token

        Returns:
            The recognized token

        Raises:
            InvalidIntegerError: If a digit run does not fit in 32 bits
            UnexpectedCharacterError: If no pattern matches here
            NoMatchError: If no pattern matches and no character can be decoded
        """
        start = cursor.position
        for pattern in self._patterns:
            match = cursor.match(pattern.regex)
            if match is None:
                continue
            text = match.group().decode("ascii")

            if pattern.kind is PatternKind.LITERAL:
                token = Token(pattern.token_type)
            elif pattern.kind is PatternKind.IDENTIFIER:
                token = self._identifier(text)
            elif pattern.kind is PatternKind.CONSTANT:
                token = self._constant(text, start)
            else:
                raise ValueError(f"Unknown pattern kind: {pattern.kind}")

            cursor.advance_to(match.end())
            return token

        # The scan stops here, so the cursor stays on the offending byte
        char = cursor.peek_char()
        if char is not None:
            raise UnexpectedCharacterError(char, start)
        raise NoMatchError(start)

    def _identifier(self, text: str) -> Token:
        keyword = KEYWORDS.get(text)
        if keyword is not None:
            return Token(keyword)
        return Token.identifier(text)

    @staticmethod
    def _constant(text: str, start: int) -> Token:
        # int() refuses very long digit strings, so reject by length first
        significant = text.lstrip("0")
        if len(significant) > len(str(INT32_MAX)):
            raise InvalidIntegerError(text, start)
        value = int(significant or "0")
        if not INT32_MIN <= value <= INT32_MAX:
            raise InvalidIntegerError(text, start)
        return Token.constant(value)
