"""
Lexer module for minic.

This module drives a scan: it alternates between skipping trivia and
recognizing one token until the input is exhausted or the first error is hit.
Tokens are either all returned or, on error, none are.
"""

import logging
from typing import Iterator, List, Optional, Union

from .cursor import Cursor
from .errors import LexerError
from .recognizer import TokenRecognizer
from .tokens import KEYWORDS, Token, keyword_spellings
from .trivia import TriviaSkipper

logger = logging.getLogger(__name__)

Source = Union[str, bytes]


def encode_source(source: Source) -> bytes:
    """Get the UTF-8 buffer for ``source``.

    Text is encoded once; lone surrogates are kept so they surface as a
    lexer error instead of an encoding failure. Bytes are used as-is.
    """
    if isinstance(source, bytes):
        return source
    if isinstance(source, str):
        return source.encode("utf-8", "surrogatepass")
    raise TypeError(f"Source must be str or bytes, got {type(source).__name__}")


class Lexer:
    """Lexer for the minic language.

    A Lexer holds only read-only tables, so one instance can be reused for any
    number of scans and shared between threads. Each scan gets its own cursor.

    Example:
        >>> lexer = Lexer()
        >>> lexer.tokenize_all("int main() { return 0; }")[:2]
        [Token(KW_INT), Token(IDENTIFIER, 'main')]
    """

    def __init__(
        self,
        skipper: Optional[TriviaSkipper] = None,
        recognizer: Optional[TokenRecognizer] = None,
    ):
        """Initialize the lexer.

        Args:
            skipper: Trivia skipper to use (default: whitespace and C comments)
            recognizer: Token recognizer to use (default: the minic pattern table)
        """
        self._skipper = skipper or TriviaSkipper()
        self._recognizer = recognizer or TokenRecognizer()

    def tokenize_all(self, source: Source) -> List[Token]:
        """Tokenize minic source code.

        Args:
            source: Source text, or its UTF-8 bytes

        Returns:
            List of Token objects in source order

        Raises:
            LexerError: On the first character sequence that is not a token
        """
        tokens = []
        try:
            for token in self.tokenize_iter(source):
                tokens.append(token)
        except LexerError as e:
            logger.debug(f"Scan failed after {len(tokens)} tokens: {e}")
            raise
        logger.debug(f"Scan finished with {len(tokens)} tokens")
        return tokens

    def tokenize_iter(self, source: Source) -> Iterator[Token]:
        """Tokenize minic source code lazily.

        Tokens before an error have already been yielded when the error is
        raised. Use tokenize_all() to get all-or-nothing behaviour.

        Args:
            source: Source text, or its UTF-8 bytes

        Yields:
            Token objects one at a time

        Raises:
            LexerError: On the first character sequence that is not a token
        """
        cursor = Cursor(encode_source(source))
        logger.debug(f"Scanning {len(cursor.buffer)} bytes")
        while True:
            self._skipper.skip(cursor)
            if cursor.at_end():
                return
            yield self._recognizer.recognize(cursor)

    def is_keyword(self, name: str) -> bool:
        """Check if a name is a keyword.

        Args:
            name: Identifier to check

        Returns:
            True if name is a keyword
        """
        return name in KEYWORDS

    def get_keyword_tokens(self) -> List[str]:
        """Get list of reserved spellings."""
        return keyword_spellings()


def tokenize_source(source: Source) -> List[Token]:
    """Convenience function to tokenize source code.

    Args:
        source: Source text, or its UTF-8 bytes

    Returns:
        List of Token objects
    """
    return Lexer().tokenize_all(source)
