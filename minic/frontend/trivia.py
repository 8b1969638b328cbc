"""
Trivia skipping for the minic lexer.

Unicode whitespace, ``//`` line comments and ``/* */`` block comments carry
no token identity. The skipper moves the cursor past any mix of them before
each token.
"""

from typing import Sequence

from .cursor import Cursor
from .patterns import TRIVIA_TABLE, TriviaPattern


class TriviaSkipper:
    """Advances a cursor past whitespace and comments.

    Block comments do not nest and end at the first ``*/``. A block comment
    that is never closed swallows the rest of the input without an error.
    """

    def __init__(self, patterns: Sequence[TriviaPattern] = TRIVIA_TABLE):
        self._patterns = tuple(patterns)

    def skip(self, cursor: Cursor) -> bool:
        """Skip trivia until a full pass over the table finds nothing.

        Args:
            cursor: Cursor to advance

        Returns:
            True if at least one byte was skipped
        """
        start = cursor.position
        while not cursor.at_end():
            for pattern in self._patterns:
                match = cursor.match(pattern.regex)
                if match is not None and match.end() > cursor.position:
                    cursor.advance_to(match.end())
                    break
            else:
                break
        return cursor.position > start
