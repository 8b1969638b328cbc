"""
Pattern table for the minic lexer.

The table lists every token matcher in the order the recognizer tries them.
It is compiled once when this module is imported and is never modified, so
any number of lexers and scans can share it.

Matchers work on bytes. On byte patterns ``\\w`` and ``\\b`` are ASCII-only,
which gives the word-boundary rule directly: an identifier or a digit run
only matches when the byte after it is not a letter, digit or underscore.

Whitespace is the full Unicode White_Space set, so the whitespace matcher
lists the UTF-8 encodings of those codepoints instead of relying on ``\\s``.
"""

import re
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Tuple

from .tokens import TokenType


class PatternKind(Enum):
    """How a match is turned into a token."""
    LITERAL = auto()     # fixed spelling, fixed token type
    IDENTIFIER = auto()  # keyword lookup, then Identifier(text)
    CONSTANT = auto()    # 32-bit integer conversion


@dataclass(frozen=True)
class TokenPattern:
    """A single entry of the pattern table.

    Attributes:
        name: Short name used in logs and reprs
        kind: How the matched text becomes a token
        regex: Compiled byte pattern, applied anchored at the cursor
        token_type: Produced type for LITERAL patterns
    """
    name: str
    kind: PatternKind
    regex: "re.Pattern[bytes]"
    token_type: Optional[TokenType] = None

    def __repr__(self) -> str:
        return f"TokenPattern({self.name}, {self.kind.name})"


@dataclass(frozen=True)
class TriviaPattern:
    """A whitespace or comment matcher used by the trivia skipper."""
    name: str
    regex: "re.Pattern[bytes]"


def literal(name: str, spelling: str, token_type: TokenType) -> TokenPattern:
    """Build a matcher for an exact spelling."""
    return TokenPattern(
        name=name,
        kind=PatternKind.LITERAL,
        regex=re.compile(re.escape(spelling.encode("ascii"))),
        token_type=token_type,
    )


IDENTIFIER_RE = re.compile(rb"[A-Za-z_]\w*\b")
CONSTANT_RE = re.compile(rb"[0-9]+\b")

# Codepoints with the Unicode White_Space property
WHITESPACE_CHARS = (
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


def whitespace_regex(chars: str = WHITESPACE_CHARS) -> "re.Pattern[bytes]":
    """Build a byte pattern matching a run of the UTF-8 encodings of ``chars``."""
    alternatives = b"|".join(re.escape(c.encode("utf-8")) for c in chars)
    return re.compile(b"(?:" + alternatives + b")+")


WHITESPACE_RE = whitespace_regex()
LINE_COMMENT_RE = re.compile(rb"//[^\n]*")
# Stops at the first "*/"; an unclosed comment runs to the end of input
BLOCK_COMMENT_RE = re.compile(rb"/\*.*?(?:\*/|\Z)", re.DOTALL)


def build_pattern_table() -> Tuple[TokenPattern, ...]:
    """Build the ordered token matchers.

    Punctuation comes first, then identifiers (which also cover keywords),
    then integer constants.
    """
    return (
        literal("open_paren", "(", TokenType.OPEN_PAREN),
        literal("close_paren", ")", TokenType.CLOSE_PAREN),
        literal("open_brace", "{", TokenType.OPEN_BRACE),
        literal("close_brace", "}", TokenType.CLOSE_BRACE),
        literal("semicolon", ";", TokenType.SEMICOLON),
        TokenPattern("identifier", PatternKind.IDENTIFIER, IDENTIFIER_RE),
        TokenPattern("constant", PatternKind.CONSTANT, CONSTANT_RE),
    )


def build_trivia_table() -> Tuple[TriviaPattern, ...]:
    """Build the trivia matchers in the order the skipper tries them."""
    return (
        TriviaPattern("whitespace", WHITESPACE_RE),
        TriviaPattern("line_comment", LINE_COMMENT_RE),
        TriviaPattern("block_comment", BLOCK_COMMENT_RE),
    )


PATTERN_TABLE: Tuple[TokenPattern, ...] = build_pattern_table()
TRIVIA_TABLE: Tuple[TriviaPattern, ...] = build_trivia_table()
