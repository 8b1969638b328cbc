"""
Frontend module for minic.

This module provides the lexer components: the token model, the error types,
the pattern table and the scan machinery built on top of them.
"""

from .tokens import Token, TokenType, KEYWORDS
from .errors import LexerError, UnexpectedCharacterError, InvalidIntegerError, NoMatchError
from .cursor import Cursor
from .patterns import PATTERN_TABLE, TRIVIA_TABLE, PatternKind, TokenPattern, TriviaPattern
from .trivia import TriviaSkipper
from .recognizer import TokenRecognizer
from .lexer import Lexer, tokenize_source

__all__ = [
    # Tokens
    "Token",
    "TokenType",
    "KEYWORDS",
    # Errors
    "LexerError",
    "UnexpectedCharacterError",
    "InvalidIntegerError",
    "NoMatchError",
    # Scan machinery
    "Cursor",
    "PATTERN_TABLE",
    "TRIVIA_TABLE",
    "PatternKind",
    "TokenPattern",
    "TriviaPattern",
    "TriviaSkipper",
    "TokenRecognizer",
    "Lexer",
    "tokenize_source",
]
