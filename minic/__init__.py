"""
minic - lexical front end for a minimal C subset

Turns source text using `int`, `void`, `return`, identifiers, integer
constants and `( ) { } ;` into a list of tokens, or a single error with the
byte offset where scanning stopped.

Example:
    >>> from minic import Lexer
    >>> Lexer().tokenize_all("int main() { return 0; }")[0]
    Token(KW_INT)

Version: 0.1.0
"""

__version__ = "0.1.0"
__author__ = "minic Team"

from .frontend import Lexer, Token, TokenType, LexerError, tokenize_source
from .core import Compiler, LexResult

__all__ = [
    "__version__",
    "__author__",
    "Lexer",
    "Token",
    "TokenType",
    "LexerError",
    "tokenize_source",
    "Compiler",
    "LexResult",
]
