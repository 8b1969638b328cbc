"""
Interchange format for lexer results.

Tokens and errors are rendered as externally tagged JSON values:

    "KwInt"                                      payload-free token
    {"Identifier": "main"}                       identifier
    {"Constant": 0}                              integer constant
    {"unexpected_character": {"char": "$", "pos": 0}}
    {"invalid_integer": {"value": "99999999999", "pos": 0}}
    {"no_match": {"pos": 3}}

A whole scan is either {"Success": [...]} or {"Error": {...}}.
"""

import json
from typing import Any, Dict, Optional, Sequence, Union

from ..frontend.errors import (
    InvalidIntegerError,
    LexerError,
    NoMatchError,
    UnexpectedCharacterError,
)
from ..frontend.tokens import Token, TokenType

JsonValue = Union[str, Dict[str, Any]]


def token_to_json(token: Token) -> JsonValue:
    """Render a token as its interchange value."""
    if token.type is TokenType.IDENTIFIER or token.type is TokenType.CONSTANT:
        return {token.type.tag: token.value}
    return token.type.tag


def error_to_json(error: LexerError) -> Dict[str, Any]:
    """Render a lexer error as its interchange value."""
    if isinstance(error, UnexpectedCharacterError):
        fields = {"char": error.char, "pos": error.pos}
    elif isinstance(error, InvalidIntegerError):
        fields = {"value": error.value, "pos": error.pos}
    elif isinstance(error, NoMatchError):
        fields = {"pos": error.pos}
    else:
        raise TypeError(f"Unknown lexer error type: {type(error).__name__}")
    return {error.kind: fields}


def result_to_json(
    tokens: Optional[Sequence[Token]] = None,
    error: Optional[LexerError] = None,
) -> Dict[str, Any]:
    """Render a scan outcome: exactly one of ``tokens`` or ``error``."""
    if error is not None:
        return {"Error": error_to_json(error)}
    if tokens is None:
        raise ValueError("A scan result needs tokens or an error")
    return {"Success": [token_to_json(token) for token in tokens]}


def dumps(data: Dict[str, Any], indent: Optional[int] = 2) -> str:
    """Serialize an interchange value; non-ASCII text is kept as-is."""
    return json.dumps(data, indent=indent, ensure_ascii=False)
