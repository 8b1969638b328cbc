"""
Token definitions for minic.

This module defines the token types produced by the lexer, the Token value
class and the keyword table used to tell keywords apart from identifiers.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import List, Mapping, Optional, Union


INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1


class TokenType(Enum):
    """Token types for the minic language.

    The enum values are the interchange tags used when tokens are serialized.
    """
    # Keywords
    KW_INT = "KwInt"            # int
    KW_VOID = "KwVoid"          # void
    KW_RETURN = "KwReturn"      # return

    # Tokens with a payload
    IDENTIFIER = "Identifier"   # main, x, _tmp1
    CONSTANT = "Constant"       # 0, 42

    # Punctuation
    OPEN_PAREN = "OpenParen"    # (
    CLOSE_PAREN = "CloseParen"  # )
    OPEN_BRACE = "OpenBrace"    # {
    CLOSE_BRACE = "CloseBrace"  # }
    SEMICOLON = "Semicolon"     # ;

    @property
    def tag(self) -> str:
        """The interchange tag of this token type."""
        return self.value

    @property
    def has_payload(self) -> bool:
        """Whether tokens of this type carry a value."""
        return self in (TokenType.IDENTIFIER, TokenType.CONSTANT)


# Reserved spellings, in lookup order
KEYWORDS: Mapping[str, TokenType] = MappingProxyType({
    "int": TokenType.KW_INT,
    "void": TokenType.KW_VOID,
    "return": TokenType.KW_RETURN,
})


@dataclass(frozen=True)
class Token:
    """Represents a token in the source code.

    Attributes:
        type: The token type
        value: The identifier text for IDENTIFIER, the integer value for
            CONSTANT, None for every other type
    """
    type: TokenType
    value: Optional[Union[str, int]] = None

    def __post_init__(self):
        if self.type is TokenType.IDENTIFIER:
            if not isinstance(self.value, str) or not self.value:
                raise ValueError(f"Identifier token needs a non-empty string, got {self.value!r}")
            if self.value in KEYWORDS:
                raise ValueError(f"Identifier token cannot hold keyword {self.value!r}")
        elif self.type is TokenType.CONSTANT:
            if isinstance(self.value, bool) or not isinstance(self.value, int):
                raise ValueError(f"Constant token needs an int, got {self.value!r}")
            if not INT32_MIN <= self.value <= INT32_MAX:
                raise ValueError(f"Constant {self.value} does not fit in 32 bits")
        elif self.value is not None:
            raise ValueError(f"{self.type.tag} token carries no value, got {self.value!r}")

    @classmethod
    def identifier(cls, text: str) -> "Token":
        return cls(TokenType.IDENTIFIER, text)

    @classmethod
    def constant(cls, value: int) -> "Token":
        return cls(TokenType.CONSTANT, value)

    def __repr__(self) -> str:
        if self.type.has_payload:
            return f"Token({self.type.name}, {self.value!r})"
        return f"Token({self.type.name})"


def keyword_spellings() -> List[str]:
    """Get the reserved spellings in table order."""
    return list(KEYWORDS)
