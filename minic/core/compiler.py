"""
Main compiler orchestration module for minic.

This module provides the high-level Compiler class that runs the lexer over
source text or files and packages the outcome as a LexResult.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from ..frontend.errors import LexerError
from ..frontend.lexer import Lexer, Source
from ..frontend.tokens import Token
from ..utils.settings import DEFAULT_SETTINGS, Settings
from .output import dumps, result_to_json

logger = logging.getLogger(__name__)


@dataclass
class LexResult:
    """Result of a lex operation.

    Attributes:
        success: Whether the scan succeeded
        tokens: Tokens of a successful scan (empty on failure)
        error: The lexer error of a failed scan
        error_message: Human readable failure description
        source: The scanned input, when it was read
    """
    success: bool
    tokens: List[Token] = field(default_factory=list)
    error: Optional[LexerError] = None
    error_message: Optional[str] = None
    source: Optional[Source] = None

    @property
    def exit_code(self) -> int:
        """Process exit code: 0 for success, 1 for any failure."""
        return 0 if self.success else 1

    def location(self) -> Optional[tuple]:
        """(line, column) of the lexer error, if there is one."""
        if self.error is None or self.source is None:
            return None
        return self.error.location(self.source)

    def to_dict(self) -> Dict[str, Any]:
        """Interchange value of this result.

        Raises:
            ValueError: For failures that are not lexer errors (e.g. I/O)
        """
        if self.success:
            return result_to_json(tokens=self.tokens)
        if self.error is None:
            raise ValueError(f"No lexer output for failed run: {self.error_message}")
        return result_to_json(error=self.error)

    def to_json(self, indent: Optional[int] = 2) -> str:
        return dumps(self.to_dict(), indent=indent)


class Compiler:
    """Main compiler class for minic.

    Only the lexical stage exists so far; the Compiler runs it and turns
    every failure into an unsuccessful LexResult instead of raising.

    Example:
        >>> compiler = Compiler()
        >>> result = compiler.lex("int main() { return 0; }")
        >>> result.success, len(result.tokens)
        (True, 9)
    """

    def __init__(self, settings: Optional[Settings] = None, lexer: Optional[Lexer] = None):
        """Initialize the compiler.

        Args:
            settings: Driver settings (default: DEFAULT_SETTINGS)
            lexer: Lexer to use (default: a new Lexer)
        """
        self._settings = settings or DEFAULT_SETTINGS
        self._lexer = lexer or Lexer()

    @property
    def settings(self) -> Settings:
        return self._settings

    def lex(self, source: Source) -> LexResult:
        """Tokenize source text.

        Args:
            source: Source text, or its UTF-8 bytes

        Returns:
            LexResult: The tokens, or the first lexer error
        """
        try:
            tokens = self._lexer.tokenize_all(source)
        except LexerError as e:
            return LexResult(
                success=False,
                error=e,
                error_message=f"Lexer error: {e}",
                source=source
            )
        return LexResult(success=True, tokens=tokens, source=source)

    def lex_file(self, path: Union[str, Path]) -> LexResult:
        """Tokenize a source file.

        Args:
            path: Path to the input file

        Returns:
            LexResult: The result; unreadable files give success=False
            with no lexer error
        """
        path = Path(path)
        if not path.exists():
            return LexResult(
                success=False,
                error_message=f"Input file not found: {path}"
            )

        try:
            raw = path.read_bytes()
        except OSError as e:
            return LexResult(
                success=False,
                error_message=f"Cannot read {path}: {e}"
            )

        encoding = self._settings.encoding
        if encoding.replace("-", "").replace("_", "").lower() != "utf8":
            # Positions are UTF-8 offsets, so other encodings are transcoded
            try:
                raw = raw.decode(encoding).encode("utf-8")
            except (UnicodeDecodeError, LookupError) as e:
                return LexResult(
                    success=False,
                    error_message=f"Cannot decode {path} as {encoding}: {e}"
                )

        logger.debug(f"Lexing {path} ({len(raw)} bytes)")
        return self.lex(raw)

    def lex_default(self) -> LexResult:
        """Tokenize the configured default source."""
        return self.lex(self._settings.default_source)
