"""
Configuration settings for minic.

This module contains default configuration values used by the compiler
driver and the command-line interface.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Settings:
    """Driver settings and configuration.

    Attributes:
        default_source: Program lexed when no input file is given
        encoding: Encoding of input files
        json_indent: Indentation of JSON output (None for a single line)
        echo_source: Whether the CLI echoes the source to stderr
    """
    default_source: str = "int main () { return 0; }"
    encoding: str = "utf-8"
    json_indent: Optional[int] = 2
    echo_source: bool = True

    def __post_init__(self):
        if self.json_indent is not None and self.json_indent < 0:
            raise ValueError(f"json_indent must be >= 0, got {self.json_indent}")


# Global default settings instance
DEFAULT_SETTINGS = Settings()
