"""
Core compiler module for minic.

This module contains the compiler driver and the interchange format for
its results.
"""

from .compiler import Compiler, LexResult
from .output import result_to_json, token_to_json, error_to_json

__all__ = [
    "Compiler",
    "LexResult",
    "result_to_json",
    "token_to_json",
    "error_to_json",
]
