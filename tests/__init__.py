"""
Test suite for minic.

This package contains tests for the minic lexer including:
- Unit tests for the token model, cursor, pattern table and scan driver
- Tests for the compiler driver, JSON output and command-line interface
- Golden tests over the source fixtures in tests/fixtures
"""

__version__ = "0.1.0"
