"""
Pytest configuration and fixtures for minic tests.
"""

import pytest
import tempfile
from pathlib import Path


@pytest.fixture
def temp_dir():
    """Provide a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmp:
        yield Path(tmp)


@pytest.fixture
def sample_c_file(temp_dir):
    """Create a sample source file for testing."""
    c_file = temp_dir / "test_input.c"
    c_file.write_text("int main(void) {\n    return 42;\n}\n", encoding="utf-8")
    return c_file


@pytest.fixture
def lexer():
    """Provide a Lexer instance."""
    from minic import Lexer
    return Lexer()


@pytest.fixture
def compiler():
    """Provide a Compiler instance."""
    from minic import Compiler
    return Compiler()
