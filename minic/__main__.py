"""
Entry point for running minic as a module.

Usage:
    python -m minic lex input.c
"""

import sys
from .cli import main

if __name__ == "__main__":
    sys.exit(main())
