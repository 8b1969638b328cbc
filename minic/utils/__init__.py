"""
Utility modules for minic.

This package contains helpers used throughout the compiler driver.
"""

from .settings import Settings, DEFAULT_SETTINGS

__all__ = [
    "Settings",
    "DEFAULT_SETTINGS",
]
