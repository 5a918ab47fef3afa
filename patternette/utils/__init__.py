# This file makes the 'utils' directory a Python package.

"""Patternette utilities."""

from .ids import snake_case

__all__ = [
    "snake_case",
]
