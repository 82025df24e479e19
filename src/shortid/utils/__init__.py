"""Utility functions for the short id package."""

from shortid.utils.runes import sort_symbols, unique

__all__ = [
    "sort_symbols",
    "unique",
]
