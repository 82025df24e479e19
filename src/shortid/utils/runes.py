"""Helpers for working with sequences of symbols."""

from collections.abc import Iterable


def unique(symbols: Iterable[str]) -> list[str]:
    """Return the distinct symbols, keeping the order of first occurrence.

    Args:
        symbols: Any iterable of single characters (a string works)

    Returns:
        List of symbols without duplicates
    """
    return list(dict.fromkeys(symbols))


def sort_symbols(symbols: Iterable[str]) -> list[str]:
    """Return the symbols sorted by code point."""
    return sorted(symbols)
