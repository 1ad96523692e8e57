"""
Display helpers for projection output.

Amounts are abbreviated with the Indian numbering suffixes used by the
calculator's charts: K (thousand), L (lakh) and CR (crore).
"""

from __future__ import annotations

from typing import List, Tuple

# (upper bound, divisor, suffix), checked in order
_SUFFIXES: List[Tuple[float, float, str]] = [
    (100_000, 1_000, "K"),
    (10_000_000, 100_000, "L"),
]
_CRORE = 10_000_000


def simplified_form(value: float, decimals: int = 3) -> str:
    """
    Abbreviate ``value`` for labels, e.g. ``simplified_form(8_000_000) == "80.000L"``.

    Magnitudes below 10,000 are printed as whole numbers without a suffix.
    """
    sign = "-" if value < 0 else ""
    magnitude = abs(value)
    if magnitude < 10_000:
        return f"{sign}{magnitude:.0f}"
    for upper, divisor, suffix in _SUFFIXES:
        if magnitude < upper:
            return f"{sign}{magnitude / divisor:.{decimals}f}{suffix}"
    return f"{sign}{magnitude / _CRORE:.{decimals}f}CR"


def format_currency(value: float) -> str:
    return f"{value:,.0f}"
