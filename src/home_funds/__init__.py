"""
Buy-versus-rent projection toolkit.

This package simulates, month by month, taking a mortgage to buy a property
against renting and investing the difference between the mortgage payment
and the rent, and returns a ledger of monthly records plus summary totals.
"""

from .errors import InvalidParameter
from .schemas import (
    InputParameters,
    PeriodRecord,
    ProjectionResult,
    SummaryTotals,
)
from .model import run

__all__ = [
    "InputParameters",
    "InvalidParameter",
    "PeriodRecord",
    "ProjectionResult",
    "SummaryTotals",
    "run",
]
