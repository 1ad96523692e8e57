from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date
from typing import List, NamedTuple, Optional, Union

from .errors import InvalidParameter

# Whole currency units; a float only when the value overflowed to inf or nan.
Amount = Union[int, float]


def _require_positive_amount(field: str, value: float) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidParameter(field, "must be a number")
    if not math.isfinite(value):
        raise InvalidParameter(field, "must be finite")
    if value <= 0:
        raise InvalidParameter(field, "must be greater than zero")


def _require_percentage(field: str, value: float) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidParameter(field, "must be a number")
    if not math.isfinite(value):
        raise InvalidParameter(field, "must be finite")
    if value < 0:
        raise InvalidParameter(field, "must not be negative")


@dataclass(frozen=True)
class InputParameters:
    """Loan, rent and growth assumptions for one projection run."""

    loan_amount: float
    loan_term_years: int
    monthly_rent: float
    annual_interest_rate_pct: float = 8.55  # e.g., 8.55 means 8.55%
    annual_investment_return_pct: float = 12.0
    annual_property_appreciation_pct: float = 3.0
    annual_rent_escalation_pct: float = 7.0
    start_date: Optional[date] = None  # labels output years; today if omitted

    def __post_init__(self) -> None:
        _require_positive_amount("loan_amount", self.loan_amount)
        _require_positive_amount("monthly_rent", self.monthly_rent)
        if isinstance(self.loan_term_years, bool) or not isinstance(
            self.loan_term_years, int
        ):
            raise InvalidParameter("loan_term_years", "must be a whole number of years")
        if self.loan_term_years < 1:
            raise InvalidParameter("loan_term_years", "must be at least 1")
        _require_percentage("annual_interest_rate_pct", self.annual_interest_rate_pct)
        _require_percentage(
            "annual_investment_return_pct", self.annual_investment_return_pct
        )
        _require_percentage(
            "annual_property_appreciation_pct", self.annual_property_appreciation_pct
        )
        _require_percentage(
            "annual_rent_escalation_pct", self.annual_rent_escalation_pct
        )
        if self.start_date is not None and not isinstance(self.start_date, date):
            raise InvalidParameter("start_date", "must be a calendar date")

    @property
    def total_months(self) -> int:
        return self.loan_term_years * 12

    @property
    def monthly_interest_rate(self) -> float:
        return self.annual_interest_rate_pct / 100 / 12

    @property
    def monthly_investment_rate(self) -> float:
        return self.annual_investment_return_pct / 12 / 100

    @property
    def monthly_appreciation_rate(self) -> float:
        return self.annual_property_appreciation_pct / 12 / 100

    @property
    def annual_rent_escalation_fraction(self) -> float:
        return self.annual_rent_escalation_pct / 100


@dataclass(frozen=True)
class PeriodRecord:
    """One month of the schedule; currency fields are whole units."""

    month: int
    year: int
    principal_payment: Amount
    interest_payment: Amount
    remaining_principal: Amount
    total_payment: Amount
    rent_payment: Amount
    difference: Amount  # mortgage payment minus rent
    invested_balance: Amount
    property_value: Amount
    cumulative_mortgage_paid: Amount
    cumulative_rent_paid: Amount


@dataclass(frozen=True)
class SummaryTotals:
    fixed_monthly_payment: float
    total_mortgage_paid: float
    total_rent_paid: float
    final_invested_balance: float
    final_property_value: float

    @property
    def better_option(self) -> str:
        if self.final_property_value > self.final_invested_balance:
            return "buying"
        if self.final_invested_balance > self.final_property_value:
            return "renting"
        return "tie"


class ProjectionResult(NamedTuple):
    records: List[PeriodRecord]
    totals: SummaryTotals

    @property
    def break_even_month(self) -> Optional[int]:
        """First month in which the invested balance reaches the property value."""
        for record in self.records:
            if record.invested_balance >= record.property_value:
                return record.month
        return None

    def yearly(self) -> List[PeriodRecord]:
        """Last record of each calendar year, in order."""
        by_year: dict[int, PeriodRecord] = {}
        for record in self.records:
            by_year[record.year] = record
        return list(by_year.values())
