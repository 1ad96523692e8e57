from __future__ import annotations

import logging
import math
from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from typing import NamedTuple

from .schemas import (
    Amount,
    InputParameters,
    PeriodRecord,
    ProjectionResult,
    SummaryTotals,
)

logger = logging.getLogger(__name__)

# Rent steps up on months divisible by this, not every 12th month.
RENT_ESCALATION_CADENCE_MONTHS = 13


class _LoopState(NamedTuple):
    principal: float
    rent: float
    invested: float
    property_value: float
    mortgage_paid: float
    rent_paid: float


def run(params: InputParameters) -> ProjectionResult:
    """
    Simulate buying with a mortgage against renting and investing the difference.

    Each month splits the fixed payment into interest and principal, escalates
    rent on the 13-month cadence, compounds the property value, and adds the
    payment-minus-rent difference to the invested balance before compounding
    it. Values are rounded to whole units only in the emitted records.
    """
    start = params.start_date or date.today()
    months = params.total_months
    monthly_rate = params.monthly_interest_rate
    payment = monthly_mortgage_payment(params.loan_amount, monthly_rate, months)
    logger.debug(
        "Projecting %d months from %s: payment=%.2f rate=%.6f",
        months,
        start.isoformat(),
        payment,
        monthly_rate,
    )

    state = _LoopState(
        principal=float(params.loan_amount),
        rent=float(params.monthly_rent),
        invested=0.0,
        property_value=float(params.loan_amount),
        mortgage_paid=0.0,
        rent_paid=0.0,
    )
    records: list[PeriodRecord] = []

    for month in range(1, months + 1):
        interest_payment = state.principal * monthly_rate
        principal_payment = payment - interest_payment
        state = _step(state, month, payment, principal_payment, params)

        records.append(
            PeriodRecord(
                month=month,
                year=year_label(start, month),
                principal_payment=round_currency(principal_payment),
                interest_payment=round_currency(interest_payment),
                remaining_principal=round_currency(state.principal),
                total_payment=round_currency(payment),
                rent_payment=round_currency(state.rent),
                difference=round_currency(payment - state.rent),
                invested_balance=round_currency(state.invested),
                property_value=round_currency(state.property_value),
                cumulative_mortgage_paid=round_currency(state.mortgage_paid),
                cumulative_rent_paid=round_currency(state.rent_paid),
            )
        )

    totals = SummaryTotals(
        fixed_monthly_payment=payment,
        total_mortgage_paid=state.mortgage_paid,
        total_rent_paid=state.rent_paid,
        final_invested_balance=state.invested,
        final_property_value=state.property_value,
    )
    logger.debug(
        "Projection finished: invested=%.2f property=%.2f residual_principal=%.4f",
        totals.final_invested_balance,
        totals.final_property_value,
        state.principal,
    )
    return ProjectionResult(records=records, totals=totals)


def _step(
    state: _LoopState,
    month: int,
    payment: float,
    principal_payment: float,
    params: InputParameters,
) -> _LoopState:
    rent = state.rent
    if month % RENT_ESCALATION_CADENCE_MONTHS == 0:
        rent *= 1 + params.annual_rent_escalation_fraction

    difference = payment - rent
    return _LoopState(
        principal=state.principal - principal_payment,
        rent=rent,
        invested=(state.invested + difference) * (1 + params.monthly_investment_rate),
        property_value=state.property_value * (1 + params.monthly_appreciation_rate),
        mortgage_paid=state.mortgage_paid + payment,
        rent_paid=state.rent_paid + rent,
    )


def monthly_mortgage_payment(
    principal: float, monthly_rate: float, term_months: int
) -> float:
    # Near-zero rates make the annuity denominator vanish.
    if abs(monthly_rate) < 1e-12:
        return principal / term_months
    # 1 - (1 + r) ** -n, without cancellation for tiny r
    denominator = -math.expm1(-term_months * math.log1p(monthly_rate))
    return principal * monthly_rate / denominator


def year_label(start: date, months_elapsed: int) -> int:
    """Calendar year reached after advancing ``months_elapsed`` months from ``start``."""
    return start.year + (start.month - 1 + months_elapsed) // 12


def round_currency(value: float) -> Amount:
    # Overflowed values (inf/nan) are emitted as-is.
    if not math.isfinite(value):
        return value
    # Half-up, so 0.5 rounds away from zero instead of to even.
    return int(Decimal(repr(value)).to_integral_value(rounding=ROUND_HALF_UP))
