from __future__ import annotations

import json
import logging
import os
from dataclasses import asdict
from datetime import date
from typing import Optional

import typer

from .errors import InvalidParameter
from .formatting import format_currency, simplified_form
from .model import run as run_projection
from .schemas import InputParameters

app = typer.Typer(help="Compare buying with a mortgage against renting and investing.")

# InputParameters field -> command-line option
_OPTION_NAMES = {
    "loan_amount": "--loan-amount",
    "annual_interest_rate_pct": "--interest-rate",
    "loan_term_years": "--loan-term",
    "monthly_rent": "--monthly-rent",
    "annual_investment_return_pct": "--investment-return",
    "annual_property_appreciation_pct": "--appreciation-rate",
    "annual_rent_escalation_pct": "--rent-escalation",
    "start_date": "--start-date",
}


def _default_start_date() -> Optional[str]:
    return os.environ.get("HOME_FUNDS_START_DATE")


def _parse_start_date(value: Optional[str]) -> Optional[date]:
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError as exc:
        raise typer.BadParameter(
            f"'{value}' is not an ISO date (YYYY-MM-DD)", param_hint="--start-date"
        ) from exc


def _amount_line(label: str, value: float) -> str:
    return f"{label}: {format_currency(value)} ({simplified_form(value)})"


@app.command()
def run(
    loan_amount: float = typer.Option(8_000_000, help="Amount borrowed."),
    interest_rate: float = typer.Option(
        8.55, help="Annual mortgage interest rate in percent (e.g., 8.55)."
    ),
    loan_term: int = typer.Option(20, help="Loan term in years."),
    monthly_rent: float = typer.Option(25_000, help="Rent due in the first month."),
    investment_return: float = typer.Option(
        12.0, help="Annual return on the invested difference, in percent."
    ),
    appreciation_rate: float = typer.Option(
        3.0, help="Annual property appreciation, in percent."
    ),
    rent_escalation: float = typer.Option(
        7.0, help="Rent increase applied every 13 months, in percent."
    ),
    start_date: Optional[str] = typer.Option(
        default_factory=_default_start_date,
        help="First month of the schedule, YYYY-MM-DD (env HOME_FUNDS_START_DATE, "
        "today if omitted).",
    ),
    show_timeline: bool = typer.Option(
        False, help="If set, dump the monthly records as JSON."
    ),
    yearly: bool = typer.Option(
        False, help="With --show-timeline, keep only the last record of each year."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logs."),
) -> None:
    """
    Project the mortgage schedule, rent, invested difference and property value.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        params = InputParameters(
            loan_amount=loan_amount,
            annual_interest_rate_pct=interest_rate,
            loan_term_years=loan_term,
            monthly_rent=monthly_rent,
            annual_investment_return_pct=investment_return,
            annual_property_appreciation_pct=appreciation_rate,
            annual_rent_escalation_pct=rent_escalation,
            start_date=_parse_start_date(start_date),
        )
    except InvalidParameter as exc:
        raise typer.BadParameter(
            exc.reason, param_hint=_OPTION_NAMES.get(exc.field, exc.field)
        ) from exc

    result = run_projection(params)
    totals = result.totals

    typer.echo(f"Monthly mortgage payment: {format_currency(totals.fixed_monthly_payment)}")
    typer.echo(f"Months projected: {len(result.records)}")
    typer.echo("")
    typer.echo("In case of buying")
    typer.echo(_amount_line("  Total mortgage paid", totals.total_mortgage_paid))
    typer.echo(_amount_line("  Property value", totals.final_property_value))
    typer.echo("In case of renting")
    typer.echo(_amount_line("  Total rent paid", totals.total_rent_paid))
    typer.echo(_amount_line("  Invested balance", totals.final_invested_balance))
    typer.echo("")
    typer.echo(f"Better outcome: {totals.better_option}")
    if result.break_even_month:
        years = result.break_even_month / 12
        typer.echo(
            f"Break-even month: {result.break_even_month} (~{years:.1f} years)"
        )

    if show_timeline:
        records = result.yearly() if yearly else result.records
        payload = [asdict(record) for record in records]
        typer.echo(json.dumps(payload, indent=2))


if __name__ == "__main__":
    app()
