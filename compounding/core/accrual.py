"""Compound interest accrual with periodic contributions."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import List, Literal, Tuple

from compounding.utils.logging import get_logger

logger = get_logger(__name__)

Granularity = Literal["year", "period"]
GRANULARITIES: Tuple[str, ...] = ("year", "period")

# daily compounding for a thousand years
MAX_PERIODS = 366_000


class InvalidInput(ValueError):
    def __init__(self, errors: List[str]):
        super().__init__("; ".join(errors))
        self.errors = errors


@dataclass(frozen=True)
class AccrualInput:
    principal: float
    annual_rate_percent: float
    years: float
    periodic_contribution: float = 0.0
    compounding_periods_per_year: int = 12
    contribution_periods_per_year: int = 12


@dataclass(frozen=True)
class AccrualResult:
    ending_balance: float
    total_contributed: float
    total_interest: float
    series: List[Tuple[int, float]] = field(default_factory=list)


def validate_input(params: AccrualInput, granularity: str = "year") -> List[str]:
    errors: List[str] = []

    for name in (
        "principal",
        "annual_rate_percent",
        "years",
        "periodic_contribution",
        "compounding_periods_per_year",
        "contribution_periods_per_year",
    ):
        value = getattr(params, name)
        if not _is_finite(value):
            errors.append(f"{name} must be finite")

    for name in ("compounding_periods_per_year", "contribution_periods_per_year"):
        value = getattr(params, name)
        if not _is_finite(value):
            continue
        if value <= 0:
            errors.append(f"{name} must be positive")
        elif value != int(value):
            errors.append(f"{name} must be a whole number")

    if _is_finite(params.years) and params.years < 0:
        errors.append("years must not be negative")
    elif not errors and params.years * params.compounding_periods_per_year > MAX_PERIODS:
        errors.append(f"horizon must not exceed {MAX_PERIODS:,} compounding periods")

    if granularity not in GRANULARITIES:
        errors.append(f"granularity must be one of {', '.join(GRANULARITIES)}")

    return errors


def _is_finite(value: float) -> bool:
    try:
        return math.isfinite(value)
    except OverflowError:
        # ints too large to convert to float
        return False


def count_periods(years: float, periods_per_year: int) -> int:
    """Number of whole sub-periods covering the horizon (partial periods round up)."""
    return math.ceil(round(years * periods_per_year, 9))


def contributions_due(period: int, compounding: int, contributing: int) -> int:
    """How many contributions land at the end of compounding sub-period ``period``.

    Contribution k (1-based) falls at k / contributing years, which is inside
    sub-period ``period`` when (period - 1) / compounding < k / contributing <= period / compounding.
    """
    return (period * contributing) // compounding - ((period - 1) * contributing) // compounding


def compute(params: AccrualInput, granularity: Granularity = "year") -> AccrualResult:
    """
    Project a balance under compound interest with periodic contributions.

    Order of operations (per compounding sub-period):
      1) Apply growth at the per-period rate to the running balance.
      2) Add the contributions that fall due at the END of the sub-period
         (ordinary annuity: a contribution earns nothing in the period it lands).
      3) Record a series point at the end of each year (or each sub-period).

    The principal counts as contributed. Balances are never rounded or clamped.
    """
    errors = validate_input(params, granularity)
    if errors:
        raise InvalidInput(errors)

    compounding = int(params.compounding_periods_per_year)
    contributing = int(params.contribution_periods_per_year)
    rate = params.annual_rate_percent / 100.0 / compounding
    total_periods = count_periods(params.years, compounding)
    logger.debug("accruing %d periods at %.6f per period", total_periods, rate)

    balance = float(params.principal)
    contributed = float(params.principal)
    series: List[Tuple[int, float]] = []

    for period in range(1, total_periods + 1):
        balance *= 1.0 + rate

        due = contributions_due(period, compounding, contributing)
        if due:
            amount = params.periodic_contribution * due
            balance += amount
            contributed += amount

        if granularity == "period":
            series.append((period, balance))
        elif period % compounding == 0:
            series.append((period // compounding, balance))

    # horizon ends part-way through a year: close the chart on the final balance
    if granularity == "year" and total_periods % compounding:
        series.append((math.ceil(total_periods / compounding), balance))

    interest = balance - contributed
    if not all(math.isfinite(value) for value in (balance, contributed, interest)):
        raise InvalidInput(["balance overflows; reduce the rate, horizon or amounts"])

    return AccrualResult(
        ending_balance=balance,
        total_contributed=contributed,
        total_interest=interest,
        series=series,
    )


__all__ = [
    "AccrualInput",
    "AccrualResult",
    "GRANULARITIES",
    "Granularity",
    "InvalidInput",
    "MAX_PERIODS",
    "compute",
    "contributions_due",
    "count_periods",
    "validate_input",
]
