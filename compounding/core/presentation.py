"""Form parsing and display formatting around the accrual engine."""

from __future__ import annotations

import math
from typing import Dict, List, Mapping, Optional, Union

from compounding.core.accrual import AccrualInput, AccrualResult
from compounding.utils.logging import get_logger

logger = get_logger(__name__)

FREQUENCIES: Dict[str, int] = {
    "monthly": 12,
    "quarterly": 4,
    "annually": 1,
}


class FormError(ValueError):
    def __init__(self, errors: List[str]):
        super().__init__("; ".join(errors))
        self.errors = errors


def frequency_from_name(name: Union[str, int, None], field: str = "frequency") -> int:
    """Map a frequency option ("monthly", "quarterly", "annually" or a count) to periods per year.

    Unknown names fall back to once a year, like the form's select widget does.
    Numeric text must be a positive whole number.
    """
    if isinstance(name, int):
        return name
    key = (name or "").strip().lower()
    if key in FREQUENCIES:
        return FREQUENCIES[key]

    try:
        count = float(key)
    except ValueError:
        logger.warning("unknown frequency %r, using annual", name)
        return 1
    if not (math.isfinite(count) and count.is_integer() and count > 0):
        raise FormError([f"{field} must be a positive whole number"])
    return int(count)


def parse_number(text: Union[str, float, int, None], field: str) -> float:
    """Parse a form field; blank means zero, junk raises FormError."""
    if text is None:
        return 0.0
    if isinstance(text, (int, float)):
        return float(text)

    cleaned = text.strip().replace(",", "").replace("$", "")
    if not cleaned:
        return 0.0
    try:
        value = float(cleaned)
    except ValueError:
        raise FormError([f"{field} must be a number"]) from None
    if not math.isfinite(value):
        raise FormError([f"{field} must be a number"])
    return value


def parse_form(fields: Mapping[str, Optional[str]]) -> AccrualInput:
    """Build engine inputs from the calculator form's raw text fields."""
    numeric = {
        "principal": "principal",
        "rate": "annual_rate_percent",
        "time": "years",
        "contribution": "periodic_contribution",
    }

    values: Dict[str, float] = {}
    errors: List[str] = []
    for form_name, input_name in numeric.items():
        try:
            values[input_name] = parse_number(fields.get(form_name), form_name)
        except FormError as exc:
            errors.extend(exc.errors)

    frequencies: Dict[str, int] = {}
    for form_name in ("compoundFrequency", "contributionFrequency"):
        try:
            frequencies[form_name] = frequency_from_name(fields.get(form_name), form_name)
        except FormError as exc:
            errors.extend(exc.errors)

    if errors:
        raise FormError(errors)

    return AccrualInput(
        principal=values["principal"],
        annual_rate_percent=values["annual_rate_percent"],
        years=values["years"],
        periodic_contribution=values["periodic_contribution"],
        compounding_periods_per_year=frequencies["compoundFrequency"],
        contribution_periods_per_year=frequencies["contributionFrequency"],
    )


# Format a float as currency.
def format_currency(value: float) -> str:
    sign = "-" if value < 0 and round(value, 2) != 0 else ""
    return f"{sign}${abs(value):,.2f}"


def summarize(result: AccrualResult) -> Dict[str, str]:
    return {
        "savings": format_currency(result.ending_balance),
        "contributed": format_currency(result.total_contributed),
        "interest": format_currency(result.total_interest),
    }


def chart_data(result: AccrualResult) -> Dict[str, list]:
    """Line chart payload: x = period index, y = balance rounded for display."""
    return {
        "labels": [index for index, _ in result.series],
        "values": [round(balance, 2) for _, balance in result.series],
    }


__all__ = [
    "FREQUENCIES",
    "FormError",
    "chart_data",
    "format_currency",
    "frequency_from_name",
    "parse_form",
    "parse_number",
    "summarize",
]
