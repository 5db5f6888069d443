from __future__ import annotations

import logging

import pytest

from compounding.core.accrual import AccrualInput, AccrualResult, compute
from compounding.core.presentation import (
    FormError,
    chart_data,
    format_currency,
    frequency_from_name,
    parse_form,
    parse_number,
    summarize,
)


def lump_sum_result() -> AccrualResult:
    return compute(AccrualInput(1000.0, 5.0, 10, 0.0, 1, 1))


@pytest.mark.parametrize(
    "value, expected",
    [
        (1628.894627, "$1,628.89"),
        (0, "$0.00"),
        (1234567.5, "$1,234,567.50"),
        (-12.5, "-$12.50"),
        (-0.001, "$0.00"),
    ],
)
def test_format_currency(value, expected):
    assert format_currency(value) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("", 0.0),
        ("   ", 0.0),
        (None, 0.0),
        ("1,000", 1000.0),
        (" $25.50 ", 25.5),
        ("-3", -3.0),
        (7, 7.0),
    ],
)
def test_parse_number(text, expected):
    assert parse_number(text, "principal") == expected


@pytest.mark.parametrize("text", ["abc", "1.2.3", "nan", "inf"])
def test_parse_number_rejects_junk(text):
    with pytest.raises(FormError) as excinfo:
        parse_number(text, "rate")

    assert excinfo.value.errors == ["rate must be a number"]


def test_frequency_names():
    assert frequency_from_name("monthly") == 12
    assert frequency_from_name("Quarterly") == 4
    assert frequency_from_name("annually") == 1
    assert frequency_from_name("52") == 52
    assert frequency_from_name(365) == 365


def test_unknown_frequency_falls_back_to_annual(caplog):
    with caplog.at_level(logging.WARNING, logger="compounding.core.presentation"):
        assert frequency_from_name("fortnightly") == 1

    assert "fortnightly" in caplog.text


def test_parse_form_builds_engine_input():
    params = parse_form(
        {
            "principal": "10,000",
            "rate": "7",
            "time": "20",
            "contribution": "",
            "compoundFrequency": "quarterly",
            "contributionFrequency": "monthly",
        }
    )

    assert params == AccrualInput(
        principal=10000.0,
        annual_rate_percent=7.0,
        years=20.0,
        periodic_contribution=0.0,
        compounding_periods_per_year=4,
        contribution_periods_per_year=12,
    )


def test_parse_form_reports_every_bad_field():
    with pytest.raises(FormError) as excinfo:
        parse_form({"principal": "lots", "rate": "5", "time": "ten"})

    assert excinfo.value.errors == ["principal must be a number", "time must be a number"]


def test_summarize_formats_result():
    assert summarize(lump_sum_result()) == {
        "savings": "$1,628.89",
        "contributed": "$1,000.00",
        "interest": "$628.89",
    }


def test_chart_data_rounds_for_display():
    chart = chart_data(lump_sum_result())

    assert chart["labels"] == list(range(1, 11))
    assert chart["values"][0] == 1050.0
    assert chart["values"][-1] == 1628.89


def test_chart_data_empty_for_zero_years():
    chart = chart_data(compute(AccrualInput(1000.0, 5.0, 0, 0.0, 1, 1)))

    assert chart == {"labels": [], "values": []}


def test_numeric_frequency_text():
    assert frequency_from_name("12.0") == 12
    assert frequency_from_name(" 4 ") == 4


@pytest.mark.parametrize("text", ["-4", "0", "1.5", "nan", "inf"])
def test_malformed_numeric_frequency_is_rejected(text):
    with pytest.raises(FormError) as excinfo:
        frequency_from_name(text, "compoundFrequency")

    assert excinfo.value.errors == ["compoundFrequency must be a positive whole number"]


def test_parse_form_reports_bad_frequency_with_other_fields():
    with pytest.raises(FormError) as excinfo:
        parse_form(
            {
                "principal": "lots",
                "rate": "5",
                "time": "10",
                "compoundFrequency": "monthly",
                "contributionFrequency": "-4",
            }
        )

    assert excinfo.value.errors == [
        "principal must be a number",
        "contributionFrequency must be a positive whole number",
    ]
