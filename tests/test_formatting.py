import math

import pytest

from invoice_items.formatting import format_currency, format_number, format_quantity

NBSP = "\u00a0"


@pytest.mark.parametrize(
    "amount, expected",
    [
        (0, "0,00"),
        (1104.95, "1104,95"),
        (1336.9895, "1336,99"),
        (12345.5, "12.345,50"),
        (1234567.891, "1.234.567,89"),
        (0.125, "0,13"),
        (-762, "-762,00"),
        (-98765.4, "-98.765,40"),
    ],
)
def test_format_currency(amount, expected):
    assert format_currency(amount) == f"{expected}{NBSP}€"


def test_format_currency_nan_and_infinity():
    assert format_currency(math.nan) == f"NaN{NBSP}€"
    assert format_currency(math.inf) == f"∞{NBSP}€"
    assert format_currency(-math.inf) == f"-∞{NBSP}€"


def test_format_number_for_inputs():
    assert format_number(2) == "2"
    assert format_number(180.5) == "180.5"
    assert format_number(math.nan) == ""
    assert format_number(math.inf) == "Infinity"


@pytest.mark.parametrize(
    "value, expected",
    [
        (2, "2"),
        (5.0, "5"),
        (2.5, "2,5"),
        (0.1236, "0,124"),
        (12345, "12.345"),
        (-1.25, "-1,25"),
        (math.nan, "NaN"),
    ],
)
def test_format_quantity(value, expected):
    assert format_quantity(value) == expected
