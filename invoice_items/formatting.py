"""Fixed es-ES currency formatting for amounts shown on the form."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext

from invoice_items import config

NBSP = "\u00a0"

# Spanish only groups thousands once the integer part reaches five digits.
_MIN_GROUPING_DIGITS = 5


def _group_thousands(digits: str) -> str:
    if len(digits) < _MIN_GROUPING_DIGITS:
        return digits
    head = len(digits) % 3 or 3
    groups = [digits[:head]]
    groups.extend(digits[i : i + 3] for i in range(head, len(digits), 3))
    return ".".join(groups)


def _format_decimal(amount: float, places: int, trim: bool) -> str:
    if math.isnan(amount):
        return "NaN"
    sign = "-" if math.copysign(1.0, amount) < 0 else ""
    if math.isinf(amount):
        return f"{sign}∞"
    with localcontext() as ctx:
        ctx.prec = 400
        quantized = Decimal(abs(amount)).quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)
    integer, fraction = f"{quantized:f}".split(".")
    if trim:
        fraction = fraction.rstrip("0")
    if not fraction:
        return f"{sign}{_group_thousands(integer)}"
    return f"{sign}{_group_thousands(integer)},{fraction}"


def format_amount(amount: float) -> str:
    """Return amount as es-ES digits: two decimals, decimal comma."""
    return _format_decimal(amount, 2, trim=False)


def format_quantity(value: float) -> str:
    """Return a plain es-ES number: up to three decimals, trailing zeros dropped."""
    return _format_decimal(value, 3, trim=True)


def format_currency(amount: float) -> str:
    """Return amount formatted as euros, e.g. ``12.345,50 €``."""
    return f"{format_amount(amount)}{NBSP}{config.CURRENCY_SYMBOL}"


def format_number(value: float) -> str:
    """Render a stored field value back into an input box."""
    if math.isnan(value):
        return ""
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))
