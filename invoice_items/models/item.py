"""Line item dataclass and numeric coercion of raw form input."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, replace
from typing import List, Union

NUMERIC_FIELDS = ("quantity", "unit_price", "discount")
EDITABLE_FIELDS = ("description",) + NUMERIC_FIELDS

_DECIMAL_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_PREFIXED_RE = re.compile(r"0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)")
_INFINITY = {"Infinity": math.inf, "+Infinity": math.inf, "-Infinity": -math.inf}


@dataclass(frozen=True)
class Parsed:
    value: float


@dataclass(frozen=True)
class Invalid:
    text: str


ParseResult = Union[Parsed, Invalid]


def parse_number(text: str) -> ParseResult:
    """Parse form text the way a browser's ``Number(text)`` does.

    Surrounding whitespace is ignored and empty text reads as zero. Decimal
    and exponent notation, ``0x``/``0o``/``0b`` literals and ``Infinity`` are
    accepted; everything else is ``Invalid``.
    """
    stripped = text.strip()
    if not stripped:
        return Parsed(0.0)
    if stripped in _INFINITY:
        return Parsed(_INFINITY[stripped])
    if _PREFIXED_RE.fullmatch(stripped):
        return Parsed(float(int(stripped, 0)))
    if _DECIMAL_RE.fullmatch(stripped):
        return Parsed(float(stripped))
    return Invalid(text)


def coerce_number(text: str) -> float:
    """Return the parsed value, or NaN when the text is not a number."""
    result = parse_number(text)
    if isinstance(result, Parsed):
        return result.value
    return math.nan


@dataclass(frozen=True)
class Item:
    id: int
    description: str = ""
    quantity: float = 1
    unit_price: float = 0
    discount: float = 0

    @property
    def line_subtotal(self) -> float:
        return self.quantity * self.unit_price * (1 - self.discount / 100)

    def invalid_fields(self) -> List[str]:
        """Numeric fields currently holding NaN."""
        return [name for name in NUMERIC_FIELDS if math.isnan(getattr(self, name))]

    def with_field(self, field: str, raw_value: str) -> "Item":
        """Return a copy with one field replaced from raw form text."""
        if field == "description":
            return replace(self, description=raw_value)
        if field in NUMERIC_FIELDS:
            return replace(self, **{field: coerce_number(raw_value)})
        raise ValueError(f"Unknown item field '{field}'.")
