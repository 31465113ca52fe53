"""Tests for Item and numeric coercion of raw input."""

import math

import pytest

from invoice_items.models.item import Invalid, Item, Parsed, coerce_number, parse_number


@pytest.mark.parametrize(
    "text, expected",
    [
        ("2", 2.0),
        ("  12.5 ", 12.5),
        ("", 0.0),
        ("   ", 0.0),
        (".5", 0.5),
        ("5.", 5.0),
        ("-3", -3.0),
        ("+4", 4.0),
        ("1e3", 1000.0),
        ("2.5E-1", 0.25),
        ("0x1F", 31.0),
        ("0o17", 15.0),
        ("0b101", 5.0),
        ("Infinity", math.inf),
        ("-Infinity", -math.inf),
    ],
)
def test_parse_number_accepts(text, expected):
    assert parse_number(text) == Parsed(expected)


@pytest.mark.parametrize(
    "text",
    ["abc", "12abc", "1,5", "1_000", "nan", "inf", "infinity", "-0x10", "0x", "1e", ".", "--1", "1 2"],
)
def test_parse_number_rejects(text):
    assert parse_number(text) == Invalid(text)


def test_coerce_number_invalid_is_nan():
    assert math.isnan(coerce_number("doce"))
    assert coerce_number("12") == 12.0


def test_line_subtotal_applies_discount():
    item = Item(id=1, quantity=2, unit_price=180.5, discount=5)
    assert item.line_subtotal == pytest.approx(342.95)


def test_new_item_defaults():
    item = Item(id=7)
    assert item.description == ""
    assert item.quantity == 1
    assert item.unit_price == 0
    assert item.discount == 0
    assert item.line_subtotal == 0


def test_with_field_description_keeps_raw_text():
    item = Item(id=1)
    updated = item.with_field("description", "  Pintura 12 ")
    assert updated.description == "  Pintura 12 "
    assert item.description == ""


def test_with_field_numeric_coerces():
    item = Item(id=1).with_field("unit_price", "95.25")
    assert item.unit_price == 95.25


def test_with_field_invalid_numeric_marks_field():
    item = Item(id=1, quantity=2, unit_price=10).with_field("quantity", "dos")
    assert math.isnan(item.quantity)
    assert math.isnan(item.line_subtotal)
    assert item.invalid_fields() == ["quantity"]


def test_with_field_unknown_field_raises():
    with pytest.raises(ValueError):
        Item(id=1).with_field("id", "4")
