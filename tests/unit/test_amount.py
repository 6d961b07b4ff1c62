"""
------------------------------------------------------------------------------
Project:        GiroCode
File:           tests/unit/test_amount.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Unit tests for exact-decimal amount parsing and bounds.
------------------------------------------------------------------------------
"""

from decimal import Decimal

import pytest

from girocode import Amount, InvalidAmount


@pytest.mark.parametrize("raw, cents", [
    ("25.00", 2500),
    ("25.5", 2550),
    ("25.05", 2505),
    ("25", 2500),
    ("0.01", 1),
    ("0.1", 10),
    ("1234.56", 123456),
    ("999999999.99", 99_999_999_999),
])
def test_cents_are_exact(raw, cents):
    amount = Amount.parse(raw)

    assert amount.cents == cents
    assert amount.as_decimal() == Decimal(raw)
    assert 0 < amount.cents <= 99_999_999_999


def test_input_text_is_kept():
    """Serialization uses exactly what was validated."""
    assert str(Amount.parse("25.5")) == "25.5"
    assert str(Amount.parse(" 25.00 ")) == "25.00"


def test_formatted_always_has_two_decimals():
    assert Amount.parse("25.5").formatted() == "25.50"
    assert Amount.parse("7").formatted() == "7.00"


def test_upper_bound():
    assert Amount.parse("999999999.99").cents == 99_999_999_999
    with pytest.raises(InvalidAmount):
        Amount.parse("1000000000.00")


@pytest.mark.parametrize("raw", [
    "",
    "   ",
    "0",
    "0.00",
    "-5.00",
    "25.001",
    "25,00",
    "1e3",
    "25.",
    ".50",
    "EUR25.00",
])
def test_invalid_amounts(raw):
    with pytest.raises(InvalidAmount) as exc:
        Amount.parse(raw)
    assert exc.value.field == "amount"


def test_numeric_inputs():
    assert str(Amount.parse(25)) == "25"
    assert str(Amount.parse(Decimal("12.30"))) == "12.30"
    assert Amount.parse(0.1).cents == 10
    assert Amount.parse(16.9).cents == 1690


def test_float_is_not_rounded_into_validity():
    """0.001 has three decimals and stays invalid."""
    with pytest.raises(InvalidAmount):
        Amount.parse(0.001)


@pytest.mark.parametrize("raw", [True, None, [25], Decimal("NaN"), Decimal("Infinity")])
def test_unsupported_inputs(raw):
    with pytest.raises(InvalidAmount):
        Amount.parse(raw)
