"""Unit tests for money helpers"""

import pytest
from decimal import Decimal

from auction_payments.domain.exceptions import InvalidAmountError
from auction_payments.utils.money import format_brl, parse_brl, quantize_cents, to_decimal


def test_parse_brl_formats():
    assert parse_brl("R$ 1.234,56") == Decimal("1234.56")
    assert parse_brl("1234.56") == Decimal("1234.56")
    assert parse_brl("1.234") == Decimal("1234")
    assert parse_brl("1.000.000") == Decimal("1000000")
    assert parse_brl("R$\xa0500,00") == Decimal("500.00")
    assert parse_brl("10") == Decimal("10")


def test_parse_brl_empty_or_garbage():
    assert parse_brl("") == Decimal("0")
    assert parse_brl(None) == Decimal("0")
    assert parse_brl("R$ ") == Decimal("0")
    assert parse_brl("abc") == Decimal("0")


def test_format_brl():
    assert format_brl(Decimal("1234.5")) == "R$ 1.234,50"
    assert format_brl(Decimal("1061.208")) == "R$ 1.061,21"
    assert format_brl(0) == "R$ 0,00"
    assert format_brl(Decimal("-10")) == "-R$ 10,00"


def test_quantize_cents_half_up():
    assert quantize_cents(Decimal("2.675")) == Decimal("2.68")
    assert quantize_cents(Decimal("2.665")) == Decimal("2.67")
    assert quantize_cents(1) == Decimal("1.00")


def test_to_decimal_float_keeps_literal():
    assert to_decimal(0.1) == Decimal("0.1")
    assert to_decimal("12.50") == Decimal("12.50")


def test_to_decimal_rejects_non_numeric():
    with pytest.raises(InvalidAmountError):
        to_decimal("abc")
    with pytest.raises(InvalidAmountError):
        to_decimal(None)
