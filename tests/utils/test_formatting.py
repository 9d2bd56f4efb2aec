"""Tests for display formatting helpers."""

from decimal import Decimal

from src.utils.decimal_utils import coerce_decimal, round_amount
from src.utils.formatting import (
    format_currency,
    format_currency_for_display,
    format_percent,
)


def test_format_currency_uses_magnitude_and_grouping() -> None:
    assert format_currency(Decimal("1234.5")) == "RS. 1,234.50"
    assert format_currency(Decimal("-99.999")) == "RS. 100.00"
    assert format_currency(10, prefix="€") == "€ 10.00"


def test_format_currency_for_display_rounds_to_units() -> None:
    assert format_currency_for_display(Decimal("1499.50")) == "RS. 1,500"
    assert format_currency_for_display(None) == "RS. 0"


def test_format_percent_and_coerce_decimal() -> None:
    assert format_percent(Decimal("60")) == "60.0%"
    assert coerce_decimal(1.5) == Decimal("1.5")
    assert coerce_decimal(None) == Decimal("0")


def test_round_amount_rounds_half_up() -> None:
    assert round_amount("2.345") == Decimal("2.35")
    assert round_amount(Decimal("1499.5"), decimals=0) == Decimal("1500")


def test_coerce_decimal_keeps_printed_float_digits() -> None:
    """Floats from SQLite keep their printed digits."""
    assert coerce_decimal(45.5) == Decimal("45.5")
    assert coerce_decimal(None) == Decimal("0")


def test_format_currency_groups_lakhs_and_crores() -> None:
    """Digits past the thousands group in pairs."""
    assert format_currency(Decimal("123456")) == "RS. 1,23,456.00"
    assert format_currency(Decimal("-1234567.891")) == "RS. 12,34,567.89"
    assert format_currency_for_display(Decimal("123456789")) == (
        "RS. 12,34,56,789"
    )
    assert format_currency_for_display(Decimal("999")) == "RS. 999"
