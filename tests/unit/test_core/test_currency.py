#!/usr/bin/env python3
"""Tests for core currency utilities."""

from decimal import Decimal

import pytest

from subtracker.core.currency import (
    cents_to_amount_str,
    cents_to_decimal,
    format_amount,
    format_decimal,
    parse_amount_to_cents,
    safe_amount_to_cents,
)


class TestParseAmount:
    """Test parsing amounts captured from mail text."""

    @pytest.mark.currency
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("149,99", 14999),
            ("149.99", 14999),
            ("52.99", 5299),
            ("12", 1200),
            ("₺ 29,99", 2999),
            ("$0.05", 5),
        ],
    )
    def test_parse_amount_to_cents(self, text, expected):
        """Comma and dot decimals parse to the same minor units."""
        assert parse_amount_to_cents(text) == expected

    @pytest.mark.currency
    @pytest.mark.parametrize("text", ["", "  ", "free", "12..5"])
    def test_parse_amount_rejects_non_numbers(self, text):
        """Non-numeric text raises ValueError."""
        with pytest.raises(ValueError):
            parse_amount_to_cents(text)

    @pytest.mark.currency
    def test_safe_amount_to_cents(self):
        """Stored prices in any JSON form convert, invalid ones give None."""
        assert safe_amount_to_cents(149.99) == 14999
        assert safe_amount_to_cents(0.1) == 10
        assert safe_amount_to_cents(12) == 1200
        assert safe_amount_to_cents("59.99") == 5999
        assert safe_amount_to_cents(None) is None
        assert safe_amount_to_cents("abc") is None
        assert safe_amount_to_cents(True) is None


class TestFormatting:
    """Test amount formatting."""

    @pytest.mark.currency
    def test_cents_to_amount_str(self):
        assert cents_to_amount_str(14999) == "149.99"
        assert cents_to_amount_str(5) == "0.05"
        assert cents_to_amount_str(0) == "0.00"
        assert cents_to_amount_str(-4599) == "-45.99"

    @pytest.mark.currency
    def test_format_amount_uses_symbol(self):
        assert format_amount(14999, "TRY") == "₺149.99"
        assert format_amount(5299, "USD") == "$52.99"
        assert format_amount(100, "CHF") == "1.00 CHF"

    @pytest.mark.currency
    def test_cents_to_decimal_is_exact(self):
        assert cents_to_decimal(14999) == Decimal("149.99")

    @pytest.mark.currency
    def test_format_decimal_rounds_to_cents(self):
        """Monthly equivalents like 52.99 / 12 are shown rounded."""
        assert format_decimal(Decimal("52.99") / 12, "USD") == "$4.42"
        assert format_decimal(Decimal("200"), "TRY") == "₺200.00"
