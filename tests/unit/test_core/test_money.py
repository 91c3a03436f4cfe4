#!/usr/bin/env python3
"""Tests for Money primitive type."""

from decimal import Decimal

import pytest

from subtracker.core.money import Money


class TestMoneyConstruction:
    """Test Money class construction."""

    @pytest.mark.currency
    def test_from_cents(self):
        m = Money.from_cents(1234, "USD")
        assert m.to_cents() == 1234
        assert m.currency == "USD"

    @pytest.mark.currency
    def test_default_currency_is_try(self):
        assert Money.from_cents(100).currency == "TRY"

    @pytest.mark.currency
    def test_from_amount_str_with_comma(self):
        m = Money.from_amount_str("149,99")
        assert m.to_cents() == 14999
        assert m.to_decimal() == Decimal("149.99")

    @pytest.mark.currency
    def test_from_amount_str_invalid(self):
        with pytest.raises(ValueError):
            Money.from_amount_str("n/a")


class TestMoneyEquality:
    """Test Money value equality."""

    @pytest.mark.currency
    def test_equality_includes_currency(self):
        assert Money.from_cents(100, "TRY") == Money.from_cents(100, "TRY")
        assert Money.from_cents(100, "TRY") != Money.from_cents(100, "USD")


class TestMoneyFormatting:
    """Test Money string output."""

    @pytest.mark.currency
    def test_str(self):
        assert str(Money.from_cents(14999)) == "₺149.99"
        assert str(Money.from_cents(5299, "USD")) == "$52.99"

    @pytest.mark.currency
    def test_repr(self):
        assert repr(Money.from_cents(5, "USD")) == "Money(cents=5, currency='USD')"
