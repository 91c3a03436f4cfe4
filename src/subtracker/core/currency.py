#!/usr/bin/env python3
"""
Currency Parsing and Formatting Utilities

All amounts are held as integer minor units (kuruş, cents) to avoid
floating-point drift. Decimal is used only at the edges: when parsing text
pulled out of an email and when producing normalized values for statistics.

Amount Formats Seen in Billing Mail:
- Turkish style with comma decimal: "149,99"
- Dot decimal: "149.99"
- With symbol or code: "₺149,99", "TRY 149.99", "52.99 USD"
"""

from decimal import Decimal, InvalidOperation
from typing import Union

DEFAULT_CURRENCY = "TRY"

SUPPORTED_CURRENCIES = ["TRY", "USD", "EUR", "GBP"]

CURRENCY_SYMBOLS = {
    "TRY": "₺",
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
}


def parse_amount_to_cents(amount_str: str) -> int:
    """
    Parse an amount captured from mail text to integer minor units.

    A single comma is treated as the decimal separator, matching the
    "149,99" style used in Turkish receipts.

    Args:
        amount_str: Amount text like "149,99", "52.99" or "₺ 29,99"

    Returns:
        Amount in minor units

    Raises:
        ValueError: If the text is not a number

    Examples:
        parse_amount_to_cents("149,99") -> 14999
        parse_amount_to_cents("52.99") -> 5299
        parse_amount_to_cents("12") -> 1200
    """
    clean = amount_str.strip()
    for symbol in CURRENCY_SYMBOLS.values():
        clean = clean.replace(symbol, "")
    clean = clean.strip().replace(",", ".", 1)

    if not clean:
        raise ValueError(f"Empty amount: {amount_str!r}")

    try:
        decimal_amount = Decimal(clean)
    except InvalidOperation as e:
        raise ValueError(f"Invalid amount: {amount_str!r}") from e

    return int((decimal_amount * 100).to_integral_value())


def safe_amount_to_cents(amount: Union[str, int, float, None]) -> int | None:
    """
    Convert a stored price (float, int or string) to minor units.

    Stored records carry prices as JSON numbers (149.99), so floats are
    routed through their string form before Decimal conversion.

    Returns:
        Amount in minor units, or None for missing/invalid input
    """
    if amount is None or isinstance(amount, bool):
        return None
    try:
        if isinstance(amount, int):
            return amount * 100
        return parse_amount_to_cents(str(amount))
    except ValueError:
        return None


def cents_to_decimal(cents: int) -> Decimal:
    """Convert minor units to a Decimal amount (14999 -> Decimal('149.99'))."""
    return Decimal(cents) / 100


def cents_to_amount_str(cents: int) -> str:
    """
    Convert minor units to an amount string using integer arithmetic.

    Example:
        cents_to_amount_str(14999) -> "149.99"
    """
    is_negative = cents < 0
    abs_cents = abs(int(cents))

    whole = abs_cents // 100
    remainder = abs_cents % 100

    if is_negative:
        return f"-{whole}.{remainder:02d}"
    return f"{whole}.{remainder:02d}"


def format_amount(cents: int, currency: str = DEFAULT_CURRENCY) -> str:
    """Format minor units with the currency symbol, falling back to the code."""
    symbol = CURRENCY_SYMBOLS.get(currency)
    if symbol:
        return f"{symbol}{cents_to_amount_str(cents)}"
    return f"{cents_to_amount_str(cents)} {currency}"


def format_decimal(amount: Decimal, currency: str = DEFAULT_CURRENCY) -> str:
    """Format a Decimal amount (e.g. a monthly equivalent) rounded to 2 places."""
    cents = int((amount * 100).quantize(Decimal("1")))
    return format_amount(cents, currency)
