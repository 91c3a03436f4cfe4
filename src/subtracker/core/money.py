#!/usr/bin/env python3
"""
Money Primitive Type

Immutable currency value wrapper that uses integer minor units internally
and remembers which currency it is denominated in.
"""

from dataclasses import dataclass
from decimal import Decimal

from .currency import (
    DEFAULT_CURRENCY,
    cents_to_decimal,
    format_amount,
    parse_amount_to_cents,
)


@dataclass(frozen=True)
class Money:
    """
    Immutable money value in minor units.

    Examples:
        >>> price = Money.from_amount_str("149,99")
        >>> str(price)
        '₺149.99'
        >>> price.to_decimal()
        Decimal('149.99')

        >>> Money.from_amount_str("52.99", "USD").to_cents()
        5299
    """

    cents: int
    currency: str = DEFAULT_CURRENCY

    @classmethod
    def from_cents(cls, cents: int, currency: str = DEFAULT_CURRENCY) -> "Money":
        """Create Money from minor units."""
        return cls(cents=cents, currency=currency)

    @classmethod
    def from_amount_str(cls, amount_str: str, currency: str = DEFAULT_CURRENCY) -> "Money":
        """
        Parse from amount text like '149,99' or '52.99'.

        Raises:
            ValueError: If the text is not a number
        """
        return cls(cents=parse_amount_to_cents(amount_str), currency=currency)

    def to_cents(self) -> int:
        """Get value in minor units."""
        return self.cents

    def to_decimal(self) -> Decimal:
        """Get value as an exact Decimal amount."""
        return cents_to_decimal(self.cents)

    def __str__(self) -> str:
        """Format with currency symbol."""
        return format_amount(self.cents, self.currency)

    def __repr__(self) -> str:
        return f"Money(cents={self.cents}, currency={self.currency!r})"
