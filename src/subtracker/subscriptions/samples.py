#!/usr/bin/env python3
"""Sample subscriptions shown on first use, with renewal dates relative to now."""

from ..core.dates import Clock, resolve_clock
from ..core.money import Money
from .models import BillingCycle, Category, Subscription

# (id, name, price, category, renewal offset in days, notes)
_SAMPLES = [
    ("1", "Netflix", "149.99", Category.STREAMING, 15, "Premium plan"),
    ("2", "Spotify", "59.99", Category.MUSIC, 7, "Premium Individual"),
    ("3", "YouTube Premium", "89.99", Category.STREAMING, 20, ""),
    ("4", "Adobe Creative Cloud", "699.99", Category.PRODUCTIVITY, 25, "All Apps plan"),
    ("5", "iCloud", "29.99", Category.STORAGE, 10, "200GB plan"),
]


def sample_subscriptions(clock: Clock | None = None) -> list[Subscription]:
    """Build the sample subscription list, all monthly and active, priced in TRY."""
    today = resolve_clock(clock).today()

    return [
        Subscription(
            id=sample_id,
            name=name,
            price=Money.from_amount_str(price, "TRY"),
            billing_cycle=BillingCycle.MONTHLY,
            category=category,
            next_billing_date=today.add_days(offset),
            is_active=True,
            notes=notes,
        )
        for sample_id, name, price, category, offset, notes in _SAMPLES
    ]
