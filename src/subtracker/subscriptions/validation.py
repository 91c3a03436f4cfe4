#!/usr/bin/env python3
"""
Subscription Record Validation

Checks applied to manually entered or imported records before they are saved.
Extraction output is best effort and is not run through these checks
automatically; callers decide whether to validate parsed records.

One price rule applies everywhere: a price is valid when it is finite and
between PRICE_MIN and PRICE_MAX inclusive. Zero is allowed for free tiers.
"""

from decimal import Decimal, InvalidOperation
from typing import Any

from ..core.currency import SUPPORTED_CURRENCIES
from .models import BillingCycle, Subscription

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 100
PRICE_MIN = Decimal(0)
PRICE_MAX = Decimal(999999)


def validate_subscription_name(name: Any) -> bool:
    """Name must be a string of 2-100 characters after trimming."""
    if not name or not isinstance(name, str):
        return False
    return NAME_MIN_LENGTH <= len(name.strip()) <= NAME_MAX_LENGTH


def validate_amount(amount: Any) -> bool:
    """
    Amount must be a finite number from PRICE_MIN to PRICE_MAX inclusive.

    Strings are accepted ("149.99").
    """
    if amount is None or isinstance(amount, bool):
        return False
    try:
        value = Decimal(str(amount))
    except InvalidOperation:
        return False
    return value.is_finite() and PRICE_MIN <= value <= PRICE_MAX


def validate_subscription(record: Subscription) -> list[str]:
    """
    Validate a subscription and return a list of error messages.

    An empty list means the record is valid.
    """
    errors = []

    if not validate_subscription_name(record.name):
        errors.append(f"Name must be {NAME_MIN_LENGTH}-{NAME_MAX_LENGTH} characters: {record.name!r}")

    price = record.price.to_decimal()
    if not validate_amount(price):
        errors.append(f"Price must be between {PRICE_MIN} and {PRICE_MAX}: {price}")

    if record.currency not in SUPPORTED_CURRENCIES:
        errors.append(f"Unsupported currency: {record.currency}")

    if not isinstance(record.billing_cycle, BillingCycle):
        errors.append(f"Unknown billing cycle: {record.billing_cycle!r}")

    return errors
