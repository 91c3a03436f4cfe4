#!/usr/bin/env python3
"""
Subscription Data Models

The subscription record produced by mail extraction (or entered by hand) and
consumed by the statistics engine, plus the closed vocabularies for billing
cycles and categories.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any

from ..core.currency import DEFAULT_CURRENCY, safe_amount_to_cents
from ..core.dates import FinancialDate
from ..core.money import Money

logger = logging.getLogger(__name__)


class BillingCycle(Enum):
    """Renewal period of a subscription."""

    MONTHLY = "monthly"
    YEARLY = "yearly"
    WEEKLY = "weekly"
    DAILY = "daily"

    @property
    def label(self) -> str:
        return _CYCLE_LABELS[self]

    @classmethod
    def parse(cls, value: Any) -> "BillingCycle":
        """Parse a stored cycle value; anything unrecognized is monthly."""
        if isinstance(value, BillingCycle):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            return cls.MONTHLY


_CYCLE_LABELS = {
    BillingCycle.MONTHLY: "Monthly",
    BillingCycle.YEARLY: "Yearly",
    BillingCycle.WEEKLY: "Weekly",
    BillingCycle.DAILY: "Daily",
}


class Category(Enum):
    """Subscription categories."""

    STREAMING = "streaming"
    MUSIC = "music"
    CLOUD = "cloud"
    SOFTWARE = "software"
    PRODUCTIVITY = "productivity"
    GAMING = "gaming"
    NEWS = "news"
    FITNESS = "fitness"
    EDUCATION = "education"
    STORAGE = "storage"
    OTHER = "other"

    @property
    def label(self) -> str:
        """Human-readable category name."""
        return _CATEGORY_LABELS[self]

    @classmethod
    def parse(cls, value: Any) -> "Category":
        """Parse a stored category value; missing or unknown values are OTHER."""
        if isinstance(value, Category):
            return value
        if not value:
            return cls.OTHER
        try:
            return cls(str(value).lower())
        except ValueError:
            return cls.OTHER


_CATEGORY_LABELS = {
    Category.STREAMING: "Video Streaming",
    Category.MUSIC: "Music",
    Category.CLOUD: "Cloud Storage",
    Category.SOFTWARE: "Software",
    Category.PRODUCTIVITY: "Productivity",
    Category.GAMING: "Gaming",
    Category.NEWS: "News",
    Category.FITNESS: "Health & Fitness",
    Category.EDUCATION: "Education",
    Category.STORAGE: "Storage",
    Category.OTHER: "Other",
}


@dataclass(frozen=True)
class Subscription:
    """
    A recurring subscription.

    Records coming out of mail extraction carry provenance fields (provider,
    source_email, email_date, raw_subject); these are informational only and
    never read by the statistics engine.
    """

    name: str
    price: Money
    billing_cycle: BillingCycle = BillingCycle.MONTHLY
    category: Category = Category.OTHER
    next_billing_date: FinancialDate | None = None
    is_active: bool = True

    # Bookkeeping for stored records
    id: str | None = None
    notes: str | None = None

    # Provenance
    provider: str | None = None
    source_email: str | None = None
    email_date: str | None = None
    raw_subject: str | None = None

    @property
    def currency(self) -> str:
        """Currency code of the price."""
        return self.price.currency

    def to_dict(self) -> dict[str, Any]:
        """
        Convert to the app's stored-record shape (camelCase keys).

        Prices are written as JSON numbers ("149.99" -> 149.99).
        """
        return {
            "id": self.id,
            "name": self.name,
            "price": float(self.price.to_decimal()),
            "currency": self.price.currency,
            "billingCycle": self.billing_cycle.value,
            "category": self.category.value,
            "nextBillingDate": self.next_billing_date.to_iso_string() if self.next_billing_date else None,
            "isActive": self.is_active,
            "notes": self.notes,
            "provider": self.provider,
            "sourceEmail": self.source_email,
            "emailDate": self.email_date,
            "rawSubject": self.raw_subject,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Subscription":
        """
        Create a Subscription from a stored record (inverse of to_dict).

        Accepts float or string prices and ISO dates or datetimes for
        nextBillingDate. An unreadable date becomes None rather than failing.

        Raises:
            ValueError: If name or price is missing or invalid
        """
        name = data.get("name")
        if not name:
            raise ValueError("Subscription record has no name")

        cents = safe_amount_to_cents(data.get("price"))
        if cents is None:
            raise ValueError(f"Subscription {name!r} has an invalid price: {data.get('price')!r}")

        next_billing_date = None
        raw_date = data.get("nextBillingDate")
        if raw_date:
            try:
                next_billing_date = FinancialDate.from_iso(str(raw_date))
            except ValueError:
                logger.warning("Ignoring unreadable nextBillingDate %r for %s", raw_date, name)

        return cls(
            name=name,
            price=Money.from_cents(cents, data.get("currency") or DEFAULT_CURRENCY),
            billing_cycle=BillingCycle.parse(data.get("billingCycle")),
            category=Category.parse(data.get("category")),
            next_billing_date=next_billing_date,
            is_active=bool(data.get("isActive", True)),
            id=data.get("id"),
            notes=data.get("notes"),
            provider=data.get("provider"),
            source_email=data.get("sourceEmail"),
            email_date=data.get("emailDate"),
            raw_subject=data.get("rawSubject"),
        )
