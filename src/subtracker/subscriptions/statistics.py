#!/usr/bin/env python3
"""
Subscription Statistics Engine

Pure aggregation over a list of subscriptions: monthly and yearly spend,
top subscriptions, category breakdown and upcoming renewals.

Every comparison and sum goes through monthly_equivalent() so that monthly
and yearly plans are measured on the same scale. Prices in different
currencies are summed as plain numbers; no exchange rates are applied.

Nothing here is cached or persisted: each call recomputes from the records it
is given, and the caller is responsible for passing a snapshot that is not
mutated mid-computation.
"""

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Iterable

from ..core.dates import Clock, resolve_clock
from .models import BillingCycle, Category, Subscription

logger = logging.getLogger(__name__)

MONTHS_PER_YEAR = 12
DEFAULT_TOP_N = 5
DEFAULT_RENEWAL_HORIZON_DAYS = 30


@dataclass(frozen=True)
class TopSubscription:
    """A subscription name with its monthly-equivalent price."""

    name: str
    monthly_price: Decimal


@dataclass
class CategoryTotal:
    """Monthly-equivalent spend for one category."""

    category: Category
    amount: Decimal = Decimal(0)

    @property
    def label(self) -> str:
        return self.category.label


@dataclass
class StatisticsSnapshot:
    """
    Aggregate view of a subscription list at one moment.

    monthly_average and total_spent are aliases of total_monthly and
    total_yearly; historical spend is not tracked. savings_potential is
    always zero.
    """

    total_monthly: Decimal
    total_yearly: Decimal
    active_count: int
    total_count: int
    top_subscriptions: list[TopSubscription] = field(default_factory=list)
    category_breakdown: list[CategoryTotal] = field(default_factory=list)
    upcoming_renewals: list[Subscription] = field(default_factory=list)
    savings_potential: Decimal = Decimal(0)

    @property
    def monthly_average(self) -> Decimal:
        return self.total_monthly

    @property
    def total_spent(self) -> Decimal:
        return self.total_yearly

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-friendly dictionary (Decimals as floats)."""
        return {
            "totalMonthly": float(self.total_monthly),
            "totalYearly": float(self.total_yearly),
            "activeCount": self.active_count,
            "totalCount": self.total_count,
            "topSubscriptions": [
                {"name": top.name, "price": float(top.monthly_price)} for top in self.top_subscriptions
            ],
            "categoryBreakdown": [
                {"category": entry.category.value, "name": entry.label, "amount": float(entry.amount)}
                for entry in self.category_breakdown
            ],
            "upcomingRenewals": [record.to_dict() for record in self.upcoming_renewals],
            "monthlyAverage": float(self.monthly_average),
            "totalSpent": float(self.total_spent),
            "savingsPotential": float(self.savings_potential),
        }


def monthly_equivalent(record: Subscription) -> Decimal:
    """
    Normalize a subscription's price to a monthly amount.

    Yearly plans are divided by 12; every other cycle is returned unchanged.
    """
    price = record.price.to_decimal()
    if record.billing_cycle == BillingCycle.YEARLY:
        return price / MONTHS_PER_YEAR
    return price


def top_subscriptions(active: list[Subscription], limit: int = DEFAULT_TOP_N) -> list[TopSubscription]:
    """
    The most expensive subscriptions by monthly-equivalent price.

    sorted() is stable, so equal prices keep their input order.
    """
    ranked = sorted(active, key=monthly_equivalent, reverse=True)
    return [TopSubscription(name=record.name, monthly_price=monthly_equivalent(record)) for record in ranked[:limit]]


def category_breakdown(active: list[Subscription]) -> list[CategoryTotal]:
    """Sum monthly-equivalent spend per category, in order of first appearance."""
    totals: dict[Category, CategoryTotal] = {}
    for record in active:
        category = Category.parse(record.category)
        entry = totals.setdefault(category, CategoryTotal(category=category))
        entry.amount += monthly_equivalent(record)
    return list(totals.values())


def upcoming_renewals(
    active: list[Subscription],
    clock: Clock | None = None,
    horizon_days: int = DEFAULT_RENEWAL_HORIZON_DAYS,
) -> list[Subscription]:
    """
    Subscriptions renewing strictly after now and within the horizon.

    Records without a next billing date are skipped.
    """
    now = resolve_clock(clock).now()

    due = []
    for record in active:
        if record.next_billing_date is None:
            logger.debug("Skipping %s in renewals: no next billing date", record.name)
            continue
        days_until = record.next_billing_date.days_until(now)
        if 0 < days_until <= horizon_days:
            due.append(record)

    return sorted(due, key=lambda record: record.next_billing_date)


def compute_statistics(
    records: Iterable[Subscription],
    clock: Clock | None = None,
    top_n: int = DEFAULT_TOP_N,
    renewal_horizon_days: int = DEFAULT_RENEWAL_HORIZON_DAYS,
) -> StatisticsSnapshot:
    """
    Compute spend statistics for a list of subscriptions.

    Only active subscriptions contribute to totals, rankings, the category
    breakdown and renewals; inactive ones are counted in total_count only.

    Args:
        records: Subscriptions to summarize
        clock: Time source for the renewal window (default: system clock)
        top_n: How many subscriptions to rank
        renewal_horizon_days: Renewal window length in days

    Returns:
        StatisticsSnapshot
    """
    records = list(records)
    active = [record for record in records if record.is_active]

    total_monthly = sum((monthly_equivalent(record) for record in active), Decimal(0))
    total_yearly = total_monthly * MONTHS_PER_YEAR

    snapshot = StatisticsSnapshot(
        total_monthly=total_monthly,
        total_yearly=total_yearly,
        active_count=len(active),
        total_count=len(records),
        top_subscriptions=top_subscriptions(active, top_n),
        category_breakdown=category_breakdown(active),
        upcoming_renewals=upcoming_renewals(active, clock, renewal_horizon_days),
    )

    logger.debug(
        "Computed statistics: %d/%d active, %s per month",
        snapshot.active_count,
        snapshot.total_count,
        snapshot.total_monthly,
    )
    return snapshot
