"""
Subscriptions Package

Subscription records and the statistics computed over them.

Key Components:
- models: Subscription, BillingCycle, Category
- statistics: monthly_equivalent, compute_statistics, StatisticsSnapshot
- samples: first-run sample subscriptions
- validation: checks for manually entered records
- loader: JSON and DataFrame conversion for the command line (imported
  directly, not re-exported here)
"""

from .models import BillingCycle, Category, Subscription
from .samples import sample_subscriptions
from .statistics import (
    CategoryTotal,
    StatisticsSnapshot,
    TopSubscription,
    compute_statistics,
    monthly_equivalent,
)
from .validation import validate_amount, validate_subscription, validate_subscription_name

__all__ = [
    "BillingCycle",
    "Category",
    "CategoryTotal",
    "StatisticsSnapshot",
    "Subscription",
    "TopSubscription",
    "compute_statistics",
    "monthly_equivalent",
    "sample_subscriptions",
    "validate_amount",
    "validate_subscription",
    "validate_subscription_name",
]
