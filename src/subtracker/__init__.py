"""
Subscription Tracker - Mail-Derived Subscription Extraction and Spend Statistics

Turns billing emails from well-known providers into structured subscription
records and summarizes a list of subscriptions into monthly/yearly spend.

Key Features:
- Provider detection from sender and subject (Netflix, Spotify, YouTube,
  Apple, Adobe, Amazon, Microsoft)
- Per-provider price, currency, billing cycle and renewal date extraction
- Best-effort batch extraction that never aborts on a single bad mail
- Monthly-equivalent normalization across billing cycles
- Category breakdown, top spenders and upcoming renewals

Domain Packages:
- core: Money, dates and clocks, configuration
- mail: Raw mail model, body decoding, provider parsers, extraction
- subscriptions: Subscription records, statistics, samples, validation
- cli: Command-line interface

Example Usage:
    from subtracker.mail import extract_all
    from subtracker.subscriptions import compute_statistics

Version: 0.1.0
"""

__version__ = "0.1.0"
__author__ = "Subscription Tracker Developers"

from .core.config import Environment, get_config
from .core.dates import Clock, FinancialDate, FixedClock, SystemClock
from .core.money import Money
from .mail.extractor import extract, extract_all
from .subscriptions.models import BillingCycle, Category, Subscription
from .subscriptions.statistics import StatisticsSnapshot, compute_statistics, monthly_equivalent

__all__ = [
    "BillingCycle",
    "Category",
    "Clock",
    # Configuration
    "Environment",
    "FinancialDate",
    "FixedClock",
    "Money",
    "StatisticsSnapshot",
    "Subscription",
    "SystemClock",
    "compute_statistics",
    # Extraction
    "extract",
    "extract_all",
    "get_config",
    "monthly_equivalent",
]
