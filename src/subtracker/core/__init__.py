"""
Core Utilities Package

Shared primitives used by the extraction pipeline and the statistics engine.

This package provides:
- Currency parsing with integer minor units for precision
- Money and FinancialDate value types
- Injectable clocks for deterministic "now"
- Configuration management for environment-specific settings
"""

from .config import (
    Config,
    Environment,
    get_config,
    reload_config,
)
from .currency import (
    CURRENCY_SYMBOLS,
    DEFAULT_CURRENCY,
    SUPPORTED_CURRENCIES,
    cents_to_amount_str,
    format_amount,
    parse_amount_to_cents,
    safe_amount_to_cents,
)
from .dates import Clock, FinancialDate, FixedClock, SystemClock, one_month_from
from .money import Money

__all__ = [
    "CURRENCY_SYMBOLS",
    "Clock",
    # Configuration
    "Config",
    "DEFAULT_CURRENCY",
    "Environment",
    "FinancialDate",
    "FixedClock",
    "Money",
    "SUPPORTED_CURRENCIES",
    "SystemClock",
    # Currency utilities
    "cents_to_amount_str",
    "format_amount",
    "get_config",
    "one_month_from",
    "parse_amount_to_cents",
    "reload_config",
    "safe_amount_to_cents",
]
