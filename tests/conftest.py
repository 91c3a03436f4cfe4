"""
Pytest Configuration and Shared Fixtures

Provides common test fixtures and configuration for the entire test suite.
"""

from datetime import datetime

import pytest

from subtracker.core.dates import FixedClock
from subtracker.core.money import Money
from subtracker.subscriptions.models import BillingCycle, Category, Subscription
from tests.fixtures.mail_samples import gmail_message

FIXED_NOW = datetime(2025, 3, 15, 10, 30, 0)


@pytest.fixture
def fixed_clock() -> FixedClock:
    """Clock pinned at FIXED_NOW."""
    return FixedClock(FIXED_NOW)


@pytest.fixture
def netflix_message() -> dict:
    """Netflix receipt with a TRY price and no renewal date."""
    return gmail_message(
        sender="Netflix <billing@netflix.com>",
        subject="Your Netflix receipt",
        body="Thanks for watching. Your plan: Premium. Amount charged: ₺149,99",
    )


@pytest.fixture
def unknown_message() -> dict:
    """Mail from a sender that is not a billing provider."""
    return gmail_message(
        sender="Grandma <grandma@example.org>",
        subject="Sunday lunch",
        body="Bring dessert. It cost me 12,50 TL last time.",
    )


@pytest.fixture
def make_subscription():
    """Factory for Subscription records with sensible defaults."""

    def _make(
        name: str = "Test Service",
        price: str = "100.00",
        billing_cycle: BillingCycle = BillingCycle.MONTHLY,
        category: Category = Category.STREAMING,
        is_active: bool = True,
        next_billing_date=None,
        currency: str = "TRY",
    ) -> Subscription:
        return Subscription(
            name=name,
            price=Money.from_amount_str(price, currency),
            billing_cycle=billing_cycle,
            category=category,
            next_billing_date=next_billing_date,
            is_active=is_active,
        )

    return _make


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch, tmp_path):
    """Set up test environment variables."""
    monkeypatch.setenv("SUBTRACKER_ENV", "test")
    monkeypatch.setenv("SUBTRACKER_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.delenv("EXTRACT_WORKERS", raising=False)
    monkeypatch.delenv("RENEWAL_HORIZON_DAYS", raising=False)
    monkeypatch.delenv("TOP_SUBSCRIPTIONS", raising=False)
    monkeypatch.delenv("DEFAULT_CURRENCY", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)


# Test markers for categorizing tests
def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests for individual components")
    config.addinivalue_line("markers", "integration: Integration tests for complete workflows")
    config.addinivalue_line("markers", "currency: Tests for currency handling and precision")
    config.addinivalue_line("markers", "mail: Tests for mail decoding and extraction")
    config.addinivalue_line("markers", "statistics: Tests for the statistics engine")
