#!/usr/bin/env python3
"""
Provider-Specific Billing Mail Parsers

Regex heuristics that pull a price, a renewal date and a billing cycle out of
a provider's billing mail. Each provider has its own pure function; PARSERS
maps providers to them and parse_generic covers anything else.

Rules shared by every parser:
- The amount is mandatory. No amount, no subscription.
- Amount patterns are tried in order and the first hit wins. A comma in the
  amount is the decimal separator ("149,99" -> 149.99).
- A missing or impossible renewal date falls back to one calendar month
  from now.

Extraction is best effort: these patterns get most real receipts right and
some wrong, and a miss is reported as None rather than an error.
"""

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass

from ..core.dates import Clock, FinancialDate, one_month_from
from ..core.money import Money
from ..subscriptions.models import BillingCycle, Category, Subscription
from .providers import Provider

logger = logging.getLogger(__name__)

_AMOUNT = r"(\d+[.,]\d{2})"

TRY_AMOUNT_PATTERNS = (
    re.compile(r"₺\s*" + _AMOUNT),
    re.compile(r"TRY\s*" + _AMOUNT),
    re.compile(_AMOUNT + r"\s*TL"),
)

USD_AMOUNT_PATTERNS = (
    re.compile(r"₺\s*" + _AMOUNT),
    re.compile(r"USD\s*" + _AMOUNT),
    re.compile(_AMOUNT + r"\s*USD"),
)

_DATE = r"(\d{1,2}[/\-]\d{1,2}[/\-]\d{2,4})"

BARE_DATE_PATTERNS = (re.compile(_DATE),)

NETFLIX_DATE_PATTERNS = (
    re.compile(r"next payment.*?" + _DATE, re.IGNORECASE),
    re.compile(r"billing date.*?" + _DATE, re.IGNORECASE),
)


@dataclass(frozen=True)
class MailContent:
    """The parts of a mail a provider parser reads."""

    subject: str
    body: str
    email_date: str = ""

    @property
    def body_lower(self) -> str:
        return self.body.lower()


ProviderParser = Callable[[MailContent, Clock | None], Subscription | None]


def find_amount(body: str, patterns: tuple[re.Pattern, ...]) -> str | None:
    """Return the amount text captured by the first matching pattern."""
    for pattern in patterns:
        match = pattern.search(body)
        if match:
            return match.group(1)
    return None


def find_next_billing_date(
    body: str, patterns: tuple[re.Pattern, ...], clock: Clock | None = None
) -> FinancialDate:
    """
    Find a day-first renewal date in the body.

    Falls back to one month from now when no pattern matches or the captured
    date does not exist (e.g. 31/02/2025).
    """
    for pattern in patterns:
        match = pattern.search(body)
        if not match:
            continue
        try:
            return FinancialDate.from_day_first(match.group(1))
        except ValueError:
            logger.debug("Unparseable billing date %r, using default", match.group(1))
            break
    return one_month_from(clock)


def _yearly_if(body_lower: str, *keywords: str) -> BillingCycle:
    if any(keyword in body_lower for keyword in keywords):
        return BillingCycle.YEARLY
    return BillingCycle.MONTHLY


def _build(
    name: str,
    amount: str,
    currency: str,
    category: Category,
    next_billing_date: FinancialDate,
    billing_cycle: BillingCycle = BillingCycle.MONTHLY,
) -> Subscription:
    return Subscription(
        name=name,
        price=Money.from_amount_str(amount, currency),
        billing_cycle=billing_cycle,
        category=category,
        next_billing_date=next_billing_date,
        is_active=True,
    )


def parse_netflix(mail: MailContent, clock: Clock | None = None) -> Subscription | None:
    """Netflix: TRY pricing, anchored renewal date, annual/yearly plans."""
    amount = find_amount(mail.body, TRY_AMOUNT_PATTERNS)
    if amount is None:
        return None

    return _build(
        "Netflix",
        amount,
        "TRY",
        Category.STREAMING,
        find_next_billing_date(mail.body, NETFLIX_DATE_PATTERNS, clock),
        _yearly_if(mail.body_lower, "annual", "yearly"),
    )


def parse_spotify(mail: MailContent, clock: Clock | None = None) -> Subscription | None:
    """
    Spotify: TRY pricing, always monthly.

    Premium Family is billed monthly too, so the family keyword leaves the
    cycle alone.
    """
    amount = find_amount(mail.body, TRY_AMOUNT_PATTERNS)
    if amount is None:
        return None

    if "premium family" in mail.body_lower or "family" in mail.subject.lower():
        logger.debug("Spotify family plan detected, keeping monthly cycle")

    return _build(
        "Spotify",
        amount,
        "TRY",
        Category.MUSIC,
        find_next_billing_date(mail.body, BARE_DATE_PATTERNS, clock),
    )


def parse_youtube(mail: MailContent, clock: Clock | None = None) -> Subscription | None:
    amount = find_amount(mail.body, TRY_AMOUNT_PATTERNS)
    if amount is None:
        return None

    return _build(
        "YouTube Premium",
        amount,
        "TRY",
        Category.STREAMING,
        find_next_billing_date(mail.body, BARE_DATE_PATTERNS, clock),
    )


# Checked in order; the first keyword found in the body picks the service
APPLE_SERVICES = (
    ("icloud", "iCloud Storage", Category.STORAGE),
    ("apple music", "Apple Music", Category.MUSIC),
    ("apple tv", "Apple TV+", Category.STREAMING),
)


def parse_apple(mail: MailContent, clock: Clock | None = None) -> Subscription | None:
    """Apple: picks iCloud Storage, Apple Music or Apple TV+ from the body."""
    amount = find_amount(mail.body, TRY_AMOUNT_PATTERNS)
    if amount is None:
        return None

    name, category = "Apple", Category.STREAMING
    for keyword, service_name, service_category in APPLE_SERVICES:
        if keyword in mail.body_lower:
            name, category = service_name, service_category
            break

    return _build(
        name,
        amount,
        "TRY",
        category,
        find_next_billing_date(mail.body, BARE_DATE_PATTERNS, clock),
    )


def _usd_or_try(body: str) -> str:
    return "USD" if "USD" in body else "TRY"


def parse_adobe(mail: MailContent, clock: Clock | None = None) -> Subscription | None:
    """Adobe: TRY or USD pricing; "annual" promotes to yearly."""
    amount = find_amount(mail.body, USD_AMOUNT_PATTERNS)
    if amount is None:
        return None

    return _build(
        "Adobe Creative Cloud",
        amount,
        _usd_or_try(mail.body),
        Category.PRODUCTIVITY,
        find_next_billing_date(mail.body, BARE_DATE_PATTERNS, clock),
        _yearly_if(mail.body_lower, "annual"),
    )


def parse_amazon(mail: MailContent, clock: Clock | None = None) -> Subscription | None:
    amount = find_amount(mail.body, TRY_AMOUNT_PATTERNS)
    if amount is None:
        return None

    return _build(
        "Amazon Prime",
        amount,
        "TRY",
        Category.STREAMING,
        find_next_billing_date(mail.body, BARE_DATE_PATTERNS, clock),
    )


def parse_microsoft(mail: MailContent, clock: Clock | None = None) -> Subscription | None:
    """Microsoft 365: TRY or USD pricing; annual/yearly promotes to yearly."""
    amount = find_amount(mail.body, USD_AMOUNT_PATTERNS)
    if amount is None:
        return None

    return _build(
        "Microsoft 365",
        amount,
        _usd_or_try(mail.body),
        Category.PRODUCTIVITY,
        find_next_billing_date(mail.body, BARE_DATE_PATTERNS, clock),
        _yearly_if(mail.body_lower, "annual", "yearly"),
    )


def parse_generic(mail: MailContent, clock: Clock | None = None) -> Subscription | None:
    """Fallback: TRY amount only, no date reading, monthly, category other."""
    amount = find_amount(mail.body, TRY_AMOUNT_PATTERNS)
    if amount is None:
        return None

    return _build("Unknown Subscription", amount, "TRY", Category.OTHER, one_month_from(clock))


PARSERS: dict[Provider, ProviderParser] = {
    Provider.NETFLIX: parse_netflix,
    Provider.SPOTIFY: parse_spotify,
    Provider.YOUTUBE: parse_youtube,
    Provider.APPLE: parse_apple,
    Provider.ADOBE: parse_adobe,
    Provider.AMAZON: parse_amazon,
    Provider.MICROSOFT: parse_microsoft,
}


def get_parser(provider: Provider | None) -> ProviderParser:
    """Look up the parser for a provider, falling back to parse_generic."""
    if provider is None:
        return parse_generic
    return PARSERS.get(provider, parse_generic)
