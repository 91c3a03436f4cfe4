#!/usr/bin/env python3
"""
Subscription Extraction Module

Turns fetched billing mail into subscription records: read headers, decode
the body, detect the provider, run its parser and attach provenance.

Failure is communicated only by absence. An unrecognized sender, a mail with
no price, or an exception inside a parser all produce None for that mail,
and extract_all() simply leaves it out.
"""

import logging
from collections import Counter
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field, replace
from typing import Any, Iterable

from ..core.dates import Clock, resolve_clock
from ..subscriptions.models import Subscription
from .decoder import decode_body
from .models import RawMailItem
from .parsers import MailContent, get_parser
from .providers import Provider, detect_provider

logger = logging.getLogger(__name__)


@dataclass
class ExtractionSummary:
    """Counts describing one batch extraction run."""

    total: int = 0
    extracted: int = 0
    unrecognized: int = 0
    failed: int = 0
    by_provider: dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "total": self.total,
            "extracted": self.extracted,
            "unrecognized": self.unrecognized,
            "failed": self.failed,
            "by_provider": dict(self.by_provider),
        }


def _extract_with_provider(
    item: RawMailItem, clock: Clock
) -> tuple[Provider | None, Subscription | None]:
    sender = item.headers.get("From")
    subject = item.headers.get("Subject")
    email_date = item.headers.get("Date")
    body = decode_body(item)

    provider = detect_provider(sender, subject)
    if provider is None:
        logger.debug("Unrecognized sender, skipping: %s", sender)
        return None, None

    parser = get_parser(provider)
    record = parser(MailContent(subject=subject, body=body, email_date=email_date), clock)
    if record is None:
        logger.info("No subscription details found in %s mail: %s", provider.value, subject)
        return provider, None

    return provider, replace(
        record,
        provider=provider.value,
        source_email=sender,
        email_date=email_date,
        raw_subject=subject,
    )


def extract(item: RawMailItem, clock: Clock | None = None) -> Subscription | None:
    """
    Extract a subscription from one mail item.

    Args:
        item: Fetched mail message
        clock: Time source for the default renewal date (default: system clock)

    Returns:
        Subscription with provenance fields set, or None when the mail is not
        from a known provider, has no price, or cannot be parsed
    """
    try:
        _, record = _extract_with_provider(item, resolve_clock(clock))
        return record
    except Exception as e:
        logger.warning("Mail extraction failed for %s: %s", getattr(item, "message_id", None), e)
        return None


def extract_all(
    items: Iterable[RawMailItem],
    clock: Clock | None = None,
    max_workers: int | None = None,
) -> list[Subscription]:
    """
    Extract subscriptions from many mail items.

    Results keep the input order; items that yield nothing are dropped.

    Args:
        items: Fetched mail messages
        clock: Time source shared by every item (default: system clock)
        max_workers: Run extraction on a thread pool of this size when > 1

    Returns:
        Extracted subscriptions in input order
    """
    items = list(items)
    clock = resolve_clock(clock)

    if max_workers and max_workers > 1 and len(items) > 1:
        with ThreadPoolExecutor(max_workers=max_workers) as pool:
            results = list(pool.map(lambda item: extract(item, clock), items))
    else:
        results = [extract(item, clock) for item in items]

    records = [record for record in results if record is not None]
    logger.info("Extracted %d subscriptions from %d mail items", len(records), len(items))
    return records


def summarize_extraction(
    items: Iterable[RawMailItem], clock: Clock | None = None
) -> tuple[list[Subscription], ExtractionSummary]:
    """
    Extract subscriptions and count what happened to each mail.

    Returns:
        (records in input order, ExtractionSummary)
    """
    clock = resolve_clock(clock)
    summary = ExtractionSummary()
    by_provider: Counter[str] = Counter()
    records = []

    for item in items:
        summary.total += 1
        try:
            provider, record = _extract_with_provider(item, clock)
        except Exception as e:
            logger.warning("Mail extraction failed for %s: %s", getattr(item, "message_id", None), e)
            summary.failed += 1
            continue

        if provider is None:
            summary.unrecognized += 1
        elif record is None:
            summary.failed += 1
        else:
            records.append(record)
            by_provider[provider.value] += 1

    summary.extracted = len(records)
    summary.by_provider = dict(by_provider)
    return records, summary
