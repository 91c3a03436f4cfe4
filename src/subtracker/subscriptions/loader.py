#!/usr/bin/env python3
"""
Subscription and Mail Loader Module

Reads and writes the JSON files used by the command line: subscription lists
in the app's stored-record shape, and dumps of Gmail API message resources.
Also converts subscription lists to pandas DataFrames for CSV export.
"""

import logging
from pathlib import Path
from typing import Any

import pandas as pd

from ..core.json_utils import read_json, write_json
from ..mail.models import RawMailItem
from .models import Subscription
from .statistics import monthly_equivalent

logger = logging.getLogger(__name__)


def _records_from_json(data: Any, key: str) -> list[dict[str, Any]]:
    """Accept either a bare list or an object wrapping the list under `key`."""
    if isinstance(data, dict):
        data = data.get(key, [])
    if not isinstance(data, list):
        raise ValueError(f"Expected a list of {key}, got {type(data).__name__}")
    return data


def load_subscriptions(path: str | Path) -> list[Subscription]:
    """
    Load subscriptions from a JSON file.

    Records that cannot be read (no name, bad price) are skipped with a
    warning.

    Args:
        path: JSON file with a list of records or {"subscriptions": [...]}

    Returns:
        List of Subscription records in file order
    """
    raw_records = _records_from_json(read_json(path), "subscriptions")

    subscriptions = []
    for index, raw in enumerate(raw_records):
        try:
            subscriptions.append(Subscription.from_dict(raw))
        except (ValueError, TypeError, AttributeError) as e:
            logger.warning("Skipping subscription #%d in %s: %s", index, path, e)

    logger.info("Loaded %d subscriptions from %s", len(subscriptions), path)
    return subscriptions


def save_subscriptions(path: str | Path, subscriptions: list[Subscription]) -> None:
    """Write subscriptions to a JSON file as a bare list of records."""
    write_json(path, [record.to_dict() for record in subscriptions])
    logger.info("Saved %d subscriptions to %s", len(subscriptions), path)


def load_mail_items(path: str | Path) -> list[RawMailItem]:
    """
    Load Gmail API message resources from a JSON file.

    Args:
        path: JSON file with a list of messages or {"messages": [...]}

    Returns:
        List of RawMailItem in file order
    """
    raw_messages = _records_from_json(read_json(path), "messages")
    items = [RawMailItem.from_gmail_message(message) for message in raw_messages]
    logger.info("Loaded %d mail items from %s", len(items), path)
    return items


def subscriptions_to_dataframe(subscriptions: list[Subscription]) -> pd.DataFrame:
    """
    Convert subscriptions to a DataFrame with one row per record.

    Adds a monthly_equivalent column alongside the stored fields.
    """
    columns = [
        "name",
        "price",
        "currency",
        "billing_cycle",
        "monthly_equivalent",
        "category",
        "next_billing_date",
        "is_active",
        "provider",
        "source_email",
    ]
    if not subscriptions:
        return pd.DataFrame(columns=columns)

    rows = [
        {
            "name": record.name,
            "price": float(record.price.to_decimal()),
            "currency": record.currency,
            "billing_cycle": record.billing_cycle.value,
            "monthly_equivalent": round(float(monthly_equivalent(record)), 2),
            "category": record.category.value,
            "next_billing_date": (
                pd.Timestamp(record.next_billing_date.date) if record.next_billing_date else pd.NaT
            ),
            "is_active": record.is_active,
            "provider": record.provider,
            "source_email": record.source_email,
        }
        for record in subscriptions
    ]
    return pd.DataFrame(rows, columns=columns)
