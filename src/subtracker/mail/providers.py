#!/usr/bin/env python3
"""
Billing Provider Detection

Recognizes which billing provider sent a mail by keyword matching on the
sender and subject. The table order is the priority order: a mail mentioning
both Netflix and Apple is treated as Netflix.
"""

from dataclasses import dataclass
from enum import Enum


class Provider(Enum):
    """Billing providers with a dedicated parser."""

    NETFLIX = "netflix"
    SPOTIFY = "spotify"
    YOUTUBE = "youtube"
    APPLE = "apple"
    ADOBE = "adobe"
    AMAZON = "amazon"
    MICROSOFT = "microsoft"


@dataclass(frozen=True)
class ProviderKeywords:
    """Keywords matched against the lowercased From and Subject headers."""

    provider: Provider
    sender: tuple[str, ...]
    subject: tuple[str, ...]

    def matches(self, sender: str, subject: str) -> bool:
        return any(keyword in sender for keyword in self.sender) or any(
            keyword in subject for keyword in self.subject
        )


PROVIDER_KEYWORDS: tuple[ProviderKeywords, ...] = (
    ProviderKeywords(Provider.NETFLIX, ("netflix",), ("netflix",)),
    ProviderKeywords(Provider.SPOTIFY, ("spotify",), ("spotify",)),
    ProviderKeywords(Provider.YOUTUBE, ("youtube",), ("youtube",)),
    # icloud is matched on the sender only
    ProviderKeywords(Provider.APPLE, ("apple", "icloud"), ("apple",)),
    ProviderKeywords(Provider.ADOBE, ("adobe",), ("adobe",)),
    ProviderKeywords(Provider.AMAZON, ("amazon",), ("amazon",)),
    ProviderKeywords(Provider.MICROSOFT, ("microsoft",), ("microsoft",)),
)


def detect_provider(from_header: str, subject_header: str) -> Provider | None:
    """
    Detect the billing provider of a mail.

    Args:
        from_header: Raw From header ("Netflix <info@account.netflix.com>")
        subject_header: Raw Subject header

    Returns:
        First matching Provider, or None when nothing matches
    """
    sender = (from_header or "").lower()
    subject = (subject_header or "").lower()

    for entry in PROVIDER_KEYWORDS:
        if entry.matches(sender, subject):
            return entry.provider
    return None
