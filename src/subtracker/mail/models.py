#!/usr/bin/env python3
"""
Raw Mail Models

The mail retrieval layer hands over already-fetched messages; these types are
the read-only view the extraction pipeline works from. The shape mirrors the
Gmail API message resource: a header list and a payload that is either a
single base64url body or a tree of MIME parts.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

logger = logging.getLogger(__name__)


class MailHeaders:
    """Case-insensitive, read-only header lookup. Missing headers read as ''."""

    def __init__(self, headers: Mapping[str, str] | None = None):
        self._headers: dict[str, str] = {}
        for name, value in (headers or {}).items():
            # First occurrence wins, as with Gmail's header list order
            self._headers.setdefault(name.lower(), value)

    @classmethod
    def from_list(cls, header_list: list[dict[str, Any]] | None) -> "MailHeaders":
        """Build from Gmail's [{"name": ..., "value": ...}] header list."""
        headers = cls()
        if not isinstance(header_list, list):
            return headers
        for header in header_list:
            if not isinstance(header, dict):
                continue
            name = header.get("name")
            if name:
                headers._headers.setdefault(str(name).lower(), str(header.get("value") or ""))
        return headers

    def get(self, name: str) -> str:
        return self._headers.get(name.lower(), "")

    def __getitem__(self, name: str) -> str:
        return self.get(name)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self._headers

    def __len__(self) -> int:
        return len(self._headers)

    def __repr__(self) -> str:
        return f"MailHeaders({self._headers!r})"


@dataclass
class MailPayload:
    """One MIME part: a media type, an optional base64url body and sub-parts."""

    mime_type: str = ""
    data: str | None = None
    parts: list["MailPayload"] = field(default_factory=list)

    @classmethod
    def from_gmail_part(cls, part: dict[str, Any]) -> "MailPayload":
        """Build from a Gmail API MessagePart dict."""
        body = part.get("body")
        data = body.get("data") if isinstance(body, dict) else None
        sub_parts = part.get("parts")
        if not isinstance(sub_parts, list):
            sub_parts = []
        return cls(
            mime_type=str(part.get("mimeType") or ""),
            data=data if isinstance(data, str) else None,
            parts=[cls.from_gmail_part(sub) for sub in sub_parts if isinstance(sub, dict)],
        )


@dataclass
class RawMailItem:
    """A fetched mail message: headers plus payload."""

    headers: MailHeaders = field(default_factory=MailHeaders)
    payload: MailPayload | None = None
    message_id: str | None = None

    @classmethod
    def from_gmail_message(cls, message: Any) -> "RawMailItem":
        """
        Build from a Gmail API users.messages.get resource (format=full).

        Anything that does not look like a message yields an item with no
        headers and no payload, which extraction then ignores.
        """
        if not isinstance(message, dict):
            logger.debug("Ignoring non-dict mail message: %r", type(message).__name__)
            return cls()

        payload = message.get("payload")
        if not isinstance(payload, dict):
            return cls(message_id=message.get("id"))

        return cls(
            headers=MailHeaders.from_list(payload.get("headers")),
            payload=MailPayload.from_gmail_part(payload),
            message_id=message.get("id"),
        )
