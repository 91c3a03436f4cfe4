#!/usr/bin/env python3
"""
Synthetic Gmail Message Builders

Builds dicts shaped like Gmail API users.messages.get resources
(format=full), with bodies encoded as unpadded URL-safe base64.
"""

import base64
from typing import Any


def encode_body(text: str) -> str:
    """Encode text the way Gmail does: URL-safe base64, padding stripped."""
    return base64.urlsafe_b64encode(text.encode("utf-8")).decode("ascii").rstrip("=")


def headers_list(sender: str, subject: str, date: str) -> list[dict[str, str]]:
    return [
        {"name": "From", "value": sender},
        {"name": "Subject", "value": subject},
        {"name": "Date", "value": date},
    ]


def gmail_message(
    sender: str,
    subject: str,
    body: str,
    date: str = "Sat, 15 Mar 2025 09:00:00 +0300",
    message_id: str = "msg-1",
) -> dict[str, Any]:
    """Single-part text/html message."""
    return {
        "id": message_id,
        "payload": {
            "mimeType": "text/html",
            "headers": headers_list(sender, subject, date),
            "body": {"data": encode_body(body)},
        },
    }


def multipart_message(
    sender: str,
    subject: str,
    parts: list[dict[str, Any]],
    date: str = "Sat, 15 Mar 2025 09:00:00 +0300",
    message_id: str = "msg-multi",
) -> dict[str, Any]:
    """Multipart message with the given parts (see text_part / container_part)."""
    return {
        "id": message_id,
        "payload": {
            "mimeType": "multipart/mixed",
            "headers": headers_list(sender, subject, date),
            "body": {"size": 0},
            "parts": parts,
        },
    }


def text_part(text: str, mime_type: str = "text/plain") -> dict[str, Any]:
    return {"mimeType": mime_type, "body": {"data": encode_body(text)}}


def container_part(*parts: dict[str, Any], mime_type: str = "multipart/alternative") -> dict[str, Any]:
    return {"mimeType": mime_type, "body": {"size": 0}, "parts": list(parts)}
