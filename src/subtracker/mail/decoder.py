#!/usr/bin/env python3
"""
Mail Body Decoding

Gmail delivers body data as URL-safe base64. A single-part message carries
the body on the payload itself; multipart messages carry it on text parts,
sometimes one level down inside a multipart/alternative container.
"""

import base64
import binascii
import logging

from .models import MailPayload, RawMailItem

logger = logging.getLogger(__name__)

TEXT_MIME_TYPES = ("text/plain", "text/html")


def decode_base64url(data: str) -> str:
    """
    Decode a URL-safe base64 string to text.

    Missing padding is restored. Bytes that are not valid UTF-8 are replaced
    rather than failing the whole body.

    Raises:
        ValueError: If the data is not valid base64
    """
    standard = data.replace("-", "+").replace("_", "/")
    standard += "=" * (-len(standard) % 4)
    try:
        raw = base64.b64decode(standard, validate=True)
    except binascii.Error as e:
        raise ValueError(f"Invalid base64 body data: {e}") from e
    return raw.decode("utf-8", errors="replace")


def _decode_part(part: MailPayload) -> str:
    """Decode one part's body, contributing '' when it is absent or broken."""
    if not isinstance(part.data, str) or not part.data:
        return ""
    try:
        return decode_base64url(part.data)
    except ValueError as e:
        logger.debug("Skipping undecodable %s part: %s", part.mime_type or "unknown", e)
        return ""


def _is_text(part: MailPayload) -> bool:
    return part.mime_type.lower() in TEXT_MIME_TYPES


def decode_body(item: RawMailItem) -> str:
    """
    Extract the text content of a mail item.

    A body on the payload itself is decoded and returned. Otherwise the
    text/plain and text/html parts, plus text sub-parts one level down, are
    decoded and concatenated in tree order. Parts of other media types are
    skipped, and a part that fails to decode contributes an empty string.

    Never raises: an absent or malformed payload yields ''.
    """
    payload = item.payload if isinstance(item, RawMailItem) else None
    if payload is None:
        return ""

    if payload.data:
        return _decode_part(payload)

    chunks = []
    for part in payload.parts:
        if _is_text(part):
            chunks.append(_decode_part(part))
        for sub_part in part.parts:
            if _is_text(sub_part):
                chunks.append(_decode_part(sub_part))

    return "".join(chunks)
