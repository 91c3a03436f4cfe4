"""
Mail Extraction Package

Heuristic extraction of subscription records from billing mail.

Key Components:
- models: RawMailItem, MailHeaders, MailPayload (Gmail API message shape)
- decoder: base64url body decoding across single and multipart payloads
- providers: sender/subject keyword detection of known billing providers
- parsers: one regex parser per provider plus a generic fallback
- extractor: extract, extract_all and summarize_extraction

Supported Providers:
Netflix, Spotify, YouTube Premium, Apple (iCloud, Music, TV+), Adobe
Creative Cloud, Amazon Prime, Microsoft 365.
"""

from .decoder import decode_base64url, decode_body
from .extractor import ExtractionSummary, extract, extract_all, summarize_extraction
from .models import MailHeaders, MailPayload, RawMailItem
from .parsers import PARSERS, MailContent, get_parser, parse_generic
from .providers import PROVIDER_KEYWORDS, Provider, detect_provider

__all__ = [
    "ExtractionSummary",
    "MailContent",
    "MailHeaders",
    "MailPayload",
    "PARSERS",
    "PROVIDER_KEYWORDS",
    "Provider",
    "RawMailItem",
    "decode_base64url",
    "decode_body",
    "detect_provider",
    "extract",
    "extract_all",
    "get_parser",
    "parse_generic",
    "summarize_extraction",
]
