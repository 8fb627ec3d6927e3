"""Data models for extracted contacts."""

from card_contacts.models.contact import (
    GOOGLE_CONTACT_HEADERS,
    ContactRecord,
    Metadata,
    ParsedCard,
)

__all__ = [
    "GOOGLE_CONTACT_HEADERS",
    "ContactRecord",
    "Metadata",
    "ParsedCard",
]
