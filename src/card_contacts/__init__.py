"""Business card contact extraction from OCR text."""

from card_contacts.extractor.heuristic import HeuristicExtractor
from card_contacts.models.contact import ContactRecord, ParsedCard
from card_contacts.parser import ContactCardParser

__version__ = "0.1.0"
__all__ = ["ContactCardParser", "ContactRecord", "HeuristicExtractor", "ParsedCard"]
