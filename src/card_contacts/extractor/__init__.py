"""Extractors that turn OCR text into contact records."""

from card_contacts.extractor.base import Extractor
from card_contacts.extractor.heuristic import HeuristicExtractor
from card_contacts.extractor.llm_response import parse_contact_json

__all__ = ["Extractor", "HeuristicExtractor", "parse_contact_json"]
