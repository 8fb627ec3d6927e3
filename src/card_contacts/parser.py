"""Main business card parser controller."""

import logging
import time
from pathlib import Path

from card_contacts.errors import MissingInputError, UpstreamError
from card_contacts.extractor.base import Extractor
from card_contacts.extractor.llm_response import parse_contact_json
from card_contacts.linkedin import build_search_url
from card_contacts.models.contact import ContactRecord, Metadata, ParsedCard
from card_contacts.ocr import OCRBackend

logger = logging.getLogger(__name__)


class ContactCardParser:
    """Run OCR text, card images or LLM replies through to a ParsedCard."""

    def __init__(
        self,
        extractor: Extractor,
        ocr: OCRBackend | None = None,
        linkedin_lookup: bool = False,
    ):
        """
        Initialize the parser.

        Args:
            extractor: Extractor used for recognized text.
            ocr: OCR backend for image input. Only needed by parse_image.
            linkedin_lookup: Attach a LinkedIn search URL when a name is found.
        """
        self._extractor = extractor
        self._ocr = ocr
        self._linkedin_lookup = linkedin_lookup

    def parse_text(self, text: str) -> ParsedCard:
        """
        Extract a contact from already recognized text.

        Never fails on sparse input: text without recognizable fields gives
        an all-empty record.
        """
        start_time = time.perf_counter()
        contact = self._extractor.extract(text)
        return self._finish(contact, text, start_time, self._extractor.name)

    def parse_image(self, image_path: str | Path) -> ParsedCard:
        """
        Recognize a card image and extract its contact.

        Args:
            image_path: Path to the business card image.

        Returns:
            ParsedCard with extracted information.

        Raises:
            ValueError: If no OCR backend is configured.
            MissingInputError: If the image file does not exist.
            UpstreamError: If the OCR backend fails.
        """
        if self._ocr is None:
            raise ValueError("No OCR backend configured for image input")

        path = Path(image_path)
        if not path.exists():
            raise MissingInputError(f"Image not found: {path}")

        start_time = time.perf_counter()
        try:
            text = self._ocr.recognize(path)
        except Exception as e:
            raise UpstreamError(f"OCR failed for {path}: {e}") from e

        if not text.strip():
            logger.warning("OCR returned no text for %s", path)

        contact = self._extractor.extract(text)
        return self._finish(
            contact, text, start_time, self._extractor.name, ocr_backend=self._ocr.name
        )

    def parse_response(self, response: str, raw_text: str = "") -> ParsedCard:
        """
        Build a ParsedCard from a vision LLM's JSON reply.

        Raises:
            ResponseParseError: If the reply holds no JSON object.
        """
        start_time = time.perf_counter()
        contact = parse_contact_json(response)
        return self._finish(contact, raw_text, start_time, "llm-response")

    def _finish(
        self,
        contact: ContactRecord,
        raw_text: str,
        start_time: float,
        extractor_backend: str,
        ocr_backend: str | None = None,
    ) -> ParsedCard:
        linkedin_url = ""
        if self._linkedin_lookup and contact.given_name and contact.family_name:
            linkedin_url = build_search_url(
                contact.given_name, contact.family_name, contact.organization_name
            )

        elapsed_ms = (time.perf_counter() - start_time) * 1000
        return ParsedCard(
            contact=contact,
            raw_text=raw_text,
            linkedin_url=linkedin_url,
            metadata=Metadata(
                extractor_backend=extractor_backend,
                ocr_backend=ocr_backend,
                processing_time_ms=round(elapsed_ms, 2),
            ),
        )
