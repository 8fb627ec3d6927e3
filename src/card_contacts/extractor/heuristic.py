"""Rule-based contact extractor for raw OCR text."""

import logging
from collections.abc import Sequence

from card_contacts.config import ExtractorConfig
from card_contacts.extractor.address import decompose_address
from card_contacts.extractor.base import Extractor
from card_contacts.extractor.lines import ClassifiedLine, classify_lines, compile_word_pattern
from card_contacts.extractor.patterns import find_email, find_phone, find_website
from card_contacts.models.contact import ContactRecord

logger = logging.getLogger(__name__)

WORK = "Work"
HOME = "Home"
MOBILE = "Mobile"


class HeuristicExtractor(Extractor):
    """Extract contact fields from OCR text with regexes and line heuristics.

    Email, phone and website are found by scanning the whole text. Name, title
    and organization come from the top-most line that qualifies for each, and
    the remaining lines with digits or street words form the address.

    Extraction is total: any string yields a fully shaped ContactRecord, with
    empty strings for whatever could not be found.
    """

    def __init__(self, config: ExtractorConfig | None = None):
        """
        Initialize the extractor.

        Args:
            config: Keyword vocabularies. Defaults to the built-in ones.
        """
        self._config = config or ExtractorConfig()
        self._street_pattern = compile_word_pattern(self._config.street_suffixes)

    @property
    def name(self) -> str:
        return "heuristic"

    def extract(self, ocr_text: str) -> ContactRecord:
        """Extract a contact record from OCR text."""
        fields: dict[str, str] = {}
        fields.update(self._extract_email(ocr_text))
        fields.update(self._extract_phone(ocr_text))
        fields.update(self._extract_website(ocr_text))

        lines = classify_lines(ocr_text, self._config.title_keywords)

        name_line = select_name_line(lines)
        title_line = select_title_line(lines)
        org_line = select_organization_line(
            lines, name_line.text if name_line else None
        )

        if name_line:
            tokens = name_line.text.split()
            fields["full_name"] = name_line.text
            fields["given_name"] = tokens[0]
            fields["family_name"] = " ".join(tokens[1:])
        if title_line:
            fields["organization_title"] = title_line.text
        if org_line:
            fields["organization_name"] = org_line.text

        fields.update(
            self._extract_address(
                lines, [line for line in (name_line, title_line, org_line) if line]
            )
        )

        logger.debug(
            "Extracted from %d lines: name=%r title=%r org=%r",
            len(lines),
            fields.get("full_name"),
            fields.get("organization_title"),
            fields.get("organization_name"),
        )
        return ContactRecord(**fields)

    def _extract_email(self, text: str) -> dict[str, str]:
        email = find_email(text)
        if not email:
            return {}

        domain = email.rsplit("@", 1)[-1].lower()
        email_type = HOME if domain in self._config.personal_email_domains else WORK
        return {"email_type": email_type, "email_value": email}

    def _extract_phone(self, text: str) -> dict[str, str]:
        phone = find_phone(
            text,
            self._config.mobile_keywords,
            context_window=self._config.phone_context_window,
            crosses_lines=self._config.phone_context_crosses_lines,
        )
        if not phone:
            return {}
        return {
            "phone_type": MOBILE if phone.is_mobile else WORK,
            "phone_value": phone.number,
        }

    def _extract_website(self, text: str) -> dict[str, str]:
        website = find_website(text)
        if not website:
            return {}
        return {"website_type": WORK, "website_value": website}

    def _extract_address(
        self, lines: Sequence[ClassifiedLine], claimed: Sequence[ClassifiedLine]
    ) -> dict[str, str]:
        claimed_texts = {line.text for line in claimed}
        address_lines = [
            line.text
            for line in lines
            if not line.has_contact_info
            and line.text not in claimed_texts
            and (line.has_digit or self._has_street_word(line.text))
        ]
        if not address_lines:
            return {}

        parts = decompose_address(address_lines, country=self._config.default_country)
        return {
            "address_type": WORK,
            "address_formatted": parts.formatted,
            "address_street": parts.street,
            "address_city": parts.city,
            "address_region": parts.region,
            "address_postal_code": parts.postal_code,
            "address_country": parts.country,
        }

    def _has_street_word(self, text: str) -> bool:
        return self._street_pattern is not None and self._street_pattern.search(text) is not None


def select_name_line(lines: Sequence[ClassifiedLine]) -> ClassifiedLine | None:
    """First line of 2-4 words with no digits and no contact info."""
    for line in lines:
        if (
            not line.has_contact_info
            and 2 <= line.word_count <= 4
            and not line.has_digit
        ):
            return line
    return None


def select_title_line(lines: Sequence[ClassifiedLine]) -> ClassifiedLine | None:
    """First line containing a title keyword and no contact info."""
    for line in lines:
        if line.has_title_keyword and not line.has_contact_info:
            return line
    return None


def select_organization_line(
    lines: Sequence[ClassifiedLine], name_text: str | None = None
) -> ClassifiedLine | None:
    """
    First short line that is not contact info, a title or the name.

    A line qualifies with at most 5 words when fully upper-case, otherwise
    with at most 3 words.

    Args:
        lines: Classified lines in card order.
        name_text: Text of the line already chosen as the name, if any.
    """
    for line in lines:
        if line.has_contact_info or line.has_title_keyword:
            continue
        if name_text is not None and line.text == name_text:
            continue
        if line.word_count <= 5 and (line.is_all_uppercase or line.word_count <= 3):
            return line
    return None
