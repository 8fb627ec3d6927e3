"""Abstract base class for contact extractors."""

from abc import ABC, abstractmethod

from card_contacts.models.contact import ContactRecord


class Extractor(ABC):
    """Abstract base class for contact extractors."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this extractor."""
        ...

    @abstractmethod
    def extract(self, ocr_text: str) -> ContactRecord:
        """
        Extract a contact record from OCR text.

        Args:
            ocr_text: Raw text recognized on the card.

        Returns:
            ContactRecord with every field present.
        """
        ...
