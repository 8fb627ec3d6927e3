"""Interface for the external OCR engine."""

from abc import ABC, abstractmethod
from pathlib import Path


class OCRBackend(ABC):
    """Text recognizer that feeds card images into the parser.

    No engine ships with this package; callers plug in their own (Tesseract,
    PaddleOCR, a cloud API, ...).
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this OCR backend."""
        ...

    @abstractmethod
    def recognize(self, image_path: Path) -> str:
        """
        Recognize the text on a card image.

        Args:
            image_path: Path to an existing image file.

        Returns:
            Recognized text, one visual line per text line.
        """
        ...
