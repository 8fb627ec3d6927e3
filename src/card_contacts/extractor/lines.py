"""Line normalization and classification."""

import re
from collections.abc import Sequence
from dataclasses import dataclass

from card_contacts.extractor.patterns import (
    DIGIT_PATTERN,
    EMAIL_PATTERN,
    PHONE_PATTERN,
    WEBSITE_PATTERN,
)


@dataclass(frozen=True)
class ClassifiedLine:
    """One non-empty OCR line with its classification flags."""

    text: str
    """Trimmed line text."""

    lower: str
    """Lower-cased text for keyword matching."""

    has_email: bool
    has_phone: bool
    has_website: bool
    has_title_keyword: bool

    word_count: int
    """Number of whitespace-separated words."""

    has_digit: bool
    is_all_uppercase: bool
    """Text is unchanged by upper-casing and longer than 2 characters."""

    @property
    def has_contact_info(self) -> bool:
        """Line carries an email, phone number or website."""
        return self.has_email or self.has_phone or self.has_website


def normalize_lines(text: str) -> list[str]:
    """Split text into trimmed, non-empty lines in source order."""
    return [line.strip() for line in text.splitlines() if line.strip()]


def classify_line(line: str, title_keywords: Sequence[str]) -> ClassifiedLine:
    lower = line.lower()
    return ClassifiedLine(
        text=line,
        lower=lower,
        has_email=EMAIL_PATTERN.search(line) is not None,
        has_phone=PHONE_PATTERN.search(line) is not None,
        has_website=WEBSITE_PATTERN.search(line) is not None,
        has_title_keyword=any(keyword in lower for keyword in title_keywords),
        word_count=len(line.split()),
        has_digit=DIGIT_PATTERN.search(line) is not None,
        is_all_uppercase=line == line.upper() and len(line) > 2,
    )


def classify_lines(text: str, title_keywords: Sequence[str]) -> list[ClassifiedLine]:
    """Normalize text and classify each remaining line."""
    return [classify_line(line, title_keywords) for line in normalize_lines(text)]


def compile_word_pattern(words: Sequence[str]) -> re.Pattern | None:
    """Case-insensitive whole-word pattern for any of words, or None if empty."""
    if not words:
        return None
    alternatives = "|".join(re.escape(word) for word in words)
    return re.compile(rf"\b(?:{alternatives})\b", re.IGNORECASE)
