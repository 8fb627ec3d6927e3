"""Regular expressions and scanners for contact fields in OCR text.

The scanners run over the whole text block rather than single lines, since
OCR line breaks are unreliable field boundaries.
"""

import re
from collections.abc import Sequence
from dataclasses import dataclass

EMAIL_PATTERN = re.compile(
    r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b", re.IGNORECASE
)
# Optional +1, optional (area code), then exchange and subscriber number.
PHONE_PATTERN = re.compile(
    r"(\+?1?[-.\s]?)?\(?([0-9]{3})\)?[-.\s]?([0-9]{3})[-.\s]?([0-9]{4})"
)
WEBSITE_PATTERN = re.compile(
    r"(https?://)?(www\.)?[a-zA-Z0-9-]+\.[a-zA-Z]{2,}(\.[a-zA-Z]{2,})?"
)
POSTAL_CODE_PATTERN = re.compile(r"\b[0-9]{5}(?:-[0-9]{4})?\b")
CITY_REGION_PATTERN = re.compile(r"([^,\d]+),\s*([A-Z]{2})\s*[0-9]{5}")
REGION_PATTERN = re.compile(r"[A-Z]{2}")
DIGIT_PATTERN = re.compile(r"[0-9]")
# Same break characters as str.splitlines().
LINE_BREAK_PATTERN = re.compile(r"[\r\n\x0b\x0c\x1c-\x1e\x85\u2028\u2029]")


@dataclass(frozen=True)
class PhoneMatch:
    """Selected phone number."""

    number: str
    """Matched number, whitespace-trimmed."""

    is_mobile: bool
    """True when a mobile keyword appeared near the number."""


def find_email(text: str) -> str | None:
    """Return the first email address in text."""
    match = EMAIL_PATTERN.search(text)
    return match.group(0) if match else None


def find_phone(
    text: str,
    mobile_keywords: Sequence[str],
    context_window: int = 20,
    crosses_lines: bool = False,
) -> PhoneMatch | None:
    """
    Pick one phone number from text, preferring a mobile one.

    The first number is the default. Numbers are then checked in order and the
    first one with a mobile keyword in its context window is taken instead.

    Args:
        text: Full OCR text.
        mobile_keywords: Lower-case context words marking a mobile number.
        context_window: Characters inspected before and after each match.
        crosses_lines: Let the look-ahead reach into the following line.

    Returns:
        PhoneMatch, or None if no phone-shaped number exists.
    """
    matches = list(PHONE_PATTERN.finditer(text))
    if not matches:
        return None

    for match in matches:
        context = _phone_context(text, match, context_window, crosses_lines)
        if any(keyword in context for keyword in mobile_keywords):
            return PhoneMatch(number=match.group(0).strip(), is_mobile=True)

    return PhoneMatch(number=matches[0].group(0).strip(), is_mobile=False)


def _phone_context(
    text: str, match: re.Match, window: int, crosses_lines: bool
) -> str:
    start = max(0, match.start() - window)
    end = match.end() + window

    if not crosses_lines:
        # Labels sit beside or above a number, never on the line below it.
        line_break = LINE_BREAK_PATTERN.search(text, match.end())
        if line_break:
            end = min(end, line_break.start())

    return text[start:end].lower()


def find_website(text: str) -> str | None:
    """Return the first website in text, with https:// added if it has no scheme."""
    match = WEBSITE_PATTERN.search(text)
    if not match:
        return None

    website = match.group(0)
    if not match.group(1):
        website = "https://" + website
    return website


def find_postal_code(text: str) -> str | None:
    """Return the first 5-digit (optionally ZIP+4) postal code in text."""
    match = POSTAL_CODE_PATTERN.search(text)
    return match.group(0) if match else None
