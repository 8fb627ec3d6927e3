"""Vocabularies and tunables for the heuristic extractor."""

import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

logger = logging.getLogger(__name__)

DEFAULT_TITLE_KEYWORDS = (
    "ceo",
    "president",
    "vice president",
    "vp",
    "director",
    "manager",
    "senior",
    "lead",
    "head",
    "chief",
    "executive",
    "officer",
    "coordinator",
    "specialist",
    "analyst",
    "consultant",
    "engineer",
    "developer",
    "designer",
    "architect",
    "supervisor",
    "administrator",
)

DEFAULT_MOBILE_KEYWORDS = ("mobile", "cell", "cellular", "personal", "m:", "c:")

DEFAULT_STREET_SUFFIXES = (
    "street",
    "st",
    "avenue",
    "ave",
    "road",
    "rd",
    "drive",
    "dr",
    "lane",
    "ln",
    "boulevard",
    "blvd",
    "suite",
    "ste",
    "apt",
    "apartment",
)

DEFAULT_PERSONAL_EMAIL_DOMAINS = (
    "gmail.com",
    "googlemail.com",
    "yahoo.com",
    "hotmail.com",
    "outlook.com",
    "live.com",
    "icloud.com",
    "me.com",
    "aol.com",
    "protonmail.com",
)


class ExtractorConfig(BaseModel):
    """Keyword vocabularies used by the heuristic extractor.

    All terms are matched case-insensitively; order is preserved. Unknown
    keys are rejected.
    """

    model_config = ConfigDict(extra="forbid")

    title_keywords: list[str] = Field(
        default_factory=lambda: list(DEFAULT_TITLE_KEYWORDS),
        description="Substrings that mark a job title line",
    )
    mobile_keywords: list[str] = Field(
        default_factory=lambda: list(DEFAULT_MOBILE_KEYWORDS),
        description="Context words that mark a phone number as mobile",
    )
    street_suffixes: list[str] = Field(
        default_factory=lambda: list(DEFAULT_STREET_SUFFIXES),
        description="Whole words that mark a street address line",
    )
    personal_email_domains: list[str] = Field(
        default_factory=lambda: list(DEFAULT_PERSONAL_EMAIL_DOMAINS),
        description="Email domains classified as Home instead of Work",
    )
    phone_context_window: int = Field(
        default=20, ge=0, description="Characters inspected on each side of a phone match"
    )
    phone_context_crosses_lines: bool = Field(
        default=False,
        description="Let the phone context look-ahead extend into the following line",
    )
    default_country: str = Field(
        default="United States",
        description="Country assigned when a two-letter region is recognized",
    )

    @field_validator(
        "title_keywords", "mobile_keywords", "street_suffixes", "personal_email_domains"
    )
    @classmethod
    def _normalize_terms(cls, terms: list[str]) -> list[str]:
        return [term.strip().lower() for term in terms if term.strip()]

    @property
    def vocabularies(self) -> dict[str, list[str]]:
        """Category name to ordered term list."""
        return {
            "title_keywords": self.title_keywords,
            "mobile_keywords": self.mobile_keywords,
            "street_suffixes": self.street_suffixes,
            "personal_email_domains": self.personal_email_domains,
        }


def load_config(path: str | Path) -> ExtractorConfig:
    """
    Load extractor configuration from a JSON file.

    Keys that are absent fall back to the built-in vocabularies.

    Args:
        path: Path to the JSON config file.

    Returns:
        Parsed ExtractorConfig.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file is not a valid config.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config not found: {path}")

    try:
        config = ExtractorConfig.model_validate_json(path.read_text(encoding="utf-8"))
    except ValidationError as e:
        raise ValueError(f"Invalid extractor config {path}: {e}") from e

    logger.debug("Loaded extractor config from %s", path)
    return config
