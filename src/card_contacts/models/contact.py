"""Pydantic models for extracted contact data."""

from pydantic import BaseModel, ConfigDict, Field


class ContactRecord(BaseModel):
    """Flat contact record in Google Contacts CSV import layout.

    Every field is always present; unresolved fields are empty strings.
    Aliases are the CSV column headers.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    full_name: str = Field(default="", alias="Name")
    given_name: str = Field(default="", alias="Given Name")
    family_name: str = Field(default="", alias="Family Name")
    email_type: str = Field(default="", alias="E-mail 1 - Type")
    email_value: str = Field(default="", alias="E-mail 1 - Value")
    phone_type: str = Field(default="", alias="Phone 1 - Type")
    phone_value: str = Field(default="", alias="Phone 1 - Value")
    address_type: str = Field(default="", alias="Address 1 - Type")
    address_formatted: str = Field(default="", alias="Address 1 - Formatted")
    address_street: str = Field(default="", alias="Address 1 - Street")
    address_city: str = Field(default="", alias="Address 1 - City")
    address_region: str = Field(default="", alias="Address 1 - Region")
    address_postal_code: str = Field(default="", alias="Address 1 - Postal Code")
    address_country: str = Field(default="", alias="Address 1 - Country")
    organization_name: str = Field(default="", alias="Organization 1 - Name")
    organization_title: str = Field(default="", alias="Organization 1 - Title")
    website_type: str = Field(default="", alias="Website 1 - Type")
    website_value: str = Field(default="", alias="Website 1 - Value")

    def to_row(self) -> dict[str, str]:
        """Return the record keyed by CSV header, in column order."""
        return self.model_dump(by_alias=True)

    def is_empty(self) -> bool:
        """True when no field was resolved."""
        return not any(self.model_dump().values())


GOOGLE_CONTACT_HEADERS: tuple[str, ...] = tuple(
    field.alias for field in ContactRecord.model_fields.values()
)


class Metadata(BaseModel):
    """Processing metadata."""

    extractor_backend: str = Field(description="Extractor that produced the record")
    ocr_backend: str | None = Field(default=None, description="OCR backend used, if any")
    processing_time_ms: float = Field(description="Total processing time in ms")


class ParsedCard(BaseModel):
    """One parsed business card with its source text."""

    contact: ContactRecord = Field(
        default_factory=ContactRecord, description="Extracted contact fields"
    )
    raw_text: str = Field(default="", description="Text the record was extracted from")
    linkedin_url: str = Field(
        default="", description="LinkedIn people search URL (display only)"
    )
    metadata: Metadata | None = Field(default=None, description="Processing metadata")
