"""Postal address decomposition for U.S.-style card addresses."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from card_contacts.extractor.patterns import (
    CITY_REGION_PATTERN,
    REGION_PATTERN,
    find_postal_code,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AddressParts:
    """Decomposed postal address. Unresolved parts are empty strings."""

    formatted: str = ""
    street: str = ""
    city: str = ""
    region: str = ""
    postal_code: str = ""
    country: str = ""


def decompose_address(
    lines: Sequence[str], country: str = "United States"
) -> AddressParts:
    """
    Split address lines into street, city, region and postal code.

    The last line is treated as the locality line ("City, ST 12345"); every
    earlier line is street address. Region detection only understands
    two-letter U.S. state codes, and `country` is assigned whenever one is
    found.

    Args:
        lines: Address lines in card order.
        country: Country name assigned when a region code is recognized.

    Returns:
        AddressParts; all empty when lines is empty.
    """
    if not lines:
        return AddressParts()

    locality = lines[-1]
    postal_code = find_postal_code(locality) or ""
    city = region = found_country = ""

    match = CITY_REGION_PATTERN.search(locality)
    if match:
        city = match.group(1).strip()
        region = match.group(2)
        found_country = country
    else:
        parts = [part.strip() for part in locality.split(",")]
        if len(parts) >= 2:
            city = parts[-2]
            if REGION_PATTERN.match(parts[-1]):
                region = parts[-1].split()[0]
                found_country = country

    street = ", ".join(lines[:-1]) if len(lines) > 1 else ""

    logger.debug(
        "Locality line %r -> city=%r region=%r postal=%r", locality, city, region, postal_code
    )
    return AddressParts(
        formatted=", ".join(lines),
        street=street,
        city=city,
        region=region,
        postal_code=postal_code,
        country=found_country,
    )
