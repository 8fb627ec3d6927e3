"""Parse contact JSON returned by a vision-capable LLM."""

import json
import logging
import re
from typing import Any

from card_contacts.errors import ResponseParseError
from card_contacts.models.contact import GOOGLE_CONTACT_HEADERS, ContactRecord

logger = logging.getLogger(__name__)


def parse_contact_json(response: str) -> ContactRecord:
    """
    Convert an LLM reply into a ContactRecord.

    The reply is expected to hold one JSON object keyed by Google Contacts
    headers ("Given Name", "E-mail 1 - Value", ...). Unknown keys are ignored
    and missing ones stay empty.

    Args:
        response: Raw model output, possibly wrapped in prose or a code fence.

    Returns:
        ContactRecord built from the reply.

    Raises:
        ResponseParseError: If no JSON object can be read from the reply.
    """
    json_str = extract_json(response)

    try:
        data = json.loads(json_str)
    except json.JSONDecodeError as e:
        logger.debug("Unparseable LLM response: %r", response)
        raise ResponseParseError(f"Invalid JSON response from LLM: {e}") from e

    if not isinstance(data, dict):
        raise ResponseParseError(
            f"Expected a JSON object from LLM, got {type(data).__name__}"
        )

    values = {header: to_str(data.get(header)) for header in GOOGLE_CONTACT_HEADERS}
    return ContactRecord.model_validate(values)


def to_str(value: Any) -> str:
    """Convert a JSON value to a string, taking the first element of lists."""
    if value is None:
        return ""
    if isinstance(value, list):
        return to_str(value[0]) if value else ""
    return str(value).strip()


def extract_json(text: str) -> str:
    """Extract JSON from text, handling markdown code blocks."""
    code_block_match = re.search(r"```(?:json)?\s*([\s\S]*?)```", text)
    if code_block_match:
        return code_block_match.group(1).strip()

    json_match = re.search(r"\{[\s\S]*\}", text)
    if json_match:
        return json_match.group(0)

    return text.strip()
