"""LinkedIn people-search URL construction."""

from urllib.parse import urlencode

from card_contacts.errors import MissingInputError

LINKEDIN_SEARCH_URL = "https://www.linkedin.com/search/results/people/"


def build_search_url(given_name: str, family_name: str, company: str = "") -> str:
    """
    Build a LinkedIn people search URL for a contact.

    No request is made; the URL is meant to be opened by the user.

    Args:
        given_name: Contact's first name.
        family_name: Contact's last name.
        company: Optional organization name to narrow the search.

    Returns:
        Search URL with keywords and origin query parameters.

    Raises:
        MissingInputError: If either name is empty.
    """
    given_name = given_name.strip()
    family_name = family_name.strip()
    if not given_name or not family_name:
        raise MissingInputError("First name and last name are required")

    keywords = f"{given_name} {family_name}"
    if company.strip():
        keywords = f"{keywords} {company.strip()}"

    query = urlencode({"keywords": keywords, "origin": "GLOBAL_SEARCH_HEADER"})
    return f"{LINKEDIN_SEARCH_URL}?{query}"
