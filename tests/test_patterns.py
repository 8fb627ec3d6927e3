"""Tests for field patterns, line classification and address decomposition."""

from card_contacts.extractor.address import AddressParts, decompose_address
from card_contacts.extractor.lines import (
    classify_line,
    compile_word_pattern,
    normalize_lines,
)
from card_contacts.extractor.patterns import (
    find_email,
    find_phone,
    find_postal_code,
    find_website,
)

MOBILE = ["mobile", "cell", "m:", "c:"]


class TestScanners:
    """Test whole-text scanners."""

    def test_find_email_first_match(self):
        """Test only the first email is returned."""
        assert find_email("a@one.com b@two.org") == "a@one.com"

    def test_find_email_none(self):
        """Test None without an email."""
        assert find_email("no email here") is None

    def test_find_phone_with_country_code(self):
        """Test +1 and parenthesized area code are kept verbatim."""
        phone = find_phone("Tel: +1 (555) 123-4567", MOBILE)
        assert phone.number == "+1 (555) 123-4567"
        assert phone.is_mobile is False

    def test_find_phone_keyword_after_number(self):
        """Test a keyword after the number on the same line marks it mobile."""
        phone = find_phone("555.123.4567 (mobile)", MOBILE)
        assert phone.number == "555.123.4567"
        assert phone.is_mobile is True

    def test_find_phone_zero_window(self):
        """Test a zero window ignores labels."""
        phone = find_phone("Cell: 5551234567", MOBILE, context_window=0)
        assert phone.number == "5551234567"
        assert phone.is_mobile is False

    def test_find_phone_none(self):
        """Test None without a phone-shaped number."""
        assert find_phone("Call 555-12", MOBILE) is None

    def test_find_website_with_second_level_tld(self):
        """Test .co.uk style domains."""
        assert find_website("www.acme.co.uk") == "https://www.acme.co.uk"

    def test_find_website_domain_starting_with_http(self):
        """Test a scheme is added to domains that begin with http."""
        assert find_website("httpbin.org") == "https://httpbin.org"
        assert find_website("http://httpbin.org") == "http://httpbin.org"

    def test_find_phone_label_on_line_below_ignored(self):
        """Test the look-ahead stops at any splitlines break character."""
        for sep in ("\n", "\r", "\x0c", "\u2028"):
            phone = find_phone(f"555-123-4567{sep}Cell", MOBILE)
            assert phone.is_mobile is False

    def test_find_website_none(self):
        """Test None without a domain."""
        assert find_website("Jane Doe") is None

    def test_find_postal_code_plus_four(self):
        """Test ZIP+4 codes."""
        assert find_postal_code("Austin, TX 78701-1234") == "78701-1234"


class TestLines:
    """Test line normalization and classification."""

    def test_normalize_lines(self):
        """Test lines are trimmed and blank lines dropped, keeping order."""
        assert normalize_lines("  b \n\n a\r\n   \n") == ["b", "a"]

    def test_classify_uppercase(self):
        """Test the all-uppercase flag needs more than 2 characters."""
        assert classify_line("ACME CORP", []).is_all_uppercase is True
        assert classify_line("AB", []).is_all_uppercase is False
        assert classify_line("Acme", []).is_all_uppercase is False

    def test_classify_flags(self):
        """Test contact and digit flags."""
        line = classify_line("Suite 100, jane@acme.com", ["lead"])
        assert line.has_email is True
        assert line.has_website is True
        assert line.has_phone is False
        assert line.has_digit is True
        assert line.has_contact_info is True
        assert line.word_count == 3

    def test_classify_title_keyword_substring(self):
        """Test title keywords match as lower-case substrings."""
        line = classify_line("Team LEAD", ["lead"])
        assert line.has_title_keyword is True
        assert line.lower == "team lead"

    def test_word_pattern(self):
        """Test street words match whole words only."""
        pattern = compile_word_pattern(["st", "ave"])
        assert pattern.search("12 Main St.")
        assert pattern.search("Fifth AVE")
        assert not pattern.search("Stanford")

    def test_word_pattern_empty(self):
        """Test an empty vocabulary compiles to None."""
        assert compile_word_pattern([]) is None


class TestDecomposeAddress:
    """Test address decomposition."""

    def test_street_and_locality(self):
        """Test a street line plus a City, ST ZIP line."""
        parts = decompose_address(["123 Main Street", "Springfield, IL 62704"])
        assert parts == AddressParts(
            formatted="123 Main Street, Springfield, IL 62704",
            street="123 Main Street",
            city="Springfield",
            region="IL",
            postal_code="62704",
            country="United States",
        )

    def test_locality_without_zip(self):
        """Test the comma-split fallback."""
        parts = decompose_address(["500 Elm Ave", "Portland, OR"])
        assert parts.city == "Portland"
        assert parts.region == "OR"
        assert parts.postal_code == ""
        assert parts.country == "United States"

    def test_non_us_region_not_recognized(self):
        """Test a spelled-out province yields no region or country."""
        parts = decompose_address(["Toronto, Ontario"])
        assert parts.city == "Toronto"
        assert parts.region == ""
        assert parts.country == ""
        assert parts.street == ""
        assert parts.formatted == "Toronto, Ontario"

    def test_single_line_street_stays_empty(self):
        """Test one line leaves the street empty."""
        parts = decompose_address(["Austin, TX 78701-1234"])
        assert parts.street == ""
        assert parts.city == "Austin"
        assert parts.postal_code == "78701-1234"

    def test_multiple_street_lines(self):
        """Test all lines but the last form the street."""
        parts = decompose_address(["Suite 200", "1 Elm St", "Dover, DE 19901"])
        assert parts.street == "Suite 200, 1 Elm St"

    def test_empty(self):
        """Test no lines gives empty parts."""
        assert decompose_address([]) == AddressParts()
