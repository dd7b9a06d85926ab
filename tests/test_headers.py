"""Tests for response-signature header lookup."""

import httpx

from secureauth_idp.headers import (
    extract_signature_headers,
    has_signature_headers,
    SIGNATURE_HEADERS,
)


class TestExtractSignatureHeaders:
    """Tests for extract_signature_headers function."""

    def test_basic_extraction(self):
        """Date and signature are returned in order."""
        headers = {
            "X-SA-DATE": "Tue, 14 Mar 2017 17:02:11.234 GMT",
            "X-SA-SIGNATURE": "c2lnbmF0dXJl",
            "Content-Type": "application/json",
        }
        result = extract_signature_headers(headers)
        assert result == ("Tue, 14 Mar 2017 17:02:11.234 GMT", "c2lnbmF0dXJl")

    def test_case_insensitive_lookup(self):
        """Header lookup is case-insensitive."""
        headers = {
            "x-sa-date": "Tue, 14 Mar 2017 17:02:11.234 GMT",
            "X-Sa-Signature": "c2lnbmF0dXJl",
        }
        date, signature = extract_signature_headers(headers)
        assert date == "Tue, 14 Mar 2017 17:02:11.234 GMT"
        assert signature == "c2lnbmF0dXJl"

    def test_missing_headers_are_empty(self):
        """Missing headers come back as empty strings."""
        assert extract_signature_headers({}) == ("", "")
        assert extract_signature_headers({"X-SA-DATE": "today"}) == ("today", "")

    def test_httpx_headers(self):
        """httpx.Headers are accepted directly."""
        headers = httpx.Headers({"X-SA-DATE": "today", "X-SA-SIGNATURE": "abc="})
        assert extract_signature_headers(headers) == ("today", "abc=")


class TestHasSignatureHeaders:
    """Tests for has_signature_headers function."""

    def test_both_present(self):
        """Both headers present."""
        assert has_signature_headers({"X-SA-DATE": "today", "X-SA-SIGNATURE": "abc="})

    def test_one_missing(self):
        """A single header is not enough."""
        assert not has_signature_headers({"X-SA-DATE": "today"})
        assert not has_signature_headers({"x-sa-signature": "abc="})

    def test_none_present(self):
        """Unsigned responses are detected."""
        assert not has_signature_headers({"Content-Type": "application/json"})


class TestSignatureHeadersConstant:
    """Tests for SIGNATURE_HEADERS constant."""

    def test_headers_lowercase(self):
        """All signature header names are lowercase."""
        for header in SIGNATURE_HEADERS:
            assert header == header.lower()
