"""
Response-signature header names and lookup.
"""

from typing import Mapping


# Date the IdP used when signing the response body
SA_DATE_HEADER = "x-sa-date"

# Base64 HMAC-SHA256 of the signing string
SA_SIGNATURE_HEADER = "x-sa-signature"

SIGNATURE_HEADERS = frozenset({
    SA_DATE_HEADER,
    SA_SIGNATURE_HEADER,
})


def extract_signature_headers(headers: Mapping[str, str]) -> tuple[str, str]:
    """
    Extract the signing date and signature from response headers.

    Header lookup is case-insensitive. Missing headers come back as empty
    strings, which never match a computed signature.

    Args:
        headers: Response headers (``httpx.Headers`` or a plain dict)

    Returns:
        Tuple of (date, signature)

    Examples:
        >>> extract_signature_headers({"X-SA-DATE": "Mon, 02 Jan 2017", "X-SA-SIGNATURE": "abc="})
        ('Mon, 02 Jan 2017', 'abc=')
        >>> extract_signature_headers({})
        ('', '')
    """
    normalized = {k.lower(): v for k, v in headers.items()}
    return (
        normalized.get(SA_DATE_HEADER, ""),
        normalized.get(SA_SIGNATURE_HEADER, ""),
    )


def has_signature_headers(headers: Mapping[str, str]) -> bool:
    """Check if a response carries both signature headers."""
    normalized = {k.lower() for k in headers.keys()}
    return SIGNATURE_HEADERS <= normalized
