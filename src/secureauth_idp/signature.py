"""
HMAC-SHA256 validation of IdP response signatures.

The IdP signs every response body with the application key. The signing
string is the ``X-SA-DATE`` header value, the application ID and the raw
response body joined by newlines; the base64 digest is returned in
``X-SA-SIGNATURE``.
"""

from __future__ import annotations

import base64
import hashlib
import hmac
import logging
from typing import TYPE_CHECKING, Mapping

from .headers import extract_signature_headers, has_signature_headers

if TYPE_CHECKING:
    from .models import ApiResponse
    from .transport import IdPClient

logger = logging.getLogger(__name__)


def build_signing_string(date: str, app_id: str, raw_body: str) -> str:
    """Join the signed components in the order the IdP signs them."""
    return f"{date}\n{app_id}\n{raw_body}"


def compute_signature(app_key: str, message: str) -> str:
    """
    Compute the base64 HMAC-SHA256 of a message.

    Args:
        app_key: Hex-encoded application key
        message: String to sign

    Returns:
        Base64 (standard alphabet, padded) digest

    Raises:
        ValueError: If app_key is not valid hex
    """
    key = bytes.fromhex(app_key)
    # surrogateescape restores body bytes that were not valid UTF-8
    data = message.encode("utf-8", "surrogateescape")
    digest = hmac.new(key, data, hashlib.sha256).digest()
    return base64.b64encode(digest).decode("ascii")


def verify_response_signature(
    headers: Mapping[str, str],
    raw_body: str,
    app_id: str,
    app_key: str,
) -> bool:
    """
    Check a response body against its ``X-SA-SIGNATURE`` header.

    Args:
        headers: Response headers carrying X-SA-DATE and X-SA-SIGNATURE
        raw_body: Response body exactly as received
        app_id: Application ID the response was signed for
        app_key: Hex-encoded application key

    Returns:
        True if the computed signature equals the header value. False on a
        mismatch or when either signature header is missing.

    Raises:
        ValueError: If app_key is not valid hex
    """
    if not has_signature_headers(headers):
        logger.debug("Response is missing X-SA-DATE or X-SA-SIGNATURE")
        return False

    date, received = extract_signature_headers(headers)
    if not received:
        return False

    computed = compute_signature(app_key, build_signing_string(date, app_id, raw_body))

    if not hmac.compare_digest(computed.encode("ascii"), received.encode("utf-8")):
        logger.debug("Response signature mismatch for app %s", app_id)
        return False
    return True


def is_signature_valid(response: ApiResponse, client: IdPClient) -> bool:
    """
    Validate the signature of a decoded API response.

    Args:
        response: Response returned by one of the service clients
        client: Client holding the application ID and key

    Returns:
        True if the computed signature matches X-SA-SIGNATURE. A response
        that has no HTTP response attached is never valid.

    Raises:
        ValueError: If the client's app_key is not valid hex
    """
    if response.http_response is None:
        return False

    return verify_response_signature(
        response.http_response.headers,
        response.raw_json,
        client.app_id,
        client.app_key,
    )
