"""
Data models shared by the IdP service clients.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import httpx

from .signature import is_signature_valid

if TYPE_CHECKING:
    from .transport import IdPClient


def omit_empty(payload: dict[str, Any]) -> dict[str, Any]:
    """Drop keys whose values are empty, as the IdP API expects."""
    return {k: v for k, v in payload.items() if v not in (None, "")}


# Reply field accessors. Missing keys and JSON null take the default;
# a value of the wrong JSON type raises ValueError.

def _wrong_type(key: str, expected: str, value: Any) -> ValueError:
    return ValueError(
        f"Unexpected reply shape: {key!r} should be {expected}, got {type(value).__name__}"
    )


def get_str(data: dict[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise _wrong_type(key, "a string", value)
    return value


def get_float(data: dict[str, Any], key: str) -> float:
    value = data.get(key)
    if value is None:
        return 0.0
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise _wrong_type(key, "a number", value)
    return float(value)


def get_int(data: dict[str, Any], key: str) -> int:
    value = data.get(key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise _wrong_type(key, "an integer", value)
    return value


def get_object(data: dict[str, Any], key: str) -> dict[str, Any] | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, dict):
        raise _wrong_type(key, "an object", value)
    return value


def get_object_list(data: dict[str, Any], key: str) -> list[dict[str, Any]]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise _wrong_type(key, "an array", value)
    for item in value:
        if not isinstance(item, dict):
            raise _wrong_type(f"{key}[]", "an object", item)
    return value


@dataclass
class ApiResponse:
    """
    Fields every IdP response carries.

    Attributes:
        status: Vendor status string (e.g. "found", "not_found", "invalid")
        message: Vendor message, usually empty on success
        raw_json: Response body exactly as received, used for signature checks.
            Bytes that are not valid UTF-8 are kept as surrogate escapes.
        http_response: The underlying HTTP response
    """
    status: str = ""
    message: str = ""
    raw_json: str = field(default="", compare=False, repr=False)
    http_response: httpx.Response | None = field(default=None, compare=False, repr=False)

    def is_signature_valid(self, client: IdPClient) -> bool:
        """
        Check X-SA-SIGNATURE against the raw body using the client's key.

        Returns False on mismatch; raises ValueError if the key is not hex.
        """
        return is_signature_valid(self, client)
