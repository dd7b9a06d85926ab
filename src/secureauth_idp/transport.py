"""
Injected IdP client contract and the shared request executor.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

import httpx

logger = logging.getLogger(__name__)


@runtime_checkable
class IdPClient(Protocol):
    """
    Client that knows how to reach and authenticate against an IdP realm.

    Host, port, realm, TLS and the Authorization header are the client's
    business. The service clients only ask it to build a request for an
    endpoint path and to send it.

    Attributes:
        app_id: Application ID registered in the realm
        app_key: Hex-encoded application key
    """

    app_id: str
    app_key: str

    def build_get_request(self, endpoint: str) -> httpx.Request: ...

    def build_post_request(self, endpoint: str, body: str) -> httpx.Request: ...

    def build_put_request(self, endpoint: str, body: str) -> httpx.Request: ...

    def send(self, request: httpx.Request) -> httpx.Response: ...


@dataclass
class RawReply:
    """
    A fully read IdP reply.

    Attributes:
        data: Decoded JSON object
        raw_json: Body text exactly as received
        http_response: The HTTP response the body was read from
    """
    data: dict[str, Any]
    raw_json: str
    http_response: httpx.Response


def encode_body(payload: dict[str, Any]) -> str:
    """Serialize a request payload to compact JSON."""
    return json.dumps(payload, separators=(",", ":"))


def decode_body(body: bytes) -> str:
    """Decode a response body losslessly; invalid UTF-8 bytes survive as surrogates."""
    return body.decode("utf-8", "surrogateescape")


def execute(client: IdPClient, request: httpx.Request) -> RawReply:
    """
    Send a built request and decode the JSON object it returns.

    HTTP status codes are not interpreted; the IdP reports failures in the
    body's status and message fields.

    Args:
        client: Client used to send the request
        request: Request built by the same client

    Returns:
        RawReply with the decoded body, the body text and the response

    Raises:
        httpx.HTTPError: On transport errors (from an httpx-backed client)
        ValueError: If the body is not a JSON object
    """
    response = client.send(request)
    try:
        body = response.read()
    finally:
        response.close()

    logger.debug(
        "%s %s -> %s (%d bytes)",
        request.method,
        request.url,
        response.status_code,
        len(body),
    )

    # The IdP signs the body bytes; Content-Type charset is ignored so
    # raw_json encodes back to exactly what was received.
    raw_json = decode_body(body)
    data = json.loads(raw_json)
    if not isinstance(data, dict):
        raise ValueError(
            f"Expected a JSON object from {request.url}, got {type(data).__name__}"
        )

    return RawReply(data=data, raw_json=raw_json, http_response=response)
