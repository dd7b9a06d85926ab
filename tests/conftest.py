"""Shared fixtures: an httpx-backed IdP client and a respx mock."""

import base64
import hashlib
import hmac

import httpx
import pytest
import respx

APP_ID = "7d3e0a1f5c2b4e8f9a6d1c3b5e7f9a2d"
APP_KEY = "4f2a8c1e9b7d3f5a0c6e8b2d4f1a3c5e7b9d0f2a4c6e8b1d3f5a7c9e0b2d4f6a"
REALM_URL = "https://idp.example.com/secureauth1"


def reference_signature(app_key: str, date: str, app_id: str, body: str | bytes) -> str:
    """Sign a response the way the IdP does, independently of the SDK."""
    if isinstance(body, str):
        body = body.encode("utf-8")
    message = b"\n".join([date.encode(), app_id.encode(), body])
    digest = hmac.new(bytes.fromhex(app_key), message, hashlib.sha256).digest()
    return base64.b64encode(digest).decode()


class FakeIdPClient:
    """Minimal IdPClient: no auth header, requests go through httpx.Client."""

    def __init__(self, app_id: str = APP_ID, app_key: str = APP_KEY, realm_url: str = REALM_URL):
        self.app_id = app_id
        self.app_key = app_key
        self._http = httpx.Client(base_url=realm_url)

    def _build(self, method: str, endpoint: str, body: str | None = None) -> httpx.Request:
        return self._http.build_request(
            method,
            endpoint,
            content=body,
            headers={"Content-Type": "application/json"},
        )

    def build_get_request(self, endpoint):
        return self._build("GET", endpoint)

    def build_post_request(self, endpoint, body):
        return self._build("POST", endpoint, body)

    def build_put_request(self, endpoint, body):
        return self._build("PUT", endpoint, body)

    def send(self, request):
        return self._http.send(request)

    def close(self):
        self._http.close()


@pytest.fixture
def idp_client():
    """IdP client pointed at the mocked realm."""
    client = FakeIdPClient()
    yield client
    client.close()


@pytest.fixture
def mock_idp():
    """Create a respx mock for the IdP realm."""
    with respx.mock(assert_all_called=False) as mock:
        yield mock
