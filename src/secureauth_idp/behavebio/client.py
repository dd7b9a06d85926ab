"""
Client for the SecureAuth IdP behavioral-biometrics endpoints.
"""

from __future__ import annotations

from ..transport import IdPClient, RawReply, encode_body, execute
from .models import BehaveBioRequest, BehaveBioResponse

# Profile submission and reset
BEHAVEBIO_ENDPOINT = "/api/v1/behavebio"

# Location of the browser-side collection script
BEHAVEBIO_JS_ENDPOINT = "/api/v1/behavebio/js"


class BehaveBioClient:
    """
    Client for the behavebio service.

    Args:
        client: Configured IdP client holding host, realm and credentials
        endpoint: Path of the profile endpoint.
            Default: /api/v1/behavebio
        js_endpoint: Path of the JavaScript endpoint.
            Default: /api/v1/behavebio/js

    Example:
        >>> behavebio = BehaveBioClient(idp)
        >>> script = behavebio.get_behave_js().source
        >>> response = behavebio.post_behave_profile(
        ...     "jsmith", profile_json, "10.0.0.12", request_user_agent
        ... )
        >>> if response.is_signature_valid(idp):
        ...     print(response.behavior_results.total_score)
    """

    def __init__(
        self,
        client: IdPClient,
        endpoint: str = BEHAVEBIO_ENDPOINT,
        js_endpoint: str = BEHAVEBIO_JS_ENDPOINT,
    ):
        self.client = client
        self.endpoint = endpoint
        self.js_endpoint = js_endpoint

    def get(self, endpoint: str) -> BehaveBioResponse:
        """
        Execute a GET against a behavebio endpoint.

        Args:
            endpoint: Endpoint path

        Returns:
            BehaveBioResponse decoded from the reply

        Raises:
            ValueError: If the reply is not a JSON object
            httpx.HTTPError: On network errors
        """
        http_request = self.client.build_get_request(endpoint)
        return self._parse_response(execute(self.client, http_request))

    def post(
        self,
        request: BehaveBioRequest,
        endpoint: str | None = None,
    ) -> BehaveBioResponse:
        """
        POST a request to the profile endpoint.

        Args:
            request: Populated request; empty fields are omitted
            endpoint: Override for the endpoint path

        Returns:
            BehaveBioResponse decoded from the reply

        Raises:
            ValueError: If the reply is not a JSON object
            httpx.HTTPError: On network errors
        """
        body = encode_body(request.to_dict())
        http_request = self.client.build_post_request(endpoint or self.endpoint, body)
        return self._parse_response(execute(self.client, http_request))

    def put(
        self,
        request: BehaveBioRequest,
        endpoint: str | None = None,
    ) -> BehaveBioResponse:
        """
        PUT a request to the profile endpoint.

        Args:
            request: Populated request; empty fields are omitted
            endpoint: Override for the endpoint path

        Returns:
            BehaveBioResponse decoded from the reply

        Raises:
            ValueError: If the reply is not a JSON object
            httpx.HTTPError: On network errors
        """
        body = encode_body(request.to_dict())
        http_request = self.client.build_put_request(endpoint or self.endpoint, body)
        return self._parse_response(execute(self.client, http_request))

    def get_behave_js(self) -> BehaveBioResponse:
        """Fetch the location of the behavebio JavaScript (returned in ``source``)."""
        return self.get(self.js_endpoint)

    def post_behave_profile(
        self,
        user_id: str,
        behavior_profile: str,
        host_address: str,
        user_agent: str,
    ) -> BehaveBioResponse:
        """
        Submit a behavior profile collected by the behavebio JavaScript.

        Args:
            user_id: Username the profile belongs to
            behavior_profile: JSON string from the behavebio JavaScript
            host_address: IP address of the user's host
            user_agent: User agent from the user's request

        Returns:
            BehaveBioResponse with the scores in ``behavior_results``
        """
        request = BehaveBioRequest(
            user_id=user_id,
            behavior_profile=behavior_profile,
            host_address=host_address,
            user_agent=user_agent,
        )
        return self.post(request)

    def reset_behave_profile(
        self,
        user_id: str,
        field_name: str,
        field_type: str,
        device_type: str,
    ) -> BehaveBioResponse:
        """
        Reset all or part of a user's stored behavior profile.

        Args:
            user_id: Username whose profile is reset
            field_name: Field to reset (unique to the application), or "ALL"
            field_type: "regulartext" (values stored in the profile),
                "anonymoustext" (no values stored, e.g. passwords), or "ALL"
            device_type: "Desktop", "Mobile", or "ALL"

        Returns:
            BehaveBioResponse carrying the reset status
        """
        request = BehaveBioRequest(
            user_id=user_id,
            field_name=field_name,
            field_type=field_type,
            device_type=device_type,
        )
        return self.put(request)

    def _parse_response(self, reply: RawReply) -> BehaveBioResponse:
        """Build a BehaveBioResponse from a decoded reply."""
        return BehaveBioResponse.from_dict(
            reply.data,
            raw_json=reply.raw_json,
            http_response=reply.http_response,
        )
