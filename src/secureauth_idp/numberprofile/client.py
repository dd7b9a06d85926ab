"""
Client for the SecureAuth IdP phone number profile endpoint.
"""

from __future__ import annotations

from ..transport import IdPClient, encode_body, execute
from .models import NumberProfileRequest, NumberProfileResponse

NUMBERPROFILE_ENDPOINT = "/api/v1/numberprofile"


class NumberProfileClient:
    """
    Client for the number profile service.

    Args:
        client: Configured IdP client holding host, realm and credentials
        endpoint: Path of the number profile endpoint.
            Default: /api/v1/numberprofile

    Example:
        >>> numbers = NumberProfileClient(idp)
        >>> response = numbers.profile_number("jsmith", "15558675309")
        >>> if response.number_profile_result:
        ...     print(response.number_profile_result.carrier)
    """

    def __init__(
        self,
        client: IdPClient,
        endpoint: str = NUMBERPROFILE_ENDPOINT,
    ):
        self.client = client
        self.endpoint = endpoint

    def post(
        self,
        request: NumberProfileRequest,
        endpoint: str | None = None,
    ) -> NumberProfileResponse:
        """
        POST a number profile request.

        Args:
            request: Request with user_id and phone_number set
            endpoint: Override for the endpoint path

        Returns:
            NumberProfileResponse decoded from the reply

        Raises:
            ValueError: If the reply is not a JSON object
            httpx.HTTPError: On network errors
        """
        body = encode_body(request.to_dict())
        http_request = self.client.build_post_request(endpoint or self.endpoint, body)
        reply = execute(self.client, http_request)

        return NumberProfileResponse.from_dict(
            reply.data,
            raw_json=reply.raw_json,
            http_response=reply.http_response,
        )

    def profile_number(self, user_id: str, phone_number: str) -> NumberProfileResponse:
        """Look up the profile of a user's phone number."""
        return self.post(NumberProfileRequest(user_id=user_id, phone_number=phone_number))
