"""
Data models for the phone number profile service.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import httpx

from ..models import ApiResponse, get_object, get_str, omit_empty


@dataclass
class NumberProfileRequest:
    """
    Parameters for a number profile lookup.

    Attributes:
        user_id: Username the phone number belongs to
        phone_number: Number to profile, digits with country code (e.g. "15558675309")
    """
    user_id: str = ""
    phone_number: str = ""

    def to_dict(self) -> dict[str, str]:
        return omit_empty({
            "user_id": self.user_id,
            "phone_number": self.phone_number,
        })


@dataclass
class CarrierInfo:
    """Carrier serving (or previously serving) a number."""
    carrier_code: str = ""
    carrier: str = ""
    country_code: str = ""
    network_code: str = ""
    carrier_type: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> CarrierInfo | None:
        if not data:
            return None
        return cls(
            carrier_code=get_str(data, "carrierCode"),
            carrier=get_str(data, "carrier"),
            country_code=get_str(data, "countryCode"),
            network_code=get_str(data, "networkCode"),
            carrier_type=get_str(data, "carrierType"),
        )


@dataclass
class NumberProfileResult:
    """
    Risk profile of a phone number.

    Attributes:
        provider_request_id: Lookup ID assigned by the data provider
        international_format: Number in international format
        national_format: Number in national format
        country_code: ISO country of the number
        country_code_e164: E.164 calling code
        carrier: Current carrier
        original_carrier: Carrier the number was issued by
        ported_status: Whether the number has been ported
        roaming_status: Whether the number is roaming
        roaming_carrier: Carrier serving a roaming number
    """
    provider_request_id: str = ""
    international_format: str = ""
    national_format: str = ""
    country_code: str = ""
    country_code_e164: str = ""
    carrier: CarrierInfo | None = None
    original_carrier: CarrierInfo | None = None
    ported_status: str = ""
    roaming_status: str = ""
    roaming_carrier: CarrierInfo | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> NumberProfileResult:
        return cls(
            provider_request_id=get_str(data, "providerRequestId"),
            international_format=get_str(data, "internationalFormat"),
            national_format=get_str(data, "nationalFormat"),
            country_code=get_str(data, "countryCode"),
            country_code_e164=get_str(data, "countryCodeE164"),
            carrier=CarrierInfo.from_dict(get_object(data, "carrier")),
            original_carrier=CarrierInfo.from_dict(get_object(data, "originalCarrier")),
            ported_status=get_str(data, "portedStatus"),
            roaming_status=get_str(data, "roamingStatus"),
            roaming_carrier=CarrierInfo.from_dict(get_object(data, "roamingCarrier")),
        )


@dataclass
class NumberProfileResponse(ApiResponse):
    """Reply from the number profile endpoint."""
    number_profile_result: NumberProfileResult | None = None

    @classmethod
    def from_dict(
        cls,
        data: dict[str, Any],
        raw_json: str = "",
        http_response: httpx.Response | None = None,
    ) -> NumberProfileResponse:
        result = get_object(data, "numberProfileResult")
        return cls(
            status=get_str(data, "status"),
            message=get_str(data, "message"),
            raw_json=raw_json,
            http_response=http_response,
            number_profile_result=NumberProfileResult.from_dict(result) if result else None,
        )
