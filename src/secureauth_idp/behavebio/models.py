"""
Data models for the behavioral-biometrics (behavebio) service.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import httpx

from ..models import (
    ApiResponse,
    get_float,
    get_int,
    get_object,
    get_object_list,
    get_str,
    omit_empty,
)


@dataclass
class BehaveBioRequest:
    """
    Parameters for behavebio POST and PUT calls.

    Empty attributes are left out of the JSON body.

    Attributes:
        user_id: Username the profile belongs to (required for POST/PUT)
        behavior_profile: JSON string produced by the behavebio JavaScript
        host_address: IP address of the user's host
        user_agent: User agent of the user's request
        field_name: Field to reset, or "ALL" for a global reset
        field_type: "regulartext", "anonymoustext", or "ALL"
        device_type: "Desktop", "Mobile", or "ALL"
    """
    user_id: str = ""
    behavior_profile: str = ""
    host_address: str = ""
    user_agent: str = ""
    field_name: str = ""
    field_type: str = ""
    device_type: str = ""

    def to_dict(self) -> dict[str, str]:
        return omit_empty({
            "userId": self.user_id,
            "behaviorProfile": self.behavior_profile,
            "hostAddress": self.host_address,
            "userAgent": self.user_agent,
            "fieldName": self.field_name,
            "fieldType": self.field_type,
            "deviceType": self.device_type,
        })


@dataclass
class ControlResult:
    """Score for a single monitored form control."""
    control_id: str = ""
    score: float = 0.0
    confidence: float = 0.0
    count: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ControlResult:
        return cls(
            control_id=get_str(data, "ControlID"),
            score=get_float(data, "Score"),
            confidence=get_float(data, "Confidence"),
            count=get_int(data, "Count"),
        )


@dataclass
class BehaviorBioResults:
    """
    Aggregate behavioral-biometrics result.

    Attributes:
        total_score: Overall match score across all controls
        total_confidence: Confidence in the overall score
        device: Device type the profile was matched against
        results: Per-control scores
    """
    total_score: float = 0.0
    total_confidence: float = 0.0
    device: str = ""
    results: list[ControlResult] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> BehaviorBioResults:
        return cls(
            total_score=get_float(data, "TotalScore"),
            total_confidence=get_float(data, "TotalConfidence"),
            device=get_str(data, "Device"),
            results=[ControlResult.from_dict(r) for r in get_object_list(data, "Results")],
        )


@dataclass
class BehaveBioResponse(ApiResponse):
    """
    Reply from the behavebio endpoints.

    Attributes:
        source: URL of the behavebio JavaScript (js endpoint only)
        behavior_results: Scores for a posted profile, if the IdP returned any
    """
    source: str = ""
    behavior_results: BehaviorBioResults | None = None

    @classmethod
    def from_dict(
        cls,
        data: dict[str, Any],
        raw_json: str = "",
        http_response: httpx.Response | None = None,
    ) -> BehaveBioResponse:
        results = get_object(data, "BehaviorBioResults")
        return cls(
            status=get_str(data, "status"),
            message=get_str(data, "message"),
            raw_json=raw_json,
            http_response=http_response,
            source=get_str(data, "src"),
            behavior_results=BehaviorBioResults.from_dict(results) if results else None,
        )
