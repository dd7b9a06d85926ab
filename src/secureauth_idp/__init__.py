"""
SecureAuth IdP SDK for Python

Behavioral-biometrics and phone number profile clients, with validation of
the IdP's HMAC-SHA256 response signatures.
"""

from .models import ApiResponse
from .transport import IdPClient
from .signature import (
    build_signing_string,
    compute_signature,
    is_signature_valid,
    verify_response_signature,
)
from .headers import extract_signature_headers, has_signature_headers
from .behavebio import (
    BehaveBioClient,
    BehaveBioRequest,
    BehaveBioResponse,
    BehaviorBioResults,
    ControlResult,
)
from .numberprofile import (
    CarrierInfo,
    NumberProfileClient,
    NumberProfileRequest,
    NumberProfileResponse,
    NumberProfileResult,
)

__version__ = "0.1.0"

__all__ = [
    "ApiResponse",
    "IdPClient",
    "build_signing_string",
    "compute_signature",
    "is_signature_valid",
    "verify_response_signature",
    "extract_signature_headers",
    "has_signature_headers",
    "BehaveBioClient",
    "BehaveBioRequest",
    "BehaveBioResponse",
    "BehaviorBioResults",
    "ControlResult",
    "CarrierInfo",
    "NumberProfileClient",
    "NumberProfileRequest",
    "NumberProfileResponse",
    "NumberProfileResult",
]
