"""
Behavioral-biometrics service.

Re-exports the client and models for convenient imports:
    from secureauth_idp.behavebio import BehaveBioClient, BehaveBioRequest
"""

from .client import BehaveBioClient, BEHAVEBIO_ENDPOINT, BEHAVEBIO_JS_ENDPOINT
from .models import (
    BehaveBioRequest,
    BehaveBioResponse,
    BehaviorBioResults,
    ControlResult,
)

__all__ = [
    "BehaveBioClient",
    "BehaveBioRequest",
    "BehaveBioResponse",
    "BehaviorBioResults",
    "ControlResult",
    "BEHAVEBIO_ENDPOINT",
    "BEHAVEBIO_JS_ENDPOINT",
]
