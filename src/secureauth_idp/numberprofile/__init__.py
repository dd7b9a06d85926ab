"""
Phone number profile service.
"""

from .client import NumberProfileClient, NUMBERPROFILE_ENDPOINT
from .models import (
    CarrierInfo,
    NumberProfileRequest,
    NumberProfileResponse,
    NumberProfileResult,
)

__all__ = [
    "NumberProfileClient",
    "NumberProfileRequest",
    "NumberProfileResponse",
    "NumberProfileResult",
    "CarrierInfo",
    "NUMBERPROFILE_ENDPOINT",
]
