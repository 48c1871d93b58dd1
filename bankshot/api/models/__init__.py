"""API request and response models."""

from .requests import BaseRequest, SolveShotsRequest
from .responses import (
    BaseResponse,
    ErrorCode,
    ErrorResponse,
    HealthResponse,
    HealthStatus,
    NearestPocketResponse,
    ShotResponse,
    SolveShotsResponse,
    TableResponse,
)

__all__ = [
    "BaseRequest",
    "SolveShotsRequest",
    "BaseResponse",
    "ErrorCode",
    "ErrorResponse",
    "HealthResponse",
    "HealthStatus",
    "NearestPocketResponse",
    "ShotResponse",
    "SolveShotsResponse",
    "TableResponse",
]
