"""API Response Models.

This module defines the Pydantic models for API responses, including:
- Health check responses
- Table geometry responses
- Ranked shot responses
- Error responses with error codes
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from bankshot.core.models import ShotCandidate, TableGeometry


class BaseResponse(BaseModel):
    """Base class for all API responses."""

    model_config = ConfigDict(
        extra="forbid",
        validate_assignment=True,
        use_enum_values=True,
    )


class HealthStatus(str, Enum):
    """Health status enumeration."""

    HEALTHY = "healthy"


class ErrorCode(str, Enum):
    """Standardized error codes."""

    VAL_INVALID_FORMAT = "VAL_001"
    VAL_PARAMETER_OUT_OF_RANGE = "VAL_003"
    CONFIG_LOAD_FAILED = "CONFIG_002"
    SYS_INTERNAL_ERROR = "SYS_001"


class ErrorResponse(BaseModel):
    """Standardized error response model."""

    error: str = Field(..., description="Error code identifier")
    message: str = Field(..., description="Human-readable error message")
    details: Optional[dict[str, Any]] = Field(
        default=None, description="Additional error details"
    )
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Error timestamp",
    )
    path: Optional[str] = Field(default=None, description="Request path")
    method: Optional[str] = Field(default=None, description="HTTP method")


class HealthResponse(BaseResponse):
    """Service health."""

    status: HealthStatus = Field(..., description="Overall status")
    version: str = Field(..., description="Package version")


class TableResponse(BaseResponse):
    """Table geometry the solver is configured with."""

    width: float
    length: float
    ball_radius: float
    ball_diameter: float
    rail_tolerance: float
    on_table_margin: float
    corner_pocket_opening: float
    side_pocket_opening: float
    diagonal: float
    pockets: dict[str, tuple[float, float]]
    rails: dict[str, float]

    @classmethod
    def from_table(cls, table: TableGeometry) -> "TableResponse":
        return cls(**table.to_dict())


class NearestPocketResponse(BaseResponse):
    """Closest pocket to a tapped point."""

    pocket: Optional[str] = Field(
        default=None, description="Pocket name, or null if none is close enough"
    )
    distance: Optional[float] = Field(default=None, description="Distance in mm")


class ShotResponse(BaseResponse):
    """One ranked shot, ready for rendering."""

    cue_position: tuple[float, float]
    object_position: tuple[float, float]
    target_pocket: tuple[float, float]
    pocket_name: str
    aim_point: tuple[float, float]
    cushion_points: list[tuple[float, float]]
    rails_used: list[str]
    shot_type: str
    total_distance: float
    difficulty_score: float
    difficulty: str
    difficulty_label: str
    difficulty_color: str
    path_segments: list[tuple[tuple[float, float], tuple[float, float]]]

    @classmethod
    def from_candidate(cls, shot: ShotCandidate) -> "ShotResponse":
        return cls(**shot.to_dict())


class SolveShotsResponse(BaseResponse):
    """Ranked shots, easiest first."""

    shots: list[ShotResponse] = Field(default_factory=list)
    count: int = Field(..., ge=0, description="Number of shots returned")
    total_found: int = Field(
        ..., ge=0, description="Number of feasible shots before applying the limit"
    )
    best: Optional[ShotResponse] = Field(
        default=None, description="Easiest shot, or null when none is feasible"
    )


__all__ = [
    "BaseResponse",
    "HealthStatus",
    "ErrorCode",
    "ErrorResponse",
    "HealthResponse",
    "TableResponse",
    "NearestPocketResponse",
    "ShotResponse",
    "SolveShotsResponse",
]
