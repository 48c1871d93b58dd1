"""API Request Models.

Pydantic models validating the bodies the shot API accepts. Coordinates are
table millimeters, origin at the bottom-left corner pocket.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, FiniteFloat


class BaseRequest(BaseModel):
    """Base class for all API requests with common validation."""

    model_config = ConfigDict(
        extra="forbid",
        str_strip_whitespace=True,
        validate_assignment=True,
    )


class SolveShotsRequest(BaseRequest):
    """Request to enumerate shots for one cue ball / object ball pair."""

    cue_position: tuple[FiniteFloat, FiniteFloat] = Field(
        ..., description="Cue ball center (x, y) in mm", examples=[[300.0, 1000.0]]
    )
    object_position: tuple[FiniteFloat, FiniteFloat] = Field(
        ..., description="Object ball center (x, y) in mm", examples=[[500.0, 500.0]]
    )
    pocket: Optional[str] = Field(
        default=None,
        description="Target pocket name; omit or null to consider all six pockets",
        examples=["bottom_right"],
    )
    max_cushions: Optional[int] = Field(
        default=None,
        ge=0,
        le=2,
        description="0 = direct only, 1 = single cushion, 2 = double cushion; "
        "defaults to the configured solver setting",
    )
    limit: Optional[int] = Field(
        default=None,
        ge=0,
        description="Maximum number of shots to return; defaults to the "
        "configured display count",
    )


__all__ = ["BaseRequest", "SolveShotsRequest"]
