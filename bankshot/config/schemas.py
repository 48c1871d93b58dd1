"""Pydantic configuration schemas.

This module defines the validated shape of the application configuration:
- Table geometry and solver margins
- Solver defaults
- Logging
- HTTP API server
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from bankshot.core.constants import (
    BALL_DIAMETER_MM,
    CORNER_POCKET_OPENING_MM,
    DEFAULT_DISPLAY_SHOTS,
    MAX_CUSHIONS,
    RAIL_TOLERANCE_MM,
    SIDE_POCKET_OPENING_MM,
    TABLE_LENGTH_MM,
    TABLE_WIDTH_MM,
)


class LogLevel(str, Enum):
    """Logging level enumeration."""

    CRITICAL = "CRITICAL"
    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"
    DEBUG = "DEBUG"


class BaseConfig(BaseModel):
    """Base configuration class with common functionality."""

    model_config = ConfigDict(
        extra="forbid",
        validate_assignment=True,
        use_enum_values=True,
        validate_default=True,
        allow_inf_nan=False,
    )


class TableSettings(BaseConfig):
    """Table geometry in millimeters."""

    width: float = Field(
        default=TABLE_WIDTH_MM, gt=0, description="Short rail span (x axis)"
    )
    length: float = Field(
        default=TABLE_LENGTH_MM, gt=0, description="Long rail span (y axis)"
    )
    ball_diameter: float = Field(default=BALL_DIAMETER_MM, gt=0, description="Ball diameter")
    corner_pocket_opening: float = Field(
        default=CORNER_POCKET_OPENING_MM,
        gt=0,
        description="Corner pocket mouth (informational)",
    )
    side_pocket_opening: float = Field(
        default=SIDE_POCKET_OPENING_MM,
        gt=0,
        description="Side pocket mouth (informational)",
    )
    rail_tolerance: float = Field(
        default=RAIL_TOLERANCE_MM,
        ge=0,
        description="Distance past each rail end a cushion contact is still accepted",
    )
    on_table_margin: Optional[float] = Field(
        default=None,
        ge=0,
        description="Distance a ball center may sit beyond a rail line; "
        "defaults to one ball radius",
    )

    @model_validator(mode="after")
    def validate_ball_fits(self):
        """A ball must fit across the short rail."""
        if self.ball_diameter >= self.width:
            raise ValueError("ball_diameter must be smaller than the table width")
        return self


class SolverSettings(BaseConfig):
    """Shot solver defaults."""

    default_max_cushions: int = Field(
        default=MAX_CUSHIONS,
        ge=0,
        le=MAX_CUSHIONS,
        description="Cushion cap used when a request does not specify one",
    )
    max_display_shots: int = Field(
        default=DEFAULT_DISPLAY_SHOTS,
        ge=1,
        description="Number of shots returned to renderers by default",
    )


class LoggingSettings(BaseConfig):
    """Logging configuration."""

    level: LogLevel = Field(default=LogLevel.INFO, description="Global logging level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log message format",
    )
    log_modules: dict[str, LogLevel] = Field(
        default_factory=dict,
        description="Per-logger levels, e.g. {'bankshot.core': 'DEBUG'}",
    )


class APISettings(BaseConfig):
    """HTTP API server configuration."""

    host: str = Field(default="0.0.0.0", description="Bind address")
    port: int = Field(default=8000, ge=1, le=65535, description="Bind port")
    log_level: str = Field(default="info", description="Uvicorn log level")
    reload: bool = Field(default=False, description="Enable auto-reload")


class ApplicationConfig(BaseConfig):
    """Complete application configuration."""

    table: TableSettings = Field(default_factory=TableSettings)
    solver: SolverSettings = Field(default_factory=SolverSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    api: APISettings = Field(default_factory=APISettings)


__all__ = [
    "LogLevel",
    "BaseConfig",
    "TableSettings",
    "SolverSettings",
    "LoggingSettings",
    "APISettings",
    "ApplicationConfig",
]
