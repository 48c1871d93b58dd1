"""Configuration module for bankshot."""

from .logging_setup import setup_logging
from .manager import Config, ConfigurationError, load_environment, merge_dicts
from .schemas import (
    APISettings,
    ApplicationConfig,
    LoggingSettings,
    SolverSettings,
    TableSettings,
)

__all__ = [
    "Config",
    "ConfigurationError",
    "load_environment",
    "merge_dicts",
    "setup_logging",
    "APISettings",
    "ApplicationConfig",
    "LoggingSettings",
    "SolverSettings",
    "TableSettings",
]
