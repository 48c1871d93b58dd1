"""Dependency injection functions for FastAPI routes."""

from fastapi import HTTPException, Request

from bankshot.config import ApplicationConfig
from bankshot.core import ShotSolver


def get_solver(request: Request) -> ShotSolver:
    """Get the shot solver attached to the application."""
    solver = getattr(request.app.state, "solver", None)
    if solver is None:
        raise HTTPException(status_code=503, detail="Shot solver not available")
    return solver


def get_settings(request: Request) -> ApplicationConfig:
    """Get the validated application settings."""
    settings = getattr(request.app.state, "settings", None)
    if settings is None:
        raise HTTPException(status_code=503, detail="Configuration not available")
    return settings
