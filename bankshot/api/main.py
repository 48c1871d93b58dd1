"""FastAPI application setup and configuration."""

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from bankshot import __version__
from bankshot.config import ApplicationConfig, Config
from bankshot.core import ShotSolver, TableGeometry

from .errors import setup_error_handling
from .routes import health, shots

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[ApplicationConfig] = None,
    solver: Optional[ShotSolver] = None,
) -> FastAPI:
    """Create and configure FastAPI application.

    Args:
        settings: Validated settings; loaded from the Config singleton if omitted
        solver: Solver to serve; built from the table settings if omitted

    Returns:
        Configured application
    """
    if settings is None:
        settings = Config().settings()
    if solver is None:
        solver = ShotSolver(TableGeometry.from_settings(settings.table))

    app = FastAPI(
        title="BankShot API",
        description="Direct and bank shot solver for pocket billiards",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    app.state.settings = settings
    app.state.solver = solver

    # Renderer clients are served from other origins (mobile webviews, dev servers)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    setup_error_handling(app)

    app.include_router(health.router, prefix="/api/v1")
    app.include_router(shots.router, prefix="/api/v1")

    logger.info(
        f"BankShot API ready for a {solver.table.width:g}x{solver.table.length:g} mm table"
    )
    return app
