"""Shot solving and table geometry endpoints.

Provides:
- Table geometry for renderers that draw the overlay
- Nearest pocket lookup for tap-to-select interactions
- Ranked direct and bank shots for a cue ball / object ball pair
"""

import logging
import math
from typing import Optional

from fastapi import APIRouter, Depends, Query

from bankshot.config import ApplicationConfig
from bankshot.core import ShotSolver, top_shots

from ..dependencies import get_settings, get_solver
from ..models.requests import SolveShotsRequest
from ..models.responses import (
    NearestPocketResponse,
    ShotResponse,
    SolveShotsResponse,
    TableResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Shots"])


@router.get("/table", response_model=TableResponse)
async def get_table(solver: ShotSolver = Depends(get_solver)) -> TableResponse:
    """Get the table geometry used for shot calculations."""
    return TableResponse.from_table(solver.table)


@router.get("/table/pockets/nearest", response_model=NearestPocketResponse)
async def get_nearest_pocket(
    x: float = Query(..., allow_inf_nan=False, description="X coordinate in mm"),
    y: float = Query(..., allow_inf_nan=False, description="Y coordinate in mm"),
    max_distance: Optional[float] = Query(
        default=None, ge=0, description="Ignore pockets further than this (mm)"
    ),
    solver: ShotSolver = Depends(get_solver),
) -> NearestPocketResponse:
    """Find the pocket closest to a point, e.g. where the user tapped."""
    table = solver.table
    name = table.nearest_pocket((x, y), max_distance=max_distance)
    if name is None:
        return NearestPocketResponse()

    px, py = table.pocket_position(name)
    return NearestPocketResponse(pocket=name, distance=math.hypot(px - x, py - y))


@router.post("/shots/solve", response_model=SolveShotsResponse)
async def solve_shots(
    request: SolveShotsRequest,
    solver: ShotSolver = Depends(get_solver),
    settings: ApplicationConfig = Depends(get_settings),
) -> SolveShotsResponse:
    """Enumerate and rank shots, easiest first.

    An empty shot list is a normal answer: nothing is feasible under the
    requested constraints. Try a larger max_cushions or another pocket.
    """
    max_cushions = (
        request.max_cushions
        if request.max_cushions is not None
        else settings.solver.default_max_cushions
    )
    limit = (
        request.limit if request.limit is not None else settings.solver.max_display_shots
    )

    shots = solver.solve(
        request.cue_position, request.object_position, request.pocket, max_cushions
    )
    returned = [ShotResponse.from_candidate(shot) for shot in top_shots(shots, limit)]

    logger.debug(
        f"Solved {len(shots)} shot(s), returning {len(returned)} "
        f"(pocket={request.pocket or 'all'}, max_cushions={max_cushions})"
    )

    return SolveShotsResponse(
        shots=returned,
        count=len(returned),
        total_found=len(shots),
        best=ShotResponse.from_candidate(shots[0]) if shots else None,
    )
