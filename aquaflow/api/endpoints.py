"""API endpoints for the intent solver."""

import asyncio

import structlog
from fastapi import APIRouter, Depends, HTTPException

from aquaflow.api.schemas import SolveRequest, SolveResponse
from aquaflow.errors import ProviderUnavailableError
from aquaflow.models import RouteOptions
from aquaflow.solver import IntentSolver, get_default_solver

logger = structlog.get_logger()

router = APIRouter()


def get_solver() -> IntentSolver:
    """Dependency provider for the solver instance.

    Override this in tests to inject a stub solver:
        app.dependency_overrides[get_solver] = lambda: stub_solver
    """
    return get_default_solver()


@router.post("/solve")
async def solve(
    request: SolveRequest,
    solver_instance: IntentSolver = Depends(get_solver),
) -> SolveResponse:
    """Resolve a free-text intent into a route.

    Error Handling:
        - Invalid body or unknown option keys: 422
        - Pool data provider down or slow: 503
        - Ambiguous, invalid or unroutable intent: 200 with success=false
    """
    try:
        options = RouteOptions.from_overrides(request.options)
    except ValueError as err:
        logger.info("invalid_route_options", error=str(err))
        raise HTTPException(status_code=422, detail=str(err)) from err

    logger.info("received_intent", text_length=len(request.text))

    loop = asyncio.get_running_loop()
    try:
        resolution = await loop.run_in_executor(
            None, solver_instance.solve, request.text, options
        )
    except ProviderUnavailableError as err:
        logger.warning("solve_unavailable", error=str(err))
        raise HTTPException(status_code=503, detail=str(err)) from err

    logger.info(
        "returning_resolution",
        success=resolution.success,
        error=resolution.error.value if resolution.error else None,
        confidence=resolution.confidence,
    )
    return SolveResponse.from_resolution(resolution)
