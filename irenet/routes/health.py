"""
Irenet Backend — Root & Health Routes
=====================================

What:  GET / (welcome message) and GET /api/health (database probe).
How:   The health check runs `SELECT 1` on a pooled connection; any failure
       reports 500 with the driver message so operators can see why.

Neither endpoint uses the `{"success": ...}` envelope.
"""

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from sqlalchemy import text

from irenet.database import engine
from irenet.schemas.common import HealthResponse, WelcomeResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])


@router.get("/", response_model=WelcomeResponse, summary="Welcome message")
async def root() -> WelcomeResponse:
    return WelcomeResponse(message="Welcome to the Irenet API")


@router.get(
    "/api/health",
    response_model=HealthResponse,
    response_model_exclude_none=True,
    responses={500: {"description": "Database unreachable", "model": HealthResponse}},
    summary="Service health check",
)
async def health_check():
    """
    Check that the server can reach the database.

    Returns:
        200 {"status": "OK", "message": ..., "database": "connected"}
        500 {"status": "ERROR", "message": ..., "error": <reason>}
    """
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1 AS test"))
    except Exception as e:
        logger.warning("Health check: database unreachable: %s", str(e))
        body = HealthResponse(
            status="ERROR",
            message="Database connection failed",
            error=str(e),
        )
        return JSONResponse(status_code=500, content=body.model_dump(exclude_none=True))

    return HealthResponse(
        status="OK",
        message="Server and database are running",
        database="connected",
    )
