"""
Blog API - Index and Health Check Routes
========================================

What:  GET / (plain-text greeting) and GET /health (store connectivity probe).
Who:   / is hit by humans checking the service is up; /health by Docker
       health checks and load balancers.

Health Check Philosophy:
    The service is only useful if it can reach its store, so /health runs a
    `SELECT 1` through the same pool the handlers use.
    - healthy:   store reachable (HTTP 200)
    - unhealthy: store unreachable (HTTP 503, stop routing traffic)
"""

import logging
import time

from fastapi import APIRouter, Depends, Response
from fastapi.responses import PlainTextResponse
from sqlalchemy.ext.asyncio import AsyncEngine

from blog_api import __version__
from blog_api.database import get_engine, verify_connection
from blog_api.schemas.blog_post import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

# Initialized once when the module loads
_start_time = time.time()


@router.get("/", response_class=PlainTextResponse, summary="Greeting")
async def index_page() -> str:
    return "Hello Crud API"


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={503: {"description": "Store unreachable", "model": HealthResponse}},
    summary="Service health check",
)
async def health_check(
    response: Response,
    engine: AsyncEngine = Depends(get_engine),
) -> HealthResponse:
    """
    Probe the store and report aggregate status.

    The probe is deliberately cheap (SELECT 1) because it runs every few
    seconds. Failures are reported in the body, never raised.
    """
    db_status = "connected"
    overall = "healthy"

    try:
        await verify_connection(engine)
    except Exception as e:
        db_status = "disconnected"
        overall = "unhealthy"
        response.status_code = 503
        logger.warning("Health check: database unreachable: %s", str(e))

    return HealthResponse(
        status=overall,
        version=__version__,
        database=db_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
