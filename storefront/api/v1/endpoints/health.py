"""
Health endpoints: basic, detailed (database connectivity), readiness and liveness.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.api.v1.deps import get_db
from storefront.core.config import settings
from storefront.schemas.health import (
    DatabaseHealth,
    DetailedHealthResponse,
    HealthResponse,
    ProbeResponse,
)

router = APIRouter(prefix="/health", tags=["health"])
logger = logging.getLogger(__name__)


def _now() -> datetime:
    return datetime.now(timezone.utc)


@router.get("", response_model=HealthResponse)
async def health() -> HealthResponse:
    logger.info("GET /health - Health check requested")
    return HealthResponse(
        status="UP",
        timestamp=_now(),
        application=settings.PROJECT_NAME,
        version=settings.VERSION,
    )


@router.get("/detailed", response_model=DetailedHealthResponse)
async def detailed_health(db: AsyncSession = Depends(get_db)) -> DetailedHealthResponse:
    """Health check including a round-trip to the database."""
    dialect = db.bind.dialect.name if db.bind is not None else "unknown"
    database = DatabaseHealth(status="UP", dialect=dialect)

    try:
        await db.execute(select(1))
    except SQLAlchemyError as e:
        logger.error("Health check DB failure: %s", e)
        database.status = "DOWN"

    return DetailedHealthResponse(
        status="UP" if database.status == "UP" else "DEGRADED",
        timestamp=_now(),
        application=settings.PROJECT_NAME,
        version=settings.VERSION,
        database=database,
    )


@router.get("/ready", response_model=ProbeResponse)
async def ready() -> ProbeResponse:
    return ProbeResponse(
        status="READY",
        timestamp=_now(),
        message="Application is ready to handle requests",
    )


@router.get("/live", response_model=ProbeResponse)
async def live() -> ProbeResponse:
    return ProbeResponse(status="ALIVE", timestamp=_now(), message="Application is running")
