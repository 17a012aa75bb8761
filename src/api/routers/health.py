"""Liveness endpoint that round-trips the database."""
import logging

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy import text
from sqlalchemy.exc import InterfaceError, OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import get_async_session
from services.exceptions import StorageUnavailableError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """API is up and the named database backend answered."""

    status: str
    database: str


@router.get("/health", response_model=HealthResponse)
async def health_check(
    db: AsyncSession = Depends(get_async_session),
) -> HealthResponse:
    """
    Run a trivial query against the database.

    An unreachable database is reported like any other outage: 503 with
    Retry-After, never a 200 with a degraded flag.
    """
    try:
        await db.execute(text("SELECT 1"))
    except (OperationalError, InterfaceError) as e:
        logger.error("Health check could not reach the database: %s", e)
        raise StorageUnavailableError(str(e.orig or e)) from e
    return HealthResponse(status="ok", database=db.get_bind().dialect.name)
