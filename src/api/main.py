"""FastAPI application entry point."""
import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import InterfaceError, OperationalError

from api.routers import bookmarks, books, health, readings
from core.config import get_settings
from db.session import engine
from models import Base
from services.exceptions import StorageUnavailableError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None]:
    """Manage application lifespan - startup and shutdown."""
    app_settings = get_settings()
    logging.basicConfig(
        level=app_settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    # Startup: create tables from model metadata (no migration engine)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database schema ready")

    yield

    # Shutdown: release pooled connections
    await engine.dispose()


app_settings = get_settings()

app = FastAPI(
    title="ReaderBuddy API",
    description="A reading tracker with books, readings, and tagged bookmarks.",
    version="0.1.0",
    lifespan=lifespan,
)


@app.exception_handler(StorageUnavailableError)
@app.exception_handler(OperationalError)
@app.exception_handler(InterfaceError)
async def storage_unavailable_handler(
    _request: Request, exc: Exception,
) -> JSONResponse:
    """Report database outages as retryable 503s rather than as missing data."""
    logger.error("Storage unavailable: %s", exc)
    return JSONResponse(
        status_code=503,
        content={"detail": "Storage is temporarily unavailable. Please try again later."},
        headers={"Retry-After": "5"},
    )


app.add_middleware(
    CORSMiddleware,
    allow_origins=app_settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(bookmarks.router)
app.include_router(books.router)
app.include_router(readings.router)
