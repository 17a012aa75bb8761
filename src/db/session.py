"""Async SQLAlchemy session factory."""
from collections.abc import AsyncGenerator

from sqlalchemy import event
from sqlalchemy.exc import InterfaceError, OperationalError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from core.config import get_settings
from services.exceptions import StorageUnavailableError

SQLITE_BUSY_TIMEOUT_SECONDS = 30


def build_engine(database_url: str, **kwargs: object) -> AsyncEngine:
    """
    Create an async engine for the given URL.

    SQLite needs two adjustments: foreign keys are off by default (ON DELETE CASCADE
    would be ignored), and the driver's implicit transaction handling breaks
    SAVEPOINT, so transactions are begun explicitly. BEGIN IMMEDIATE takes the
    write lock up front; concurrent writers wait on the busy timeout instead of
    failing to upgrade a shared lock with "database is locked".
    """
    if not database_url.startswith("sqlite"):
        return create_async_engine(database_url, echo=False, pool_pre_ping=True, **kwargs)

    engine = create_async_engine(
        database_url, echo=False, connect_args={"timeout": SQLITE_BUSY_TIMEOUT_SECONDS},
    )

    @event.listens_for(engine.sync_engine, "connect")
    def _on_connect(dbapi_connection, _connection_record) -> None:  # noqa: ANN001
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    @event.listens_for(engine.sync_engine, "begin")
    def _on_begin(conn) -> None:  # noqa: ANN001
        conn.exec_driver_sql("BEGIN IMMEDIATE")

    return engine


settings = get_settings()

engine = build_engine(
    settings.database_url,
    **(
        {}
        if settings.is_sqlite
        else {"pool_size": settings.db_pool_size, "max_overflow": settings.db_max_overflow}
    ),
)

async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def get_async_session() -> AsyncGenerator[AsyncSession]:
    """
    Yield an async database session.

    Uses unit-of-work pattern: services use flush() for refreshing objects,
    commit happens once here at request end. This ensures atomic transactions
    per request - if anything fails, all changes are rolled back.

    Connection-level failures are re-raised as StorageUnavailableError so the
    API can answer 503 instead of treating them like a missing row.
    """
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except (OperationalError, InterfaceError) as e:
            await session.rollback()
            raise StorageUnavailableError(str(e.orig or e)) from e
        except Exception:
            await session.rollback()
            raise
