"""
Blog API - Connection Pool Provider
===================================

What:  Builds the bounded async connection pool, checks it at startup,
       and hands it to route handlers through FastAPI dependency injection.
How:   `create_pool()` wraps `create_async_engine`; the resulting engine is
       stored on `app.state.engine` by the lifespan handler and read back by
       the `get_engine` dependency on every request.

Why no module-level engine:
    The pool is passed explicitly to every data-access call. Tests swap in
    an in-memory SQLite engine through `app.dependency_overrides[get_engine]`
    without touching import-time state.

Connection Leasing:
    Data-access operations lease a connection with `async with engine.begin()`.
    The connection goes back to the pool when the block exits, whether the
    statement committed or raised.
"""

import logging

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import DeclarativeBase

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    The service never creates tables itself; `Base.metadata` is used by the
    test suite to build the schema on the substitute store.
    """
    pass


def create_pool(
    database_url: str,
    pool_size: int,
    max_overflow: int = 0,
    pool_timeout: float = 30.0,
    echo: bool = False,
) -> AsyncEngine:
    """
    Create the async engine that owns the connection pool.

    Args:
        database_url: SQLAlchemy async URL (e.g. postgresql+asyncpg://...)
        pool_size: Persistent connections kept open by the pool
        max_overflow: Extra connections allowed above pool_size (0 = fixed bound)
        pool_timeout: Seconds a checkout waits for a free connection before
            raising sqlalchemy.exc.TimeoutError
        echo: Log every SQL statement (enabled when LOG_LEVEL=DEBUG)

    No connection is opened here; call `verify_connection()` to fail fast.
    """
    return create_async_engine(
        database_url,
        pool_size=pool_size,
        max_overflow=max_overflow,
        pool_timeout=pool_timeout,
        pool_pre_ping=True,  # Catches stale connections after a DB restart
        echo=echo,
    )


async def verify_connection(engine: AsyncEngine) -> None:
    """
    Round-trip `SELECT 1` through the pool.

    Raises whatever the driver raises when the store is unreachable. The
    lifespan handler lets that propagate so the process never serves a
    request without a working store.
    """
    async with engine.connect() as conn:
        await conn.execute(text("SELECT 1"))
    logger.info("Database connection verified")


async def dispose_pool(engine: AsyncEngine) -> None:
    """Close every pooled connection. Called during application shutdown."""
    await engine.dispose()


def get_engine(request: Request) -> AsyncEngine:
    """
    FastAPI dependency returning the shared pool for the current app.

    Example usage in a route:
        @router.get("/blog")
        async def get_blogposts(engine: AsyncEngine = Depends(get_engine)):
            return await blog_post_service.list_posts(engine)
    """
    return request.app.state.engine
