"""
Blog API - Test Configuration (conftest.py)
===========================================

What:  Shared pytest fixtures for the entire test suite.
How:   An in-memory SQLite database (aiosqlite + StaticPool) stands in for
       PostgreSQL. The app under test never runs its lifespan; its pool
       dependency is overridden to point at the substitute store.

Fixture Hierarchy (all function-scoped):
    ├── engine:        substitute store with the blog_posts table created
    ├── bare_engine:   substitute store with NO tables (every statement fails)
    ├── new_post:      a valid NewBlogPost
    ├── test_client:   HTTPX AsyncClient bound to the app and `engine`
    └── broken_client: same, bound to `bare_engine`
"""

import os

# Override settings for testing BEFORE any app imports
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from blog_api.database import Base, get_engine
from blog_api.models.blog_post import BlogPostRecord  # noqa: F401
from blog_api.schemas.blog_post import NewBlogPost


def _memory_engine():
    # StaticPool: every checkout shares the one connection that holds the
    # in-memory database, otherwise each lease would see an empty database.
    return create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
    )


@pytest_asyncio.fixture
async def engine():
    """Substitute store with the schema created. Empty table, so ids start at 1."""
    eng = _memory_engine()
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield eng
    await eng.dispose()


@pytest_asyncio.fixture
async def bare_engine():
    """Reachable store without the blog_posts table: every statement fails."""
    eng = _memory_engine()
    yield eng
    await eng.dispose()


@pytest.fixture
def new_post():
    return NewBlogPost(title="T", author="Al", content="C")


async def _client_for(engine, raise_app_exceptions=True):
    from blog_api.main import app

    app.dependency_overrides[get_engine] = lambda: engine
    transport = ASGITransport(app=app, raise_app_exceptions=raise_app_exceptions)
    return app, AsyncClient(transport=transport, base_url="http://test")


@pytest_asyncio.fixture
async def test_client(engine):
    """
    HTTPX AsyncClient talking to the FastAPI app over ASGI.

    Usage:
        async def test_index(test_client):
            response = await test_client.get("/")
            assert response.status_code == 200
    """
    app, client = await _client_for(engine)
    async with client:
        yield client
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def broken_client(bare_engine):
    """Client whose store rejects every statement. Unhandled errors become 500s."""
    app, client = await _client_for(bare_engine, raise_app_exceptions=False)
    async with client:
        yield client
    app.dependency_overrides.clear()
