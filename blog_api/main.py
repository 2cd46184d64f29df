"""
Blog API - FastAPI Application Factory
======================================

What:  Creates and configures the FastAPI application instance.
How:   `create_app()` wires middleware, exception handlers and routers;
       `lifespan` owns the connection pool for the life of the process.
Who:   uvicorn (`uvicorn blog_api.main:app`) or the `blog-api` console script.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware:  [Request ID] → [Access Logging]       │
    │                                                     │
    │  Routes:      GET /   /health                       │
    │               POST/GET /blog   GET/PUT/DELETE /blog/{id}
    │                                                     │
    │  Exception Handlers:                                │
    │    NotFoundError → 404 │ PersistenceError → 500     │
    │    RequestValidationError → 400 │ Exception → 500   │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:
    1. Initialize logging
    2. Build the bounded pool from settings
    3. Round-trip SELECT 1; if the store is unreachable, startup aborts
    Shutdown:
    1. Dispose the pool (close all connections)
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from blog_api import __version__
from blog_api.config import settings
from blog_api.database import create_pool, dispose_pool, verify_connection
from blog_api.exceptions import BlogApiError, status_code_for
from blog_api.middleware.logging import RequestLoggingMiddleware
from blog_api.middleware.request_id import RequestIDMiddleware, request_id_var
from blog_api.routes import blog, health

logger = logging.getLogger(__name__)
access_logger = logging.getLogger("blog_api.access")


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure the root logger once, before anything else logs.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Our access middleware replaces uvicorn's access log
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if settings.log_level == "DEBUG" else logging.WARNING
    )


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Own the connection pool for the lifetime of the application.

    An unreachable store is fatal: the exception is logged and re-raised,
    uvicorn reports "Application startup failed" and exits without ever
    accepting a request.
    """
    setup_logging()
    logger.info("Blog API %s starting up...", __version__)

    engine = create_pool(
        settings.database_url,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_timeout=settings.db_pool_timeout,
    )
    try:
        await verify_connection(engine)
    except Exception as e:
        logger.critical("Failed to connect to database: %s", str(e))
        await dispose_pool(engine)
        raise

    app.state.engine = engine
    logger.info(
        "Connection pool ready (max %d connections)", settings.max_connections
    )
    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)

    yield

    logger.info("Blog API shutting down...")
    await dispose_pool(engine)
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Register the single translation point from errors to HTTP responses.

    Every error body is a bare JSON string:
        BlogApiError subclasses  → status_code_for(exc), exc.message
        RequestValidationError   → 400, generic bad-request message
        Exception (fallback)     → 500, generic message (trace logged only)
    """

    @app.exception_handler(BlogApiError)
    async def handle_blog_api_error(request: Request, exc: BlogApiError):
        rid = request_id_var.get("")
        status_code = status_code_for(exc)
        if status_code >= 500:
            logger.error("[%s] %s: %s", rid, type(exc).__name__, exc.message)
        return JSONResponse(status_code=status_code, content=exc.message)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(
        request: Request, exc: RequestValidationError
    ):
        """Malformed JSON, missing fields or a non-integer path id."""
        rid = request_id_var.get("")
        errors = exc.errors()
        logger.warning("[%s] Bad request: %s", rid, errors)
        if errors:
            first = errors[0]
            location = ".".join(str(part) for part in first.get("loc", ()))
            message = f"Bad request: {location}: {first.get('msg', 'invalid value')}"
        else:
            message = "Bad request"
        return JSONResponse(status_code=400, content=message)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """
        Stack trace goes to the server log, never to the client.

        Runs in ServerErrorMiddleware, outside RequestIDMiddleware, so the
        header and the access line are added here.
        """
        rid = getattr(request.state, "request_id", "") or request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        access_logger.error(
            "%s %s 500 [%s]", request.method, request.url.path, rid,
            extra={"request_id": rid, "status": 500},
        )
        headers = {"X-Request-ID": rid} if rid else None
        return JSONResponse(
            status_code=500,
            content="An unexpected error occurred",
            headers=headers,
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    No connection is made here; the pool is created by `lifespan`. Tests
    bypass the lifespan and inject their own engine through
    `app.dependency_overrides[get_engine]`.
    """
    app = FastAPI(
        title="Blog API",
        description="Minimal CRUD service for blog posts backed by one SQL table.",
        version=__version__,
        lifespan=lifespan,
    )

    # Last added = first to execute: RequestID runs before Logging
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    app.include_router(health.router)
    app.include_router(blog.router)

    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the app on the configured host and port."""
    uvicorn.run(
        "blog_api.main:app",
        host=settings.backend_host,
        port=settings.backend_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
