"""
Blog API - Application Package Initializer
==========================================

What: Marks the `blog_api` directory as a Python package.
Who:  Imported by uvicorn (`blog_api.main:app`), pytest and the `blog-api` script.

Architecture Note:
    The service is a thin three-layer pipeline:

    ┌─────────────────────────────────────┐
    │        Routes (HTTP handlers)       │  ← path/body decoding, status codes
    ├─────────────────────────────────────┤
    │    Services (data-access layer)     │  ← one SQL statement per operation
    ├─────────────────────────────────────┤
    │   Database (pooled AsyncEngine)     │  ← injected per request, never global
    └─────────────────────────────────────┘

    Errors raised by the data-access layer are typed (see `exceptions`) and
    are translated to HTTP responses in exactly one place: the exception
    handlers registered in `main`.
"""

__version__ = "1.0.0"
