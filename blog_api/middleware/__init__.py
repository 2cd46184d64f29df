# Middleware package init
"""
Blog API - Middleware Package
=============================

Middleware Chain (order matters):
    Request → [Request ID] → [Logging] → Route Handler

    The request id is set first so the access log line carries it.
"""
