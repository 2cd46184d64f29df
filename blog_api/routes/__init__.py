# Routes package init
"""
Blog API - Routes Package
=========================

Route Inventory:
    - blog.py:    POST/GET /blog, GET/PUT/DELETE /blog/{id}
    - health.py:  GET /  (greeting)
                  GET /health

Routes are thin: decode the request, call the service, pick the status code.
Error translation lives in the exception handlers registered in `main`.
"""
