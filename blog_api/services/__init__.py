# Services package init
"""
Blog API - Services Layer
=========================

What:  Data-access logic sitting between routes (HTTP) and the store.
How:   Services receive the pooled engine on every call and return pydantic
       entities or raise errors from `blog_api.exceptions`.

Service Inventory:
    - BlogPostService: create / list / get / update / delete for blog posts

Why services are separate from routes:
    Services can be exercised against a substitute store without HTTP,
    and routes stay limited to request decoding and status codes.
"""
