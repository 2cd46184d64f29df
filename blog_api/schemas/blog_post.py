"""
Blog API - Pydantic Request/Response Schemas
============================================

What:  The JSON contract of the service.
How:   FastAPI decodes request bodies into `NewBlogPost` (structural checks
       only: the three fields must be present and be strings) and serializes
       `BlogPost` responses with fields in the order id, title, author, content.

Schemas are kept apart from the SQLAlchemy model so the API contract does
not follow every change to the table mapping.
"""

from pydantic import BaseModel, Field


class NewBlogPost(BaseModel):
    """
    Input entity for both create and full-replacement update.
    No `id`: the store assigns it on create and it is taken from the path on update.
    """
    title: str = Field(description="Post title")
    author: str = Field(description="Post author")
    content: str = Field(description="Post body")


class BlogPost(BaseModel):
    """A persisted post, as returned by the create, get and list endpoints."""
    id: int = Field(description="Store-assigned identifier")
    title: str = Field(description="Post title")
    author: str = Field(description="Post author")
    content: str = Field(description="Post body")

    model_config = {"from_attributes": True}


class HealthResponse(BaseModel):
    """
    Returned by GET /health for monitoring and load balancer probes.
    """
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
