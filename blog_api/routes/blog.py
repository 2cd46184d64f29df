"""
Blog API - Blog Route Handlers
==============================

What:  The five /blog endpoints, one per data-access operation.
How:   FastAPI decodes the path id (int) and JSON body (NewBlogPost), the
       handler calls BlogPostService with the injected pool, and returns 200.
       Errors are not caught here: NotFoundError and PersistenceError
       propagate to the exception handlers registered in `main`.

Route Table:
    POST   /blog        → create_post  → 200 created BlogPost
    GET    /blog        → list_posts   → 200 [BlogPost]
    GET    /blog/{id}   → get_post     → 200 BlogPost | 404
    PUT    /blog/{id}   → update_post  → 200 submitted body echoed
    DELETE /blog/{id}   → delete_post  → 200 empty body
"""

import logging
from typing import Annotated, List

from fastapi import APIRouter, Depends, Path, Response
from sqlalchemy.ext.asyncio import AsyncEngine

from blog_api.database import get_engine
from blog_api.schemas.blog_post import BlogPost, NewBlogPost
from blog_api.services.blog_post_service import blog_post_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/blog", tags=["Blog"])

# blog_posts.id is a 32-bit INTEGER; ids outside it are rejected as bad requests.
PostId = Annotated[int, Path(ge=-(2**31), le=2**31 - 1, description="Blog post id")]

# Error bodies are a bare JSON string carrying the message.
_MESSAGE_BODY = {"application/json": {"schema": {"type": "string"}}}
_ERROR_RESPONSES = {500: {"description": "Persistence error", "content": _MESSAGE_BODY}}


@router.post(
    "",
    response_model=BlogPost,
    responses=_ERROR_RESPONSES,
    summary="Create a blog post",
)
async def create_blogpost(
    new_post: NewBlogPost,
    engine: AsyncEngine = Depends(get_engine),
) -> BlogPost:
    return await blog_post_service.create_post(engine, new_post)


@router.get(
    "",
    response_model=List[BlogPost],
    responses=_ERROR_RESPONSES,
    summary="List all blog posts",
)
async def get_blogposts(engine: AsyncEngine = Depends(get_engine)) -> List[BlogPost]:
    return await blog_post_service.list_posts(engine)


@router.get(
    "/{post_id}",
    response_model=BlogPost,
    responses={
        404: {"description": "No post with this id", "content": _MESSAGE_BODY},
        **_ERROR_RESPONSES,
    },
    summary="Get a blog post by id",
)
async def get_blogpost(
    post_id: PostId,
    engine: AsyncEngine = Depends(get_engine),
) -> BlogPost:
    return await blog_post_service.get_post(engine, post_id)


@router.put(
    "/{post_id}",
    response_model=NewBlogPost,
    responses=_ERROR_RESPONSES,
    summary="Replace a blog post",
    description=(
        "Overwrites title, author and content. Returns the submitted body. "
        "An id with no matching post is accepted and changes nothing."
    ),
)
async def update_blogpost(
    post_id: PostId,
    updated_post: NewBlogPost,
    engine: AsyncEngine = Depends(get_engine),
) -> NewBlogPost:
    await blog_post_service.update_post(engine, post_id, updated_post)
    return updated_post


@router.delete(
    "/{post_id}",
    responses=_ERROR_RESPONSES,
    summary="Delete a blog post",
    description="An id with no matching post is accepted and changes nothing.",
)
async def delete_blogpost(
    post_id: PostId,
    engine: AsyncEngine = Depends(get_engine),
) -> Response:
    await blog_post_service.delete_post(engine, post_id)
    return Response(status_code=200)
