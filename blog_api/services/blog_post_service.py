"""
Blog API - Blog Post Service (Data-Access Layer)
================================================

What:  The five persistence operations behind the /blog routes.
How:   Each operation leases one pooled connection, issues one parameterized
       statement, maps rows to `BlogPost`, and returns the connection.
Who:   Called by route handlers in `routes.blog`; the pool is always passed in.

Statement Inventory:
    create_post  INSERT INTO blog_posts (...) VALUES (...) RETURNING *
    list_posts   SELECT * FROM blog_posts                       (no ORDER BY)
    get_post     SELECT * FROM blog_posts WHERE id = :id
    update_post  UPDATE blog_posts SET title, author, content WHERE id = :id
    delete_post  DELETE FROM blog_posts WHERE id = :id

Error Handling Strategy:
    Nothing is recovered locally. Every failure leaves through `_lease`,
    which converts it with `translate_store_error` and re-raises. Update and
    delete do not inspect the affected-row count as an error: a missing id is
    a silent success.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, List

from sqlalchemy import delete, insert, select, update
from sqlalchemy.engine import Row
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine

from blog_api.exceptions import BlogApiError, PersistenceError, translate_store_error
from blog_api.models.blog_post import BlogPostRecord
from blog_api.schemas.blog_post import BlogPost, NewBlogPost

logger = logging.getLogger(__name__)

blog_posts = BlogPostRecord.__table__


@asynccontextmanager
async def _lease(engine: AsyncEngine, operation: str) -> AsyncIterator[AsyncConnection]:
    """
    Check out one connection for the duration of a single statement.

    `engine.begin()` commits on clean exit, rolls back on error, and always
    returns the connection to the pool. Errors are translated after the
    connection has been released.
    """
    try:
        async with engine.begin() as conn:
            yield conn
    except BlogApiError:
        raise
    except Exception as exc:
        error = translate_store_error(exc)
        if isinstance(error, PersistenceError):
            logger.error("%s failed: %s", operation, error.message)
        raise error from exc


def _to_post(row: Row) -> BlogPost:
    return BlogPost.model_validate(dict(row._mapping))


class BlogPostService:
    """
    Stateless data-access operations for blog posts.

    The service holds no connection and no cached rows; every call is a
    fresh round trip through the engine it is given.
    """

    async def create_post(self, engine: AsyncEngine, post: NewBlogPost) -> BlogPost:
        """
        Insert a new row and return it with the store-generated id.

        Raises:
            PersistenceError: constraint violation, connectivity loss, etc.
        """
        stmt = (
            insert(blog_posts)
            .values(title=post.title, author=post.author, content=post.content)
            .returning(*blog_posts.c)
        )
        async with _lease(engine, "create_post") as conn:
            result = await conn.execute(stmt)
            created = _to_post(result.one())

        logger.info("Blog post %d created", created.id)
        return created

    async def list_posts(self, engine: AsyncEngine) -> List[BlogPost]:
        """Return every row. Callers must not assume insertion order."""
        async with _lease(engine, "list_posts") as conn:
            result = await conn.execute(select(blog_posts))
            return [_to_post(row) for row in result.all()]

    async def get_post(self, engine: AsyncEngine, post_id: int) -> BlogPost:
        """
        Fetch exactly one row by id.

        Raises:
            NotFoundError: no row has this id (`Result.one()` raises NoResultFound)
            PersistenceError: any other store failure
        """
        stmt = select(blog_posts).where(blog_posts.c.id == post_id)
        async with _lease(engine, "get_post") as conn:
            result = await conn.execute(stmt)
            return _to_post(result.one())

    async def update_post(
        self, engine: AsyncEngine, post_id: int, post: NewBlogPost
    ) -> None:
        """
        Overwrite title, author and content of the row with this id.

        A missing id updates zero rows and still returns normally.
        """
        stmt = (
            update(blog_posts)
            .where(blog_posts.c.id == post_id)
            .values(title=post.title, author=post.author, content=post.content)
        )
        async with _lease(engine, "update_post") as conn:
            result = await conn.execute(stmt)
            affected = result.rowcount

        if affected == 0:
            logger.debug("update_post: no row with id %d", post_id)

    async def delete_post(self, engine: AsyncEngine, post_id: int) -> None:
        """Hard-delete the row with this id. A missing id is a silent no-op."""
        stmt = delete(blog_posts).where(blog_posts.c.id == post_id)
        async with _lease(engine, "delete_post") as conn:
            result = await conn.execute(stmt)
            affected = result.rowcount

        if affected == 0:
            logger.debug("delete_post: no row with id %d", post_id)


blog_post_service = BlogPostService()
