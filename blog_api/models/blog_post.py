"""
Blog API - BlogPost SQLAlchemy Model
====================================

What:  Table mapping for `blog_posts`.
Who:   Used by BlogPostService to build its INSERT/SELECT/UPDATE/DELETE
       statements and by the test suite to create the schema.

Table Design:
    - id: integer primary key generated by the store (SERIAL on PostgreSQL,
      INTEGER PRIMARY KEY on SQLite). First insert into an empty table yields 1.
    - title, author, content: unbounded TEXT, all required.
"""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from blog_api.database import Base


class BlogPostRecord(Base):
    """
    One persisted blog post row.

    Lifecycle:
        1. Inserted by create_post (id assigned by the store)
        2. Overwritten in full by update_post (id preserved)
        3. Removed by delete_post (hard delete, no tombstone)
    """

    __tablename__ = "blog_posts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    author: Mapped[str] = mapped_column(Text, nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"<BlogPostRecord(id={self.id}, title='{self.title}')>"
