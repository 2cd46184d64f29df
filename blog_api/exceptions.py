"""
Blog API - Error Taxonomy
=========================

What:  The closed set of errors the data-access layer is allowed to raise,
       plus the two pure functions that map them in and out:
       store failure → error kind → HTTP status.
Who:   Raised by `services.blog_post_service`; turned into responses by the
       handlers registered in `main.register_exception_handlers`.

Exception Hierarchy:
    BlogApiError (base)
    ├── NotFoundError      → 404 Not Found (single-row lookup miss)
    └── PersistenceError   → 500 Internal Server Error (every other store failure)

Translation Rule:
    sqlalchemy.exc.NoResultFound  → NotFoundError("Record not found")
    anything else                 → PersistenceError(<store error text>)

    The mapping is total: no store exception leaves the data-access layer
    untranslated.
"""

from typing import Dict, Type

from sqlalchemy.exc import DBAPIError, NoResultFound


class BlogApiError(Exception):
    """
    Base exception for all Blog API errors.

    Attributes:
        message: Client-facing description, returned verbatim as the JSON body
    """

    def __init__(self, message: str = "An unexpected error occurred"):
        self.message = message
        super().__init__(self.message)


class NotFoundError(BlogApiError):
    """
    Raised when a single-row lookup finds no matching row.

    Only `get_post` raises this. Update and delete against a missing id
    succeed silently.
    """

    def __init__(self, message: str = "Record not found"):
        super().__init__(message=message)


class PersistenceError(BlogApiError):
    """
    Raised for every store failure that is not a row-not-found signal:
    lost connections, constraint violations, malformed statements.
    """

    def __init__(self, message: str = "Database error"):
        super().__init__(message=message)


# Most specific class first; BlogApiError is the fallback.
_STATUS_CODES: Dict[Type[BlogApiError], int] = {
    NotFoundError: 404,
    PersistenceError: 500,
    BlogApiError: 500,
}


def status_code_for(error: BlogApiError) -> int:
    """
    Map an error kind to its HTTP status code.

    Pure and total over `BlogApiError`: subclasses resolve through their
    MRO, so an unlisted subclass falls back to its nearest listed parent.
    """
    for cls in type(error).__mro__:
        if cls in _STATUS_CODES:
            return _STATUS_CODES[cls]
    return 500


def translate_store_error(exc: BaseException) -> BlogApiError:
    """
    Convert a low-level store exception into a `BlogApiError`.

    For DBAPI errors only the driver's own text is kept. SQLAlchemy's
    wrapper text also embeds the SQL statement and parameters, which stay
    in the server log.
    """
    if isinstance(exc, BlogApiError):
        return exc
    if isinstance(exc, NoResultFound):
        return NotFoundError("Record not found")
    if isinstance(exc, DBAPIError) and exc.orig is not None:
        return PersistenceError(str(exc.orig))
    return PersistenceError(str(exc) or type(exc).__name__)
