"""
Blog API - Error Taxonomy Tests
===============================

What:  The two pure mappings in `blog_api.exceptions`, tested without HTTP.
"""

from sqlalchemy.exc import IntegrityError, NoResultFound, OperationalError

from blog_api.exceptions import (
    BlogApiError,
    NotFoundError,
    PersistenceError,
    status_code_for,
    translate_store_error,
)


class TestStatusCodeFor:
    def test_not_found_is_404(self):
        assert status_code_for(NotFoundError()) == 404

    def test_persistence_error_is_500(self):
        assert status_code_for(PersistenceError("boom")) == 500

    def test_base_error_is_500(self):
        assert status_code_for(BlogApiError()) == 500

    def test_unlisted_subclass_uses_parent(self):
        class MissingComment(NotFoundError):
            pass

        assert status_code_for(MissingComment()) == 404


class TestTranslateStoreError:
    def test_no_result_found_becomes_not_found(self):
        error = translate_store_error(NoResultFound("No row was found"))

        assert isinstance(error, NotFoundError)
        assert error.message == "Record not found"

    def test_dbapi_error_keeps_driver_text_only(self):
        exc = OperationalError(
            "SELECT * FROM blog_posts", {}, Exception("connection refused")
        )

        error = translate_store_error(exc)

        assert isinstance(error, PersistenceError)
        assert error.message == "connection refused"
        assert "SELECT" not in error.message

    def test_constraint_violation_is_persistence_error(self):
        exc = IntegrityError("INSERT", {}, Exception("NOT NULL constraint failed"))

        assert isinstance(translate_store_error(exc), PersistenceError)

    def test_unknown_exception_defaults_to_persistence_error(self):
        error = translate_store_error(ConnectionResetError("peer reset"))

        assert isinstance(error, PersistenceError)
        assert error.message == "peer reset"

    def test_empty_message_falls_back_to_type_name(self):
        assert translate_store_error(TimeoutError()).message == "TimeoutError"

    def test_already_translated_passes_through(self):
        original = NotFoundError("gone")

        assert translate_store_error(original) is original
