"""Unit tests for UserOperations (users_aql.py)."""

from unittest.mock import MagicMock

import pytest
from arango.exceptions import DocumentInsertError

from bloglist.helpers.exceptions import DuplicateUsernameError
from bloglist.persistence.database.users_aql import ERROR_ARANGO_UNIQUE_CONSTRAINT_VIOLATED, UserOperations


@pytest.fixture
def mock_db():
    db = MagicMock()
    db.name = "test_db"
    return db


@pytest.fixture
def ops(mock_db):
    return UserOperations(mock_db)


def insert_error(error_code: int) -> DocumentInsertError:
    """Build a DocumentInsertError without an HTTP response object."""
    error = DocumentInsertError.__new__(DocumentInsertError)
    Exception.__init__(error, "insert failed")
    error.error_code = error_code
    return error


@pytest.mark.unit
class TestInsertUser:
    def test_insert_stores_hash_and_empty_blog_list(self, ops, mock_db):
        mock_db.collection.return_value.insert.return_value = {"new": {"_id": "users/1", "username": "root"}}

        result = ops.insert_user(username="root", name="Superuser", password_hash="$2b$hash")

        assert result == {"_id": "users/1", "username": "root"}
        doc = mock_db.collection.return_value.insert.call_args[0][0]
        assert doc["password_hash"] == "$2b$hash"
        assert doc["blogs"] == []

    def test_unique_violation_becomes_duplicate_username(self, ops, mock_db):
        mock_db.collection.return_value.insert.side_effect = insert_error(ERROR_ARANGO_UNIQUE_CONSTRAINT_VIOLATED)

        with pytest.raises(DuplicateUsernameError, match="username must be unique"):
            ops.insert_user(username="root", name=None, password_hash="h")

    def test_other_insert_errors_propagate(self, ops, mock_db):
        mock_db.collection.return_value.insert.side_effect = insert_error(1203)

        with pytest.raises(DocumentInsertError):
            ops.insert_user(username="root", name=None, password_hash="h")


@pytest.mark.unit
class TestLookups:
    def test_get_user_by_username(self, ops, mock_db):
        mock_db.aql.execute.return_value = iter([{"_id": "users/1", "username": "root"}])

        assert ops.get_user_by_username("root")["_id"] == "users/1"
        assert mock_db.aql.execute.call_args[1]["bind_vars"] == {"username": "root"}

    def test_get_user_missing(self, ops, mock_db):
        mock_db.aql.execute.return_value = iter([])
        assert ops.get_user("users/404") is None

    def test_list_users_sorts_keys_numerically(self, ops, mock_db):
        mock_db.aql.execute.return_value = iter([])
        ops.list_users()
        assert "SORT user.created_at, TO_NUMBER(user._key)" in mock_db.aql.execute.call_args[0][0]

    def test_get_users_by_ids_empty_skips_query(self, ops, mock_db):
        assert ops.get_users_by_ids([]) == []
        mock_db.aql.execute.assert_not_called()


@pytest.mark.unit
class TestBlogRefs:
    def test_add_blog_ref_appends_unique(self, ops, mock_db):
        ops.add_blog_ref("users/1", "blogs/2")

        query = mock_db.aql.execute.call_args[0][0]
        assert "APPEND(NOT_NULL(user.blogs, []), [@blog_id], true)" in query
        assert mock_db.aql.execute.call_args[1]["bind_vars"] == {"user_id": "users/1", "blog_id": "blogs/2"}

    def test_remove_blog_ref(self, ops, mock_db):
        ops.remove_blog_ref("users/1", "blogs/2")

        assert "REMOVE_VALUE" in mock_db.aql.execute.call_args[0][0]
