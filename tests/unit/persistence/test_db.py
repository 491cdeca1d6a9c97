"""Unit tests for the Database facade."""

from unittest.mock import MagicMock

import pytest

from bloglist.persistence.database.blogs_aql import BlogOperations
from bloglist.persistence.database.users_aql import UserOperations
from bloglist.persistence.db import Database


@pytest.mark.unit
class TestDatabase:
    def test_wraps_given_handle(self):
        handle = MagicMock()
        db = Database(handle=handle)

        assert db.db is handle
        assert isinstance(db.blogs, BlogOperations)
        assert isinstance(db.users, UserOperations)
        handle.collection.assert_any_call("blogs")
        handle.collection.assert_any_call("users")

    def test_connects_when_no_handle(self, monkeypatch):
        created = MagicMock()
        factory = MagicMock(return_value=created)
        monkeypatch.setattr("bloglist.persistence.db.create_arango_client", factory)

        db = Database(hosts="http://arangodb:8529", username="u", password="p", db_name="blogs_test")

        factory.assert_called_once_with(hosts="http://arangodb:8529", username="u", password="p", db_name="blogs_test")
        assert db.db is created
