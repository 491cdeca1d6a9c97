"""
Pytest fixtures and configuration for the test suite.

Strategy:
- Pure components are tested directly
- Persistence operations are tested against a MagicMock'd AQL handle
- Services and HTTP endpoints run against FakeDatabase, an in-memory stand-in
  for persistence.db.Database with the same operations surface
"""

import copy
import itertools
import sys
from pathlib import Path
from typing import Any

import pytest

# Add project root to path so tests can import bloglist package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from bloglist.helpers.exceptions import DuplicateUsernameError  # noqa: E402
from bloglist.services.infrastructure.auth_svc import AuthConfig, AuthService  # noqa: E402

TEST_SECRET = "test-secret-not-for-production"


# === IN-MEMORY PERSISTENCE ===


class FakeBlogOperations:
    """In-memory BlogOperations. Documents are copied in and out like a real store."""

    def __init__(self, keys: itertools.count) -> None:
        self._docs: dict[str, dict[str, Any]] = {}
        self._keys = keys

    def insert_blog(self, title: str, author: str, url: str, likes: int, user_id: str | None) -> dict[str, Any]:
        key = str(next(self._keys))
        doc = {
            "_key": key,
            "_id": f"blogs/{key}",
            "title": title,
            "author": author,
            "url": url,
            "likes": likes,
            "comments": [],
            "user": user_id,
        }
        self._docs[doc["_id"]] = doc
        return copy.deepcopy(doc)

    def get_blog(self, blog_id: str) -> dict[str, Any] | None:
        doc = self._docs.get(blog_id)
        return copy.deepcopy(doc) if doc else None

    def list_blogs(self) -> list[dict[str, Any]]:
        return [copy.deepcopy(doc) for doc in self._docs.values()]

    def list_blogs_by_ids(self, blog_ids: list[str]) -> list[dict[str, Any]]:
        return [copy.deepcopy(doc) for blog_id, doc in self._docs.items() if blog_id in blog_ids]

    def update_blog(self, blog_id: str, fields: dict[str, Any]) -> dict[str, Any] | None:
        if blog_id not in self._docs:
            return None
        self._docs[blog_id].update(copy.deepcopy(fields))
        return copy.deepcopy(self._docs[blog_id])

    def add_comment(self, blog_id: str, comment: str) -> dict[str, Any] | None:
        if blog_id not in self._docs:
            return None
        self._docs[blog_id]["comments"].append(comment)
        return copy.deepcopy(self._docs[blog_id])

    def delete_blog(self, blog_id: str) -> bool:
        return self._docs.pop(blog_id, None) is not None

    def seed(self, doc: dict[str, Any]) -> dict[str, Any]:
        """Store a raw document (e.g. a legacy blog without owner)."""
        key = str(next(self._keys))
        stored = {"_key": key, "_id": f"blogs/{key}", "comments": [], "user": None, **doc}
        self._docs[stored["_id"]] = stored
        return copy.deepcopy(stored)


class FakeUserOperations:
    """In-memory UserOperations enforcing the unique username index."""

    def __init__(self, keys: itertools.count) -> None:
        self._docs: dict[str, dict[str, Any]] = {}
        self._keys = keys

    def insert_user(self, username: str, name: str | None, password_hash: str) -> dict[str, Any]:
        if any(doc["username"] == username for doc in self._docs.values()):
            raise DuplicateUsernameError("username must be unique")
        key = str(next(self._keys))
        doc = {
            "_key": key,
            "_id": f"users/{key}",
            "username": username,
            "name": name,
            "password_hash": password_hash,
            "blogs": [],
        }
        self._docs[doc["_id"]] = doc
        return copy.deepcopy(doc)

    def get_user(self, user_id: str) -> dict[str, Any] | None:
        doc = self._docs.get(user_id)
        return copy.deepcopy(doc) if doc else None

    def get_user_by_username(self, username: str) -> dict[str, Any] | None:
        for doc in self._docs.values():
            if doc["username"] == username:
                return copy.deepcopy(doc)
        return None

    def get_users_by_ids(self, user_ids: list[str]) -> list[dict[str, Any]]:
        return [copy.deepcopy(doc) for user_id, doc in self._docs.items() if user_id in user_ids]

    def list_users(self) -> list[dict[str, Any]]:
        return [copy.deepcopy(doc) for doc in self._docs.values()]

    def add_blog_ref(self, user_id: str, blog_id: str) -> None:
        blogs = self._docs[user_id]["blogs"]
        if blog_id not in blogs:
            blogs.append(blog_id)

    def remove_blog_ref(self, user_id: str, blog_id: str) -> None:
        if user_id in self._docs:
            self._docs[user_id]["blogs"] = [b for b in self._docs[user_id]["blogs"] if b != blog_id]


class FakeDatabase:
    """Stand-in for persistence.db.Database."""

    def __init__(self) -> None:
        self.db_name = "fake"
        self.closed = False
        self.blogs = FakeBlogOperations(itertools.count(1))
        self.users = FakeUserOperations(itertools.count(1))

    def close(self) -> None:
        self.closed = True


# === DATABASE / SERVICE FIXTURES ===


@pytest.fixture
def fake_db() -> FakeDatabase:
    """Provide an empty in-memory database."""
    return FakeDatabase()


@pytest.fixture
def auth_config() -> AuthConfig:
    """Auth settings with a fixed secret and cheap bcrypt cost."""
    return AuthConfig(secret=TEST_SECRET, token_ttl_seconds=3600, bcrypt_rounds=4)


@pytest.fixture
def auth_service(fake_db, auth_config) -> AuthService:
    return AuthService(fake_db, auth_config)


@pytest.fixture
def blog_service(fake_db):
    from bloglist.services.domain.blog_svc import BlogService

    return BlogService(fake_db)


@pytest.fixture
def user_service(fake_db, auth_service):
    from bloglist.services.domain.user_svc import UserService

    return UserService(fake_db, auth_service)


@pytest.fixture
def stats_service(fake_db):
    from bloglist.services.domain.stats_svc import StatsService

    return StatsService(fake_db)


@pytest.fixture
def root_user(user_service, fake_db):
    """A registered user 'root' with password 'sekret'."""
    from bloglist.helpers.dto.user_dto import RegisterUserParams, UserRecord

    user_service.register_user(RegisterUserParams(username="root", password="sekret", name="Superuser"))
    return UserRecord.from_doc(fake_db.users.get_user_by_username("root"))


@pytest.fixture
def other_user(user_service, fake_db):
    """A second registered user 'mluukkai' with password 'salainen'."""
    from bloglist.helpers.dto.user_dto import RegisterUserParams, UserRecord

    user_service.register_user(RegisterUserParams(username="mluukkai", password="salainen", name="Matti Luukkainen"))
    return UserRecord.from_doc(fake_db.users.get_user_by_username("mluukkai"))


# === API FIXTURES ===


@pytest.fixture
def api_client(auth_service, blog_service, user_service, stats_service):
    """Provide a FastAPI TestClient whose service providers return the in-memory services."""
    from fastapi.testclient import TestClient

    from bloglist.interfaces.api.api_app import api_app
    from bloglist.interfaces.api.web import dependencies

    api_app.dependency_overrides[dependencies.get_auth_service] = lambda: auth_service
    api_app.dependency_overrides[dependencies.get_blog_service] = lambda: blog_service
    api_app.dependency_overrides[dependencies.get_user_service] = lambda: user_service
    api_app.dependency_overrides[dependencies.get_stats_service] = lambda: stats_service

    yield TestClient(api_app)

    api_app.dependency_overrides.clear()


@pytest.fixture
def root_token(api_client, root_user) -> str:
    """Log in as root through the API and return the bearer token."""
    response = api_client.post("/api/login", json={"username": "root", "password": "sekret"})
    assert response.status_code == 200
    return response.json()["token"]
