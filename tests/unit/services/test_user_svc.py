"""Unit tests for UserService over the in-memory database."""

import pytest

from bloglist.helpers.dto.blog_dto import CreateBlogParams
from bloglist.helpers.dto.user_dto import RegisterUserParams
from bloglist.helpers.exceptions import DuplicateUsernameError, InvalidUserDataError, UserNotFoundError


@pytest.mark.unit
class TestRegisterUser:
    def test_register_hashes_password(self, user_service, fake_db):
        view = user_service.register_user(RegisterUserParams(username="hellas", password="secret", name="Arto"))

        assert view.username == "hellas"
        assert view.blogs == []
        stored = fake_db.users.get_user_by_username("hellas")
        assert stored["password_hash"] != "secret"
        assert stored["password_hash"].startswith("$2")

    def test_view_has_no_password_hash(self, user_service):
        view = user_service.register_user(RegisterUserParams(username="hellas", password="secret"))
        assert not hasattr(view, "password_hash")

    def test_duplicate_username(self, user_service, root_user):
        with pytest.raises(DuplicateUsernameError, match="username must be unique"):
            user_service.register_user(RegisterUserParams(username="root", password="another"))

    @pytest.mark.parametrize(
        ("username", "password"),
        [(None, "secret"), ("hellas", None), ("ab", "secret"), ("hellas", "pw"), ("   ", "secret")],
    )
    def test_invalid_registration(self, user_service, username, password):
        with pytest.raises(InvalidUserDataError):
            user_service.register_user(RegisterUserParams(username=username, password=password))

    def test_password_over_bcrypt_limit_rejected(self, user_service, fake_db):
        with pytest.raises(InvalidUserDataError, match="at most 72 bytes"):
            user_service.register_user(RegisterUserParams(username="longpw", password="p" * 100))
        assert fake_db.users.get_user_by_username("longpw") is None

    def test_password_limit_counts_bytes(self, user_service):
        with pytest.raises(InvalidUserDataError):
            user_service.register_user(RegisterUserParams(username="longpw", password="\u00e4" * 40))

    def test_password_at_bcrypt_limit_accepted(self, user_service):
        view = user_service.register_user(RegisterUserParams(username="longpw", password="p" * 72))
        assert view.username == "longpw"


@pytest.mark.unit
class TestListUsers:
    def test_blogs_are_populated(self, user_service, blog_service, root_user):
        created = blog_service.create_blog(
            CreateBlogParams(title="React patterns", url="https://reactpatterns.com/", author="Michael Chan", likes=7),
            root_user,
        )

        [view] = user_service.list_users()

        assert len(view.blogs) == 1
        assert view.blogs[0].id == created.blog.id
        assert view.blogs[0].title == "React patterns"
        assert view.blogs[0].likes == 7

    def test_get_user(self, user_service, root_user):
        assert user_service.get_user(root_user.id).username == "root"

    def test_get_missing_user(self, user_service):
        with pytest.raises(UserNotFoundError):
            user_service.get_user("users/999")
