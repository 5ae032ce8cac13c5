import pytest

from src.domain.errors import AuthorNotFoundError, DependencyFailureError
from src.services.author_service import ensure_author, resolve_author_id


def test_resolve_author_id_found(user_repo):
    assert resolve_author_id("Admin", user_repo) == "admin-user-id"


def test_resolve_author_id_missing(empty_user_repo):
    with pytest.raises(AuthorNotFoundError) as exc_info:
        resolve_author_id("Admin", empty_user_repo)

    assert isinstance(exc_info.value, DependencyFailureError)
    assert exc_info.value.status_code == 500
    assert "Admin" in exc_info.value.message


def test_ensure_author_returns_existing(user_repo):
    user = ensure_author("Admin", user_repo)

    assert user.id == "admin-user-id"
    assert len(user_repo.users) == 1


def test_ensure_author_creates_missing(empty_user_repo):
    user = ensure_author("Admin", empty_user_repo)

    assert user.user_name == "Admin"
    assert resolve_author_id("Admin", empty_user_repo) == user.id
