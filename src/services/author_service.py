from __future__ import annotations

import uuid

from src.domain.errors import AuthorNotFoundError
from src.domain.models.db_models import User
from src.domain.repositories import IUserRepository
from tm_utils.logger_utils import logger


def resolve_author_id(user_name: str, user_repo: IUserRepository) -> str:
    """
    Resolve the id of the user that authors new quizzes.

    This is a lookup by user name standing in for the authenticated caller.

    :param user_name: Name of the author account (normally the configured default author).
    :param user_repo: Repository used for the lookup.
    :return: The user's id.
    :raises AuthorNotFoundError: if no such user exists.
    """
    user = user_repo.get_by_user_name(user_name)
    if user is None:
        logger.error(
            "Author lookup failed",
            extra={"user_name": user_name, "component": "author_service"},
        )
        raise AuthorNotFoundError(user_name)
    return user.id


def ensure_author(user_name: str, user_repo: IUserRepository) -> User:
    """Return the author named `user_name`, creating the account when missing."""
    user = user_repo.get_by_user_name(user_name)
    if user is not None:
        return user

    user = User(_id=str(uuid.uuid4()), user_name=user_name, display_name=user_name)
    user_repo.create(user)
    logger.info(
        "Created default author",
        extra={"user_id": user.id, "user_name": user_name, "component": "author_service"},
    )
    return user
