"""User service: registration and lookups over a UserRepository."""

import logging

from domain.model.errors import NotFoundError
from domain.model.user import NewUser, User
from port.user_repository import UserRepository

logger = logging.getLogger(__name__)


def register_user(repo: UserRepository, new_user: NewUser) -> User:
    """Create a user. No field validation is applied."""
    user = repo.create(new_user)
    logger.info("User created", extra={"userId": user.id, "username": user.username})
    return user


def get_user(repo: UserRepository, user_id: int) -> User:
    """Return the user with ``user_id``.

    Raises:
        NotFoundError: No user has this ID (always the case for IDs below 1).
    """
    user = repo.get_by_id(user_id)
    if user is None:
        raise NotFoundError("User", user_id)
    return user


def list_users(repo: UserRepository) -> list[User]:
    return repo.list_all()
