from typing import Protocol
from domain.model.user import NewUser, User


class UserRepository(Protocol):
    """Protocol defining the interface for user data access."""
    def create(self, new_user: NewUser) -> User:
        """Store a new user under the next sequential ID and return it."""
        ...

    def get_by_id(self, user_id: int) -> User | None:
        """Find a user by ID. Return User or None if not found."""
        ...

    def list_all(self) -> list[User]:
        """Return every user in creation order."""
        ...

    def count(self) -> int:
        """Return the number of stored users."""
        ...
