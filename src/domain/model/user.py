from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class NewUser:
    """Fields supplied by a caller when registering a user."""
    username: str | None = None
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None


@dataclass(frozen=True)
class User:
    """Domain model representing a registered user.

    ``id`` and ``created_at`` are assigned by the registry and never change.
    """
    id: int
    username: str | None
    email: str | None
    first_name: str | None
    last_name: str | None
    created_at: datetime
