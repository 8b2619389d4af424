"""In-memory implementation of UserRepository.

Records live for the lifetime of the repository instance. A single lock
covers ID assignment and insertion so concurrent creates never share an ID.
"""

import threading
from datetime import datetime, timezone

from domain.model.user import NewUser, User


class InMemoryUserRepository:
    def __init__(self):
        self._users: list[User] = []
        self._next_id = 1
        self._lock = threading.Lock()

    # ── write operations ─────────────────────────────────────

    def create(self, new_user: NewUser) -> User:
        with self._lock:
            user = User(
                id=self._next_id,
                username=new_user.username,
                email=new_user.email,
                first_name=new_user.first_name,
                last_name=new_user.last_name,
                created_at=datetime.now(timezone.utc),
            )
            self._users.append(user)
            self._next_id += 1
        return user

    # ── read operations ──────────────────────────────────────

    def get_by_id(self, user_id: int) -> User | None:
        if user_id < 1:
            return None
        with self._lock:
            for user in self._users:
                if user.id == user_id:
                    return user
        return None

    def list_all(self) -> list[User]:
        with self._lock:
            return list(self._users)

    def count(self) -> int:
        with self._lock:
            return len(self._users)
