"""Unit tests for InMemoryUserRepository, verifying Port contract compliance."""

import threading
import unittest
from datetime import datetime, timezone

from adapter.memory.user_repository import InMemoryUserRepository
from domain.model.user import NewUser, User


def _new_user(n: int = 1) -> NewUser:
    return NewUser(
        username=f"user{n}",
        email=f"user{n}@example.com",
        first_name=f"First{n}",
        last_name=f"Last{n}",
    )


class TestInMemoryUserRepository(unittest.TestCase):
    """Tests that InMemoryUserRepository correctly implements UserRepository Protocol."""

    def setUp(self):
        self.repo = InMemoryUserRepository()

    # ── create ────────────────────────────────────────────────

    def test_create_assigns_first_id_and_copies_fields(self):
        before = datetime.now(timezone.utc)
        user = self.repo.create(NewUser(
            username="johndoe",
            email="john.doe@example.com",
            first_name="John",
            last_name="Doe",
        ))
        after = datetime.now(timezone.utc)

        self.assertIsInstance(user, User)
        self.assertEqual(user.id, 1)
        self.assertEqual(user.username, "johndoe")
        self.assertEqual(user.email, "john.doe@example.com")
        self.assertEqual(user.first_name, "John")
        self.assertEqual(user.last_name, "Doe")
        self.assertTrue(before <= user.created_at <= after)
        self.assertEqual(user.created_at.tzinfo, timezone.utc)

    def test_create_assigns_sequential_ids(self):
        ids = [self.repo.create(_new_user(n)).id for n in range(1, 6)]
        self.assertEqual(ids, [1, 2, 3, 4, 5])

    def test_create_accepts_missing_and_empty_fields(self):
        empty = self.repo.create(NewUser(username="", email=""))
        missing = self.repo.create(NewUser())

        self.assertEqual(empty.username, "")
        self.assertIsNone(empty.first_name)
        self.assertIsNone(missing.username)
        self.assertIsNone(missing.email)
        self.assertEqual(missing.id, 2)

    def test_create_accepts_very_long_strings(self):
        long_name = "a" * 10_000
        user = self.repo.create(NewUser(username=long_name, email="long@example.com"))
        self.assertEqual(self.repo.get_by_id(user.id).username, long_name)

    # ── get_by_id ─────────────────────────────────────────────

    def test_get_by_id_round_trip(self):
        created = self.repo.create(_new_user())
        self.assertEqual(self.repo.get_by_id(created.id), created)

    def test_get_by_id_finds_every_created_user(self):
        for n in range(1, 6):
            self.repo.create(_new_user(n))
        for user_id in range(1, 6):
            self.assertEqual(self.repo.get_by_id(user_id).username, f"user{user_id}")

    def test_get_by_id_returns_none_for_missing(self):
        for n in range(1, 6):
            self.repo.create(_new_user(n))
        for user_id in (0, -1, 6, 999):
            self.assertIsNone(self.repo.get_by_id(user_id))

    def test_get_by_id_on_empty_repository(self):
        self.assertIsNone(self.repo.get_by_id(999))

    # ── list_all / count ──────────────────────────────────────

    def test_list_all_empty(self):
        self.assertEqual(self.repo.list_all(), [])
        self.assertEqual(self.repo.count(), 0)

    def test_list_all_returns_creation_order(self):
        created = [self.repo.create(_new_user(n)) for n in range(1, 4)]
        self.assertEqual(self.repo.list_all(), created)
        self.assertEqual(self.repo.count(), 3)

    def test_list_all_returns_snapshot(self):
        self.repo.create(_new_user())
        snapshot = self.repo.list_all()
        snapshot.clear()
        self.assertEqual(len(self.repo.list_all()), 1)

    # ── concurrency ───────────────────────────────────────────

    def test_concurrent_creates_assign_unique_contiguous_ids(self):
        threads_count = 20
        per_thread = 50
        barrier = threading.Barrier(threads_count)

        def worker(offset: int):
            barrier.wait()
            for n in range(per_thread):
                self.repo.create(_new_user(offset * per_thread + n))

        threads = [threading.Thread(target=worker, args=(i,)) for i in range(threads_count)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        total = threads_count * per_thread
        users = self.repo.list_all()
        self.assertEqual(len(users), total)
        self.assertEqual([u.id for u in users], list(range(1, total + 1)))


if __name__ == '__main__':
    unittest.main()
