from __future__ import annotations

from dataclasses import replace

from sessionauth.domain.users.entities import User
from sessionauth.domain.users.exceptions import UserAlreadyExistsError
from sessionauth.domain.users.repositories import PasswordHasher, UserRepository
from sessionauth.shared.errors import StoreError


class InMemoryUserRepository(UserRepository):
    def __init__(self) -> None:
        self._users: dict[str, User] = {}
        self._seq = 1
        self.writes = 0
        self.fail_with: Exception | None = None

    def _maybe_fail(self) -> None:
        if self.fail_with is not None:
            raise self.fail_with

    def find_by_email(self, email: str) -> User | None:
        self._maybe_fail()
        return self._users.get(email)

    def find_by_id(self, user_id: int) -> User | None:
        self._maybe_fail()
        return next((u for u in self._users.values() if u.id == user_id), None)

    def add(self, user: User) -> User:
        self._maybe_fail()
        self.writes += 1
        if user.email in self._users:
            raise UserAlreadyExistsError()
        new_user = replace(user, id=self._seq)
        self._seq += 1
        self._users[new_user.email] = new_user
        return new_user


class DeterministicHasher(PasswordHasher):
    dummy_hash = "hashed:\x00unknown"

    def __init__(self) -> None:
        self.calls = 0
        self.verify_calls: list[str] = []

    def hash(self, password: str) -> str:
        self.calls += 1
        return f"hashed:{password}"

    def verify(self, password: str, hashed: str) -> bool:
        self.verify_calls.append(hashed)
        return hashed == f"hashed:{password}"


def failing_store() -> StoreError:
    return StoreError("test")
