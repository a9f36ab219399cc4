"""Resolve the user referenced by a session."""

from __future__ import annotations

from sessionauth.domain.users.entities import User
from sessionauth.domain.users.repositories import UserRepository


class LoadSessionUserUseCase:
    def __init__(self, *, users: UserRepository) -> None:
        self._users = users

    def execute(self, user_id: int) -> User | None:
        """Return the sanitized user, or None when the record is gone.

        StoreError from the repository propagates unchanged.
        """
        user = self._users.find_by_id(user_id)
        if user is None:
            return None
        return user.without_password()
