# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import UTC, datetime

from sessionauth.application.services.input_guard import (
    check_password_strength,
    validate_fields,
)
from sessionauth.domain.users.entities import User
from sessionauth.domain.users.repositories import PasswordHasher, UserRepository


class RegisterUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher

    def execute(self, email: str, nickname: str, password: str) -> User:
        validate_fields(email=email, nickname=nickname, password=password)
        check_password_strength(password)

        hashed = self._password_hasher.hash(password)
        user = User(
            id=0,
            email=email,
            nickname=nickname,
            password_hash=hashed,
            created_at=datetime.now(UTC),
        )
        # Uniqueness is enforced by the store; a duplicate raises UserAlreadyExistsError.
        return self._users.add(user)
