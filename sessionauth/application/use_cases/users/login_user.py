# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from sessionauth.application.services.input_guard import validate_fields
from sessionauth.domain.users.entities import User
from sessionauth.domain.users.exceptions import InvalidCredentialsError
from sessionauth.domain.users.repositories import PasswordHasher, UserRepository
from sessionauth.shared.errors.base import StoreError
from sessionauth.shared.logging import logger


class LoginUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher

    def execute(self, email: str, password: str) -> User:
        validate_fields(email=email, password=password)

        try:
            user = self._users.find_by_email(email)
        except StoreError:
            logger.exception("auth.login: user lookup failed")
            user = None

        # Unknown email, store failure and wrong password share one outcome,
        # and each of them costs exactly one hash check.
        if user is None or not user.password_hash:
            self._password_hasher.verify(password, self._password_hasher.dummy_hash)
            raise InvalidCredentialsError()
        if not self._password_hasher.verify(password, user.password_hash):
            raise InvalidCredentialsError()

        return user.without_password()
