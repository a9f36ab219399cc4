# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from functools import cached_property

from sessionauth.application.services.password_hashing import BcryptPasswordHasher
from sessionauth.application.use_cases.users.load_session_user import LoadSessionUserUseCase
from sessionauth.application.use_cases.users.login_user import LoginUserUseCase
from sessionauth.application.use_cases.users.register_user import RegisterUserUseCase
from sessionauth.infrastructure.repositories.users.sqlalchemy_user_repository import (
    SqlAlchemyUserRepository,
)
from sessionauth.interfaces.http.controllers.auth_controller import AuthController
from sessionauth.interfaces.http.controllers.pages_controller import PagesController
from sessionauth.shared.config import AppConfig


class Container:
    def __init__(self, config: AppConfig) -> None:
        self._config = config

    @cached_property
    def password_hasher(self) -> BcryptPasswordHasher:
        hasher = BcryptPasswordHasher(rounds=self._config.password_hash_rounds)
        # Warm the dummy hash before the first login attempt.
        _ = hasher.dummy_hash
        return hasher

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository()

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(
            users=self.user_repository,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            users=self.user_repository,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def load_session_user_use_case(self) -> LoadSessionUserUseCase:
        return LoadSessionUserUseCase(users=self.user_repository)

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            register_use_case=self.register_user_use_case,
            login_use_case=self.login_user_use_case,
        )

    @cached_property
    def pages_controller(self) -> PagesController:
        return PagesController()
