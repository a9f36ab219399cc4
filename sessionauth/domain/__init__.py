# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .users.entities import SessionWindow, User
from .users.exceptions import InvalidCredentialsError, UserAlreadyExistsError
from .users.repositories import PasswordHasher, UserRepository

__all__ = [
    "InvalidCredentialsError",
    "PasswordHasher",
    "SessionWindow",
    "User",
    "UserAlreadyExistsError",
    "UserRepository",
]
