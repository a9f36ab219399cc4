# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import SessionWindow, User
from .exceptions import InvalidCredentialsError, UserAlreadyExistsError
from .repositories import PasswordHasher, UserRepository

__all__ = [
    "InvalidCredentialsError",
    "PasswordHasher",
    "SessionWindow",
    "User",
    "UserAlreadyExistsError",
    "UserRepository",
]
