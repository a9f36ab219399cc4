"""Password hashing strategies."""

from __future__ import annotations

import secrets
from functools import cached_property

import bcrypt

from sessionauth.domain.users.repositories import PasswordHasher

DEFAULT_ROUNDS = 14
# bcrypt only uses the first 72 bytes of a password.
BCRYPT_MAX_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


class BcryptPasswordHasher(PasswordHasher):
    def __init__(self, rounds: int = DEFAULT_ROUNDS) -> None:
        self._rounds = rounds

    @cached_property
    def dummy_hash(self) -> str:
        return self.hash(secrets.token_urlsafe(32))

    def hash(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self._rounds)
        return bcrypt.hashpw(_encode(password), salt).decode("ascii")

    def verify(self, password: str, hashed: str) -> bool:
        # Malformed stored hashes are a plain mismatch, not an error.
        if not hashed:
            return False
        try:
            return bcrypt.checkpw(_encode(password), hashed.encode("ascii"))
        except (ValueError, UnicodeEncodeError):
            return False
