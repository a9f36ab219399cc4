# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime


@dataclass(slots=True, frozen=True)
class User:

    id: int
    email: str
    nickname: str
    password_hash: str | None
    created_at: datetime

    def without_password(self) -> User:
        return replace(self, password_hash=None)


@dataclass(slots=True, frozen=True)
class SessionWindow:
    """Validity window of a client-side session, as unix timestamps."""

    issued_at: float
    expires_at: float

    @classmethod
    def start(cls, now: float, duration: float) -> SessionWindow:
        return cls(issued_at=now, expires_at=now + duration)

    def is_expired(self, now: float) -> bool:
        return now >= self.expires_at

    def renewed(self, now: float, active_duration: float) -> SessionWindow:
        return replace(self, expires_at=max(self.expires_at, now + active_duration))
