# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Request input policy.

The character deny-list is a compatibility policy kept for existing
clients, not an injection defence: all queries are parameterized by
SQLAlchemy. Likewise the user-agent check only filters obvious non-browser
clients and is trivially spoofed.
"""

from __future__ import annotations

import re

from sessionauth.shared.errors.base import InputValidationError
from sessionauth.shared.errors.validation_types import ValidationErrorType

DISALLOWED_CHARACTERS = "<>'%"
MIN_PASSWORD_LENGTH = 8
ALLOWED_BROWSERS: tuple[str, ...] = ("Firefox", "Chrome", "Safari")

_DISALLOWED_RE = re.compile(r"[<>'%]")


def contains_disallowed(value: str | None) -> bool:
    return bool(value) and _DISALLOWED_RE.search(value) is not None


def validate_fields(
    *,
    email: str | None = None,
    nickname: str | None = None,
    password: str | None = None,
) -> None:
    for name, value in (("email", email), ("nickname", nickname), ("password", password)):
        if contains_disallowed(value):
            raise InputValidationError(
                ValidationErrorType.DISALLOWED_CHARACTERS, context={"field": name}
            )


def check_password_strength(password: str) -> None:
    if len(password) < MIN_PASSWORD_LENGTH:
        raise InputValidationError(
            ValidationErrorType.PASSWORD_TOO_SHORT,
            context={"min_length": MIN_PASSWORD_LENGTH},
        )


def check_origin(user_agent: str | None) -> bool:
    if not user_agent:
        return False
    return any(browser in user_agent for browser in ALLOWED_BROWSERS)


__all__ = [
    "ALLOWED_BROWSERS",
    "DISALLOWED_CHARACTERS",
    "MIN_PASSWORD_LENGTH",
    "check_origin",
    "check_password_strength",
    "contains_disallowed",
    "validate_fields",
]
