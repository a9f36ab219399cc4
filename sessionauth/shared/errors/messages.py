# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from .validation_types import ValidationErrorType

GENERIC_ERROR = "Something bad happened! Please try again."

USER_MESSAGES: dict[str, str] = {
    ValidationErrorType.DISALLOWED_CHARACTERS: "<>'% characters not allowed!",
    ValidationErrorType.PASSWORD_TOO_SHORT: "Please use a password with 8 characters or more.",
    ValidationErrorType.MISSING: "Please fill in all fields.",
    ValidationErrorType.TOO_LONG: "That value is too long.",
    "user_already_exists": "That email is already registered!",
    "invalid_credentials": "Incorrect email/password.",
    "store_error": GENERIC_ERROR,
}


def user_message(code: str) -> str:
    return USER_MESSAGES.get(code, GENERIC_ERROR)


__all__ = ["GENERIC_ERROR", "USER_MESSAGES", "user_message"]
