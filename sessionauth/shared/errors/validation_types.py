# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from enum import StrEnum


class ValidationErrorType(StrEnum):
    MISSING = "missing"
    DISALLOWED_CHARACTERS = "disallowed_characters"
    PASSWORD_TOO_SHORT = "password_too_short"
    TOO_LONG = "too_long"


# Highest priority first: character checks run before the strength check.
PRIORITY: tuple[ValidationErrorType, ...] = (
    ValidationErrorType.DISALLOWED_CHARACTERS,
    ValidationErrorType.MISSING,
    ValidationErrorType.TOO_LONG,
    ValidationErrorType.PASSWORD_TOO_SHORT,
)


__all__ = ["PRIORITY", "ValidationErrorType"]
