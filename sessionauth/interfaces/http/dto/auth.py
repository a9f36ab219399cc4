from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic_core import PydanticCustomError

from sessionauth.application.services.input_guard import (
    DISALLOWED_CHARACTERS,
    MIN_PASSWORD_LENGTH,
    contains_disallowed,
)
from sessionauth.shared.errors.validation_types import ValidationErrorType

MAX_LENGTHS = {"email": 254, "nickname": 64, "password": 128}


def _check_text(field: str, value: str) -> str:
    if not value:
        raise PydanticCustomError(
            ValidationErrorType.MISSING,
            "{field} cannot be empty",
            {"field": field},
        )
    if contains_disallowed(value):
        raise PydanticCustomError(
            ValidationErrorType.DISALLOWED_CHARACTERS,
            "{field} must not contain any of {chars}",
            {"field": field, "chars": DISALLOWED_CHARACTERS},
        )
    if len(value) > MAX_LENGTHS[field]:
        raise PydanticCustomError(
            ValidationErrorType.TOO_LONG,
            "{field} must be at most {max_length} characters",
            {"field": field, "max_length": MAX_LENGTHS[field]},
        )
    return value


class RegisterFormDTO(BaseModel):
    model_config = ConfigDict(extra="ignore", str_strip_whitespace=False)

    email: str
    nickname: str
    password: str

    @field_validator("email", "nickname")
    @classmethod
    def validate_text(cls, value: str, info) -> str:
        return _check_text(info.field_name, value)

    @field_validator("password")
    @classmethod
    def validate_password(cls, value: str) -> str:
        if not value:
            return _check_text("password", value)
        if contains_disallowed(value):
            raise PydanticCustomError(
                ValidationErrorType.DISALLOWED_CHARACTERS,
                "password must not contain any of {chars}",
                {"chars": DISALLOWED_CHARACTERS},
            )
        if len(value) < MIN_PASSWORD_LENGTH:
            raise PydanticCustomError(
                ValidationErrorType.PASSWORD_TOO_SHORT,
                "Password must be at least {min_length} characters long",
                {"min_length": MIN_PASSWORD_LENGTH},
            )
        return _check_text("password", value)


class LoginFormDTO(BaseModel):
    model_config = ConfigDict(extra="ignore")

    email: str
    password: str  # No strength check on login

    @field_validator("email", "password")
    @classmethod
    def validate_text(cls, value: str, info) -> str:
        return _check_text(info.field_name, value)
