# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Any, NoReturn

from pydantic import ValidationError as PydanticValidationError

from .base import InputValidationError
from .validation_types import PRIORITY, ValidationErrorType


def format_pydantic_errors(exc: PydanticValidationError) -> dict[str, Any]:
    errors_list = []
    fields_set = set()

    for error in exc.errors():
        loc = error.get("loc", ())
        field_path = ".".join(str(part) for part in loc if part is not None)

        if field_path:
            fields_set.add(field_path)

        errors_list.append(
            {
                "field": field_path or "unknown",
                "type": error.get("type", "value_error"),
            }
        )

    return {
        "fields": sorted(fields_set),
        "errors": errors_list,
    }


def _resolve_code(context: dict[str, Any]) -> ValidationErrorType:
    types = set()
    for entry in context["errors"]:
        kind = entry["type"]
        # Required and wrong-typed fields are reported as missing.
        if kind not in tuple(ValidationErrorType):
            kind = ValidationErrorType.MISSING
        types.add(ValidationErrorType(kind))
    for candidate in PRIORITY:
        if candidate in types:
            return candidate
    return ValidationErrorType.MISSING


def raise_form_error(exc: PydanticValidationError) -> NoReturn:
    context = format_pydantic_errors(exc)
    raise InputValidationError(_resolve_code(context), context=context) from exc


__all__ = [
    "format_pydantic_errors",
    "raise_form_error",
]
