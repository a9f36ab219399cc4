# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .base import (
    AppError,
    DomainError,
    InfrastructureError,
    InputValidationError,
    OriginRejectedError,
    StoreError,
    ValidationError,
)
from .http import register_error_handler, render_error_page
from .messages import user_message

__all__ = [
    "AppError",
    "DomainError",
    "InfrastructureError",
    "InputValidationError",
    "OriginRejectedError",
    "StoreError",
    "ValidationError",
    "register_error_handler",
    "render_error_page",
    "user_message",
]
