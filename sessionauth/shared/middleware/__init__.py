# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .csrf import csrf_protect, issue_csrf_token
from .error_handler import configure_error_handling
from .origin import configure_origin_guard
from .request_logger import configure_request_logging
from .security_headers import configure_security_headers
from .session_auth import (
    configure_session_auth,
    end_user_session,
    login_required,
    start_user_session,
    verify_session,
)
from .sliding_session import SlidingSessionInterface

__all__ = [
    "SlidingSessionInterface",
    "configure_error_handling",
    "configure_origin_guard",
    "configure_request_logging",
    "configure_security_headers",
    "configure_session_auth",
    "csrf_protect",
    "end_user_session",
    "issue_csrf_token",
    "login_required",
    "start_user_session",
    "verify_session",
]
