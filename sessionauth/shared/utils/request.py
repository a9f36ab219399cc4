# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import request


def get_client_ip() -> str:
    """First X-Forwarded-For hop, else the socket peer, else ``"unknown"``."""
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.remote_addr or "unknown"


__all__ = ["get_client_ip"]
