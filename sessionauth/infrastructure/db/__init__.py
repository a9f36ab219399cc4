# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .session import Base, SessionLocal, build_engine, get_engine, init_db, session_scope

__all__ = ["Base", "SessionLocal", "build_engine", "get_engine", "init_db", "session_scope"]
