# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .auth import LoginFormDTO, RegisterFormDTO

__all__ = ["LoginFormDTO", "RegisterFormDTO"]
