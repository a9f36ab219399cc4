# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .auth_controller import AuthController
from .pages_controller import PagesController

__all__ = ["AuthController", "PagesController"]
