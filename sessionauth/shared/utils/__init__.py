# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .request import get_client_ip

__all__ = ["get_client_ip"]
