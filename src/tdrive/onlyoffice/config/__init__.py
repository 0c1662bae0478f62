# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Scipp contributors (https://github.com/scipp)
from .settings import ConnectorSettings, load_settings

__all__ = ["ConnectorSettings", "load_settings"]
