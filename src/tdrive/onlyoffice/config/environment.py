# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Scipp contributors (https://github.com/scipp)
"""Deployment environment of the OnlyOffice connector, read from ONLYOFFICE_ENV."""

import os

ENV_VAR = 'ONLYOFFICE_ENV'
DEFAULT_ENV = 'dev'
PRODUCTION_ENV = 'production'


def get_environment() -> str:
    """Name of the deployment environment, 'dev' unless ONLYOFFICE_ENV is set."""
    return os.getenv(ENV_VAR, DEFAULT_ENV).strip().lower() or DEFAULT_ENV


def is_production() -> bool:
    return get_environment() == PRODUCTION_ENV
