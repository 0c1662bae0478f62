# SPDX-FileCopyrightText: 2025 Scipp contributors (https://github.com/scipp)
# SPDX-License-Identifier: BSD-3-Clause
"""
Settings of the connector to the OnlyOffice document server.

Defaults are read from the packaged ``defaults.yaml`` and can be overridden by
environment variables named after the fields with an ``ONLYOFFICE_`` prefix,
e.g. ``ONLYOFFICE_SERVER_URL``.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from importlib import resources
from typing import Any

import yaml
from pydantic import BaseModel, Field

ENV_PREFIX = 'ONLYOFFICE'


class ConnectorSettings(BaseModel, frozen=True):
    """
    Settings of the connector.

    Parameters
    ----------
    server_url:
        Base URL of the document server, e.g. ``http://onlyoffice:8090``.
    connectivity_check_period:
        Seconds between two license requests checking the server is reachable.
    request_timeout:
        Total timeout in seconds of a single command.
    """

    server_url: str = Field(min_length=1)
    connectivity_check_period: float = Field(default=60.0, gt=0)
    request_timeout: float = Field(default=10.0, gt=0)


def load_defaults() -> dict[str, Any]:
    """Load the packaged default settings."""
    config_path = resources.files('tdrive.onlyoffice.config')
    with config_path.joinpath('defaults.yaml').open() as f:
        return yaml.safe_load(f) or {}


def get_env_overrides(
    env: Mapping[str, str] | None = None, *, prefix: str = ENV_PREFIX
) -> dict[str, str]:
    """Get settings from environment variables, converting field_name to
    PREFIX_FIELD_NAME."""
    env = os.environ if env is None else env
    overrides = {}
    for name in ConnectorSettings.model_fields:
        value = env.get(f"{prefix}_{name.upper()}")
        if value is not None:
            overrides[name] = value
    return overrides


def load_settings(
    env: Mapping[str, str] | None = None,
    *,
    overrides: Mapping[str, Any] | None = None,
) -> ConnectorSettings:
    """
    Load the connector settings.

    Parameters
    ----------
    env:
        Environment variables to read overrides from. Defaults to ``os.environ``.
    overrides:
        Values taking precedence over both the defaults and the environment,
        e.g. from command-line arguments.

    Raises
    ------
    pydantic.ValidationError:
        If no server URL is configured or a value is invalid.
    """
    values = {
        key: value for key, value in load_defaults().items() if value is not None
    }
    values.update(get_env_overrides(env))
    values.update(overrides or {})
    return ConnectorSettings(**values)
