# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Scipp contributors (https://github.com/scipp)
# ruff: noqa: E402, I

import importlib.metadata

try:
    __version__ = importlib.metadata.version("tdrive-onlyoffice")
except importlib.metadata.PackageNotFoundError:
    __version__ = "0.0.0"

del importlib

from .config import ConnectorSettings, load_settings
from .errors import CommandError, CommandTransportError, OnlyOfficeError
from .polled_value import PolledValue
from .protocol import ErrorCode, error_code_label
from .reconciler import ForgottenProcessor, process_forgotten
from .service import OnlyOfficeService
from .transport import CommandTransport

__all__ = [
    "CommandError",
    "CommandTransport",
    "CommandTransportError",
    "ConnectorSettings",
    "ErrorCode",
    "ForgottenProcessor",
    "OnlyOfficeError",
    "OnlyOfficeService",
    "PolledValue",
    "error_code_label",
    "load_settings",
    "process_forgotten",
]
