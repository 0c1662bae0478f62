# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Scipp contributors (https://github.com/scipp)
"""Exceptions raised when talking to the OnlyOffice command service."""

from __future__ import annotations

import json
from typing import Any

from .protocol.commands import BaseCommand
from .protocol.error_codes import error_code_label


class OnlyOfficeError(Exception):
    """Base class of all errors raised by this package."""


class CommandTransportError(OnlyOfficeError):
    """
    The command service could not be reached or its reply could not be decoded.

    Distinct from :class:`CommandError`, which means the server was reachable
    but rejected the command.
    """

    def __init__(self, message: str, *, request: BaseCommand | None = None):
        super().__init__(message)
        self.request = request


class CommandError(OnlyOfficeError):
    """The command service answered with an ``error`` other than ``SUCCESS``."""

    def __init__(
        self, error_code: int, request: BaseCommand, response: dict[str, Any]
    ):
        self.error_code = error_code
        self.label = error_code_label(error_code)
        self.request = request
        self.response = response
        super().__init__(
            f"OnlyOffice command service error {self.label} ({error_code}): "
            f"Requested {json.dumps(request.to_payload())} "
            f"got {json.dumps(response, default=str)}"
        )
