# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Scipp contributors (https://github.com/scipp)
"""Wire protocol of the OnlyOffice document server."""

from .callback import (
    ActionType,
    CallbackAction,
    CallbackParameters,
    CallbackStatus,
    ForceSaveType,
)
from .commands import (
    COMMAND_TYPES,
    BaseCommand,
    Command,
    DeleteForgottenCommand,
    DeleteForgottenResponse,
    ForceSaveCommand,
    ForceSaveResponse,
    GetForgottenCommand,
    GetForgottenListCommand,
    GetForgottenListResponse,
    GetForgottenResponse,
    LicenseCommand,
    LicenseResponse,
    RawResponse,
    SuccessResponse,
    VersionCommand,
    VersionResponse,
    parse_command,
)
from .error_codes import ErrorCode, error_code_label, is_success

__all__ = [
    "COMMAND_TYPES",
    "ActionType",
    "BaseCommand",
    "CallbackAction",
    "CallbackParameters",
    "CallbackStatus",
    "Command",
    "DeleteForgottenCommand",
    "DeleteForgottenResponse",
    "ErrorCode",
    "ForceSaveCommand",
    "ForceSaveResponse",
    "ForceSaveType",
    "GetForgottenCommand",
    "GetForgottenListCommand",
    "GetForgottenListResponse",
    "GetForgottenResponse",
    "LicenseCommand",
    "LicenseResponse",
    "RawResponse",
    "SuccessResponse",
    "VersionCommand",
    "VersionResponse",
    "error_code_label",
    "is_success",
    "parse_command",
]
