# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Scipp contributors (https://github.com/scipp)
"""
Error codes returned in the ``error`` field of every command service response.

See https://api.onlyoffice.com/editors/command/ for the upstream list.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    SUCCESS = 0
    KEY_MISSING_OR_DOC_NOT_FOUND = 1
    INVALID_CALLBACK_URL = 2
    INTERNAL_SERVER_ERROR = 3
    FORCE_SAVE_BUT_NO_CHANGES_TO_APPLY = 4
    COMMAND_NOT_CORRECT = 5
    INVALID_TOKEN = 6

    FORCE_SAVE_NO_CHANGES = 4


_LABELS: dict[int, str] = {
    0: 'SUCCESS',
    1: 'KEY_MISSING_OR_DOC_NOT_FOUND',
    2: 'INVALID_CALLBACK_URL',
    3: 'INTERNAL_SERVER_ERROR',
    4: 'FORCE_SAVE_BUT_NO_CHANGES_TO_APPLY',
    5: 'COMMAND_NOT_CORRECT',
    6: 'INVALID_TOKEN',
}


def error_code_label(value: Any) -> str:
    """
    Return the name of an error code, or a description if it is not recognised.

    Never raises, the command service may return codes newer than this table.
    """
    # bool is an int subclass but never a valid code
    if isinstance(value, int) and not isinstance(value, bool):
        label = _LABELS.get(value)
        if label is not None:
            return label
    return f"Unrecognized OnlyOffice.ErrorCode value {value!r}"


def is_success(value: Any) -> bool:
    """True iff ``value`` is the success sentinel."""
    return (
        isinstance(value, int)
        and not isinstance(value, bool)
        and value == ErrorCode.SUCCESS
    )
