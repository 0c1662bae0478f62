# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Scipp contributors (https://github.com/scipp)
"""
Parameters the document server posts to the callback URL of an editing session.

See https://api.onlyoffice.com/editors/callback
"""

from __future__ import annotations

from enum import IntEnum

from pydantic import BaseModel, ConfigDict, Field


class ActionType(IntEnum):
    USER_DISCONNECTED = 0
    USER_CONNECTED = 1
    USER_INITIATED_FORCE_SAVE = 2


class ForceSaveType(IntEnum):
    FROM_COMMAND_SERVICE = 0
    FORCE_SAVE_BUTTON_CLICKED = 1
    SERVER_TIMER = 2
    FORM_SUBMITTED = 3


class CallbackStatus(IntEnum):
    BEING_EDITED = 1
    READY_FOR_SAVING = 2
    ERROR_SAVING = 3
    CLOSED_WITHOUT_CHANGES = 4
    BEING_EDITED_BUT_IS_SAVED = 6
    ERROR_FORCE_SAVING = 7


# Statuses for which the document server includes a download ``url``
STATUSES_WITH_URL = frozenset(
    {
        CallbackStatus.READY_FOR_SAVING,
        CallbackStatus.ERROR_SAVING,
        CallbackStatus.BEING_EDITED_BUT_IS_SAVED,
        CallbackStatus.ERROR_FORCE_SAVING,
    }
)


class CallbackAction(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: ActionType
    userid: str


class CallbackParameters(BaseModel):
    """Body of a callback request, unknown fields are ignored."""

    model_config = ConfigDict(extra='ignore', frozen=True)

    key: str = Field(description="Editing session key of the document.")
    status: CallbackStatus
    filetype: str | None = None
    forcesavetype: ForceSaveType | None = None
    url: str | None = Field(
        default=None, description="Download link of the edited document."
    )
    actions: list[CallbackAction] = Field(default_factory=list)
    users: list[str] = Field(default_factory=list)

    @property
    def has_document(self) -> bool:
        """True if the document server attached the edited document."""
        return self.status in STATUSES_WITH_URL and self.url is not None

    @property
    def is_force_save(self) -> bool:
        return self.status in (
            CallbackStatus.BEING_EDITED_BUT_IS_SAVED,
            CallbackStatus.ERROR_FORCE_SAVING,
        )
