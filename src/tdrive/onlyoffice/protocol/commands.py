# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Scipp contributors (https://github.com/scipp)
"""
Requests and responses of the OnlyOffice document server command service.

Each command is a frozen model tagged by its command name in the ``c`` field.
The model is serialized verbatim as the JSON body of the POST request, and
names the model its success response is validated into.

See https://api.onlyoffice.com/editors/command/
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Annotated, Any, ClassVar, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from .error_codes import ErrorCode


class RawResponse(BaseModel):
    """
    Any response of the command service, before its ``error`` field is checked.

    Fields other than ``error`` are kept as-is, since their shape depends on
    both the command and the outcome.
    """

    model_config = ConfigDict(extra='allow', frozen=True)

    error: int

    def as_dict(self) -> dict[str, Any]:
        return self.model_dump()


class SuccessResponse(BaseModel):
    """Common base of the payloads returned when ``error`` is ``SUCCESS``."""

    model_config = ConfigDict(extra='ignore', frozen=True)

    error: int = ErrorCode.SUCCESS


class VersionResponse(SuccessResponse):
    version: str


class ForceSaveResponse(SuccessResponse):
    key: str


class GetForgottenResponse(SuccessResponse):
    key: str
    url: str


class GetForgottenListResponse(SuccessResponse):
    keys: list[str]


class DeleteForgottenResponse(SuccessResponse):
    key: str


class LicenseResponse(SuccessResponse):
    """See https://api.onlyoffice.com/editors/command/license"""

    license: dict[str, Any]
    server: dict[str, Any]
    quota: dict[str, Any]


class BaseCommand(BaseModel):
    model_config = ConfigDict(frozen=True)

    response_model: ClassVar[type[SuccessResponse]] = SuccessResponse

    c: str

    def to_payload(self) -> dict[str, Any]:
        """Return the JSON-compatible request body."""
        return self.model_dump(mode='json')


class VersionCommand(BaseCommand):
    response_model: ClassVar[type[SuccessResponse]] = VersionResponse

    c: Literal['version'] = 'version'


class ForceSaveCommand(BaseCommand):
    response_model: ClassVar[type[SuccessResponse]] = ForceSaveResponse

    c: Literal['forcesave'] = 'forcesave'
    key: str
    userdata: str = Field(
        default='', description="Forwarded as-is to the document callback."
    )


class GetForgottenCommand(BaseCommand):
    response_model: ClassVar[type[SuccessResponse]] = GetForgottenResponse

    c: Literal['getForgotten'] = 'getForgotten'
    key: str


class GetForgottenListCommand(BaseCommand):
    response_model: ClassVar[type[SuccessResponse]] = GetForgottenListResponse

    c: Literal['getForgottenList'] = 'getForgottenList'


class DeleteForgottenCommand(BaseCommand):
    response_model: ClassVar[type[SuccessResponse]] = DeleteForgottenResponse

    c: Literal['deleteForgotten'] = 'deleteForgotten'
    key: str


class LicenseCommand(BaseCommand):
    response_model: ClassVar[type[SuccessResponse]] = LicenseResponse

    c: Literal['license'] = 'license'


Command = Annotated[
    VersionCommand
    | ForceSaveCommand
    | GetForgottenCommand
    | GetForgottenListCommand
    | DeleteForgottenCommand
    | LicenseCommand,
    Field(discriminator='c'),
]

COMMAND_TYPES: dict[str, type[BaseCommand]] = {
    'version': VersionCommand,
    'forcesave': ForceSaveCommand,
    'getForgotten': GetForgottenCommand,
    'getForgottenList': GetForgottenListCommand,
    'deleteForgotten': DeleteForgottenCommand,
    'license': LicenseCommand,
}

_command_adapter: TypeAdapter[Command] = TypeAdapter(Command)


def parse_command(data: Mapping[str, Any] | str | bytes) -> BaseCommand:
    """
    Parse a request body into the matching command variant.

    Raises
    ------
    pydantic.ValidationError:
        If ``c`` names no known command or required fields are missing.
    """
    if isinstance(data, str | bytes):
        return _command_adapter.validate_json(data)
    return _command_adapter.validate_python(data)
