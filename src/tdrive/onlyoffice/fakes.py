# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Scipp contributors (https://github.com/scipp)
from typing import Any

from pydantic import ValidationError

from .errors import CommandError, CommandTransportError
from .protocol.commands import BaseCommand, RawResponse, SuccessResponse
from .protocol.error_codes import is_success


class FakeCommandTransport:
    """
    A fake command transport answering from memory for testing purposes.

    Replies are registered per command name and consumed in order, the last reply
    of a command is repeated once the others are used up. A reply is either the
    response body as a dict or an exception to raise. Every command posted is
    recorded in ``sent``.
    """

    def __init__(self, replies: dict[str, list[dict[str, Any] | Exception]]) -> None:
        self._replies = {name: list(items) for name, items in replies.items()}
        self.sent: list[BaseCommand] = []
        self.closed = False

    def sent_names(self) -> list[str]:
        return [command.c for command in self.sent]

    async def post_unsafe(self, command: BaseCommand) -> RawResponse:
        self.sent.append(command)
        replies = self._replies.get(command.c)
        if not replies:
            raise AssertionError(f"No reply registered for command {command.c}")
        reply = replies.pop(0) if len(replies) > 1 else replies[0]
        if isinstance(reply, Exception):
            raise reply
        return RawResponse.model_validate(reply)

    async def post(self, command: BaseCommand) -> SuccessResponse:
        response = await self.post_unsafe(command)
        if not is_success(response.error):
            raise CommandError(response.error, command, response.as_dict())
        try:
            return command.response_model.model_validate(response.as_dict())
        except ValidationError as e:
            raise CommandTransportError(
                f"Fake reply to {command.c} is missing fields: {response.as_dict()!r}",
                request=command,
            ) from e

    async def close(self) -> None:
        self.closed = True


class FakeForgottenStore:
    """An in-memory forgotten document list of a document server."""

    def __init__(self, keys: list[str], *, url_template: str = 'http://ds/{key}'):
        self.keys = list(keys)
        self._url_template = url_template
        self.calls: list[tuple[str, str | None]] = []

    async def get_forgotten_list(self) -> list[str]:
        self.calls.append(('getForgottenList', None))
        return list(self.keys)

    async def get_forgotten(self, key: str) -> str:
        self.calls.append(('getForgotten', key))
        return self._url_template.format(key=key)

    async def delete_forgotten(self, key: str) -> str:
        self.calls.append(('deleteForgotten', key))
        self.keys.remove(key)
        return key

    def deleted(self) -> list[str]:
        return [key for name, key in self.calls if name == 'deleteForgotten']
