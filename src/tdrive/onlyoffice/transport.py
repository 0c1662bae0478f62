# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Scipp contributors (https://github.com/scipp)
"""HTTP transport for the OnlyOffice command service."""

from __future__ import annotations

from types import TracebackType
from typing import Protocol, Self

import aiohttp
import structlog
from pydantic import ValidationError

from .errors import CommandError, CommandTransportError
from .protocol.commands import BaseCommand, RawResponse, SuccessResponse
from .protocol.error_codes import is_success

logger = structlog.get_logger(__name__)

COMMAND_SERVICE_PATH = 'coauthoring/CommandService.ashx'


def command_service_url(server_url: str) -> str:
    """Join the document server base URL and the command service path."""
    return f"{server_url.rstrip('/')}/{COMMAND_SERVICE_PATH}"


class CommandSender(Protocol):
    async def post_unsafe(self, command: BaseCommand) -> RawResponse: ...

    async def post(self, command: BaseCommand) -> SuccessResponse: ...

    async def close(self) -> None: ...


class CommandTransport:
    """
    Posts commands to the command service of an OnlyOffice document server.

    Parameters
    ----------
    server_url:
        Base URL of the document server, e.g. ``http://onlyoffice:8090``.
    session:
        Optional session to send requests with. If not given, one is created on
        first use and closed by :meth:`close`. A session passed in is left open.
    timeout:
        Total timeout in seconds for a single command.
    """

    def __init__(
        self,
        server_url: str,
        *,
        session: aiohttp.ClientSession | None = None,
        timeout: float = 10.0,
    ) -> None:
        self._url = command_service_url(server_url)
        self._session = session
        self._owns_session = session is None
        self._timeout = aiohttp.ClientTimeout(total=timeout)

    @property
    def url(self) -> str:
        return self._url

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.close()

    def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None:
            self._session = aiohttp.ClientSession(timeout=self._timeout)
        return self._session

    async def close(self) -> None:
        """Close the HTTP session if it was created by this transport."""
        if self._owns_session and self._session is not None:
            await self._session.close()
            self._session = None

    async def post_unsafe(self, command: BaseCommand) -> RawResponse:
        """
        POST a command and decode the reply, without checking its ``error`` field.

        Raises
        ------
        CommandTransportError:
            If the server cannot be reached, times out, or the reply is not a
            JSON object with an integer ``error`` field.
        """
        payload = command.to_payload()
        logger.debug("onlyoffice_command_sent", command=command.c, payload=payload)
        session = self._get_session()
        try:
            async with session.post(
                self._url, json=payload, timeout=self._timeout
            ) as response:
                status = response.status
                body = await response.json(content_type=None)
        except (aiohttp.ClientError, TimeoutError) as e:
            raise CommandTransportError(
                f"OnlyOffice command {command.c} could not be sent to "
                f"{self._url}: {e!r}",
                request=command,
            ) from e
        except ValueError as e:
            raise CommandTransportError(
                f"OnlyOffice command {command.c} got a reply that is not JSON",
                request=command,
            ) from e
        logger.info(
            "onlyoffice_command_response",
            command=command.c,
            status=status,
            payload=body,
        )
        try:
            return RawResponse.model_validate(body)
        except ValidationError as e:
            raise CommandTransportError(
                f"OnlyOffice command {command.c} got a malformed reply: {body!r}",
                request=command,
            ) from e

    async def post(self, command: BaseCommand) -> SuccessResponse:
        """
        POST a command and return its success payload.

        Raises
        ------
        CommandError:
            If the ``error`` field of the reply is not ``SUCCESS``.
        CommandTransportError:
            If the request fails or the reply does not have the fields
            documented for the command.
        """
        response = await self.post_unsafe(command)
        if not is_success(response.error):
            raise CommandError(response.error, command, response.as_dict())
        try:
            return command.response_model.model_validate(response.as_dict())
        except ValidationError as e:
            raise CommandTransportError(
                f"OnlyOffice command {command.c} succeeded but its reply is "
                f"missing fields: {response.as_dict()!r}",
                request=command,
            ) from e
