# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Scipp contributors (https://github.com/scipp)
"""
Commands of the OnlyOffice document server exposed to the rest of the connector.

See https://api.onlyoffice.com/editors/command/
"""

from __future__ import annotations

import random
from types import TracebackType
from typing import Self

import structlog

from .config.settings import ConnectorSettings
from .polled_value import PolledValue
from .protocol.commands import (
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
    VersionCommand,
    VersionResponse,
)
from .reconciler import ForgottenProcessor, process_forgotten
from .transport import CommandSender, CommandTransport

logger = structlog.get_logger(__name__)

CONNECTIVITY_LABEL = 'Connect to Only Office'


class OnlyOfficeService:
    """
    Client of the command service of an OnlyOffice document server.

    Must be created from within a running event loop, since the license status
    starts being polled right away.

    Parameters
    ----------
    transport:
        Sends the commands, see :class:`~.transport.CommandTransport`.
    connectivity_check_period:
        Seconds between two license requests.
    rng:
        Random number generator shuffling forgotten documents.
    """

    def __init__(
        self,
        transport: CommandSender,
        *,
        connectivity_check_period: float,
        rng: random.Random | None = None,
    ) -> None:
        self._transport = transport
        self._rng = rng
        self._poller: PolledValue[LicenseResponse] = PolledValue(
            CONNECTIVITY_LABEL, self._poll_license, connectivity_check_period
        )

    @classmethod
    def from_settings(cls, settings: ConnectorSettings) -> OnlyOfficeService:
        transport = CommandTransport(
            settings.server_url, timeout=settings.request_timeout
        )
        return cls(
            transport, connectivity_check_period=settings.connectivity_check_period
        )

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.close()

    async def close(self) -> None:
        """Stop polling the license and release the transport."""
        await self._poller.stop()
        await self._transport.close()

    async def _poll_license(self) -> LicenseResponse:
        logger.info("onlyoffice_license_status")
        return await self.get_license()

    def get_latest_licence(self) -> LicenseResponse | None:
        """
        Get the latest license status from polling.

        None probably means the document server could not be reached since the
        connector started.
        """
        return self._poller.latest()

    @property
    def license_poller(self) -> PolledValue[LicenseResponse]:
        return self._poller

    async def process_forgotten(self, processor: ForgottenProcessor) -> int:
        """
        Call ``processor`` on every forgotten document of the document server.

        If the processor returns True the document is deleted from the forgotten
        list, otherwise it will be listed again by a later call.

        Returns
        -------
        :
            Number of documents processed and deleted.
        """
        return await process_forgotten(self, processor, rng=self._rng)

    async def get_version(self) -> str:
        """Return the version string of the document server."""
        response: VersionResponse = await self._transport.post(VersionCommand())
        return response.version

    async def get_license(self) -> LicenseResponse:
        """Return the license, server and quota details of the document server."""
        return await self._transport.post(LicenseCommand())

    async def force_save(self, key: str, userdata: str = '') -> str:
        """Force a save of the editing session ``key``, ``userdata`` is passed to
        the callback."""
        response: ForceSaveResponse = await self._transport.post(
            ForceSaveCommand(key=key, userdata=userdata)
        )
        return response.key

    async def get_forgotten_list(self) -> list[str]:
        """Return the keys of all forgotten documents."""
        response: GetForgottenListResponse = await self._transport.post(
            GetForgottenListCommand()
        )
        return response.keys

    async def get_forgotten(self, key: str) -> str:
        """Return the download URL of the forgotten document ``key``."""
        response: GetForgottenResponse = await self._transport.post(
            GetForgottenCommand(key=key)
        )
        return response.url

    async def delete_forgotten(self, key: str) -> str:
        """Delete the forgotten document ``key`` from the document server."""
        response: DeleteForgottenResponse = await self._transport.post(
            DeleteForgottenCommand(key=key)
        )
        return response.key
