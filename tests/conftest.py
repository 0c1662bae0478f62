# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Scipp contributors (https://github.com/scipp)
from typing import Any

import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer

from tdrive.onlyoffice.protocol.commands import BaseCommand, parse_command
from tdrive.onlyoffice.transport import COMMAND_SERVICE_PATH


class FakeCommandServer:
    """
    Fake command service of a document server, recording the commands it gets.

    Replies are set per command name in ``replies``. Setting ``raw_reply`` to a
    ``(status, text)`` tuple answers every command with that body instead.
    """

    def __init__(self) -> None:
        self.received: list[BaseCommand] = []
        self.replies: dict[str, dict[str, Any]] = {}
        self.raw_reply: tuple[int, str] | None = None
        self.base_url = ''

    async def handle(self, request: web.Request) -> web.Response:
        command = parse_command(await request.read())
        self.received.append(command)
        if self.raw_reply is not None:
            status, text = self.raw_reply
            return web.Response(status=status, text=text)
        return web.json_response(self.replies.get(command.c, {'error': 5}))

    def make_app(self) -> web.Application:
        app = web.Application()
        app.router.add_post(f'/{COMMAND_SERVICE_PATH}', self.handle)
        return app


@pytest_asyncio.fixture
async def command_server():
    fake = FakeCommandServer()
    server = TestServer(fake.make_app())
    await server.start_server()
    fake.base_url = str(server.make_url('/'))
    yield fake
    await server.close()
