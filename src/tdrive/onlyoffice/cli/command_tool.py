"""Command-line tool to send a single command to an OnlyOffice document server.

Useful to check the connector configuration and to inspect or clean up the
forgotten documents by hand.
"""
# ruff: noqa: T201  # print is appropriate for CLI output

import argparse
import asyncio
import json
import sys
from collections.abc import Callable

import structlog
from pydantic import ValidationError

from ..config.settings import ConnectorSettings, load_settings
from ..errors import CommandError, CommandTransportError
from ..logging_config import configure_logging
from ..protocol.commands import (
    BaseCommand,
    DeleteForgottenCommand,
    ForceSaveCommand,
    GetForgottenCommand,
    GetForgottenListCommand,
    LicenseCommand,
    SuccessResponse,
    VersionCommand,
)
from ..transport import CommandTransport

logger = structlog.get_logger(__name__)

EXIT_COMMAND_ERROR = 1
EXIT_TRANSPORT_ERROR = 2

COMMAND_BUILDERS: dict[str, Callable[[argparse.Namespace], BaseCommand]] = {
    'version': lambda args: VersionCommand(),
    'license': lambda args: LicenseCommand(),
    'forcesave': lambda args: ForceSaveCommand(key=args.key, userdata=args.userdata),
    'forgotten-list': lambda args: GetForgottenListCommand(),
    'forgotten-get': lambda args: GetForgottenCommand(key=args.key),
    'forgotten-delete': lambda args: DeleteForgottenCommand(key=args.key),
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Send a command to the OnlyOffice command service",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        '--server',
        default=None,
        help='Base URL of the document server (default: ONLYOFFICE_SERVER_URL)',
    )
    parser.add_argument(
        '--timeout',
        type=float,
        default=None,
        help='Request timeout in seconds (default: ONLYOFFICE_REQUEST_TIMEOUT)',
    )
    parser.add_argument(
        '--log-level',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
        default='WARNING',
        help='Set the logging level',
    )
    subparsers = parser.add_subparsers(dest='command', required=True)
    subparsers.add_parser('version', help='Version of the document server')
    subparsers.add_parser('license', help='License and quota of the document server')
    forcesave = subparsers.add_parser('forcesave', help='Force save a document')
    forcesave.add_argument('key', help='Editing session key')
    forcesave.add_argument(
        '--userdata', default='', help='Passed as-is to the document callback'
    )
    subparsers.add_parser('forgotten-list', help='Keys of the forgotten documents')
    for name, description in (
        ('forgotten-get', 'Download URL of a forgotten document'),
        ('forgotten-delete', 'Delete a forgotten document'),
    ):
        sub = subparsers.add_parser(name, help=description)
        sub.add_argument('key', help='Key of the forgotten document')
    return parser


def resolve_settings(args: argparse.Namespace) -> ConnectorSettings:
    """Combine command-line arguments with the settings from the environment.

    Arguments given on the command line win over the environment.
    """
    overrides = {'server_url': args.server, 'request_timeout': args.timeout}
    return load_settings(
        overrides={key: value for key, value in overrides.items() if value is not None}
    )


async def send(settings: ConnectorSettings, command: BaseCommand) -> SuccessResponse:
    async with CommandTransport(
        settings.server_url, timeout=settings.request_timeout
    ) as transport:
        return await transport.post(command)


def format_response(response: SuccessResponse) -> str:
    return json.dumps(response.model_dump(mode='json', exclude={'error'}), indent=2)


def main(argv: list[str] | None = None) -> int:
    """Main entry point of the command tool."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(level=args.log_level)

    try:
        settings = resolve_settings(args)
    except ValidationError as e:
        parser.error(f"invalid settings, is --server set?\n{e}")

    command = COMMAND_BUILDERS[args.command](args)
    logger.debug("cli_command", command=command.c, server=settings.server_url)
    try:
        response = asyncio.run(send(settings, command))
    except CommandError as e:
        print(e, file=sys.stderr)
        return EXIT_COMMAND_ERROR
    except CommandTransportError as e:
        print(f"Document server unreachable: {e}", file=sys.stderr)
        return EXIT_TRANSPORT_ERROR

    print(format_response(response))
    return 0


if __name__ == '__main__':
    sys.exit(main())
