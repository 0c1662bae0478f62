# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Scipp contributors (https://github.com/scipp)
"""Structured logging configuration for the OnlyOffice connector."""

import logging
import sys
from logging.handlers import RotatingFileHandler

import structlog

from .config.environment import is_production

# Third-party loggers reporting every request, redundant with our own events
NOISY_LOGGERS = ('aiohttp.access', 'aiohttp.client')
JSON_FILE_MAX_BYTES = 10 * 1024 * 1024
JSON_FILE_BACKUPS = 5


def _shared_processors() -> list[structlog.typing.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def _json_formatter(
    shared_processors: list[structlog.typing.Processor],
) -> logging.Formatter:
    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
    )


def _console_formatter(
    shared_processors: list[structlog.typing.Processor],
) -> logging.Formatter:
    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty()),
        ],
    )


def resolve_level(level: int | str) -> int:
    """Turn a level name such as 'debug' into its number, numbers pass through."""
    if isinstance(level, int):
        return level
    name = level.upper()
    if name == 'TRACE':
        # No trace level in the standard library
        name = 'DEBUG'
    try:
        return logging.getLevelNamesMapping()[name]
    except KeyError:
        raise ValueError(f"Unknown log level {level!r}") from None


def configure_logging(
    *,
    level: int | str = logging.INFO,
    json_file: str | None = None,
    disable_stdout: bool = False,
) -> None:
    """
    Route structlog events, and those of the standard library loggers, through
    the root logger handlers.

    Stdout gets a human readable rendering, or one JSON object per line when
    ``ONLYOFFICE_ENV`` is ``production``.

    Parameters
    ----------
    level:
        The minimum log level to output, as a number or a name like 'debug'.
    json_file:
        Path to write JSON-formatted logs to, rotated at 10MB with 5 backups.
    disable_stdout:
        If True, nothing is written to stdout.
    """
    level = resolve_level(level)
    shared_processors = _shared_processors()

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    if not disable_stdout:
        stdout_handler = logging.StreamHandler(sys.stdout)
        if is_production():
            stdout_handler.setFormatter(_json_formatter(shared_processors))
        else:
            stdout_handler.setFormatter(_console_formatter(shared_processors))
        root_logger.addHandler(stdout_handler)

    if json_file is not None:
        file_handler = RotatingFileHandler(
            json_file, maxBytes=JSON_FILE_MAX_BYTES, backupCount=JSON_FILE_BACKUPS
        )
        file_handler.setFormatter(_json_formatter(shared_processors))
        root_logger.addHandler(file_handler)

    root_logger.setLevel(level)
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))
