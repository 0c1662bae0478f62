# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Scipp contributors (https://github.com/scipp)
import json
import logging

import pytest
import structlog

from tdrive.onlyoffice.logging_config import configure_logging, resolve_level


@pytest.fixture
def restore_logging():
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield
    for handler in root_logger.handlers:
        handler.close()
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)
    logging.getLogger('aiohttp.access').setLevel(logging.NOTSET)
    logging.getLogger('aiohttp.client').setLevel(logging.NOTSET)
    structlog.reset_defaults()


@pytest.mark.usefixtures('restore_logging')
def test_level_by_name():
    configure_logging(level='debug', disable_stdout=True)

    assert logging.getLogger().level == logging.DEBUG
    assert logging.getLogger().handlers == []
    assert logging.getLogger('aiohttp.access').level == logging.WARNING


@pytest.mark.usefixtures('restore_logging')
def test_json_file_receives_events(tmp_path):
    path = tmp_path / 'connector.jsonl'
    configure_logging(json_file=str(path), disable_stdout=True)

    structlog.get_logger('json-test').info('forgotten_documents_found', count=3)
    for handler in logging.getLogger().handlers:
        handler.flush()

    record = json.loads(path.read_text().splitlines()[-1])
    assert record['event'] == 'forgotten_documents_found'
    assert record['count'] == 3
    assert record['level'] == 'info'


@pytest.mark.usefixtures('restore_logging')
def test_production_writes_json_to_stdout(monkeypatch, capsys):
    monkeypatch.setenv('ONLYOFFICE_ENV', 'production')
    configure_logging()

    structlog.get_logger('production-test').warning('onlyoffice_unreachable')

    record = json.loads(capsys.readouterr().out.splitlines()[-1])
    assert record['event'] == 'onlyoffice_unreachable'
    assert record['level'] == 'warning'


@pytest.mark.parametrize(
    ('name', 'expected'),
    [
        ('debug', logging.DEBUG),
        ('INFO', logging.INFO),
        ('trace', logging.DEBUG),
        (logging.ERROR, logging.ERROR),
    ],
)
def test_resolve_level(name, expected):
    assert resolve_level(name) == expected


def test_resolve_unknown_level():
    with pytest.raises(ValueError, match='loud'):
        resolve_level('loud')
