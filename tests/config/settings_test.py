# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Scipp contributors (https://github.com/scipp)
import pydantic
import pytest

from tdrive.onlyoffice.config.settings import (
    ConnectorSettings,
    get_env_overrides,
    load_defaults,
    load_settings,
)


def test_packaged_defaults():
    defaults = load_defaults()

    assert defaults['server_url'] is None
    assert defaults['connectivity_check_period'] == 60.0
    assert defaults['request_timeout'] == 10.0


def test_load_settings_from_env():
    settings = load_settings(env={'ONLYOFFICE_SERVER_URL': 'http://ds:8090'})

    assert settings == ConnectorSettings(
        server_url='http://ds:8090',
        connectivity_check_period=60.0,
        request_timeout=10.0,
    )


def test_env_overrides_defaults():
    settings = load_settings(
        env={
            'ONLYOFFICE_SERVER_URL': 'http://ds',
            'ONLYOFFICE_CONNECTIVITY_CHECK_PERIOD': '5.5',
            'ONLYOFFICE_REQUEST_TIMEOUT': '2',
        }
    )

    assert settings.connectivity_check_period == 5.5
    assert settings.request_timeout == 2.0


def test_unrelated_env_vars_are_ignored():
    overrides = get_env_overrides(
        {'ONLYOFFICE_SERVER_URL': 'http://ds', 'SERVER_URL': 'http://other'}
    )

    assert overrides == {'server_url': 'http://ds'}


def test_reads_os_environ_by_default(monkeypatch):
    monkeypatch.setenv('ONLYOFFICE_SERVER_URL', 'http://from-environ')

    assert load_settings().server_url == 'http://from-environ'


def test_missing_server_url_is_an_error():
    with pytest.raises(pydantic.ValidationError):
        load_settings(env={})


@pytest.mark.parametrize('period', ['0', '-3', 'often'])
def test_invalid_period_is_an_error(period):
    with pytest.raises(pydantic.ValidationError):
        load_settings(
            env={
                'ONLYOFFICE_SERVER_URL': 'http://ds',
                'ONLYOFFICE_CONNECTIVITY_CHECK_PERIOD': period,
            }
        )


def test_explicit_overrides_win_over_env():
    settings = load_settings(
        env={
            'ONLYOFFICE_SERVER_URL': 'http://from-env',
            'ONLYOFFICE_REQUEST_TIMEOUT': '2',
        },
        overrides={'server_url': 'http://explicit'},
    )

    assert settings.server_url == 'http://explicit'
    assert settings.request_timeout == 2.0
