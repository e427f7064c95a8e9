"""Unit tests for the command line entry point."""

from unittest.mock import Mock

import pytest
from click.testing import CliRunner
from pydantic import ValidationError

import everfit_app.__main__ as cli
from everfit_app.platform.server.exceptions import StartupBindError


@pytest.fixture
def mock_serve(monkeypatch: pytest.MonkeyPatch) -> Mock:
    monkeypatch.delenv("PORT", raising=False)
    monkeypatch.setattr(cli, "configure_logging", Mock())
    monkeypatch.setattr(cli, "initialize_bugsnag", Mock())
    serve = Mock()
    monkeypatch.setattr(cli, "serve", serve)
    return serve


def test_main_serves(mock_serve: Mock):
    result = CliRunner().invoke(cli.main, [])

    assert result.exit_code == 0
    settings = mock_serve.call_args.args[0]
    assert settings.bind_port == 3000
    assert mock_serve.call_args.kwargs == {"reload": False}


def test_main_reload_flag(mock_serve: Mock):
    result = CliRunner().invoke(cli.main, ["--reload"])

    assert result.exit_code == 0
    assert mock_serve.call_args.kwargs == {"reload": True}


def test_bind_failure_exits_nonzero(mock_serve: Mock):
    mock_serve.side_effect = StartupBindError("Address already in use", host="0.0.0.0", port=3000)

    result = CliRunner().invoke(cli.main, [])

    assert result.exit_code == 1
    assert "Cannot bind 0.0.0.0:3000" in result.output


def test_invalid_port_exits_nonzero(mock_serve: Mock):
    result = CliRunner().invoke(cli.main, [], env={"PORT": "abc"})

    assert result.exit_code == 1
    assert "invalid port value" in result.output
    mock_serve.assert_not_called()


def test_invalid_setting_exits_nonzero(mock_serve: Mock):
    result = CliRunner().invoke(cli.main, [], env={"APP_HTTP__LOG_LEVEL": "LOUD"})

    assert result.exit_code == 1
    assert "log_level" in result.output
    assert not isinstance(result.exception, ValidationError)
    mock_serve.assert_not_called()
