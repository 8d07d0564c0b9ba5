"""Tests for the cfpulse CLI commands."""

import json
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from cf.models import ApplicationSummary
from cfpulse.server_settings import ServerSettings
from cli import app
from cli.common import DetachedClient
from conftest import make_platform_client


@pytest.fixture(autouse=True)
def no_logging_setup():
    """Leave logging to pytest so command output stays clean."""
    with patch("cli.setup_logging"):
        yield


@pytest.fixture
def runner():
    """Create a CLI runner for testing."""
    return CliRunner()


@pytest.fixture
def platform_client_factory():
    client = make_platform_client()
    with patch("cli.common.build_client", return_value=client):
        yield client


def test_help_lists_commands(runner):
    result = runner.invoke(app, ["--help"])

    assert result.exit_code == 0
    for command in ("serve", "tools", "call"):
        assert command in result.output


def test_tools_prints_table_without_connecting(runner, monkeypatch):
    monkeypatch.setenv("CF_HTTP_TIMEOUT", "soon")

    with patch("cli.common.build_client") as build_client:
        result = runner.invoke(app, ["tools"])

    assert result.exit_code == 0
    assert "applicationsList" in result.stdout
    assert "deleteServiceKey" in result.stdout
    build_client.assert_not_called()


def test_detached_client_refuses_platform_calls():
    with pytest.raises(RuntimeError, match="list_applications"):
        DetachedClient().list_applications


def test_call_with_invalid_settings_exits_with_two(runner, monkeypatch):
    monkeypatch.setenv("CF_HTTP_TIMEOUT", "soon")

    result = runner.invoke(app, ["call", "applicationsList"])

    assert result.exit_code == 2
    assert "isError" not in result.stdout
    assert not isinstance(result.exception, ValueError)


def test_call_prints_success_envelope(runner, platform_client_factory):
    platform_client_factory.list_applications.return_value = [
        ApplicationSummary(id="1", name="demo", state="STARTED")
    ]

    result = runner.invoke(app, ["call", "applicationsList"])

    assert result.exit_code == 0
    envelope = json.loads(result.stdout)
    assert envelope["isError"] is False
    assert len(envelope["content"]) == 1
    assert json.loads(envelope["content"][0]["text"])["name"] == "demo"


def test_call_passes_arguments(runner, platform_client_factory):
    result = runner.invoke(app, ["call", "scaleApplication", "--args", '{"name": "demo", "instances": 2}'])

    assert result.exit_code == 0
    assert json.loads(result.stdout)["content"][0]["text"] == "Application 'demo' scaled (instances=2)."


def test_call_failure_exits_with_one(runner, platform_client_factory):
    result = runner.invoke(app, ["call", "startApplication"])

    assert result.exit_code == 1
    envelope = json.loads(result.stdout)
    assert envelope["isError"] is True
    assert "Invalid argument 'name'" in envelope["content"][0]["text"]


@pytest.mark.parametrize("args", ["{not json", "[1, 2]"])
def test_call_rejects_bad_args(runner, platform_client_factory, args):
    result = runner.invoke(app, ["call", "applicationsList", "--args", args])

    assert result.exit_code == 2
    platform_client_factory.list_applications.assert_not_called()


def test_serve_options_override_environment(runner, monkeypatch):
    monkeypatch.setenv("TRANSPORT_MODE", "stdio")
    monkeypatch.setenv("MCP_PORT", "7000")

    with patch("tools.cloud_foundry.server.main") as server_main:
        result = runner.invoke(app, ["serve", "--transport", "sse", "--host", "0.0.0.0"])

    assert result.exit_code == 0
    server_main.assert_called_once_with(ServerSettings(transport="sse", host="0.0.0.0", port=7000))


def test_serve_rejects_unknown_transport(runner):
    with patch("tools.cloud_foundry.server.main") as server_main:
        result = runner.invoke(app, ["serve", "--transport", "smoke-signals"])

    assert result.exit_code == 2
    server_main.assert_not_called()
