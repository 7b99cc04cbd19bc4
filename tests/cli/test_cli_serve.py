"""Tests for ``likeminds-mcp serve``."""

from __future__ import annotations

from unittest.mock import patch

import pytest
from click.testing import CliRunner

from likeminds_mcp import __version__
from likeminds_mcp.cli import main
from likeminds_mcp.config import Settings


class TestServe:
    def test_serve_applies_overrides(self) -> None:
        with (
            patch("likeminds_mcp.config.load_settings", return_value=Settings()),
            patch("likeminds_mcp.server.serve") as mock_serve,
        ):
            runner = CliRunner()
            result = runner.invoke(
                main, ["serve", "--host", "127.0.0.1", "--port", "9000", "--log-level", "debug"]
            )

        assert result.exit_code == 0
        settings = mock_serve.call_args[0][0]
        assert settings.host == "127.0.0.1"
        assert settings.port == 9000
        assert settings.log_level == "DEBUG"

    def test_serve_uses_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PORT", "8181")
        monkeypatch.setenv("SERVER_NAME", "env-gateway")
        with patch("likeminds_mcp.server.serve") as mock_serve:
            runner = CliRunner()
            result = runner.invoke(main, ["serve"])

        assert result.exit_code == 0
        settings = mock_serve.call_args[0][0]
        assert settings.port == 8181
        assert settings.server_name == "env-gateway"

    def test_invalid_configuration_exits(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PORT", "not-a-port")
        with patch("likeminds_mcp.server.serve") as mock_serve:
            runner = CliRunner()
            result = runner.invoke(main, ["serve"])

        assert result.exit_code == 1
        mock_serve.assert_not_called()

    def test_rejects_out_of_range_port(self) -> None:
        runner = CliRunner()
        result = runner.invoke(main, ["serve", "--port", "0"])
        assert result.exit_code == 2


class TestVersion:
    def test_version_option(self) -> None:
        runner = CliRunner()
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


class TestCommandGroup:
    def test_registers_gateway_commands(self) -> None:
        assert sorted(main.commands) == ["serve", "tools"]

    def test_help_lists_commands(self) -> None:
        runner = CliRunner()
        result = runner.invoke(main, ["--help"])
        assert result.exit_code == 0
        assert "serve" in result.output
        assert "tools" in result.output
