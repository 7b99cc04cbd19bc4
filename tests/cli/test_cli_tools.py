"""Tests for ``likeminds-mcp tools`` CLI commands."""

from __future__ import annotations

from unittest.mock import AsyncMock, patch

from click.testing import CliRunner

from likeminds_mcp.cli import main
from likeminds_mcp.errors import UpstreamHTTPError


class TestToolsList:
    def test_lists_registered_tools(self) -> None:
        runner = CliRunner()
        result = runner.invoke(main, ["tools", "list"])

        assert result.exit_code == 0
        assert "likeminds_query" in result.output
        assert "flutter_chat_integration" in result.output
        assert "add" in result.output


class TestToolsCall:
    def test_call_add(self) -> None:
        runner = CliRunner()
        result = runner.invoke(main, ["tools", "call", "add", "--args", '{"a": 2, "b": 3}'])

        assert result.exit_code == 0
        assert "The sum of 2 and 3 is 5" in result.output

    def test_call_upstream_tool(self) -> None:
        with patch(
            "likeminds_mcp.upstream.client.LikeMindsClient.query_ai_agent",
            new=AsyncMock(return_value={"success": True, "data": {"answer": "Use LMChat"}}),
        ):
            runner = CliRunner()
            result = runner.invoke(
                main, ["tools", "call", "likeminds_query", "--args", '{"query": "How?"}']
            )

        assert result.exit_code == 0
        assert "Use LMChat" in result.output

    def test_upstream_failure_is_printed_as_text(self) -> None:
        with patch(
            "likeminds_mcp.upstream.client.LikeMindsClient.generate_flutter_code",
            new=AsyncMock(side_effect=UpstreamHTTPError(500, "down")),
        ):
            runner = CliRunner()
            result = runner.invoke(
                main,
                ["tools", "call", "flutter_chat_integration", "--args", '{"user_query": "x"}'],
            )

        assert result.exit_code == 0
        assert "HTTP 500: down" in result.output

    def test_unknown_tool(self) -> None:
        runner = CliRunner()
        result = runner.invoke(main, ["tools", "call", "nope"])

        assert result.exit_code == 1

    def test_invalid_json_args(self) -> None:
        runner = CliRunner()
        result = runner.invoke(main, ["tools", "call", "add", "--args", "{bad"])

        assert result.exit_code == 1

    def test_non_object_args(self) -> None:
        runner = CliRunner()
        result = runner.invoke(main, ["tools", "call", "add", "--args", "[1, 2]"])

        assert result.exit_code == 1
