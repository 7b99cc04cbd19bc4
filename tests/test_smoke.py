"""Smoke test to verify the project scaffolding works."""

from __future__ import annotations


def test_import() -> None:
    import likeminds_mcp

    assert likeminds_mcp.__version__ == "1.0.0"


def test_cli_entrypoint() -> None:
    from likeminds_mcp.cli import main

    assert callable(main)


def test_package_exports() -> None:
    from likeminds_mcp.protocol import McpDispatcher, ToolResult
    from likeminds_mcp.tools import ToolRegistry, build_registry
    from likeminds_mcp.upstream import LikeMindsClient

    assert McpDispatcher is not None
    assert ToolResult is not None
    assert ToolRegistry is not None
    assert build_registry is not None
    assert LikeMindsClient is not None
