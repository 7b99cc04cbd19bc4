"""CLI subcommands: ``serve`` runs the gateway, ``tools`` inspects and calls tools."""

from __future__ import annotations

from likeminds_mcp.cli_commands.serve import serve
from likeminds_mcp.cli_commands.tools import tools

COMMANDS = [serve, tools]

__all__ = ["COMMANDS", "serve", "tools"]
