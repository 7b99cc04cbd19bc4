"""likeminds-mcp CLI entrypoint."""

from __future__ import annotations

import click

from likeminds_mcp import __version__
from likeminds_mcp.cli_commands import COMMANDS


@click.group(commands=COMMANDS)
@click.version_option(version=__version__, prog_name="likeminds-mcp")
def main() -> None:
    """likeminds-mcp: MCP gateway for the LikeMinds AI service."""


if __name__ == "__main__":
    main()
