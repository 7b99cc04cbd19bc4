"""``likeminds-mcp tools`` — inspect and invoke the registered tools."""

from __future__ import annotations

import asyncio
import json
import sys
from typing import Any

import click

from likeminds_mcp.cli_commands._output import (
    configure_logging,
    console,
    err_console,
    print_tools_table,
)
from likeminds_mcp.config import Settings, load_settings
from likeminds_mcp.errors import ConfigError


def _settings() -> Settings:
    try:
        return load_settings()
    except ConfigError as exc:
        err_console.print(f"[red]Configuration error:[/red] {exc}")
        sys.exit(1)


@click.group()
def tools() -> None:
    """Inspect and invoke tools."""


@tools.command("list")
def list_tools() -> None:
    """List the tools served by the gateway."""
    from likeminds_mcp.tools.builtin import build_registry
    from likeminds_mcp.upstream.client import LikeMindsClient

    settings = _settings()

    async def _list() -> None:
        async with LikeMindsClient(settings.likeminds_api_url) as client:
            print_tools_table(build_registry(client))

    asyncio.run(_list())


@tools.command("call")
@click.argument("name")
@click.option("--args", "raw_args", default="{}", help="Tool arguments as a JSON object.")
def call(name: str, raw_args: str) -> None:
    """Invoke tool NAME against the configured LikeMinds API and print the result."""
    from likeminds_mcp.tools.builtin import build_registry
    from likeminds_mcp.upstream.client import LikeMindsClient

    try:
        arguments: Any = json.loads(raw_args)
    except ValueError as exc:
        err_console.print(f"[red]Invalid --args JSON:[/red] {exc}")
        sys.exit(1)
    if not isinstance(arguments, dict):
        err_console.print("[red]Invalid --args JSON:[/red] expected an object")
        sys.exit(1)

    settings = _settings()
    configure_logging(settings.log_level)

    async def _call() -> str | None:
        async with LikeMindsClient(settings.likeminds_api_url) as client:
            tool = build_registry(client).get(name)
            if tool is None:
                return None
            result = await tool.handler(arguments)
            return result.text

    text = asyncio.run(_call())
    if text is None:
        err_console.print(f"[red]Tool not found:[/red] {name}")
        sys.exit(1)
    console.print(text, markup=False, highlight=False, soft_wrap=True)
