"""``likeminds-mcp serve`` — run the HTTP gateway."""

from __future__ import annotations

import sys

import click

from likeminds_mcp.cli_commands._output import configure_logging, err_console
from likeminds_mcp.errors import ConfigError


@click.command()
@click.option("--host", default=None, help="Interface to bind (overrides HOST).")
@click.option(
    "--port",
    type=click.IntRange(1, 65535),
    default=None,
    help="Port to listen on (overrides PORT).",
)
@click.option(
    "--log-level",
    type=click.Choice(["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"], case_sensitive=False),
    default=None,
    help="Log level (overrides LOG_LEVEL).",
)
def serve(host: str | None, port: int | None, log_level: str | None) -> None:
    """Serve MCP over HTTP on POST /mcp."""
    from likeminds_mcp.config import load_settings
    from likeminds_mcp.server import serve as run_server

    try:
        settings = load_settings()
    except ConfigError as exc:
        err_console.print(f"[red]Configuration error:[/red] {exc}")
        sys.exit(1)

    overrides: dict[str, object] = {}
    if host is not None:
        overrides["host"] = host
    if port is not None:
        overrides["port"] = port
    if log_level is not None:
        overrides["log_level"] = log_level.upper()
    if overrides:
        settings = settings.model_copy(update=overrides)

    configure_logging(settings.log_level)
    run_server(settings)
