"""Shared CLI output helpers."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

if TYPE_CHECKING:
    from likeminds_mcp.tools.registry import ToolRegistry

console = Console()
err_console = Console(stderr=True)


def configure_logging(level: str = "INFO") -> None:
    """Route all log records through a rich handler on stderr."""
    logging.basicConfig(
        level=level,
        format="%(name)s: %(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, rich_tracebacks=True, show_path=False)],
        force=True,
    )


def print_tools_table(registry: ToolRegistry) -> None:
    """Pretty-print the registered tools as a table."""
    table = Table(title="Registered Tools")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Description")
    table.add_column("Required")

    for tool in registry:
        table.add_row(tool.name, _truncate(tool.description), ", ".join(tool.required) or "-")

    console.print(table)


def _truncate(text: str, max_len: int = 80) -> str:
    if len(text) <= max_len:
        return text
    return text[: max_len - 3] + "..."
