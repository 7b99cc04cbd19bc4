"""Tool layer — registry, built-in tools and response formatters."""

from likeminds_mcp.tools.builtin import build_registry
from likeminds_mcp.tools.formatters import format_flutter_response, format_response
from likeminds_mcp.tools.registry import ToolHandler, ToolRegistry, ToolSpec

__all__ = [
    "ToolHandler",
    "ToolRegistry",
    "ToolSpec",
    "build_registry",
    "format_flutter_response",
    "format_response",
]
