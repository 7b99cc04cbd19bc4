"""The gateway's tools: LikeMinds query, Flutter code generation, and add.

Each handler validates its arguments with a pydantic model, calls the
upstream client, and formats the reply. Any failure is logged and returned
as ``"<prefix>: <message>"`` text instead of being raised.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel

from likeminds_mcp.protocol.models import ToolResult
from likeminds_mcp.tools.formatters import format_flutter_response, format_response
from likeminds_mcp.tools.registry import ToolRegistry, ToolSpec

if TYPE_CHECKING:
    from likeminds_mcp.upstream.client import LikeMindsClient

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Argument models
# ---------------------------------------------------------------------------


class LikeMindsQueryArgs(BaseModel):
    query: str
    context: str | None = None


class FlutterChatArgs(BaseModel):
    user_query: str


class AddArgs(BaseModel):
    a: float
    b: float


# ---------------------------------------------------------------------------
# Input schemas advertised by ``tools/list``
# ---------------------------------------------------------------------------

LIKEMINDS_QUERY_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "query": {
            "type": "string",
            "description": "Your question about LikeMinds chat SDK integration",
        },
        "context": {
            "type": "string",
            "description": "Additional context (platform, specific issue, etc.)",
        },
    },
    "required": ["query"],
}

FLUTTER_CHAT_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "user_query": {
            "type": "string",
            "description": "Request for Flutter chat SDK integration",
        },
    },
    "required": ["user_query"],
}

ADD_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "a": {"type": "number", "description": "First number"},
        "b": {"type": "number", "description": "Second number"},
    },
    "required": ["a", "b"],
}


def format_number(value: float) -> str:
    """Render a number the way JSON writes it (``5``, not ``5.0``)."""
    if math.isfinite(value) and value.is_integer():
        return str(int(value))
    return repr(value)


def _preview(text: str, limit: int = 80) -> str:
    return text[:limit]


def build_registry(client: LikeMindsClient) -> ToolRegistry:
    """Build the gateway's tool registry, bound to *client*."""

    async def likeminds_query(arguments: dict[str, Any]) -> ToolResult:
        try:
            args = LikeMindsQueryArgs.model_validate(arguments)
            logger.info('likeminds_query: "%s"', _preview(args.query))
            response = await client.query_ai_agent(args.query, args.context)
            return ToolResult.from_text(format_response(response))
        except Exception as exc:
            logger.exception("likeminds_query failed")
            return ToolResult.from_text(f"Error querying LikeMinds AI Agent: {exc}")

    async def flutter_chat_integration(arguments: dict[str, Any]) -> ToolResult:
        try:
            args = FlutterChatArgs.model_validate(arguments)
            logger.info('flutter_chat_integration: "%s"', _preview(args.user_query))
            response = await client.generate_flutter_code(args.user_query)
            return ToolResult.from_text(format_flutter_response(response))
        except Exception as exc:
            logger.exception("flutter_chat_integration failed")
            return ToolResult.from_text(
                f"Error generating Flutter chat integration code: {exc}"
            )

    async def add(arguments: dict[str, Any]) -> ToolResult:
        try:
            args = AddArgs.model_validate(arguments)
            text = (
                f"The sum of {format_number(args.a)} and {format_number(args.b)}"
                f" is {format_number(args.a + args.b)}"
            )
            logger.info("add: %s", text)
            return ToolResult.from_text(text)
        except Exception as exc:
            logger.exception("add failed")
            return ToolResult.from_text(f"Error adding numbers: {exc}")

    return ToolRegistry([
        ToolSpec(
            name="likeminds_query",
            description="Query LikeMinds AI Agent for chat SDK integration help",
            input_schema=LIKEMINDS_QUERY_SCHEMA,
            handler=likeminds_query,
        ),
        ToolSpec(
            name="flutter_chat_integration",
            description="Generate Flutter code for integrating LikeMinds chat SDK",
            input_schema=FLUTTER_CHAT_SCHEMA,
            handler=flutter_chat_integration,
        ),
        ToolSpec(
            name="add",
            description="Add two numbers together",
            input_schema=ADD_SCHEMA,
            handler=add,
        ),
    ])
