"""Protocol layer — MCP JSON-RPC models and the request dispatcher."""

from likeminds_mcp.protocol.dispatcher import DispatchOutcome, McpDispatcher
from likeminds_mcp.protocol.models import (
    PROTOCOL_VERSION,
    ErrorCode,
    JsonRpcError,
    JsonRpcRequest,
    JsonRpcResponse,
    MCPToolDef,
    ServerInfo,
    TextContent,
    ToolResult,
)

__all__ = [
    "PROTOCOL_VERSION",
    "DispatchOutcome",
    "ErrorCode",
    "JsonRpcError",
    "JsonRpcRequest",
    "JsonRpcResponse",
    "MCPToolDef",
    "McpDispatcher",
    "ServerInfo",
    "TextContent",
    "ToolResult",
]
