"""MCP models — JSON-RPC 2.0 messages, tool definitions and tool results.

Implements the message format used by the Model Context Protocol for the
handshake (``initialize``), tool discovery (``tools/list``) and execution
(``tools/call``).
"""

from __future__ import annotations

from enum import IntEnum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, StrictStr

PROTOCOL_VERSION = "2025-06-18"

RequestId = StrictStr | StrictInt | StrictFloat | None

# ---------------------------------------------------------------------------
# JSON-RPC 2.0 envelope
# ---------------------------------------------------------------------------


class ErrorCode(IntEnum):
    """JSON-RPC error codes returned by the gateway."""

    PARSE_ERROR = -32700
    INVALID_REQUEST = -32600
    METHOD_NOT_FOUND = -32601
    INTERNAL_ERROR = -32603
    SERVER_ERROR = -32000


class JsonRpcRequest(BaseModel):
    """A JSON-RPC 2.0 request message."""

    jsonrpc: str = "2.0"
    method: StrictStr
    id: RequestId = None
    params: dict[str, Any] | None = None


class JsonRpcError(BaseModel):
    """A JSON-RPC 2.0 error object."""

    code: int
    message: str
    data: Any = None


class JsonRpcResponse(BaseModel):
    """A JSON-RPC 2.0 response message.

    Carries exactly one of ``result`` or ``error``; use :meth:`success` and
    :meth:`failure` to build one.
    """

    jsonrpc: str = "2.0"
    result: dict[str, Any] | None = None
    error: JsonRpcError | None = None
    id: RequestId = None

    @classmethod
    def success(cls, request_id: RequestId, result: dict[str, Any]) -> JsonRpcResponse:
        return cls(result=result, id=request_id)

    @classmethod
    def failure(
        cls,
        request_id: RequestId,
        code: int,
        message: str,
        data: Any = None,
    ) -> JsonRpcResponse:
        return cls(error=JsonRpcError(code=int(code), message=message, data=data), id=request_id)

    def to_wire(self) -> dict[str, Any]:
        """Serialize for the wire: ``id`` is always present, ``error.data`` only when set."""
        payload: dict[str, Any] = {"jsonrpc": self.jsonrpc}
        if self.error is not None:
            payload["error"] = self.error.model_dump(exclude_none=True)
        else:
            payload["result"] = self.result if self.result is not None else {}
        payload["id"] = self.id
        return payload


# ---------------------------------------------------------------------------
# MCP-specific payloads
# ---------------------------------------------------------------------------


class InitializeParams(BaseModel):
    """Parameters of an ``initialize`` request (only the version is inspected)."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    protocol_version: Any = Field(default=None, alias="protocolVersion")


class ToolCallParams(BaseModel):
    """Parameters of a ``tools/call`` request.

    ``arguments`` is checked only after ``name`` resolves to a registered tool.
    """

    name: StrictStr
    arguments: Any = None


class MCPToolDef(BaseModel):
    """A tool definition as returned by ``tools/list``."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    description: str = ""
    input_schema: dict[str, Any] = Field(default_factory=dict, alias="inputSchema")


class TextContent(BaseModel):
    """Plain text content part."""

    type: Literal["text"] = "text"
    text: str


class ToolResult(BaseModel):
    """The result of executing a tool; always holds at least one content part."""

    content: list[TextContent] = Field(min_length=1)

    @classmethod
    def from_text(cls, text: str) -> ToolResult:
        """Create a ToolResult with a single text content part."""
        return cls(content=[TextContent(text=text)])

    @property
    def text(self) -> str:
        """Concatenated text of all content parts."""
        return "".join(part.text for part in self.content)


class ServerInfo(BaseModel):
    """Server identity reported by ``initialize``."""

    model_config = ConfigDict(frozen=True)

    name: str
    version: str
