"""McpDispatcher — turns one inbound JSON-RPC message into one response envelope.

Routing::

    initialize       -> handshake (protocol version must match exactly)
    tools/list       -> registry descriptors, registration order
    tools/call       -> registry lookup + handler
    resources/list   -> {"resources": []}
    prompts/list     -> {"prompts": []}
    anything else    -> -32601

Every outcome is a well-formed envelope; protocol errors are answered with
HTTP 200, a body that is not a JSON object with 400, and unexpected faults
with 500.
"""

from __future__ import annotations

import asyncio
import logging
import uuid
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from likeminds_mcp.errors import InvalidParamsError, ToolNotFoundError
from likeminds_mcp.protocol.models import (
    PROTOCOL_VERSION,
    ErrorCode,
    InitializeParams,
    JsonRpcRequest,
    JsonRpcResponse,
    RequestId,
    ServerInfo,
    ToolCallParams,
)

if TYPE_CHECKING:
    from likeminds_mcp.tools.registry import ToolRegistry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DispatchOutcome:
    """A response envelope plus the HTTP status it should be sent with."""

    response: JsonRpcResponse
    status_code: int = 200
    session_id: str | None = None


MethodHandler = Callable[[JsonRpcRequest], Awaitable[DispatchOutcome]]


def extract_id(body: Any) -> RequestId:
    """Best-effort request id from a raw body; ``None`` if absent or of an illegal type."""
    if not isinstance(body, dict):
        return None
    value = body.get("id")
    if isinstance(value, bool) or not isinstance(value, str | int | float):
        return None
    return value


def describe_validation_error(exc: ValidationError) -> str:
    """Flatten a pydantic error into ``field: message`` pairs."""
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc']) or '<root>'}: {err['msg']}"
        for err in exc.errors()
    )


class McpDispatcher:
    """Routes MCP methods to their handlers and builds the reply envelope.

    Holds no per-session state: the session id minted by ``initialize`` is
    logged and returned but never required afterwards.

    Usage::

        dispatcher = McpDispatcher(registry, ServerInfo(name="gw", version="1.0.0"))
        outcome = await dispatcher.dispatch({"jsonrpc": "2.0", "id": 1, "method": "tools/list"})
        outcome.response.to_wire()
    """

    def __init__(self, registry: ToolRegistry, server_info: ServerInfo) -> None:
        self._registry = registry
        self._server_info = server_info
        self._methods: dict[str, MethodHandler] = {
            "initialize": self._initialize,
            "tools/list": self._tools_list,
            "tools/call": self._tools_call,
            "resources/list": self._resources_list,
            "prompts/list": self._prompts_list,
        }

    @property
    def methods(self) -> list[str]:
        return list(self._methods)

    async def dispatch(self, body: Any) -> DispatchOutcome:
        """Process one decoded request body. Never raises."""
        if not isinstance(body, dict):
            return DispatchOutcome(
                JsonRpcResponse.failure(None, ErrorCode.PARSE_ERROR, "Parse error: Invalid JSON"),
                status_code=400,
            )
        try:
            return await self._dispatch(body)
        except Exception as exc:
            logger.exception("Unhandled error while processing MCP message")
            return DispatchOutcome(
                JsonRpcResponse.failure(
                    extract_id(body),
                    ErrorCode.INTERNAL_ERROR,
                    "Internal server error",
                    data=str(exc),
                ),
                status_code=500,
            )

    async def _dispatch(self, body: dict[str, Any]) -> DispatchOutcome:
        try:
            request = JsonRpcRequest.model_validate(body)
        except ValidationError as exc:
            return _error(
                extract_id(body),
                ErrorCode.INVALID_REQUEST,
                "Invalid Request",
                data=describe_validation_error(exc),
            )

        handler = self._methods.get(request.method)
        if handler is None:
            return _error(
                request.id, ErrorCode.METHOD_NOT_FOUND, f"Method not found: {request.method}"
            )
        return await handler(request)

    # ------------------------------------------------------------------
    # Methods
    # ------------------------------------------------------------------

    async def _initialize(self, request: JsonRpcRequest) -> DispatchOutcome:
        params = InitializeParams.model_validate(request.params or {})
        if params.protocol_version != PROTOCOL_VERSION:
            return _error(
                request.id,
                ErrorCode.SERVER_ERROR,
                f"Invalid protocolVersion: expected {PROTOCOL_VERSION}, "
                f"got {params.protocol_version}",
            )

        session_id = str(uuid.uuid4())
        logger.info("Session initialized: %s", session_id)
        result = {
            "protocolVersion": PROTOCOL_VERSION,
            "capabilities": {"tools": {}, "resources": {}, "prompts": {}},
            "serverInfo": self._server_info.model_dump(),
        }
        return DispatchOutcome(JsonRpcResponse.success(request.id, result), session_id=session_id)

    async def _tools_list(self, request: JsonRpcRequest) -> DispatchOutcome:
        tools = [tool.model_dump(by_alias=True) for tool in self._registry.descriptors()]
        return DispatchOutcome(JsonRpcResponse.success(request.id, {"tools": tools}))

    async def _tools_call(self, request: JsonRpcRequest) -> DispatchOutcome:
        try:
            params = _tool_call_params(request.params)
            tool = self._registry.get(params.name)
            if tool is None:
                raise ToolNotFoundError(params.name)
            arguments = _tool_arguments(params.arguments)
            # The upstream call runs to completion even if the client goes away.
            result = await asyncio.shield(tool.handler(arguments))
        except ToolNotFoundError as exc:
            return _error(request.id, ErrorCode.METHOD_NOT_FOUND, str(exc))
        except Exception as exc:
            logger.warning("tools/call failed: %s", exc)
            return _error(request.id, ErrorCode.SERVER_ERROR, str(exc) or "Tool execution failed")
        return DispatchOutcome(JsonRpcResponse.success(request.id, result.model_dump()))

    async def _resources_list(self, request: JsonRpcRequest) -> DispatchOutcome:
        return DispatchOutcome(JsonRpcResponse.success(request.id, {"resources": []}))

    async def _prompts_list(self, request: JsonRpcRequest) -> DispatchOutcome:
        return DispatchOutcome(JsonRpcResponse.success(request.id, {"prompts": []}))


def _tool_call_params(params: dict[str, Any] | None) -> ToolCallParams:
    if params is None:
        msg = "tools/call requires params with 'name' and 'arguments'"
        raise InvalidParamsError(msg)
    try:
        return ToolCallParams.model_validate(params)
    except ValidationError as exc:
        msg = f"Invalid tools/call params: {describe_validation_error(exc)}"
        raise InvalidParamsError(msg) from exc


def _tool_arguments(arguments: Any) -> dict[str, Any]:
    if arguments is None:
        msg = "Invalid tools/call params: arguments: Field required"
        raise InvalidParamsError(msg)
    if not isinstance(arguments, dict):
        msg = "Invalid tools/call params: arguments: Input should be a valid dictionary"
        raise InvalidParamsError(msg)
    return arguments


def _error(request_id: RequestId, code: int, message: str, data: Any = None) -> DispatchOutcome:
    return DispatchOutcome(JsonRpcResponse.failure(request_id, code, message, data))
