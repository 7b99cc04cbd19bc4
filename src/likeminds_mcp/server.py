"""HTTP surface — FastAPI app serving MCP over ``POST /mcp``.

Endpoints:
  GET  /health -> "ok"
  POST /mcp    -> one JSON-RPC 2.0 message in, one envelope out

Run:
  likeminds-mcp serve   (uses uvicorn programmatically)
"""

from __future__ import annotations

import json
import logging
import math
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any, NoReturn

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse

from likeminds_mcp.config import Settings
from likeminds_mcp.protocol.dispatcher import McpDispatcher
from likeminds_mcp.protocol.models import ServerInfo
from likeminds_mcp.tools.builtin import build_registry
from likeminds_mcp.upstream.client import LikeMindsClient

logger = logging.getLogger(__name__)

SESSION_HEADER = "Mcp-Session-Id"


def _reject_constant(token: str) -> NoReturn:
    msg = f"Invalid JSON constant: {token}"
    raise ValueError(msg)


def _finite_float(token: str) -> float:
    value = float(token)
    if not math.isfinite(value):
        msg = f"Number out of range: {token}"
        raise ValueError(msg)
    return value


async def _read_json(request: Request) -> Any:
    """Decode the request body; ``None`` when it is empty or not strict JSON.

    ``NaN``, ``Infinity`` and numbers that overflow to infinity count as not JSON.
    """
    raw = await request.body()
    if not raw:
        return None
    try:
        return json.loads(raw, parse_constant=_reject_constant, parse_float=_finite_float)
    except ValueError:
        return None


def create_app(settings: Settings, *, client: LikeMindsClient | None = None) -> FastAPI:
    """Build the gateway app.

    The upstream client and tool registry are created here, before the
    listener accepts traffic, and the client is closed on shutdown.
    """
    upstream = client or LikeMindsClient(settings.likeminds_api_url)
    registry = build_registry(upstream)
    dispatcher = McpDispatcher(
        registry,
        ServerInfo(name=settings.server_name, version=settings.server_version),
    )

    @asynccontextmanager
    async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
        yield
        await upstream.aclose()

    app = FastAPI(title=settings.server_name, version=settings.server_version, lifespan=lifespan)
    app.state.settings = settings
    app.state.registry = registry
    app.state.dispatcher = dispatcher

    @app.get("/health", response_class=PlainTextResponse)
    async def health() -> str:
        return "ok"

    @app.post("/mcp")
    async def mcp(request: Request) -> JSONResponse:
        body = await _read_json(request)
        outcome = await dispatcher.dispatch(body)
        headers = {SESSION_HEADER: outcome.session_id} if outcome.session_id else None
        return JSONResponse(
            outcome.response.to_wire(),
            status_code=outcome.status_code,
            headers=headers,
        )

    return app


def serve(settings: Settings) -> None:
    """Run the gateway with uvicorn until interrupted."""
    logger.info("Server Name: %s", settings.server_name)
    logger.info("Server Version: %s", settings.server_version)
    logger.info("LikeMinds API URL: %s", settings.likeminds_api_url)
    logger.info("MCP HTTP server listening on http://%s:%d", settings.host, settings.port)
    logger.info("  POST /mcp     (JSON-RPC MCP messages)")
    logger.info("  GET  /health  (health check)")
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        log_config=None,
    )
