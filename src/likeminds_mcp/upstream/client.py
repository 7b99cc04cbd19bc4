"""LikeMindsClient — HTTP client for the LikeMinds AI service."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import httpx

from likeminds_mcp.errors import (
    UpstreamConnectionError,
    UpstreamError,
    UpstreamHTTPError,
    UpstreamTimeoutError,
)

logger = logging.getLogger(__name__)

REQUEST_TIMEOUT = 30.0

QUERY_PATH = "/ai-agent/query"
FLUTTER_PATH = "/api/ai-query"


class LikeMindsClient:
    """Posts JSON payloads to the LikeMinds API and returns the parsed reply.

    One attempt per call, bounded by :data:`REQUEST_TIMEOUT`. Safe to share
    across concurrent requests.

    Usage::

        async with LikeMindsClient("http://localhost:8000") as client:
            payload = await client.query_ai_agent("How do I add chat?", "android")
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = REQUEST_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url
        self._timeout = timeout
        self._client = httpx.AsyncClient(
            headers={"Content-Type": "application/json"},
            timeout=timeout,
            transport=transport,
        )
        logger.info("LikeMindsClient base URL: %s", base_url)

    @property
    def base_url(self) -> str:
        return self._base_url

    async def __aenter__(self) -> LikeMindsClient:
        return self

    async def __aexit__(self, *_: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Release the underlying connection pool."""
        await self._client.aclose()

    async def query_ai_agent(self, query: str, context: str | None = None) -> Any:
        """Ask the LikeMinds AI agent a chat SDK question.

        ``context`` is left out of the payload when not given.
        """
        payload: dict[str, Any] = {"query": query}
        if context is not None:
            payload["context"] = context
        return await self.post(QUERY_PATH, payload)

    async def generate_flutter_code(self, user_query: str) -> Any:
        """Request generated Flutter integration code."""
        return await self.post(FLUTTER_PATH, {"user_query": user_query})

    async def post(self, path: str, payload: Any) -> Any:
        """POST *payload* as JSON to ``base_url + path`` and return the decoded body.

        Raises
        ------
        UpstreamTimeoutError
            No complete response within the timeout (the whole call, not each read).
        UpstreamHTTPError
            Non-2xx status; carries the status code and response text.
        UpstreamConnectionError
            Any other transport failure.
        UpstreamError
            The response body is not valid JSON.
        """
        url = f"{self._base_url}{path}"
        logger.info("-> POST %s", path)
        try:
            async with asyncio.timeout(self._timeout):
                response = await self._client.post(url, json=payload)
        except (httpx.TimeoutException, TimeoutError) as exc:
            raise UpstreamTimeoutError(url, self._timeout) from exc
        except httpx.HTTPError as exc:
            raise UpstreamConnectionError(str(exc) or type(exc).__name__) from exc

        if not response.is_success:
            raise UpstreamHTTPError(response.status_code, _safe_text(response))

        try:
            return response.json()
        except ValueError as exc:
            msg = f"Invalid JSON in response from {url}"
            raise UpstreamError(msg) from exc


def _safe_text(response: httpx.Response) -> str:
    try:
        return response.text
    except (UnicodeDecodeError, LookupError):
        return ""
