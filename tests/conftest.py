"""Shared fixtures: settings and an upstream client backed by a mock transport."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import httpx
import pytest

from likeminds_mcp.config import Settings
from likeminds_mcp.upstream.client import LikeMindsClient

UPSTREAM_URL = "http://upstream.test"

UpstreamHandler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture
def settings() -> Settings:
    return Settings(
        server_name="test-gateway",
        server_version="9.9.9",
        likeminds_api_url=UPSTREAM_URL,
    )


@pytest.fixture
def make_client() -> Callable[[UpstreamHandler], LikeMindsClient]:
    """Factory for a :class:`LikeMindsClient` whose requests go to *handler*."""

    def _make(handler: UpstreamHandler) -> LikeMindsClient:
        return LikeMindsClient(UPSTREAM_URL, transport=httpx.MockTransport(handler))

    return _make


@pytest.fixture
def query_payload() -> dict[str, Any]:
    return {
        "success": True,
        "data": {
            "answer": "Use the LMChat SDK.",
            "code_examples": [
                {"language": "kotlin", "code": "LMChat.init()", "description": "Init"},
            ],
            "documentation_links": [{"title": "Docs", "url": "https://docs.example.com"}],
        },
    }


@pytest.fixture
def flutter_payload() -> dict[str, Any]:
    return {
        "result": {
            "choices": [{"message": {"content": "class ChatScreen {}"}}],
            "metadata": {
                "description": "A chat screen",
                "suggestedInsertion": {
                    "filePathHint": "lib/chat_screen.dart",
                    "widgetPlacement": "Inside MaterialApp",
                    "dependencies": ["likeminds_chat_flutter_core"],
                    "preconditions": ["Flutter 3.10+"],
                },
            },
        }
    }
