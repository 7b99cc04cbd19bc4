"""Upstream layer — client for the LikeMinds AI service."""

from likeminds_mcp.upstream.client import REQUEST_TIMEOUT, LikeMindsClient

__all__ = ["REQUEST_TIMEOUT", "LikeMindsClient"]
