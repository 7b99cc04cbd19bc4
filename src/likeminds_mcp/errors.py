"""Shared error types for the gateway."""

from __future__ import annotations


class GatewayError(Exception):
    """Base error for all gateway failures."""


class ConfigError(GatewayError):
    """The environment configuration is invalid."""


class UpstreamError(GatewayError):
    """A call to the LikeMinds API failed."""


class UpstreamConnectionError(UpstreamError):
    """The LikeMinds API could not be reached."""


class UpstreamTimeoutError(UpstreamError):
    """The LikeMinds API did not answer within the request timeout."""

    def __init__(self, url: str, timeout: float) -> None:
        self.url = url
        self.timeout = timeout
        super().__init__(f"Request to {url} timed out after {timeout}s")


class UpstreamHTTPError(UpstreamError):
    """The LikeMinds API answered with a non-success status."""

    def __init__(self, status_code: int, body: str = "") -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(f"HTTP {status_code}: {body}")


class ToolNotFoundError(GatewayError):
    """Requested tool does not exist in the registry."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Tool not found: {name}")


class InvalidParamsError(GatewayError):
    """The parameters of a protocol call are malformed."""
