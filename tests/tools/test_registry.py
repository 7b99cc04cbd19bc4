"""Tests for ToolRegistry."""

from __future__ import annotations

from typing import Any
from unittest.mock import AsyncMock

import pytest

from likeminds_mcp.protocol.models import ToolResult
from likeminds_mcp.tools.registry import ToolRegistry, ToolSpec


def _make_tool(name: str, required: list[str] | None = None) -> ToolSpec:
    schema: dict[str, Any] = {"type": "object", "properties": {}}
    if required is not None:
        schema["required"] = required
    return ToolSpec(
        name=name,
        description=f"{name} tool",
        input_schema=schema,
        handler=AsyncMock(return_value=ToolResult.from_text("done")),
    )


class TestToolRegistry:
    def test_preserves_registration_order(self) -> None:
        registry = ToolRegistry([_make_tool("b"), _make_tool("a"), _make_tool("c")])
        assert registry.names() == ["b", "a", "c"]
        assert [tool.name for tool in registry] == ["b", "a", "c"]

    def test_get_and_contains(self) -> None:
        tool = _make_tool("alpha")
        registry = ToolRegistry([tool])
        assert registry.get("alpha") is tool
        assert registry.get("missing") is None
        assert "alpha" in registry
        assert "missing" not in registry
        assert len(registry) == 1

    def test_duplicate_names_rejected(self) -> None:
        with pytest.raises(ValueError, match="Duplicate tool name: x"):
            ToolRegistry([_make_tool("x"), _make_tool("x")])

    def test_descriptors_use_input_schema_alias(self) -> None:
        registry = ToolRegistry([_make_tool("alpha", required=["q"])])
        dumped = [d.model_dump(by_alias=True) for d in registry.descriptors()]
        assert dumped == [
            {
                "name": "alpha",
                "description": "alpha tool",
                "inputSchema": {"type": "object", "properties": {}, "required": ["q"]},
            }
        ]

    def test_required_defaults_to_empty(self) -> None:
        assert _make_tool("alpha").required == []
        assert _make_tool("beta", required=["a", "b"]).required == ["a", "b"]

    def test_registry_is_read_only(self) -> None:
        registry = ToolRegistry([_make_tool("alpha")])
        with pytest.raises(TypeError):
            registry._tools["beta"] = _make_tool("beta")  # type: ignore[index]
