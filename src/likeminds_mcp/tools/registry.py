"""ToolRegistry — the fixed, ordered set of tools served by the gateway."""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterable, Iterator
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from likeminds_mcp.protocol.models import MCPToolDef, ToolResult

ToolHandler = Callable[[dict[str, Any]], Awaitable[ToolResult]]


@dataclass(frozen=True)
class ToolSpec:
    """A registered tool: its public descriptor plus the handler that runs it.

    Handlers never raise; failures are returned as text in the
    :class:`ToolResult`.
    """

    name: str
    description: str
    input_schema: dict[str, Any] = field(repr=False)
    handler: ToolHandler = field(repr=False, compare=False)

    def to_def(self) -> MCPToolDef:
        return MCPToolDef(name=self.name, description=self.description, input_schema=self.input_schema)

    @property
    def required(self) -> list[str]:
        return list(self.input_schema.get("required", []))


class ToolRegistry:
    """Read-only name-to-tool map that preserves registration order.

    Populated once at construction; there are no mutators, so it can be
    shared freely between concurrent requests.

    Usage::

        registry = ToolRegistry([add_tool, query_tool])
        registry.get("add")         # ToolSpec | None
        [t.name for t in registry]  # registration order
    """

    def __init__(self, tools: Iterable[ToolSpec]) -> None:
        tool_map: dict[str, ToolSpec] = {}
        for tool in tools:
            if tool.name in tool_map:
                msg = f"Duplicate tool name: {tool.name}"
                raise ValueError(msg)
            tool_map[tool.name] = tool
        self._tools = MappingProxyType(tool_map)

    def get(self, name: str) -> ToolSpec | None:
        return self._tools.get(name)

    def names(self) -> list[str]:
        return list(self._tools)

    def descriptors(self) -> list[MCPToolDef]:
        """Return ``tools/list`` descriptors in registration order."""
        return [tool.to_def() for tool in self._tools.values()]

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __iter__(self) -> Iterator[ToolSpec]:
        return iter(self._tools.values())

    def __len__(self) -> int:
        return len(self._tools)
