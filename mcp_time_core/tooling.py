from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from mcp.server.fastmcp import FastMCP


ToolHandler = Callable[..., str]


@dataclass(frozen=True)
class ToolDef:
    """A single MCP tool definition."""

    name: str
    title: str
    description: str
    handler: ToolHandler


def tool(
    *,
    name: str,
    title: str,
    description: str,
) -> Callable[[ToolHandler], ToolHandler]:
    """Decorator to declare a tool handler in a module.

    The decorated function keeps its plain call signature (so it can be called
    directly) and carries a ToolDef in attribute "__mcp_tool_def__". The input
    schema is derived by FastMCP from the signature when the module is passed to
    register_decorated().
    """

    def decorator(fn: ToolHandler) -> ToolHandler:
        if not callable(fn):
            raise TypeError("tool decorator can only be applied to callables")
        setattr(
            fn,
            "__mcp_tool_def__",
            ToolDef(name=str(name), title=str(title), description=str(description), handler=fn),
        )
        return fn

    return decorator


def collect_tool_defs(namespace: dict[str, Any]) -> list[ToolDef]:
    out: list[ToolDef] = []
    for obj in list(namespace.values()):
        if not callable(obj):
            continue
        tool_def = getattr(obj, "__mcp_tool_def__", None)
        if isinstance(tool_def, ToolDef):
            out.append(tool_def)
    return out


def register_decorated(mcp: FastMCP, namespace: dict[str, Any]) -> list[str]:
    """Add all @tool-decorated handlers found in the given namespace to a FastMCP server."""
    names: list[str] = []
    for tool_def in collect_tool_defs(namespace):
        mcp.add_tool(tool_def.handler, name=tool_def.name, title=tool_def.title, description=tool_def.description)
        names.append(tool_def.name)
    return names
