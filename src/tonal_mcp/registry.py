"""
Tool registry for the Tonal MCP server.

Each tool module declares a CATEGORY and a TOOLS tuple of async handlers.
build_registry() collects them once into a read-only name → ToolDefinition
mapping; register_tools() attaches that mapping to a FastMCP app.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Awaitable, Callable, Mapping


@dataclass(frozen=True)
class ToolDefinition:
    """One tool exposed over MCP."""
    name: str
    category: str
    handler: Callable[..., Awaitable]


def build_registry(*modules) -> Mapping[str, ToolDefinition]:
    """
    Build the tool registry from tool modules.

    Args:
        modules: Modules exposing CATEGORY and TOOLS

    Returns:
        Read-only mapping of tool name to ToolDefinition, in module order

    Raises:
        ValueError: If two tools share a name
    """
    tools = {}
    for module in modules:
        for handler in module.TOOLS:
            name = handler.__name__
            if name in tools:
                raise ValueError(
                    f"Duplicate tool name '{name}' in {module.CATEGORY} "
                    f"(already registered by {tools[name].category})"
                )
            tools[name] = ToolDefinition(name=name, category=module.CATEGORY, handler=handler)
    return MappingProxyType(tools)


def tools_by_category(registry: Mapping[str, ToolDefinition]) -> dict[str, list[str]]:
    """Tool names grouped by category, in registration order."""
    grouped = {}
    for definition in registry.values():
        grouped.setdefault(definition.category, []).append(definition.name)
    return grouped


def register_tools(app, registry: Mapping[str, ToolDefinition]):
    """Register every tool in the registry with the MCP app."""
    for definition in registry.values():
        app.tool()(definition.handler)
    return app
