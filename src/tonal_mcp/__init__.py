"""
Modular MCP Server for Tonal strength training

Provides tools to authenticate with Tonal, read training data and author
custom workouts via the Model Context Protocol (MCP).

This server uses Tonal's non-public API.
The API could change without notice.

Supports two transport modes:
- stdio: For single-user local usage (default)
- http: For multi-user HTTP server deployment
"""

import logging
import os

from fastmcp import FastMCP

from tonal_mcp import auth_tool
from tonal_mcp import custom_workouts
from tonal_mcp import fitness
from tonal_mcp import movements
from tonal_mcp import workout_editing
from tonal_mcp import workouts
from tonal_mcp.registry import build_registry, register_tools, tools_by_category

logger = logging.getLogger(__name__)

TOOL_MODULES = (
    auth_tool,
    fitness,
    workouts,
    movements,
    custom_workouts,
    workout_editing,
)


def create_app() -> FastMCP:
    """Create and configure the MCP app with all tools registered."""
    app = FastMCP("Tonal MCP v1.0")
    registry = build_registry(*TOOL_MODULES)
    for category, names in tools_by_category(registry).items():
        logger.debug("Registering %s tools: %s", category, ", ".join(names))
    return register_tools(app, registry)


def main():
    """Initialize the MCP server and run with configured transport.

    Environment variables:
    - MCP_TRANSPORT: 'stdio' (default) or 'http'
    - MCP_HOST: Host to bind to (default: '0.0.0.0')
    - MCP_PORT: Port for HTTP transport (default: 8081)
    - TONAL_LOG_LEVEL: Logging level (default: INFO)
    """
    logging.basicConfig(level=os.environ.get("TONAL_LOG_LEVEL", "INFO").upper())
    app = create_app()

    if os.environ.get("MCP_TRANSPORT", "stdio") == "http":
        host = os.environ.get("MCP_HOST", "0.0.0.0")
        port = int(os.environ.get("MCP_PORT", "8081"))
        logger.info("Starting Tonal MCP server on http://%s:%s/mcp", host, port)
        app.run(transport="http", host=host, port=port)
    else:
        app.run()


if __name__ == "__main__":
    main()
