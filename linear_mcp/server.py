"""Binds the tool router to the MCP stdio transport."""

import logging
from typing import Any

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import CallToolResult, Tool

from linear_mcp.logging import LOGGER_NAME
from linear_mcp.providers.linear import LinearProvider
from linear_mcp.router import ToolRouter
from linear_mcp.settings import Settings

SERVER_VERSION = "0.1.0"

logger = logging.getLogger(LOGGER_NAME)


def build_server(settings: Settings, router: ToolRouter) -> Server:
    server = Server(settings.server_name, version=SERVER_VERSION)

    @server.list_tools()
    async def list_tools() -> list[Tool]:
        return router.list_tools()

    # Arguments are validated by the router, not against the JSON schema by the SDK
    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: dict[str, Any]) -> CallToolResult:
        return await router.call_tool(name, arguments)

    return server


async def serve(settings: Settings) -> None:
    """Serve MCP over stdin/stdout until the client disconnects."""
    if settings.team_name:
        logger.info('Team name set to "%s". Server will be named %s.', settings.team_name, settings.server_name)

    async with LinearProvider(settings) as tracker:
        server = build_server(settings, ToolRouter(tracker))
        async with stdio_server() as (read_stream, write_stream):
            logger.info("Linear MCP server running on stdio")
            await server.run(read_stream, write_stream, server.create_initialization_options())
