#!/usr/bin/env python3
"""
Asana MCP Server
Exposes every registered Asana tool over the MCP stdio transport.
"""

import asyncio
import logging
import sys
from typing import Any, Dict, List, Optional

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from .base import ExecutionError
from .config import get_settings
from .registry import execute_tool, get_input_schemas, list_tool_names
from .services import get_asana_service

SERVER_NAME = "asana-tasks-manager"

logger = logging.getLogger(__name__)

# Create MCP server
server = Server(SERVER_NAME)


@server.list_tools()
async def list_tools() -> List[Tool]:
    """List available Asana tools."""
    return [
        Tool(
            name=schema["name"],
            description=schema["description"],
            inputSchema=schema["inputSchema"],
        )
        for schema in get_input_schemas()
    ]


@server.call_tool()
async def call_tool(name: str, arguments: Optional[Dict[str, Any]]) -> List[TextContent]:
    """
    Handle tool calls.

    A failed run is raised so the MCP layer reports it as an error result.
    """
    logger.debug(f"Calling tool {name} with {arguments}")
    result = await execute_tool(name, **(arguments or {}))

    if not result["success"]:
        raise ExecutionError(result["error"], tool_name=name)

    return [TextContent(type="text", text=str(result["result"]))]


def configure_logging(level: str = "INFO") -> None:
    # stdout carries MCP frames; logs go to stderr
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


async def main():
    """Run the MCP server."""
    tools = list_tool_names()
    logger.info(f"Asana MCP server starting with {len(tools)} tools")
    for name in tools:
        logger.info(f"  - {name}")

    try:
        async with stdio_server() as (read_stream, write_stream):
            await server.run(
                read_stream,
                write_stream,
                server.create_initialization_options()
            )
    finally:
        await get_asana_service().aclose()
        logger.info("Asana MCP server shutting down")


def cli() -> None:
    configure_logging(get_settings().log_level)
    asyncio.run(main())


if __name__ == "__main__":
    cli()
