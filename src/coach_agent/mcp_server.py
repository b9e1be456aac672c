"""MCP stdio server exposing the coaching tools to any MCP-capable host.

Run with ``myhealth-coach --serve``. By default every tool is served under
one server name; ``--group fitness-tools`` or ``--group plan-tools`` serves
a single group under that group's name, matching the tool names the coach
prompt expects (``mcp__<group>__<tool>``).

Stdout carries the protocol, so logging must go to stderr only.
"""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any

import mcp.types as types
from mcp.server import Server
from mcp.server.stdio import stdio_server

from coach_agent import config
from training_engine.registry import ToolRegistry, default_registry
from training_engine.tools.base import CoachTool
from training_engine.tools.exceptions import CoachToolError, UnknownToolError

logger = logging.getLogger(__name__)


def served_tools(registry: ToolRegistry, group: str | None = None) -> list[CoachTool]:
    """Tools a server instance exposes, optionally limited to one group."""
    return [
        tool for tool in registry.get_all_tools() if group is None or tool.server == group
    ]


def tool_listing(registry: ToolRegistry, group: str | None = None) -> list[types.Tool]:
    return [
        types.Tool(
            name=tool.name,
            description=tool.description,
            inputSchema=tool.input_schema(),
        )
        for tool in served_tools(registry, group)
    ]


def execute_tool(
    registry: ToolRegistry,
    name: str,
    arguments: dict[str, Any] | None,
    group: str | None = None,
) -> list[types.TextContent]:
    """Run one tool call and render its payload as text content.

    Raises:
        CoachToolError: On unknown tools or invalid arguments. The MCP
            runtime turns the exception into an ``isError`` result.
    """
    if name not in {tool.name for tool in served_tools(registry, group)}:
        raise UnknownToolError(name)
    payload = registry.call(name, arguments)
    return [types.TextContent(type="text", text=json.dumps(payload, indent=2))]


def build_server(
    registry: ToolRegistry | None = None, group: str | None = None
) -> Server:
    """Create an MCP server bound to the given registry."""
    registry = registry or default_registry()
    server: Server = Server(group or config.COACH_SERVER_NAME)

    @server.list_tools()
    async def list_tools_handler() -> list[types.Tool]:
        return tool_listing(registry, group)

    @server.call_tool()
    async def call_tool_handler(
        name: str, arguments: dict[str, Any]
    ) -> list[types.TextContent]:
        try:
            return execute_tool(registry, name, arguments, group)
        except CoachToolError as exc:
            logger.warning("Tool call %s rejected: %s", name, exc)
            raise

    return server


async def run_server(group: str | None = None) -> None:
    """Serve tools over stdio until the host disconnects."""
    server = build_server(group=group)
    logger.info("Starting MCP server %s", server.name)
    try:
        async with stdio_server() as (read_stream, write_stream):
            await server.run(
                read_stream,
                write_stream,
                server.create_initialization_options(),
            )
    except Exception:
        logger.error("MCP server error", exc_info=True)
        raise
    finally:
        logger.info("MCP server %s stopped", server.name)


def serve(group: str | None = None) -> None:
    asyncio.run(run_server(group))
