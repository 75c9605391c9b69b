"""
ClickUp MCP Server - ClickUp task tools over stdio

Tools:
- list_tasks: List tasks from a ClickUp list
- create_task: Create a new task in a ClickUp list

Bad arguments and unknown tool names are protocol errors (JSON-RPC error
responses). ClickUp API failures come back as normal tool results with
isError set.

Requires CLICKUP_API_KEY in the environment or in a .env file.
"""

import asyncio
import json
import logging
import sys
from collections.abc import Mapping
from typing import Any

from dotenv import load_dotenv
from mcp import types
from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.shared.exceptions import McpError

from .client import ClickUpClient, ClickUpError
from .config import ConfigError, Settings
from .tools import (
    CREATE_TASK,
    LIST_TASKS,
    CreateTaskArgs,
    ListTasksArgs,
    list_tools,
    validate_create_task,
    validate_list_tasks,
)

# Configure logging (stderr; stdout carries the protocol)
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

SERVER_NAME = "clickup-server"
SERVER_VERSION = "0.1.0"


def _text_result(text: str, is_error: bool = False) -> types.CallToolResult:
    return types.CallToolResult(
        content=[types.TextContent(type="text", text=text)],
        isError=is_error,
    )


def _json_text(data: Any) -> str:
    """Pretty-print a ClickUp payload for the tool result."""
    return json.dumps(data, indent=2, ensure_ascii=False)


class ClickUpTools:
    """Dispatches tool calls to the ClickUp API."""

    def __init__(self, client: ClickUpClient) -> None:
        self._client = client

    async def call(self, name: str, arguments: Mapping[str, Any]) -> types.CallToolResult:
        """
        Run one tool call.

        Args:
            name: Tool name
            arguments: Raw tool arguments

        Returns:
            Tool result; isError is set when the ClickUp call failed

        Raises:
            McpError: INVALID_PARAMS for bad arguments, METHOD_NOT_FOUND for
                an unknown tool
        """
        if name == LIST_TASKS:
            return await self.list_tasks(validate_list_tasks(arguments))
        if name == CREATE_TASK:
            return await self.create_task(validate_create_task(arguments))
        raise McpError(
            types.ErrorData(code=types.METHOD_NOT_FOUND, message=f"Unknown tool: {name}")
        )

    async def list_tasks(self, args: ListTasksArgs) -> types.CallToolResult:
        try:
            tasks = await self._client.get_tasks(args.list_id)
        except ClickUpError as e:
            logger.error("ClickUp API error (list_tasks): %s", e.message)
            return _text_result(f"Error listing tasks: {e.message}", is_error=True)
        return _text_result(_json_text(tasks))

    async def create_task(self, args: CreateTaskArgs) -> types.CallToolResult:
        try:
            task = await self._client.create_task(args.list_id, args.to_payload())
        except ClickUpError as e:
            logger.error("ClickUp API error (create_task): %s", e.message)
            return _text_result(f"Error creating task: {e.message}", is_error=True)
        logger.info("Created task %s in list %s", task.get("id"), args.list_id)
        return _text_result(_json_text(task))


def create_server(client: ClickUpClient) -> Server:
    """Build the MCP server around an open ClickUp client."""
    server: Server = Server(SERVER_NAME, version=SERVER_VERSION)
    tools = ClickUpTools(client)

    @server.list_tools()
    async def _list_tools() -> list[types.Tool]:
        return list_tools()

    async def _call_tool(req: types.CallToolRequest) -> types.ServerResult:
        result = await tools.call(req.params.name, req.params.arguments or {})
        return types.ServerResult(result)

    # Registered without the call_tool() decorator, which would turn
    # McpError into an isError result instead of a protocol error.
    server.request_handlers[types.CallToolRequest] = _call_tool

    return server


async def serve(settings: Settings) -> None:
    """Serve MCP requests over stdio until the client disconnects."""
    async with ClickUpClient(settings) as client:
        server = create_server(client)
        async with stdio_server() as (read_stream, write_stream):
            await server.run(
                read_stream,
                write_stream,
                server.create_initialization_options(),
            )


def main() -> None:
    """Entry point for the ClickUp MCP server."""
    load_dotenv()
    try:
        settings = Settings.from_env()
    except ConfigError as e:
        logger.error("%s", e)
        sys.exit(1)

    logger.info("Starting ClickUp MCP server, API: %s", settings.base_url)
    try:
        asyncio.run(serve(settings))
    except Exception:
        logger.exception("Server error")
        sys.exit(1)


if __name__ == "__main__":
    main()
