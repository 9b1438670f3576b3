"""
MCP (Model Context Protocol) Server for NPB roster data.

Exposes the team registry, roster scraper, player profile scraper and
cross-team search as MCP tools.

Usage:
    # Start server in stdio mode (for Claude Desktop and other MCP clients)
    python -m npb_data.servers.mcp_server

    # or via the console script
    npb-mcp --log-level debug
"""

import argparse
import asyncio
import json
import logging
import sys
from typing import Any

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import Resource, TextContent, Tool

from ..config import config
from .mcp.resources import STATIC_RESOURCES, read_resource_uri
from .mcp.tools import TOOLS
from .mcp_models import validate_tool_args

logger = logging.getLogger(__name__)


# ============================================================================
# MCP Server Implementation
# ============================================================================


class ToolCallError(Exception):
    """Raised from the MCP call_tool handler so the SDK marks the result isError."""


def render_tool_result(result: dict[str, Any]) -> list[TextContent]:
    """
    Turn a tool result dict into MCP content.

    A failed result raises ToolCallError with the message prefixed by
    ``エラー:``; the low-level server reports it with ``isError: true``.
    """
    if result.get("success") is False:
        raise ToolCallError(f"エラー: {result.get('error', 'unknown error')}")
    return [TextContent(type="text", text=json.dumps(result, ensure_ascii=False, indent=2))]


class NPBDataMCPServer:
    """
    MCP Server for NPB roster data.

    Provides 4 tools and the team catalog resources.
    """

    def __init__(self, name: str = "npb-mcp"):
        """
        Initialize MCP server.

        Args:
            name: Server name for MCP registration
        """
        self.name = name
        self.server: Server | None = None
        self.tools_registry = {tool["name"]: tool for tool in TOOLS}

        logger.info(f"Initialized {name} MCP server")
        logger.info(f"Registered {len(TOOLS)} tools")
        logger.info(f"Registered {len(STATIC_RESOURCES)} resources")

    async def call_tool(self, name: str, arguments: dict[str, Any] | None) -> dict[str, Any]:
        """
        Validate arguments and run a tool handler.

        Returns the handler's result dict; unknown tools and invalid
        arguments come back as error dicts rather than exceptions.
        """
        logger.info(f"Tool called: {name} with args: {arguments}")

        tool = self.tools_registry.get(name)
        if not tool:
            return {"success": False, "error": f"Tool '{name}' not found", "error_type": "ToolNotFound"}

        try:
            kwargs = validate_tool_args(name, arguments or {})
        except ValueError as e:
            return {"success": False, "error": str(e), "error_type": "ValidationError"}

        return await tool["handler"](**kwargs)

    def setup_server(self) -> Server:
        """
        Set up the MCP server with tools and resources.

        Returns:
            Configured MCP Server instance
        """
        self.server = Server(self.name)

        @self.server.list_tools()
        async def list_tools() -> list[Tool]:
            """List all available tools."""
            return [
                Tool(name=tool["name"], description=tool["description"], inputSchema=tool["inputSchema"])
                for tool in TOOLS
            ]

        @self.server.call_tool()
        async def call_tool(name: str, arguments: dict[str, Any]) -> list[TextContent]:
            """Call a tool with arguments."""
            result = await self.call_tool(name, arguments)
            return render_tool_result(result)

        @self.server.list_resources()
        async def list_resources() -> list[Resource]:
            """List all available resources."""
            return [
                Resource(
                    uri=res["uri"],
                    name=res["name"],
                    description=res["description"],
                    mimeType=res["mimeType"],
                )
                for res in STATIC_RESOURCES
            ]

        @self.server.read_resource()
        async def read_resource(uri: Any) -> str:
            """Read a resource by URI."""
            logger.info(f"Resource requested: {uri}")
            return read_resource_uri(str(uri))

        logger.info("MCP server setup complete")
        return self.server

    async def run_stdio(self) -> None:
        """Run server in stdio mode."""
        if self.server is None:
            self.server = self.setup_server()

        logger.info("Starting MCP server in stdio mode...")

        async with stdio_server() as (read_stream, write_stream):
            await self.server.run(
                read_stream,
                write_stream,
                self.server.create_initialization_options(),
            )


# ============================================================================
# CLI Entry Point
# ============================================================================


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Start the NPB roster data MCP server")

    parser.add_argument(
        "--transport",
        type=str,
        default=config.mcp_server.transport,
        choices=["stdio"],
        help="Transport mode (stdio only)",
    )

    parser.add_argument(
        "--log-level",
        type=str,
        default=config.mcp_server.log_level,
        choices=["critical", "error", "warning", "info", "debug"],
        help="Log level",
    )

    return parser.parse_args(argv)


async def main(argv: list[str] | None = None) -> None:
    """Main entry point for MCP server."""
    args = parse_args(argv)

    # stdout belongs to the protocol stream; keep all logging on stderr
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    logger.info("NPB Data MCP Server")
    logger.info(f"Transport: {args.transport}")
    logger.info(f"Log Level: {args.log_level}")

    server = NPBDataMCPServer("npb-mcp")

    try:
        await server.run_stdio()
    except KeyboardInterrupt:
        logger.info("Server stopped by user")


def run() -> None:
    """Console-script wrapper around main()."""
    asyncio.run(main())


if __name__ == "__main__":
    run()
