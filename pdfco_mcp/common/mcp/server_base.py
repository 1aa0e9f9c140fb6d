"""
Base MCP server implementation

Provides common functionality for MCP server implementations backed by a
ToolRegistry.
"""

import json
from typing import Any, Dict, List, Optional

# Quiets the mcp loggers on import; must precede the mcp imports
from pdfco_mcp.common import logging_config  # noqa: F401

from mcp.server import Server
from mcp.server.models import InitializationOptions
from mcp.server import NotificationOptions
import mcp.server.stdio
import mcp.types as types

from pdfco_mcp.common.mcp.tools import ToolRegistry


class BaseMCPServer:
    """Base class for MCP server implementations"""

    def __init__(self, server_name: str, server_version: str = "1.0.0"):
        """Initialize base MCP server"""
        self.server_name = server_name
        self.server_version = server_version
        self.server = Server(server_name)
        self.tool_registry = ToolRegistry()
        self.setup_handlers()

    def setup_handlers(self):
        """Setup MCP server handlers"""
        @self.server.list_tools()
        async def handle_list_tools() -> List[types.Tool]:
            return await self.list_tools()

        # Raw handler: McpError must reach the client as a JSON-RPC error,
        # and argument checks happen in call_tool, after the subclass gates.
        async def handle_call_tool(request: types.CallToolRequest) -> types.ServerResult:
            content = await self.call_tool(request.params.name, request.params.arguments)
            return types.ServerResult(types.CallToolResult(content=content, isError=False))

        self.server.request_handlers[types.CallToolRequest] = handle_call_tool

    async def list_tools(self) -> List[types.Tool]:
        """List all registered tools"""
        return self.tool_registry.get_tool_definitions()

    async def call_tool(self, name: str, arguments: Optional[Dict[str, Any]]) -> List[types.TextContent]:
        """Dispatch a tool call through the registry"""
        return await self.tool_registry.call_tool(name, arguments)

    def create_text_response(self, text: str) -> List[types.TextContent]:
        """Create a standard text response"""
        return [types.TextContent(type="text", text=text)]

    def create_json_response(self, data: Any) -> List[types.TextContent]:
        """Create a JSON response"""
        return [types.TextContent(
            type="text",
            text=json.dumps(data, indent=2, ensure_ascii=False)
        )]

    async def run(self):
        """Run the MCP server over stdio"""
        async with mcp.server.stdio.stdio_server() as (read_stream, write_stream):
            await self.server.run(
                read_stream,
                write_stream,
                InitializationOptions(
                    server_name=self.server_name,
                    server_version=self.server_version,
                    capabilities=self.server.get_capabilities(
                        notification_options=NotificationOptions(),
                        experimental_capabilities={}
                    )
                )
            )
