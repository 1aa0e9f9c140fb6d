#!/usr/bin/env python3
"""
PDF.co MCP Server

A Model Context Protocol server that exposes PDF.co document operations
(merge, split, text/JSON extraction, HTML-to-PDF and credit balance) as tools.
Every tool call is forwarded to the PDF.co REST API and the response is
reshaped into text.
"""

import asyncio
import logging
from typing import Any, Dict, List, Optional

from pdfco_mcp.common.mcp.server_base import BaseMCPServer
from pdfco_mcp.common.mcp.tools import create_simple_tool_schema, create_url_tool_schema
from pdfco_mcp.api_client import PDFcoAPIError, PDFcoClient
from pdfco_mcp.config import API_KEY_ENV_VAR, PDFcoSettings, load_settings

import mcp.types as types
from mcp.shared.exceptions import McpError

logger = logging.getLogger(__name__)

SERVER_NAME = "pdf-co-mcp-server"
SERVER_VERSION = "0.1.0"


class PDFcoMCPServer(BaseMCPServer):
    """PDF.co MCP server implementation"""

    def __init__(self, settings: Optional[PDFcoSettings] = None, client: Optional[PDFcoClient] = None):
        super().__init__(SERVER_NAME, SERVER_VERSION)
        self.settings = settings if settings is not None else load_settings()
        self.client = client or PDFcoClient(self.settings)
        self.setup_tools()

    def setup_tools(self):
        """Setup all PDF.co tools"""

        self.tool_registry.register(
            name="pdf_merge",
            description="Merge multiple PDF files into a single PDF",
            input_schema=create_simple_tool_schema(
                ["urls"],
                {
                    "urls": {
                        "type": "array",
                        "items": {"type": "string"},
                        "description": "Array of URLs to PDF files to merge"
                    }
                }
            ),
            handler=self.pdf_merge
        )

        self.tool_registry.register(
            name="pdf_split",
            description="Split PDF into individual pages",
            input_schema=create_url_tool_schema(
                "URL of the PDF file to split",
                additional_optional={
                    "pages": {
                        "type": "string",
                        "description": 'Page numbers (e.g., "1,3,5-7")'
                    }
                }
            ),
            handler=self.pdf_split
        )

        self.tool_registry.register(
            name="pdf_to_text",
            description="Extract text content from PDF",
            input_schema=create_url_tool_schema(),
            handler=self.pdf_to_text
        )

        self.tool_registry.register(
            name="pdf_to_json",
            description="Convert PDF to JSON format",
            input_schema=create_url_tool_schema(),
            handler=self.pdf_to_json
        )

        # Neither field is required by the schema; the handler enforces one of them
        self.tool_registry.register(
            name="html_to_pdf",
            description="Convert HTML to PDF",
            input_schema=create_simple_tool_schema(
                [],
                {
                    "html": {"type": "string", "description": "HTML content to convert"},
                    "url": {"type": "string", "description": "URL to convert"}
                }
            ),
            handler=self.html_to_pdf
        )

        self.tool_registry.register(
            name="get_credits_balance",
            description="Get API credits balance",
            input_schema=create_simple_tool_schema([]),
            handler=self.get_credits_balance
        )

    async def call_tool(self, name: str, arguments: Optional[Dict[str, Any]]) -> List[types.TextContent]:
        """Check the credential, dispatch, and translate failures into MCP errors"""
        if not self.settings.has_api_key:
            raise McpError(types.ErrorData(
                code=types.INVALID_REQUEST,
                message=f"{API_KEY_ENV_VAR} environment variable is not set"
            ))

        try:
            return await self.tool_registry.call_tool(name, arguments)
        except McpError:
            raise
        except Exception as e:
            if isinstance(e, PDFcoAPIError) and e.status_code is not None:
                logger.error(f"Tool {name} failed with HTTP {e.status_code}: {e}")
            else:
                logger.error(f"Tool {name} failed: {e}")
            raise McpError(types.ErrorData(
                code=types.INTERNAL_ERROR,
                message=f"PDF.co API error: {e}"
            )) from e

    # Tool handlers
    async def pdf_merge(self, args: dict):
        """Merge PDFs"""
        result = self.client.post("/pdf/merge", {
            "url": ",".join(args["urls"]),
            "name": "merged.pdf",
        })
        return self.create_text_response(f"PDFs merged successfully!\nOutput URL: {result.get('url')}")

    async def pdf_split(self, args: dict):
        """Split a PDF into pages"""
        result = self.client.post("/pdf/split", {
            "url": args["url"],
            "pages": args.get("pages") or "",
        })
        if result.get("urls") is None:
            raise PDFcoAPIError("Split response did not include output URLs")
        urls = "\n".join(result["urls"])
        return self.create_text_response(f"PDF split successfully!\nOutput URLs:\n{urls}")

    async def pdf_to_text(self, args: dict):
        """Extract text"""
        result = self.client.post("/pdf/convert/to/text", {
            "url": args["url"],
            "inline": True,
        })
        return self.create_text_response(result.get("body") or result.get("text") or "No text extracted")

    async def pdf_to_json(self, args: dict):
        """Convert to JSON"""
        result = self.client.post("/pdf/convert/to/json", {
            "url": args["url"],
            "inline": True,
        })
        return self.create_json_response(result.get("body") or result)

    async def html_to_pdf(self, args: dict):
        """Render HTML or a web page to PDF"""
        data = {"name": "output.pdf"}
        if args.get("html"):
            data["html"] = args["html"]
        elif args.get("url"):
            data["url"] = args["url"]
        else:
            raise ValueError("Either html or url must be provided")

        result = self.client.post("/pdf/convert/from/html", data)
        return self.create_text_response(f"PDF created successfully!\nOutput URL: {result.get('url')}")

    async def get_credits_balance(self, args: dict):
        """Get remaining credits"""
        result = self.client.get("/account/balance")
        return self.create_text_response(
            "API Credits Balance:\n"
            f"Available: {result.get('AvailableCredits')}\n"
            f"Used: {result.get('UsedCredits')}"
        )


async def main():
    """Main entry point"""
    server = PDFcoMCPServer()
    if not server.settings.has_api_key:
        logger.warning(f"{API_KEY_ENV_VAR} is not set; tool calls will be rejected")
    logger.info("PDF.co MCP server running on stdio")
    try:
        await server.run()
    finally:
        server.client.close()


if __name__ == "__main__":
    from pdfco_mcp.common.logging_config import configure_logging

    configure_logging()
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        pass
