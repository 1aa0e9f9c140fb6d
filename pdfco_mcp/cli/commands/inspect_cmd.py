# Copyright 2025 pdfco-mcp Contributors. All Rights Reserved.
#
# Licensed under the MIT License.

"""Inspection commands: credits balance and declared tools."""

import asyncio

import typer
from mcp.shared.exceptions import McpError
from rich.console import Console
from rich.table import Table

from pdfco_mcp.server import PDFcoMCPServer

console = Console()


def balance_command() -> None:
    """Call get_credits_balance once and print the result.

    Example:
        PDFCO_API_KEY=... pdfco-mcp balance
    """
    server = PDFcoMCPServer()
    try:
        response = asyncio.run(server.call_tool("get_credits_balance", {}))
    except McpError as e:
        console.print(f"[red]Error:[/red] {e.error.message}")
        raise typer.Exit(1)
    finally:
        server.client.close()

    for content in response:
        console.print(content.text)


def tools_command() -> None:
    """Show the tools the server declares with their required arguments.

    Example:
        pdfco-mcp tools
    """
    server = PDFcoMCPServer()
    tools = asyncio.run(server.list_tools())
    server.client.close()

    table = Table(title="PDF.co Tools", show_header=True)
    table.add_column("Tool", style="cyan")
    table.add_column("Description")
    table.add_column("Required", style="dim")

    for tool in tools:
        required = ", ".join(tool.inputSchema.get("required", []))
        table.add_row(tool.name, tool.description or "", required)

    console.print(table)
