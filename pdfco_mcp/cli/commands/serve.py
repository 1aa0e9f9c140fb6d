# Copyright 2025 pdfco-mcp Contributors. All Rights Reserved.
#
# Licensed under the MIT License.

"""Serve command: run the PDF.co MCP server over stdio."""

import asyncio

import typer
from rich.console import Console

from pdfco_mcp.common.logging_config import configure_logging
from pdfco_mcp.server import main as run_server

# stdout belongs to the MCP transport
console = Console(stderr=True)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def serve_command(
    log_level: str = typer.Option(
        "INFO",
        "--log-level",
        "-l",
        help="Logging level (DEBUG, INFO, WARNING, ERROR).",
        case_sensitive=False,
    ),
) -> None:
    """Run the PDF.co MCP server on stdio.

    Example:
        pdfco-mcp serve --log-level DEBUG
    """
    if log_level.upper() not in LOG_LEVELS:
        console.print(f"[red]Error:[/red] Unknown log level '{log_level}'. Choose from {', '.join(LOG_LEVELS)}.")
        raise typer.Exit(1)

    configure_logging(log_level)
    try:
        asyncio.run(run_server())
    except KeyboardInterrupt:
        pass
