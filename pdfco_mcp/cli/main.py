# Copyright 2025 pdfco-mcp Contributors. All Rights Reserved.
#
# Licensed under the MIT License.

"""Main pdfco-mcp CLI application."""

from typing import Optional

import typer
from rich.console import Console

from pdfco_mcp import __version__
from pdfco_mcp.cli.commands import serve, inspect_cmd

console = Console()

app = typer.Typer(
    name="pdfco-mcp",
    help="MCP server exposing PDF.co document operations as tools",
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"pdfco-mcp version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """pdfco-mcp CLI for serving and inspecting the PDF.co MCP server."""
    pass


# Register subcommands
app.command(name="serve", help="Run the MCP server on stdio.")(serve.serve_command)
app.command(name="balance", help="Show the PDF.co credits balance.")(inspect_cmd.balance_command)
app.command(name="tools", help="List the tools the server declares.")(inspect_cmd.tools_command)


if __name__ == "__main__":
    app()
