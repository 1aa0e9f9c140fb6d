# Copyright 2025 pdfco-mcp Contributors. All Rights Reserved.
#
# Licensed under the MIT License.

"""Command line interface for the PDF.co MCP server."""
