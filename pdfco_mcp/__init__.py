# Copyright 2025 pdfco-mcp Contributors. All Rights Reserved.
#
# Licensed under the MIT License.

"""MCP server that proxies document operations to the PDF.co API."""

from pdfco_mcp.__about__ import __version__

__all__ = ["__version__"]
