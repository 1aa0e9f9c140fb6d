# Copyright 2025 pdfco-mcp Contributors. All Rights Reserved.
#
# Licensed under the MIT License.

"""CLI command implementations."""
