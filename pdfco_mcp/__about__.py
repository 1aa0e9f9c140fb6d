# Copyright 2025 pdfco-mcp Contributors. All Rights Reserved.
#
# Licensed under the MIT License.

__version__ = "0.1.0"
