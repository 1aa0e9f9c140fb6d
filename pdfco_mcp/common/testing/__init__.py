"""
Testing utilities for MCP servers

Provides base classes and utilities for testing MCP servers.
"""

from .base_test import BaseMCPTest
from .mcp_test import MCPServerTester, make_response

__all__ = ["BaseMCPTest", "MCPServerTester", "make_response"]
