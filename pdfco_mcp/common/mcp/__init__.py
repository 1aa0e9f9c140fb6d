"""
MCP server utilities

Provides base classes and utilities for creating MCP servers.
"""

from .server_base import BaseMCPServer
from .tools import ToolRegistry, ToolDefinition

__all__ = ["BaseMCPServer", "ToolRegistry", "ToolDefinition"]
