"""Helper functions for launching the PDF.co MCP server from an MCP client.

MCP clients that spawn stdio servers expect a ``{"mcpServers": {...}}``
mapping. The helpers here build the entry for this server so it can be merged
with other server configs.
"""

from __future__ import annotations

import sys
from typing import Optional

from pdfco_mcp.config import API_KEY_ENV_VAR, BASE_URL_ENV_VAR


def get_pdfco_stdio_config(
    api_key: Optional[str] = None,
    server_name: str = "pdf_co",
    base_url: Optional[str] = None,
    python_executable: Optional[str] = None,
    env_vars: Optional[dict] = None,
) -> dict:
    """Get PDF.co stdio server configuration.

    Args:
        api_key: PDF.co API key passed to the child process as PDFCO_API_KEY.
            If not specified, the child inherits whatever the client's
            environment holds.
        server_name: Name for this server in the config (default: "pdf_co")
        base_url: Optional API root override (PDFCO_BASE_URL)
        python_executable: Interpreter used to run the server module.
            Defaults to the current interpreter.
        env_vars: Optional dictionary of additional environment variables to set

    Returns:
        Dict with single server config: {server_name: {...}}

    Examples:
        pdf_config = get_pdfco_stdio_config(api_key="...")
        merged_config = {
            "mcpServers": {
                **pdf_config,
                **other_config
            }
        }
    """
    config = {
        server_name: {
            "command": python_executable or sys.executable,
            "args": ["-m", "pdfco_mcp.server"],
        }
    }

    env = dict(env_vars or {})
    if api_key:
        env[API_KEY_ENV_VAR] = api_key
    if base_url:
        env[BASE_URL_ENV_VAR] = base_url
    if env:
        config[server_name]["env"] = env

    return config

