"""
Logging configuration for MCP servers.

Import this module at the top of MCP server files to suppress verbose logging
when the PDFCO_MCP_QUIET environment variable is set. Stdout carries the MCP
transport, so every handler configured here writes to stderr.
"""

import logging
import os
import sys

QUIET_ENV_VAR = "PDFCO_MCP_QUIET"

NOISY_LOGGERS = ["mcp", "mcp.server", "httpx", "urllib3", "requests", "asyncio"]


def is_quiet() -> bool:
    return os.environ.get(QUIET_ENV_VAR, '').lower() in ('1', 'true', 'yes')


def configure_quiet_logging():
    """Configure logging to be quiet when PDFCO_MCP_QUIET is set."""
    if is_quiet():
        logging.basicConfig(level=logging.WARNING, stream=sys.stderr, force=True)
        logging.getLogger().setLevel(logging.WARNING)
        for logger_name in NOISY_LOGGERS:
            logging.getLogger(logger_name).setLevel(logging.WARNING)


def configure_logging(level: str = "INFO"):
    """Send log records to stderr at the given level, unless quiet mode wins."""
    if is_quiet():
        configure_quiet_logging()
        return
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        force=True,
    )


# Auto-configure on import
configure_quiet_logging()
