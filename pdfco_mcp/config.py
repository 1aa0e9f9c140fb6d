# Copyright 2025 pdfco-mcp Contributors. All Rights Reserved.
#
# Licensed under the MIT License.

"""Runtime settings for the PDF.co MCP server, read from the environment."""

import logging
import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.pdf.co/v1"
DEFAULT_TIMEOUT = 120.0

API_KEY_ENV_VAR = "PDFCO_API_KEY"
BASE_URL_ENV_VAR = "PDFCO_BASE_URL"
TIMEOUT_ENV_VAR = "PDFCO_TIMEOUT"


@dataclass
class PDFcoSettings:
    """Connection settings for the PDF.co API.

    An empty ``api_key`` means the credential is not set; the server still
    starts and lists its tools but rejects every tool call.
    """

    api_key: str = ""
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self):
        self.base_url = self.base_url.rstrip("/")

    @property
    def has_api_key(self) -> bool:
        return bool(self.api_key)


def _parse_timeout(raw: str) -> float:
    try:
        timeout = float(raw)
    except ValueError:
        logger.warning(f"Invalid {TIMEOUT_ENV_VAR}={raw!r}, using {DEFAULT_TIMEOUT}s")
        return DEFAULT_TIMEOUT
    if timeout <= 0:
        logger.warning(f"Non-positive {TIMEOUT_ENV_VAR}={raw!r}, using {DEFAULT_TIMEOUT}s")
        return DEFAULT_TIMEOUT
    return timeout


def load_settings(load_env_file: bool = True) -> PDFcoSettings:
    """Build settings from the process environment.

    Args:
        load_env_file: Also load variables from the nearest ``.env`` file,
            searched upward from the working directory.
            Variables already present in the environment are not overridden.

    Returns:
        PDFcoSettings instance.
    """
    if load_env_file:
        load_dotenv(find_dotenv(usecwd=True))

    raw_timeout = os.environ.get(TIMEOUT_ENV_VAR, "")
    return PDFcoSettings(
        api_key=os.environ.get(API_KEY_ENV_VAR, "").strip(),
        base_url=os.environ.get(BASE_URL_ENV_VAR) or DEFAULT_BASE_URL,
        timeout=_parse_timeout(raw_timeout) if raw_timeout else DEFAULT_TIMEOUT,
    )
