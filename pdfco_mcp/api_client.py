# Copyright 2025 pdfco-mcp Contributors. All Rights Reserved.
#
# Licensed under the MIT License.

"""HTTP client for the PDF.co REST API."""

import logging
from typing import Any, Dict, Optional

import requests

from pdfco_mcp.config import PDFcoSettings


logger = logging.getLogger(__name__)


class PDFcoAPIError(Exception):
    """Raised when a PDF.co call fails at the transport, HTTP or API level."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class PDFcoClient:
    """Client that forwards document operations to PDF.co."""

    def __init__(self, settings: PDFcoSettings, session: Optional[requests.Session] = None):
        """
        Initialize the PDF.co client.

        Args:
            settings: API key, base URL and timeout
            session: Optional pre-built session (tests inject a mock here)
        """
        self.settings = settings
        self.session = session or requests.Session()

    @property
    def base_url(self) -> str:
        return self.settings.base_url

    def _headers(self, json_body: bool = True) -> Dict[str, str]:
        headers = {"x-api-key": self.settings.api_key}
        if json_body:
            headers["Content-Type"] = "application/json"
        return headers

    def post(self, endpoint: str, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        POST a synchronous job to PDF.co.

        Args:
            endpoint: Path below the base URL, e.g. ``/pdf/merge``
            data: Request body; ``async: false`` is always added

        Returns:
            Decoded JSON response body
        """
        url = f"{self.base_url}{endpoint}"
        logger.debug(f"POST {url}")
        try:
            response = self.session.post(
                url,
                json={**data, "async": False},
                headers=self._headers(),
                timeout=self.settings.timeout,
            )
            response.raise_for_status()
            payload = response.json()
        except requests.exceptions.RequestException as e:
            raise self._translate_request_error(endpoint, e) from e

        return self._check_payload(endpoint, payload)

    def get(self, endpoint: str) -> Dict[str, Any]:
        """GET a resource from PDF.co and return the decoded JSON body."""
        url = f"{self.base_url}{endpoint}"
        logger.debug(f"GET {url}")
        try:
            response = self.session.get(
                url,
                headers=self._headers(json_body=False),
                timeout=self.settings.timeout,
            )
            response.raise_for_status()
            payload = response.json()
        except requests.exceptions.RequestException as e:
            raise self._translate_request_error(endpoint, e) from e

        return self._check_payload(endpoint, payload)

    def _check_payload(self, endpoint: str, payload: Any) -> Dict[str, Any]:
        # PDF.co reports job failures with HTTP 200 and "error": true
        if isinstance(payload, dict) and payload.get("error"):
            message = payload.get("message") or "API request failed"
            logger.error(f"PDF.co rejected {endpoint}: {message}")
            raise PDFcoAPIError(message, status_code=payload.get("status"))
        return payload

    def _translate_request_error(self, endpoint: str, error: requests.exceptions.RequestException) -> PDFcoAPIError:
        status_code = None
        upstream_message = None

        response = getattr(error, "response", None)
        if response is not None:
            status_code = response.status_code
            try:
                body = response.json()
            except ValueError:
                body = None
            if isinstance(body, dict):
                upstream_message = body.get("message")

        message = f"API call failed: {upstream_message or error}"
        logger.error(f"PDF.co call to {endpoint} failed: {message}")
        return PDFcoAPIError(message, status_code=status_code)

    def close(self):
        self.session.close()
