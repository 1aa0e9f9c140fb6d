#!/usr/bin/env python3
"""Tests for the PDF.co HTTP client and its error translation."""

from unittest.mock import Mock

import pytest
import requests

from pdfco_mcp.api_client import PDFcoAPIError, PDFcoClient
from pdfco_mcp.common.testing import make_response
from pdfco_mcp.config import PDFcoSettings


@pytest.fixture
def session():
    return Mock(spec=requests.Session)


@pytest.fixture
def client(session):
    settings = PDFcoSettings(api_key="k-123", base_url="https://api.example.test/v1/", timeout=15)
    return PDFcoClient(settings, session=session)


class TestPDFcoClient:
    """Test outbound request shape and failure handling"""

    def test_post_adds_sync_flag_and_headers(self, client, session):
        session.post.return_value = make_response({"url": "https://o.test/x.pdf"})

        result = client.post("/pdf/merge", {"url": "a,b", "name": "merged.pdf"})

        assert result == {"url": "https://o.test/x.pdf"}
        session.post.assert_called_once_with(
            "https://api.example.test/v1/pdf/merge",
            json={"url": "a,b", "name": "merged.pdf", "async": False},
            headers={"x-api-key": "k-123", "Content-Type": "application/json"},
            timeout=15,
        )

    def test_post_does_not_mutate_input(self, client, session):
        session.post.return_value = make_response({})
        data = {"url": "u"}

        client.post("/pdf/split", data)

        assert data == {"url": "u"}

    def test_get_sends_api_key_only(self, client, session):
        session.get.return_value = make_response({"AvailableCredits": 10})

        assert client.get("/account/balance") == {"AvailableCredits": 10}
        session.get.assert_called_once_with(
            "https://api.example.test/v1/account/balance",
            headers={"x-api-key": "k-123"},
            timeout=15,
        )

    def test_error_field_with_message(self, client, session):
        session.post.return_value = make_response({"error": True, "status": 402, "message": "Not enough credits"})

        with pytest.raises(PDFcoAPIError) as exc_info:
            client.post("/pdf/merge", {})

        assert str(exc_info.value) == "Not enough credits"
        assert exc_info.value.status_code == 402

    def test_error_field_without_message(self, client, session):
        session.post.return_value = make_response({"error": True})

        with pytest.raises(PDFcoAPIError, match="^API request failed$"):
            client.post("/pdf/merge", {})

    def test_http_error_uses_upstream_message(self, client, session):
        session.post.return_value = make_response({"message": "File not found"}, status_code=404)

        with pytest.raises(PDFcoAPIError) as exc_info:
            client.post("/pdf/convert/to/text", {"url": "missing"})

        assert exc_info.value.message == "API call failed: File not found"
        assert exc_info.value.status_code == 404

    def test_http_error_without_json_body(self, client, session):
        session.get.return_value = make_response(status_code=500, json_error=True)

        with pytest.raises(PDFcoAPIError) as exc_info:
            client.get("/account/balance")

        assert exc_info.value.message == "API call failed: 500 Client Error"
        assert exc_info.value.status_code == 500

    def test_timeout_is_translated(self, client, session):
        session.post.side_effect = requests.exceptions.Timeout("read timed out")

        with pytest.raises(PDFcoAPIError, match="API call failed: read timed out"):
            client.post("/pdf/merge", {})

    def test_invalid_json_on_success(self, client, session):
        session.post.return_value = make_response(json_error=True)

        with pytest.raises(PDFcoAPIError, match="^API call failed: "):
            client.post("/pdf/merge", {})

    def test_close_closes_session(self, client, session):
        client.close()
        session.close.assert_called_once()
