#!/usr/bin/env python3
"""Tests for environment-driven settings."""

import os

import pytest

from pdfco_mcp.config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, PDFcoSettings, load_settings


ENV_VARS = ("PDFCO_API_KEY", "PDFCO_BASE_URL", "PDFCO_TIMEOUT")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield
    # load_dotenv writes straight into os.environ
    for name in ENV_VARS:
        os.environ.pop(name, None)


def test_defaults_without_environment():
    settings = load_settings(load_env_file=False)

    assert settings.api_key == ""
    assert not settings.has_api_key
    assert settings.base_url == DEFAULT_BASE_URL
    assert settings.timeout == DEFAULT_TIMEOUT


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("PDFCO_API_KEY", "  secret  ")
    monkeypatch.setenv("PDFCO_BASE_URL", "https://proxy.test/v1/")
    monkeypatch.setenv("PDFCO_TIMEOUT", "45")

    settings = load_settings(load_env_file=False)

    assert settings.api_key == "secret"
    assert settings.has_api_key
    assert settings.base_url == "https://proxy.test/v1"
    assert settings.timeout == 45.0


@pytest.mark.parametrize("raw", ["soon", "0", "-3"])
def test_bad_timeout_falls_back(monkeypatch, raw):
    monkeypatch.setenv("PDFCO_TIMEOUT", raw)

    assert load_settings(load_env_file=False).timeout == DEFAULT_TIMEOUT


def test_env_file_is_loaded(tmp_path, monkeypatch):
    (tmp_path / ".env").write_text("PDFCO_API_KEY=from-dotenv\n")
    monkeypatch.chdir(tmp_path)

    settings = load_settings()

    assert settings.api_key == "from-dotenv"


def test_env_file_does_not_override_environment(tmp_path, monkeypatch):
    (tmp_path / ".env").write_text("PDFCO_API_KEY=from-dotenv\n")
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("PDFCO_API_KEY", "from-env")

    assert load_settings().api_key == "from-env"


def test_settings_strip_trailing_slash():
    assert PDFcoSettings(api_key="k", base_url="https://x.test/v1///").base_url == "https://x.test/v1"
