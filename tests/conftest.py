"""Pytest configuration and shared fixtures for chromepdf test suite.

This module provides shared fixtures, test configuration, and utilities
that are used across the entire test suite.
"""

from pathlib import Path

import pytest
from utils import FakeRenderService

from chromepdf import BrowserlessClient

_CHROMEPDF_ENV_VARS = (
    "CHROMEPDF_API_KEY",
    "CHROMEPDF_API_URL",
    "CHROMEPDF_TIMEOUT",
    "CHROMEPDF_USER_AGENT",
    "CHROMEPDF_CONFIG",
    "CHROMEPDF_DISABLE_NETWORK",
)


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path: Path):
    """Keep user configuration and CHROMEPDF_* variables out of every test.

    The working directory and home directory both point at an empty
    temporary directory so config discovery finds nothing by default.
    """
    for name in _CHROMEPDF_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def fake_service() -> FakeRenderService:
    """Provide a fake rendering service answering 200 with PDF bytes."""
    return FakeRenderService()


@pytest.fixture
def client(fake_service: FakeRenderService) -> BrowserlessClient:
    """Provide a client whose transport is the fake service.

    Returns
    -------
    BrowserlessClient
        Client with API key ``test-key`` and default options.

    """
    return BrowserlessClient(http_client=fake_service.client(), api_key="test-key")


@pytest.fixture
def html_file(tmp_path: Path) -> Path:
    """Create a small HTML file for file renders."""
    path = tmp_path / "page.html"
    path.write_text("<html><body><h1>Report</h1><p>Grüße</p></body></html>", encoding="utf-8")
    return path
