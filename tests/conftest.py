"""Pytest fixtures for esv-fetch tests."""

from unittest.mock import MagicMock, patch

import pytest
import requests


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Isolate tests from the caller's ESV_* variables and any .env file."""
    for name in ("ESV_API_KEY", "ESV_API_URL", "ESV_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def api_key(monkeypatch):
    """Set a dummy API key in the environment."""
    monkeypatch.setenv("ESV_API_KEY", "test-token")
    return "test-token"


def make_response(status_code: int = 200, text: str = "", reason: str = "OK") -> MagicMock:
    """Build a stand-in for requests.Response."""
    response = MagicMock(spec=requests.Response)
    response.status_code = status_code
    response.reason = reason
    response.text = text
    return response


@pytest.fixture
def mock_get():
    """Patch requests.get as used by the client module."""
    with patch("esv_fetch.client.requests.get") as mock:
        mock.return_value = make_response(
            text='{"query":"John 3:16","canonical":"John 3:16",'
                 '"passages":["For God so loved the world...  "]}'
        )
        yield mock


@pytest.fixture
def response_factory():
    """Factory for fake responses, for tests that need a specific status or body."""
    return make_response
