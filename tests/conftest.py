"""
Pytest configuration and fixtures.
"""
import os
import sys

import pytest
import requests

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from backend.config import Settings  # noqa: E402

CREDENTIAL_VARS = (
    "GOOGLE_API_KEY",
    "POSITIONSTACK_KEY",
    "OPENCAGE_KEY",
    "LOCATIONIQ_KEY",
    "MAPQUEST_KEY",
)


class FakeResponse:
    def __init__(self, payload=None, status_code=200, text=None):
        self.payload = payload
        self.status_code = status_code
        self.text = text

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Client Error")

    def json(self):
        if self.text is not None:
            raise requests.exceptions.JSONDecodeError("Expecting value", self.text, 0)
        return self.payload


class FakeSession:
    """records every GET and answers from a per-url table"""

    def __init__(self, routes=None):
        self.routes = dict(routes or {})
        self.calls = []

    def get(self, url, params=None, headers=None, timeout=None):
        self.calls.append({"url": url, "params": params, "headers": headers, "timeout": timeout})
        answer = self.routes.get(url)
        if answer is None:
            raise requests.ConnectionError(f"no route to {url}")
        if isinstance(answer, Exception):
            raise answer
        return answer

    @property
    def urls(self):
        return [call["url"] for call in self.calls]


@pytest.fixture
def no_credentials(monkeypatch):
    for name in CREDENTIAL_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def empty_settings():
    return Settings({})


@pytest.fixture
def all_keys_settings():
    return Settings({name: f"test-{name.lower()}" for name in CREDENTIAL_VARS})
