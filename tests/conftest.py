"""
Pytest configuration and shared fixtures.

Provider calls go through FakeSession; no test touches the network.
"""

import json
import sys
from pathlib import Path

import pytest

BASE_DIR = Path(__file__).parent.parent
sys.path.insert(0, str(BASE_DIR))

from config.settings import ProviderKeys  # noqa: E402

KEY_ENV_VARS = [
    "VITE_OPENROUTER_API_KEY",
    "OPENROUTER_API_KEY",
    "VITE_GROQ_API_KEY",
    "GROQ_API_KEY",
]


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, status_code=200, body=None, text=None):
        self.status_code = status_code
        self._body = body
        self._text = text

    @property
    def ok(self):
        return 200 <= self.status_code < 400

    def json(self):
        if self._text is not None:
            return json.loads(self._text)
        return self._body


class FakeSession:
    """Returns queued responses (or raises queued exceptions) and records each POST."""

    def __init__(self, responses=()):
        self.responses = list(responses)
        self.calls = []

    def post(self, url, json=None, headers=None, timeout=None):
        self.calls.append({"url": url, "json": json, "headers": headers, "timeout": timeout})
        if not self.responses:
            raise AssertionError(f"Unexpected request to {url}")
        item = self.responses.pop(0)
        if isinstance(item, Exception):
            raise item
        return item

    @property
    def models(self):
        return [call["json"]["model"] for call in self.calls]


def completion(content):
    return FakeResponse(200, {"choices": [{"message": {"role": "assistant", "content": content}}]})


def decommissioned():
    return FakeResponse(400, {"error": {"code": "model_decommissioned", "message": "gone"}})


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """Clear key env vars and point the local settings file at a temp path."""
    for var in KEY_ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    path = tmp_path / "settings.json"
    monkeypatch.setenv("MARGDARSHAK_SETTINGS_PATH", str(path))
    return path


@pytest.fixture
def no_keys():
    return ProviderKeys()


@pytest.fixture
def groq_only():
    return ProviderKeys(groq="test-groq-key")


@pytest.fixture
def both_keys():
    return ProviderKeys(openrouter="test-openrouter-key", groq="test-groq-key")
