"""Tests for provider key resolution."""

import json

import pytest

from config import settings
from config.settings import (
    ProviderKeys,
    load_local_settings,
    resolve_key,
    resolve_keys,
    save_local_key,
)


@pytest.fixture(autouse=True)
def no_dotenv(monkeypatch):
    monkeypatch.setattr(settings, "load_dotenv", lambda *a, **k: False)


def test_no_sources_gives_none():
    assert resolve_keys() == ProviderKeys()
    assert not resolve_keys().any()


def test_vite_prefixed_variable_wins(monkeypatch):
    monkeypatch.setenv("VITE_GROQ_API_KEY", "vite-key")
    monkeypatch.setenv("GROQ_API_KEY", "plain-key")
    assert resolve_key("groq", {}) == "vite-key"


def test_unprefixed_variable_used_when_vite_empty(monkeypatch):
    monkeypatch.setenv("VITE_OPENROUTER_API_KEY", "")
    monkeypatch.setenv("OPENROUTER_API_KEY", "plain-key")
    assert resolve_key("openrouter", {}) == "plain-key"


def test_local_settings_fallback(isolated_settings):
    isolated_settings.write_text(json.dumps({"groq_api_key": "stored-key"}))
    keys = resolve_keys()
    assert keys.groq == "stored-key"
    assert keys.openrouter is None


def test_env_beats_local_settings(monkeypatch, isolated_settings):
    isolated_settings.write_text(json.dumps({"openrouter_api_key": "stored"}))
    monkeypatch.setenv("OPENROUTER_API_KEY", "env")
    assert resolve_keys().openrouter == "env"


def test_save_and_remove_local_key(isolated_settings):
    save_local_key("openrouter", "  abc  ")
    assert load_local_settings() == {"openrouter_api_key": "abc"}
    save_local_key("openrouter", "")
    assert load_local_settings() == {}


def test_save_unknown_provider():
    with pytest.raises(KeyError):
        save_local_key("anthropic", "x")


def test_corrupt_settings_file_is_ignored(isolated_settings):
    isolated_settings.write_text("{not json")
    assert load_local_settings() == {}
