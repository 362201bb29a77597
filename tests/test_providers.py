"""Tests for the provider gateway and its fallback loop."""

import pytest
import requests

from agent.providers import (
    FATAL,
    GROQ,
    OPENROUTER,
    SUCCESS,
    UNAVAILABLE,
    ApiKeyNotConfigured,
    Attempt,
    ModelUnavailable,
    Outcome,
    ProviderError,
    ProviderGateway,
    extract_content,
    is_model_unavailable,
    plan_attempts,
    run_attempts,
)
from config.parameters import GROQ_MODELS, OPENROUTER_MODEL
from config.settings import ProviderKeys
from conftest import FakeResponse, FakeSession, completion, decommissioned

MESSAGES = [{"role": "user", "content": "hi"}]


# --- Attempt plan ---

def test_plan_with_both_keys():
    attempts = plan_attempts(ProviderKeys(openrouter="a", groq="b"))
    assert attempts[0] == Attempt(OPENROUTER, OPENROUTER_MODEL)
    assert [a.model for a in attempts[1:]] == GROQ_MODELS
    assert len(attempts) == 7


def test_plan_without_keys_is_empty():
    assert plan_attempts(ProviderKeys()) == []


# --- Fallback loop ---

def _scripted(outcomes):
    calls = []

    def send(attempt):
        calls.append(attempt)
        return outcomes.pop(0)

    return send, calls


def test_loop_returns_first_success():
    attempts = [Attempt(GROQ, "m1"), Attempt(GROQ, "m2")]
    send, calls = _scripted([Outcome(SUCCESS, text="done")])
    assert run_attempts(attempts, send) == "done"
    assert len(calls) == 1


def test_loop_advances_on_unavailable():
    attempts = [Attempt(GROQ, "m1"), Attempt(GROQ, "m2")]
    send, calls = _scripted([
        Outcome(UNAVAILABLE, error=ModelUnavailable("gone")),
        Outcome(SUCCESS, text="second"),
    ])
    assert run_attempts(attempts, send) == "second"
    assert [c.model for c in calls] == ["m1", "m2"]


def test_fatal_skips_rest_of_provider_but_not_next_provider():
    attempts = [Attempt(OPENROUTER, "o1"), Attempt(GROQ, "g1"), Attempt(GROQ, "g2")]
    send, calls = _scripted([
        Outcome(FATAL, error=ProviderError("boom")),
        Outcome(SUCCESS, text="from groq"),
    ])
    assert run_attempts(attempts, send) == "from groq"


def test_fatal_on_last_provider_raises_that_error():
    err = ProviderError("API error: 500")
    attempts = [Attempt(GROQ, "g1"), Attempt(GROQ, "g2")]
    send, calls = _scripted([Outcome(FATAL, error=err)])
    with pytest.raises(ProviderError) as exc:
        run_attempts(attempts, send)
    assert exc.value is err
    assert len(calls) == 1


def test_exhausted_list_raises_last_error():
    last = ModelUnavailable("last")
    attempts = [Attempt(GROQ, "g1"), Attempt(GROQ, "g2")]
    send, _ = _scripted([
        Outcome(UNAVAILABLE, error=ModelUnavailable("first")),
        Outcome(UNAVAILABLE, error=last),
    ])
    with pytest.raises(ModelUnavailable) as exc:
        run_attempts(attempts, send)
    assert exc.value is last


def test_empty_attempt_list_raises():
    with pytest.raises(ProviderError):
        run_attempts([], lambda a: Outcome(SUCCESS, text="x"))


# --- Response parsing ---

def test_extract_content():
    assert extract_content({"choices": [{"message": {"content": "ok"}}]}) == "ok"


@pytest.mark.parametrize("body", [
    {},
    {"choices": []},
    {"choices": [{}]},
    {"choices": [{"message": {"content": None}}]},
    [],
])
def test_extract_content_rejects_malformed(body):
    with pytest.raises(ValueError):
        extract_content(body)


def test_extract_content_empty_string_only_when_allowed():
    body = {"choices": [{"message": {"content": ""}}]}
    assert extract_content(body, allow_empty=True) == ""
    with pytest.raises(ValueError):
        extract_content(body)


def test_model_unavailable_detection():
    assert is_model_unavailable({"error": {"code": "model_decommissioned"}})
    assert is_model_unavailable({"error": {"message": "The model not found on server"}})
    assert not is_model_unavailable({"error": {"code": "rate_limit_exceeded"}})
    assert not is_model_unavailable({})


# --- Gateway over HTTP ---

def test_gateway_without_keys_raises_before_any_request():
    session = FakeSession()
    with pytest.raises(ApiKeyNotConfigured):
        ProviderGateway(ProviderKeys(), session=session).complete(MESSAGES)
    assert session.calls == []


def test_openrouter_request_shape(both_keys):
    session = FakeSession([completion("hello")])
    assert ProviderGateway(both_keys, session=session).complete(MESSAGES) == "hello"

    call = session.calls[0]
    assert call["url"] == "https://openrouter.ai/api/v1/chat/completions"
    assert call["headers"]["Authorization"] == "Bearer test-openrouter-key"
    assert call["headers"]["X-Title"] == "Road Safety Intervention GPT"
    assert call["json"] == {
        "model": "minimax/minimax-01",
        "messages": MESSAGES,
        "temperature": 0.7,
        "max_tokens": 4000,
    }
    assert call["timeout"] is None


def test_openrouter_failure_falls_back_to_groq(both_keys):
    session = FakeSession([FakeResponse(502, {}), completion("groq answer")])
    assert ProviderGateway(both_keys, session=session).complete(MESSAGES) == "groq answer"
    second = session.calls[1]
    assert second["url"] == "https://api.groq.com/openai/v1/chat/completions"
    assert second["headers"]["Authorization"] == "Bearer test-groq-key"
    assert second["json"]["model"] == "openai/gpt-oss-120b"
    assert second["json"]["max_tokens"] == 800


@pytest.mark.parametrize("failure", [
    requests.ConnectionError("offline"),
    FakeResponse(200, text="<html>not json</html>"),
    FakeResponse(200, {"choices": []}),
])
def test_any_openrouter_failure_falls_through(both_keys, failure):
    session = FakeSession([failure, completion("ok")])
    assert ProviderGateway(both_keys, session=session).complete(MESSAGES) == "ok"


def test_decommissioned_models_are_skipped(groq_only):
    session = FakeSession([decommissioned(), decommissioned(), completion("third model")])
    assert ProviderGateway(groq_only, session=session).complete(MESSAGES) == "third model"
    assert session.models == GROQ_MODELS[:3]


def test_other_groq_error_aborts_model_list(groq_only):
    session = FakeSession([FakeResponse(401, {"error": {"code": "invalid_api_key"}})])
    with pytest.raises(ProviderError) as exc:
        ProviderGateway(groq_only, session=session).complete(MESSAGES)
    assert exc.value.status_code == 401
    assert exc.value.provider == GROQ
    assert len(session.calls) == 1


def test_malformed_groq_body_aborts_model_list(groq_only):
    session = FakeSession([FakeResponse(200, {"choices": []}), completion("never")])
    with pytest.raises(ProviderError) as exc:
        ProviderGateway(groq_only, session=session).complete(MESSAGES)
    assert exc.value.provider == GROQ
    assert len(session.calls) == 1


def test_empty_groq_answer_is_returned(groq_only):
    session = FakeSession([completion("")])
    assert ProviderGateway(groq_only, session=session).complete(MESSAGES) == ""


def test_empty_openrouter_answer_falls_through(both_keys):
    session = FakeSession([completion(""), completion("groq answer")])
    assert ProviderGateway(both_keys, session=session).complete(MESSAGES) == "groq answer"
    assert session.models == ["minimax/minimax-01", "openai/gpt-oss-120b"]


def test_gateway_without_session_uses_module_post(monkeypatch, groq_only):
    fake = FakeSession([completion("direct")])
    monkeypatch.setattr(requests, "post", fake.post)
    assert ProviderGateway(groq_only).complete(MESSAGES) == "direct"
    assert len(fake.calls) == 1


def test_all_groq_models_decommissioned(groq_only):
    session = FakeSession([decommissioned() for _ in GROQ_MODELS])
    with pytest.raises(ModelUnavailable):
        ProviderGateway(groq_only, session=session).complete(MESSAGES)
    assert session.models == GROQ_MODELS


def test_openrouter_only_failure_raises():
    session = FakeSession([FakeResponse(500, {})])
    with pytest.raises(ProviderError):
        ProviderGateway(ProviderKeys(openrouter="k"), session=session).complete(MESSAGES)
