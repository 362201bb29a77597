"""Tests for the top-level entry point and chat session handling."""

from agent import orchestrator
from agent.orchestrator import create_session, process_message, query_openai
from agent.prompts import CONFIG_HELP_MESSAGE, ERROR_APOLOGY, FAILURE_MESSAGE, WELCOME_MESSAGE
from config import settings
from config.settings import ProviderKeys
from conftest import FakeResponse, FakeSession, completion


def test_no_keys_returns_config_help_without_network(monkeypatch):
    monkeypatch.setattr(settings, "load_dotenv", lambda *a, **k: False)
    session = FakeSession()
    answer = query_openai("speeding on NH", session=session)
    assert answer == CONFIG_HELP_MESSAGE
    assert "OPENROUTER_API_KEY" in answer and "GROQ_API_KEY" in answer
    assert session.calls == []


def test_keys_from_environment_are_used(monkeypatch):
    monkeypatch.setattr(settings, "load_dotenv", lambda *a, **k: False)
    monkeypatch.setenv("GROQ_API_KEY", "env-groq")
    session = FakeSession([completion("answer")])
    assert query_openai("hello", session=session) == "answer"
    assert session.calls[0]["headers"]["Authorization"] == "Bearer env-groq"


def test_speeding_question_sends_injected_context(groq_only):
    session = FakeSession([completion("Install speed cameras.")])
    answer = query_openai("What causes speeding accidents on NH roads at night?",
                          keys=groq_only, session=session)
    assert answer == "Install speed cameras."
    messages = session.calls[0]["json"]["messages"]
    assert messages[0]["role"] == "system"
    assert "RECOMMENDED SAFETY INTERVENTIONS" in messages[0]["content"]
    assert messages[-1] == {"role": "user",
                            "content": "What causes speeding accidents on NH roads at night?"}


def test_context_is_forwarded(groq_only):
    session = FakeSession([completion("ok")])
    query_openai("hello", context="district data", keys=groq_only, session=session)
    messages = session.calls[0]["json"]["messages"]
    assert messages[1] == {"role": "system", "content": "Context data: district data"}


def test_state_query_answer_is_sanitized(groq_only):
    session = FakeSession([completion("I do not have the exact counts for Gujarat.")])
    answer = query_openai("Accident counts in Gujarat", keys=groq_only, session=session)
    assert "top hotspots in Gujarat" in answer


def test_non_state_answer_is_not_sanitized(groq_only):
    reply = "I do not have the exact counts."
    session = FakeSession([completion(reply)])
    assert query_openai("Accident counts", keys=groq_only, session=session) == reply


def test_without_session_uses_module_level_post(monkeypatch, groq_only):
    fake = FakeSession([completion("plain post")])
    monkeypatch.setattr(orchestrator.requests, "post", fake.post)
    assert query_openai("hello", keys=groq_only) == "plain post"


def test_provider_failure_returns_generic_message(groq_only):
    session = FakeSession([FakeResponse(500, {"error": {"code": "server_error"}})])
    assert query_openai("hello", keys=groq_only, session=session) == FAILURE_MESSAGE


def test_unexpected_error_returns_generic_message(monkeypatch, groq_only):
    def boom(*args, **kwargs):
        raise RuntimeError("bug")

    monkeypatch.setattr(orchestrator, "assemble_prompt", boom)
    assert query_openai("hello", keys=groq_only, session=FakeSession()) == FAILURE_MESSAGE


# --- Chat session ---

def test_create_session_has_welcome_message():
    state = create_session()
    assert len(state["messages"]) == 1
    assert state["messages"][0].role == "assistant"
    assert state["messages"][0].content == WELCOME_MESSAGE


def test_process_message_appends_turns_and_normalizes_breaks(groq_only):
    state = create_session()
    session = FakeSession([completion("line one<br>line two")])
    answer = process_message(state, "speeding tips", keys=groq_only, session=session)
    assert answer == "line one\nline two"
    assert [m.role for m in state["messages"]] == ["assistant", "user", "assistant"]
    assert state["messages"][-1].content == "line one\nline two"


def test_process_message_ignores_blank_input(groq_only):
    state = create_session()
    assert process_message(state, "   ", keys=groq_only, session=FakeSession()) == ""
    assert len(state["messages"]) == 1


def test_process_message_apologizes_on_unexpected_error(monkeypatch):
    def boom(*args, **kwargs):
        raise RuntimeError("bug")

    monkeypatch.setattr(orchestrator, "query_openai", boom)
    state = create_session()
    assert process_message(state, "hello", keys=ProviderKeys(groq="k")) == ERROR_APOLOGY
    assert state["messages"][-1].content == ERROR_APOLOGY


def test_process_message_uses_session_context(groq_only):
    state = create_session()
    state["context_data"] = "NH-48 crash log"
    session = FakeSession([completion("ok")])
    process_message(state, "hello", keys=groq_only, session=session)
    assert session.calls[0]["json"]["messages"][1]["content"] == "Context data: NH-48 crash log"
