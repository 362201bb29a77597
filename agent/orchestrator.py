"""
MargDarshak Orchestrator
Single entry point from the chat page into the recommendation pipeline:
prompt assembly, provider query and response clean-up.
"""

import logging
from typing import Optional

import requests

from agent.assembler import ChatMessage, assemble_prompt
from agent.prompts import (
    CONFIG_HELP_MESSAGE,
    ERROR_APOLOGY,
    FAILURE_MESSAGE,
    WELCOME_MESSAGE,
)
from agent.providers import ApiKeyNotConfigured, ProviderGateway
from agent.sanitizer import filter_out_meta_commentary, normalize_line_breaks
from config.settings import ProviderKeys, resolve_keys

logger = logging.getLogger(__name__)


def query_openai(
    prompt: str,
    context: Optional[str] = None,
    keys: Optional[ProviderKeys] = None,
    session: Optional[requests.Session] = None,
) -> str:
    """
    Answer a road-safety question.

    Args:
        prompt: The user's question.
        context: Optional extra context data from the caller.
        keys: Provider keys (defaults to env vars / local settings).
        session: Optional requests.Session used for provider calls.

    Returns:
        The model's answer, or a fixed guidance message on failure. Never raises.
    """
    try:
        if keys is None:
            keys = resolve_keys()

        assembled = assemble_prompt(prompt, context)
        gateway = ProviderGateway(keys, session=session)
        answer = gateway.complete(assembled.to_api())

        if assembled.mentioned_state and answer:
            answer = filter_out_meta_commentary(answer, assembled.mentioned_state)
        return answer

    except ApiKeyNotConfigured:
        logger.warning("No provider API key configured")
        return CONFIG_HELP_MESSAGE
    except Exception as e:
        logger.warning("Query failed: %s", e)
        return FAILURE_MESSAGE


def create_session() -> dict:
    """
    Initialize chat session state.

    Returns:
        Dict containing the message list (seeded with the welcome message)
        and the optional context data passed with every question.
    """
    return {
        "messages": [ChatMessage("assistant", WELCOME_MESSAGE)],
        "context_data": None,
    }


def process_message(
    session_state: dict,
    user_message: str,
    keys: Optional[ProviderKeys] = None,
    session: Optional[requests.Session] = None,
) -> str:
    """
    Append a user message, ask the pipeline, and append the cleaned answer.

    Blank messages are ignored. Any unexpected error becomes an apology so
    the conversation can continue.

    Returns:
        The assistant text appended to the session ("" for blank input).
    """
    if not user_message or not user_message.strip():
        return ""

    session_state["messages"].append(ChatMessage("user", user_message))

    try:
        answer = query_openai(
            user_message,
            session_state.get("context_data"),
            keys=keys,
            session=session,
        )
        answer = normalize_line_breaks(answer)
    except Exception as e:
        logger.exception("Chat turn failed: %s", e)
        answer = ERROR_APOLOGY

    session_state["messages"].append(ChatMessage("assistant", answer))
    return answer
