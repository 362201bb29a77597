"""
MargDarshak Provider Gateway
Sends chat messages to OpenRouter, then Groq, walking an ordered list of
(provider, model) attempts until one returns text.
"""

import logging
from typing import Callable, NamedTuple, Optional

import requests

from config.parameters import (
    APP_REFERER,
    APP_TITLE,
    GROQ_MAX_TOKENS,
    GROQ_MODELS,
    GROQ_TEMPERATURE,
    GROQ_URL,
    MODEL_UNAVAILABLE_CODES,
    MODEL_UNAVAILABLE_MARKERS,
    OPENROUTER_MAX_TOKENS,
    OPENROUTER_MODEL,
    OPENROUTER_TEMPERATURE,
    OPENROUTER_URL,
    REQUEST_TIMEOUT,
)
from config.settings import ProviderKeys

logger = logging.getLogger(__name__)

OPENROUTER = "openrouter"
GROQ = "groq"

SUCCESS = "success"
UNAVAILABLE = "unavailable"
FATAL = "fatal"


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

class ApiKeyNotConfigured(Exception):
    """No API key could be resolved for any provider."""


class ProviderError(Exception):
    """A provider returned a non-success status, a malformed body, or was unreachable."""

    def __init__(
        self,
        message: str,
        provider: Optional[str] = None,
        model: Optional[str] = None,
        status_code: Optional[int] = None,
    ):
        super().__init__(message)
        self.provider = provider
        self.model = model
        self.status_code = status_code


class ModelUnavailable(ProviderError):
    """The requested model is decommissioned or unknown; the next model may work."""


# ---------------------------------------------------------------------------
# Attempt plan
# ---------------------------------------------------------------------------

class ProviderSpec(NamedTuple):
    url: str
    temperature: float
    max_tokens: int
    extra_headers: dict
    allow_empty: bool


PROVIDERS: dict[str, ProviderSpec] = {
    OPENROUTER: ProviderSpec(
        url=OPENROUTER_URL,
        temperature=OPENROUTER_TEMPERATURE,
        max_tokens=OPENROUTER_MAX_TOKENS,
        extra_headers={"HTTP-Referer": APP_REFERER, "X-Title": APP_TITLE},
        allow_empty=False,
    ),
    GROQ: ProviderSpec(
        url=GROQ_URL,
        temperature=GROQ_TEMPERATURE,
        max_tokens=GROQ_MAX_TOKENS,
        extra_headers={},
        allow_empty=True,
    ),
}


class Attempt(NamedTuple):
    provider: str
    model: str


class Outcome(NamedTuple):
    kind: str
    text: Optional[str] = None
    error: Optional[ProviderError] = None


def plan_attempts(keys: ProviderKeys) -> list[Attempt]:
    """OpenRouter's single model first (if keyed), then every Groq model in order (if keyed)."""
    attempts: list[Attempt] = []
    if keys.openrouter:
        attempts.append(Attempt(OPENROUTER, OPENROUTER_MODEL))
    if keys.groq:
        attempts.extend(Attempt(GROQ, model) for model in GROQ_MODELS)
    return attempts


def run_attempts(attempts: list[Attempt], send: Callable[[Attempt], Outcome]) -> str:
    """
    Try each attempt in order, one at a time.

    - success: return its text
    - unavailable: move on to the next attempt
    - fatal: skip the remaining attempts of that provider

    Raises:
        ProviderError: The last error seen, once every attempt is used up.
    """
    last_error: Optional[ProviderError] = None
    abandoned: set[str] = set()

    for attempt in attempts:
        if attempt.provider in abandoned:
            continue

        outcome = send(attempt)
        if outcome.kind == SUCCESS:
            logger.info("Answer received from %s (%s)", attempt.provider, attempt.model)
            return outcome.text

        last_error = outcome.error
        if outcome.kind == UNAVAILABLE:
            logger.warning("Model %s unavailable on %s, trying next: %s",
                           attempt.model, attempt.provider, outcome.error)
        else:
            abandoned.add(attempt.provider)
            logger.warning("Provider %s failed with %s: %s",
                           attempt.provider, attempt.model, outcome.error)

    if last_error is None:
        raise ProviderError("No provider attempts to run")
    raise last_error


# ---------------------------------------------------------------------------
# Response parsing
# ---------------------------------------------------------------------------

def _safe_json(response: requests.Response) -> dict:
    try:
        data = response.json()
    except ValueError:
        return {}
    return data if isinstance(data, dict) else {}


def is_model_unavailable(body: dict) -> bool:
    """True when an error body says the model is decommissioned or not found."""
    error = body.get("error")
    if not isinstance(error, dict):
        return False
    if error.get("code") in MODEL_UNAVAILABLE_CODES:
        return True
    message = str(error.get("message") or "").lower()
    return any(marker in message for marker in MODEL_UNAVAILABLE_MARKERS)


def extract_content(data: dict, allow_empty: bool = False) -> str:
    """
    Pull choices[0].message.content out of a chat-completions body.

    An empty string is accepted only when *allow_empty* is set.

    Raises:
        ValueError: If the body does not have that shape.
    """
    try:
        content = data["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError) as e:
        raise ValueError("Invalid response format") from e
    if not isinstance(content, str) or (not content and not allow_empty):
        raise ValueError("Invalid response format")
    return content


# ---------------------------------------------------------------------------
# Gateway
# ---------------------------------------------------------------------------

class ProviderGateway:
    """
    Sends chat-completions requests using explicitly injected provider keys.

    Args:
        keys: Provider API keys.
        session: Optional requests.Session; module-level requests.post is used when omitted.
        timeout: Per-request timeout in seconds; None leaves it to the transport.
    """

    def __init__(
        self,
        keys: ProviderKeys,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = REQUEST_TIMEOUT,
    ):
        self.keys = keys
        self.session = session
        self.timeout = timeout

    def complete(self, messages: list[dict]) -> str:
        """
        Return the first successful answer for *messages*.

        Raises:
            ApiKeyNotConfigured: If neither provider has a key. No request is sent.
            ProviderError: If every attempt failed.
        """
        if not self.keys.any():
            raise ApiKeyNotConfigured("API key not configured")

        attempts = plan_attempts(self.keys)
        return run_attempts(attempts, lambda attempt: self.send(attempt, messages))

    def send(self, attempt: Attempt, messages: list[dict]) -> Outcome:
        """Run a single attempt and tag its outcome."""
        try:
            text = self._post(attempt, messages)
        except ModelUnavailable as e:
            return Outcome(UNAVAILABLE, error=e)
        except ProviderError as e:
            return Outcome(FATAL, error=e)
        return Outcome(SUCCESS, text=text)

    def _api_key(self, provider: str) -> Optional[str]:
        return self.keys.openrouter if provider == OPENROUTER else self.keys.groq

    def _post(self, attempt: Attempt, messages: list[dict]) -> str:
        spec = PROVIDERS[attempt.provider]
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self._api_key(attempt.provider)}",
            **spec.extra_headers,
        }
        payload = {
            "model": attempt.model,
            "messages": messages,
            "temperature": spec.temperature,
            "max_tokens": spec.max_tokens,
        }

        try:
            post = self.session.post if self.session is not None else requests.post
            response = post(
                spec.url, json=payload, headers=headers, timeout=self.timeout
            )
        except requests.RequestException as e:
            raise ProviderError(
                f"{attempt.provider} request failed: {e}", attempt.provider, attempt.model
            ) from e

        if not response.ok:
            body = _safe_json(response)
            if is_model_unavailable(body):
                raise ModelUnavailable(
                    f"Model {attempt.model} is unavailable",
                    attempt.provider, attempt.model, response.status_code,
                )
            raise ProviderError(
                f"API error: {response.status_code}",
                attempt.provider, attempt.model, response.status_code,
            )

        try:
            return extract_content(response.json(), allow_empty=spec.allow_empty)
        except ValueError as e:
            raise ProviderError(
                f"{attempt.provider} returned an invalid response: {e}",
                attempt.provider, attempt.model, response.status_code,
            ) from e
