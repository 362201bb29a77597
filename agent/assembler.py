"""
MargDarshak Prompt Assembler
Turns a user question into the provider message list, injecting matching
intervention records as system-prompt context.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import NamedTuple, Optional

from agent.prompts import (
    CONTEXT_DATA_PROMPT,
    INFRASTRUCTURE_CONTEXT_HEADER,
    INFRASTRUCTURE_ITEM,
    SAFETY_CONTEXT_HEADER,
    STATE_SYSTEM_PROMPT,
    SYSTEM_PROMPT,
)
from config.parameters import (
    DEFAULT_CONDITION,
    DEFAULT_INFRASTRUCTURE_TYPE,
    DEFAULT_PROBLEM_CATEGORY,
    DEFAULT_ROAD_TYPE,
    MAX_INFRASTRUCTURE_MATCHES,
)
from engine.detector import (
    InfrastructureTags,
    SafetyTags,
    detect_infrastructure_issues,
    detect_safety_issues,
    detect_state,
)
from engine.infrastructure import get_infrastructure_interventions
from engine.interventions import get_intervention_recommendations

logger = logging.getLogger(__name__)

ROLES = ("system", "user", "assistant")


@dataclass
class ChatMessage:
    role: str
    content: str
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self) -> None:
        if self.role not in ROLES:
            raise ValueError(f"Unknown role '{self.role}'. Valid roles: {', '.join(ROLES)}")

    def to_api(self) -> dict:
        """Message in the chat-completions wire format."""
        return {"role": self.role, "content": self.content}


class LookupResult(NamedTuple):
    """
    Outcome of one context lookup.

    status is "ok" (context holds a block), "empty" (nothing matched or
    nothing detected) or "failed" (the lookup raised; error holds the message).
    """

    status: str
    context: str = ""
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == "ok"


class AssembledPrompt(NamedTuple):
    messages: list[ChatMessage]
    mentioned_state: Optional[str]
    safety: LookupResult
    infrastructure: LookupResult

    def to_api(self) -> list[dict]:
        return [m.to_api() for m in self.messages]


def safety_context(tags: SafetyTags) -> LookupResult:
    """Build the safety-intervention context block for detected tags."""
    if not tags.issue_types:
        return LookupResult("empty")

    issue = tags.issue_types[0]
    road_type = tags.road_types[0] if tags.road_types else DEFAULT_ROAD_TYPE
    condition = tags.conditions[0] if tags.conditions else DEFAULT_CONDITION
    try:
        result = get_intervention_recommendations(issue, road_type, condition)
    except Exception as e:
        logger.warning("Safety intervention lookup failed for %s/%s/%s: %s",
                       issue, road_type, condition, e)
        return LookupResult("failed", error=str(e))

    if not result["interventions"]:
        return LookupResult("empty")
    return LookupResult("ok", SAFETY_CONTEXT_HEADER + result["recommendations"])


def format_infrastructure_item(item) -> str:
    return INFRASTRUCTURE_ITEM.format(
        specific_problem=item.specific_problem,
        problem_category=item.problem_category,
        infrastructure_type=item.infrastructure_type,
        priority=item.priority,
        timeframe=item.timeframe,
        description=item.description,
        solution=item.solution,
        implementation=item.implementation,
    )


def infrastructure_context(tags: InfrastructureTags) -> LookupResult:
    """Build the infrastructure-maintenance context block for detected tags."""
    if not tags.problem_categories and not tags.infrastructure_types:
        return LookupResult("empty")

    category = tags.problem_categories[0] if tags.problem_categories else DEFAULT_PROBLEM_CATEGORY
    asset = tags.infrastructure_types[0] if tags.infrastructure_types else DEFAULT_INFRASTRUCTURE_TYPE
    try:
        matches = get_infrastructure_interventions(category, asset)
        if not matches:
            return LookupResult("empty")
        blocks = [format_infrastructure_item(m) for m in matches[:MAX_INFRASTRUCTURE_MATCHES]]
    except Exception as e:
        logger.warning("Infrastructure intervention lookup failed for %s/%s: %s",
                       category, asset, e)
        return LookupResult("failed", error=str(e))

    return LookupResult("ok", INFRASTRUCTURE_CONTEXT_HEADER + "\n\n".join(blocks))


def build_system_prompt(mentioned_state: Optional[str], *context_blocks: str) -> str:
    if mentioned_state:
        base = STATE_SYSTEM_PROMPT.format(state=mentioned_state)
    else:
        base = SYSTEM_PROMPT
    return base + "".join(context_blocks)


def assemble_prompt(prompt: str, context: Optional[str] = None) -> AssembledPrompt:
    """
    Build the provider message list for one user question.

    Args:
        prompt: Raw user question.
        context: Optional caller-supplied context, sent as a second system message.

    Returns:
        AssembledPrompt with [system, system?, user] messages and the detected state.
    """
    mentioned_state = detect_state(prompt)

    safety = safety_context(detect_safety_issues(prompt))
    infrastructure = infrastructure_context(detect_infrastructure_issues(prompt))

    system_prompt = build_system_prompt(
        mentioned_state, safety.context, infrastructure.context
    )

    messages = [ChatMessage("system", system_prompt)]
    if context:
        messages.append(ChatMessage("system", CONTEXT_DATA_PROMPT.format(context=context)))
    messages.append(ChatMessage("user", prompt))

    return AssembledPrompt(messages, mentioned_state, safety, infrastructure)
