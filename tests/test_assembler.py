"""Tests for prompt assembly and context injection."""

import pytest

from agent import assembler
from agent.assembler import (
    ChatMessage,
    LookupResult,
    assemble_prompt,
    infrastructure_context,
    safety_context,
)
from engine.detector import InfrastructureTags, SafetyTags


def test_end_to_end_speeding_prompt_has_safety_block():
    result = assemble_prompt("What causes speeding accidents on NH roads at night?")
    roles = [m.role for m in result.messages]
    assert roles == ["system", "user"]
    system = result.messages[0].content
    assert "RECOMMENDED SAFETY INTERVENTIONS FROM GLOBAL BEST PRACTICES DATABASE:" in system
    assert result.safety.status == "ok"
    assert result.mentioned_state is None
    assert result.messages[-1].content == "What causes speeding accidents on NH roads at night?"


def test_system_prompt_forbids_ids_and_database_mentions():
    system = assemble_prompt("How to reduce pedestrian accidents?").messages[0].content
    assert 'DO NOT mention "Intervention ID"' in system
    assert 'DO NOT mention "Safety Intervention Database"' in system
    assert "specializing in Indian road conditions" in system


def test_state_specialised_prompt():
    result = assemble_prompt("Top accident hotspots in Gujarat")
    assert result.mentioned_state == "Gujarat"
    system = result.messages[0].content
    assert "specializing in Gujarat" in system
    assert "Tailor recommendations to Gujarat-specific context" in system


def test_external_context_becomes_second_system_message():
    result = assemble_prompt("Tell me about road safety", context="42 crashes on NH-44")
    assert [m.role for m in result.messages] == ["system", "system", "user"]
    assert result.messages[1].content == "Context data: 42 crashes on NH-44"


def test_no_keywords_means_no_context_blocks():
    result = assemble_prompt("Hello")
    system = result.messages[0].content
    assert "RECOMMENDED" not in system
    assert result.safety == LookupResult("empty")
    assert result.infrastructure == LookupResult("empty")


def test_defaults_used_when_only_issue_detected(monkeypatch):
    seen = {}

    def fake_recommendations(issue, road_type, condition):
        seen.update(issue=issue, road_type=road_type, condition=condition)
        return {"interventions": [], "reasoning": "", "recommendations": ""}

    monkeypatch.setattr(assembler, "get_intervention_recommendations", fake_recommendations)
    result = safety_context(SafetyTags(["speeding"], [], []))
    assert seen == {"issue": "speeding", "road_type": "NH", "condition": "normal_conditions"}
    assert result.status == "empty"


def test_safety_lookup_failure_is_reported_not_raised(monkeypatch):
    def boom(*args):
        raise RuntimeError("table unavailable")

    monkeypatch.setattr(assembler, "get_intervention_recommendations", boom)
    result = safety_context(SafetyTags(["speeding"], ["NH"], ["fog"]))
    assert result.status == "failed"
    assert result.error == "table unavailable"
    assert result.context == ""


def test_assembly_continues_when_lookups_fail(monkeypatch):
    def boom(*args):
        raise RuntimeError("broken")

    monkeypatch.setattr(assembler, "get_intervention_recommendations", boom)
    monkeypatch.setattr(assembler, "get_infrastructure_interventions", boom)
    result = assemble_prompt("speeding past a damaged sign")
    assert result.safety.status == "failed"
    assert result.infrastructure.status == "failed"
    assert [m.role for m in result.messages] == ["system", "user"]


def test_infrastructure_block_uses_defaults_and_top_three():
    result = infrastructure_context(InfrastructureTags(["Missing"], []))
    assert result.ok
    # Missing + default "Road Sign" has four records; only three are injected
    assert result.context.count("Priority:") == 3
    assert result.context.startswith("\n\nRECOMMENDED INFRASTRUCTURE INTERVENTIONS:\n\n")
    assert "**Emergency SOS Facility Sign (Missing)** (Missing - Road Sign)" in result.context
    assert "Height Limit Sign" not in result.context


def test_infrastructure_block_default_category():
    result = infrastructure_context(InfrastructureTags([], ["Road Marking"]))
    assert result.ok
    assert "**Box Marking (Damaged)** (Damaged - Road Marking)" in result.context


def test_infrastructure_no_match_is_empty():
    # "Corrosion" is detected but no table record uses that category
    assert infrastructure_context(InfrastructureTags(["Corrosion"], ["Road Sign"])).status == "empty"


def test_damaged_sign_prompt_includes_infrastructure_block():
    result = assemble_prompt("There is a damaged stop sign on my street")
    system = result.messages[0].content
    assert "RECOMMENDED INFRASTRUCTURE INTERVENTIONS:" in system
    assert "STOP Sign (Damaged)" in system
    assert "INFRA_001" not in system


def test_to_api_shape():
    result = assemble_prompt("speeding")
    api = result.to_api()
    assert api[-1] == {"role": "user", "content": "speeding"}
    assert set(api[0]) == {"role", "content"}


def test_chat_message_rejects_unknown_role():
    with pytest.raises(ValueError):
        ChatMessage("robot", "hi")
