"""Tests for keyword-based issue detection."""

import pytest

from engine.detector import (
    ISSUE_TYPE_RULES,
    detect_infrastructure_issues,
    detect_safety_issues,
    detect_state,
    match_rules,
)


@pytest.mark.parametrize("text", ["", "   ", "\n\t", "Hello there, how are you?", "qwerty"])
def test_no_keywords_gives_empty_tags(text):
    safety = detect_safety_issues(text)
    infra = detect_infrastructure_issues(text)
    assert safety.issue_types == []
    assert safety.road_types == []
    assert safety.conditions == []
    assert infra.problem_categories == []
    assert infra.infrastructure_types == []


def test_none_input_is_treated_as_empty():
    assert detect_safety_issues(None).issue_types == []
    assert detect_infrastructure_issues(None).infrastructure_types == []


def test_speeding_on_nh_at_night():
    tags = detect_safety_issues("What causes speeding accidents on NH roads at night?")
    assert "speeding" in tags.issue_types
    assert "NH" in tags.road_types
    assert "night_driving" in tags.conditions


def test_detection_is_case_insensitive():
    tags = detect_safety_issues("PEDESTRIAN deaths in the CITY")
    assert tags.issue_types == ["pedestrian_accident"]
    assert tags.road_types == ["Urban"]


def test_mountain_triggers_road_type_and_condition():
    tags = detect_safety_issues("mountain road")
    assert tags.road_types == ["NH"]
    assert tags.conditions == ["mountainous_terrain"]


def test_duplicate_tags_are_kept():
    tags = detect_safety_issues("national highway through the hills")
    assert tags.road_types == ["NH", "NH"]


def test_tag_order_follows_rule_order_not_text_order():
    tags = detect_safety_issues("drowsy truck drivers speeding")
    assert tags.issue_types == ["speeding", "truck_accident", "drowsy_driving"]


def test_fog_is_both_weather_issue_and_condition():
    tags = detect_safety_issues("collision in fog")
    assert tags.issue_types == ["intersection_collision", "weather_related_accident"]
    assert tags.conditions == ["fog"]


def test_rash_matches_inside_crash():
    tags = detect_safety_issues("crashes in fog")
    assert tags.issue_types == ["intersection_collision", "weather_related_accident", "rash_driving"]


def test_one_tag_per_rule_even_with_several_keyword_hits():
    assert match_rules("speed and speeding", ISSUE_TYPE_RULES) == ["speeding"]


def test_infrastructure_damaged_stop_sign():
    tags = detect_infrastructure_issues("There is a damaged STOP sign near the junction")
    assert tags.problem_categories == ["Damaged"]
    assert tags.infrastructure_types == ["Road Sign"]


def test_infrastructure_faded_zebra_crossing():
    tags = detect_infrastructure_issues("the zebra crossing paint has faded")
    assert tags.problem_categories == ["Faded"]
    assert tags.infrastructure_types == ["Road Marking"]


def test_infrastructure_missing_speed_hump():
    tags = detect_infrastructure_issues("missing speed hump outside the school")
    assert tags.problem_categories == ["Missing"]
    assert tags.infrastructure_types == ["Traffic Calming Measures"]


def test_detect_state_first_in_list_wins():
    assert detect_state("Compare Kerala and Gujarat") == "Gujarat"
    assert detect_state("accidents in tamil nadu") == "Tamil Nadu"
    assert detect_state("no state here") is None
