"""
MargDarshak Issue Detector
Maps free-text questions to safety and infrastructure tags by keyword membership.
"""

from typing import NamedTuple, Optional

from config.parameters import STATE_NAMES


# ---------------------------------------------------------------------------
# Keyword rules: (keywords, tag), checked in order. Any keyword hit adds the tag.
# ---------------------------------------------------------------------------

ISSUE_TYPE_RULES: list[tuple[tuple[str, ...], str]] = [
    (("speed", "speeding"), "speeding"),
    (("collision", "crash"), "intersection_collision"),
    (("lane", "overtake"), "lane_indiscipline"),
    (("visibility",), "low_visibility_accident"),
    (("pedestrian",), "pedestrian_accident"),
    (("truck", "heavy vehicle"), "truck_accident"),
    (("weather", "monsoon", "fog"), "weather_related_accident"),
    (("defect", "brake", "tire"), "vehicle_defect"),
    (("rash", "dangerous"), "rash_driving"),
    (("drowsy", "fatigue"), "drowsy_driving"),
]

ROAD_TYPE_RULES: list[tuple[tuple[str, ...], str]] = [
    (("nh", "national highway"), "NH"),
    (("sh", "state highway"), "SH"),
    (("urban", "city"), "Urban"),
    (("rural", "village"), "Rural_Road"),
    # Mountain roads are mostly national highways
    (("mountain", "hill"), "NH"),
]

CONDITION_RULES: list[tuple[tuple[str, ...], str]] = [
    (("night", "dark"), "night_driving"),
    (("fog", "foggy"), "fog"),
    (("monsoon", "rain"), "monsoon"),
    (("wet",), "wet_road"),
    (("traffic", "congestion"), "high_traffic_volume"),
    (("hotspot", "accident prone"), "accident_hotspot"),
    (("mountain", "hill"), "mountainous_terrain"),
]

PROBLEM_CATEGORY_RULES: list[tuple[tuple[str, ...], str]] = [
    (("damaged", "damage", "broken"), "Damaged"),
    (("faded", "fading", "worn"), "Faded"),
    (("missing", "absent"), "Missing"),
    (("improper", "incorrect", "wrongly placed"), "Improper Placement"),
    (("cracked", "crack"), "Cracked/Deteriorated"),
    (("loose", "separated"), "Loose/Separated Components"),
    (("corroded", "corrosion", "rust"), "Corrosion"),
    (("obscured", "obstruct", "blocked"), "Obscured"),
]

INFRASTRUCTURE_TYPE_RULES: list[tuple[tuple[str, ...], str]] = [
    (("sign", "signage", "stop sign", "warning sign", "directional sign"), "Road Sign"),
    (("marking", "line", "paint", "zebra crossing", "road marking"), "Road Marking"),
    (("speed hump", "bump", "traffic calming", "rumble strip", "stud"), "Traffic Calming Measures"),
]


class SafetyTags(NamedTuple):
    issue_types: list[str]
    road_types: list[str]
    conditions: list[str]


class InfrastructureTags(NamedTuple):
    problem_categories: list[str]
    infrastructure_types: list[str]


def match_rules(text: str, rules: list[tuple[tuple[str, ...], str]]) -> list[str]:
    """
    Apply keyword rules to already lower-cased text.

    Returns one tag per matching rule, in rule order. Repeated tags are kept.
    """
    return [tag for keywords, tag in rules if any(kw in text for kw in keywords)]


def detect_safety_issues(text: str) -> SafetyTags:
    """
    Detect safety issue types, road types and conditions mentioned in *text*.

    Args:
        text: Raw user question.

    Returns:
        SafetyTags with a (possibly empty) list per category.
    """
    lowered = (text or "").lower()
    return SafetyTags(
        issue_types=match_rules(lowered, ISSUE_TYPE_RULES),
        road_types=match_rules(lowered, ROAD_TYPE_RULES),
        conditions=match_rules(lowered, CONDITION_RULES),
    )


def detect_infrastructure_issues(text: str) -> InfrastructureTags:
    """Detect infrastructure problem categories and asset types mentioned in *text*."""
    lowered = (text or "").lower()
    return InfrastructureTags(
        problem_categories=match_rules(lowered, PROBLEM_CATEGORY_RULES),
        infrastructure_types=match_rules(lowered, INFRASTRUCTURE_TYPE_RULES),
    )


def detect_state(text: str) -> Optional[str]:
    """Return the first known Indian state named in *text*, or None."""
    lowered = (text or "").lower()
    for state in STATE_NAMES:
        if state.lower() in lowered:
            return state
    return None
