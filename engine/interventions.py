"""Safety intervention table and ranked lookup.

Provides global best-practice interventions for Indian road-safety issues,
keyed by issue type, road type and environmental condition, with
effectiveness, cost and timeframe ratings.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from config.parameters import WILDCARD


@dataclass(frozen=True)
class SafetyIntervention:
    """One safety intervention record. ``road_type`` and
    ``environmental_condition`` may be the wildcard ``'all'``."""

    id: str
    issue_type: str
    road_type: str
    environmental_condition: str
    intervention_name: str
    description: str
    implementation: str
    effectiveness: int
    cost: str
    timeframe: str
    references: tuple[str, ...] = ()
    best_practice_region: Optional[str] = None
    constraints: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "references", tuple(self.references or ()))


# ---------------------------------------------------------------------------
# Intervention table
# ---------------------------------------------------------------------------

SAFETY_INTERVENTIONS: tuple[SafetyIntervention, ...] = (
    SafetyIntervention(
        id="INT_001",
        issue_type="speeding",
        road_type="NH",
        environmental_condition="high_traffic_corridor",
        intervention_name="Variable Speed Limits with Dynamic Signage",
        description="Speed limits that change based on real-time traffic conditions, weather, and time of day",
        implementation="Install LED speed limit signs connected to traffic monitoring systems. Adjust limits during peak hours and adverse weather",
        effectiveness=85,
        cost="High",
        timeframe="Medium-term",
        references=["WHO Road Safety Guidelines", "NHAI Safety Audit 2024", "European Speed Limit Study"],
        best_practice_region="Netherlands, Germany",
        constraints="Requires initial capital investment and system maintenance",
    ),
    SafetyIntervention(
        id="INT_002",
        issue_type="speeding",
        road_type="NH",
        environmental_condition="accident_hotspot",
        intervention_name="Automated Speed Enforcement (Radar/Camera)",
        description="Automated detection and penalization of speeding vehicles through radar or CCTV",
        implementation="Deploy speed cameras at identified hotspots with clear signage. Revenue from fines supports road safety programs",
        effectiveness=80,
        cost="High",
        timeframe="Immediate",
        references=["NHAI Enforcement Guidelines", "CCTV Safety Audit"],
        best_practice_region="India (Delhi, Mumbai), Singapore",
    ),
    SafetyIntervention(
        id="INT_003",
        issue_type="speeding",
        road_type="NH",
        environmental_condition="all",
        intervention_name="Road Markings with Speed Perception Lines",
        description="Psychological traffic calming using convergent line markings to create speed perception",
        implementation="Paint converging white lines on road surface that create optical illusion of narrowing road, naturally slowing drivers",
        effectiveness=35,
        cost="Low",
        timeframe="Immediate",
        references=["Traffic Calming Guidelines", "Psychological Road Safety"],
        best_practice_region="India (some highways), UK",
    ),
    SafetyIntervention(
        id="INT_004",
        issue_type="speeding",
        road_type="Rural_Road",
        environmental_condition="all",
        intervention_name="Gateway Treatments and Entrance Treatments",
        description="Visual and physical modifications at village/town entrances to signal speed reduction",
        implementation="Install decorative welcome signs, reduce lane width visually, add vegetation. Communicate entry to lower-speed zone",
        effectiveness=45,
        cost="Medium",
        timeframe="Immediate",
        references=["Rural Road Safety Guidelines"],
    ),
    SafetyIntervention(
        id="INT_005",
        issue_type="intersection_collision",
        road_type="NH",
        environmental_condition="high_traffic_volume",
        intervention_name="Grade Separation (Overpass/Underpass)",
        description="Complete separation of traffic streams to eliminate intersection conflicts",
        implementation="Construct overpass or underpass to eliminate at-grade intersection. Provide on/off ramps with proper sight distance",
        effectiveness=95,
        cost="Very High",
        timeframe="Long-term",
        references=["NHAI Grade Separation Standards", "International Highway Design"],
        best_practice_region="India (NH on major corridors)",
    ),
    SafetyIntervention(
        id="INT_006",
        issue_type="intersection_collision",
        road_type="NH",
        environmental_condition="medium_traffic",
        intervention_name="Roundabout Implementation",
        description="Replace traditional intersection with modern roundabout design",
        implementation="Convert T-junction or cross-intersection to roundabout with proper splitter islands, lane markings, and signage",
        effectiveness=80,
        cost="High",
        timeframe="Medium-term",
        references=["Roundabout Design Manual", "NHAI Guidelines"],
        best_practice_region="India (Jaipur, Bangalore), Europe",
    ),
    SafetyIntervention(
        id="INT_007",
        issue_type="intersection_collision",
        road_type="Urban",
        environmental_condition="pedestrian_activity",
        intervention_name="Signal Coordination and Adaptive Signal Control",
        description="Synchronized traffic signals that adapt to real-time traffic flow",
        implementation="Install SCATS/SCOTS systems with sensors that detect traffic volume and adjust signal timing dynamically",
        effectiveness=75,
        cost="High",
        timeframe="Medium-term",
        references=["Urban Traffic Management"],
    ),
    SafetyIntervention(
        id="INT_008",
        issue_type="intersection_collision",
        road_type="NH",
        environmental_condition="low_visibility",
        intervention_name="Enhanced Lane Markings and Chevron Signage",
        description="High-visibility lane markings and directional signage to guide traffic",
        implementation="Use retro-reflective paint for lane markings, install chevron signs for curve indication, add center line markers",
        effectiveness=60,
        cost="Low",
        timeframe="Immediate",
        references=["Road Marking Standards"],
    ),
    SafetyIntervention(
        id="INT_009",
        issue_type="lane_indiscipline",
        road_type="NH",
        environmental_condition="high_traffic_volume",
        intervention_name="Rumble Strips (Tactile Warning)",
        description="Textured road surface that creates noise and vibration when crossed unintentionally",
        implementation="Install rumble strips on lane boundaries and road edges. Creates feedback to drowsy or inattentive drivers",
        effectiveness=70,
        cost="Medium",
        timeframe="Immediate",
        references=["Lane Discipline Guidelines", "Driver Fatigue Research"],
    ),
    SafetyIntervention(
        id="INT_010",
        issue_type="unsafe_overtaking",
        road_type="NH",
        environmental_condition="high_traffic_corridor",
        intervention_name="Clear Lane Demarcation with Restricted Overtaking Zones",
        description="Distinct visual marking of overtaking prohibition zones",
        implementation="Paint solid yellow lines in no-overtake zones (curves, hills), broken white lines in safe zones. Reinforce with signage",
        effectiveness=65,
        cost="Low",
        timeframe="Immediate",
        references=["Lane Marking Conventions"],
    ),
    SafetyIntervention(
        id="INT_011",
        issue_type="unsafe_overtaking",
        road_type="NH",
        environmental_condition="mountainous_terrain",
        intervention_name="Dedicated Slow-Moving Vehicle Lanes",
        description="Separate lanes for heavy vehicles and slow traffic",
        implementation="Designate rightmost lane exclusively for trucks/buses on uphill sections. Provides safe passing for other vehicles",
        effectiveness=75,
        cost="Medium",
        timeframe="Medium-term",
    ),
    SafetyIntervention(
        id="INT_012",
        issue_type="low_visibility_accident",
        road_type="NH",
        environmental_condition="night_driving",
        intervention_name="Road Lighting (LED Street Lights)",
        description="High-quality LED lighting on accident-prone stretches",
        implementation="Install energy-efficient LED lights at 40-50m intervals on hotspot sections. Maintain consistent illumination (50+ lux)",
        effectiveness=80,
        cost="High",
        timeframe="Medium-term",
        references=["Lighting Standards for Roads", "Energy Efficiency Guidelines"],
        best_practice_region="India (Delhi, Bangalore highways)",
    ),
    SafetyIntervention(
        id="INT_013",
        issue_type="low_visibility_accident",
        road_type="NH",
        environmental_condition="fog_monsoon",
        intervention_name="Retro-Reflective Barriers and Edge Lines",
        description="Highly visible markers for road edges during low-visibility conditions",
        implementation="Install retro-reflective delineators every 25m on both sides. Use cat-eye reflectors on center lines",
        effectiveness=50,
        cost="Low",
        timeframe="Immediate",
        references=["Visibility Enhancement Standards"],
    ),
    SafetyIntervention(
        id="INT_014",
        issue_type="low_visibility_accident",
        road_type="NH",
        environmental_condition="all",
        intervention_name="Information Gantry Signs (Electronic)",
        description="Large overhead signs displaying real-time alerts about hazards, weather, accidents",
        implementation="Install electronic gantries at key locations. Display alerts about speed, weather, accidents, traffic density",
        effectiveness=70,
        cost="High",
        timeframe="Medium-term",
    ),
    SafetyIntervention(
        id="INT_015",
        issue_type="pedestrian_accident",
        road_type="Urban",
        environmental_condition="high_pedestrian_activity",
        intervention_name="Pedestrian Crossing with Signals",
        description="Dedicated pedestrian crossing with traffic signals and clear markings",
        implementation="Paint zebra crossing, install pedestrian traffic signals with countdown timers, add refuge islands for safety",
        effectiveness=85,
        cost="Medium",
        timeframe="Immediate",
        references=["Pedestrian Safety Guidelines", "Urban Design Standards"],
    ),
    SafetyIntervention(
        id="INT_016",
        issue_type="pedestrian_accident",
        road_type="NH",
        environmental_condition="village_markets",
        intervention_name="Speed Reduction Zone with Physical Barriers",
        description="Physical calming measures to reduce vehicle speed in pedestrian zones",
        implementation="Install speed humps, chicanes, bollards to naturally slow traffic. Combine with speed limit signage",
        effectiveness=80,
        cost="Medium",
        timeframe="Immediate",
    ),
    SafetyIntervention(
        id="INT_017",
        issue_type="pedestrian_accident",
        road_type="Rural_Road",
        environmental_condition="all",
        intervention_name="Separated Pedestrian Pathway",
        description="Physical separation of pedestrians from vehicle traffic",
        implementation="Construct 1-2m wide pathway on road shoulder with guard rails where necessary. Provide adequate width for 2-way traffic",
        effectiveness=90,
        cost="Medium",
        timeframe="Long-term",
    ),
    SafetyIntervention(
        id="INT_018",
        issue_type="vehicle_defect",
        road_type="all",
        environmental_condition="all",
        intervention_name="Mandatory Vehicle Inspection Program",
        description="Regular vehicle inspections to ensure roadworthiness",
        implementation="Enforce quarterly/annual vehicle inspections. Check brakes, tires, lights, steering. Issue permits only after clearance",
        effectiveness=75,
        cost="Medium",
        timeframe="Immediate",
        references=["Vehicle Roadworthiness Standards", "Registration Guidelines"],
    ),
    SafetyIntervention(
        id="INT_019",
        issue_type="brake_failure",
        road_type="NH",
        environmental_condition="mountainous_terrain",
        intervention_name="Emergency Escape Ramps",
        description="Safe runout areas for vehicles with brake failure on downhill sections",
        implementation="Construct gravel/sand-filled ramps on long downhill sections. Design with adequate length (50-100m) to safely stop vehicles",
        effectiveness=95,
        cost="High",
        timeframe="Medium-term",
        references=["Mountain Road Safety Standards"],
    ),
    SafetyIntervention(
        id="INT_020",
        issue_type="rash_driving",
        road_type="all",
        environmental_condition="all",
        intervention_name="Aggressive Enforcement with Penalties",
        description="Strict enforcement of traffic rules with proportionate penalties",
        implementation="Deploy traffic police, conduct surprise checks, strict penalties for violations. Focus on high-risk behaviors",
        effectiveness=70,
        cost="Medium",
        timeframe="Immediate",
        references=["Traffic Law Enforcement"],
    ),
    SafetyIntervention(
        id="INT_021",
        issue_type="drowsy_driving",
        road_type="NH",
        environmental_condition="night_driving",
        intervention_name="Designated Rest Areas with Facilities",
        description="Safe rest stops for drivers to recover from fatigue",
        implementation="Establish rest areas every 50-60km with basic facilities (water, seating, clean toilets). Encourage 15-20min rest",
        effectiveness=65,
        cost="High",
        timeframe="Medium-term",
    ),
    SafetyIntervention(
        id="INT_022",
        issue_type="impaired_driving",
        road_type="all",
        environmental_condition="night_driving",
        intervention_name="Sobriety Checkpoints",
        description="Random alcohol breath testing at strategic locations",
        implementation="Set up checkpoints at night and weekends. Use breathalyzers, conduct tests, severe penalties for violations",
        effectiveness=80,
        cost="Medium",
        timeframe="Immediate",
    ),
    SafetyIntervention(
        id="INT_023",
        issue_type="weather_related_accident",
        road_type="NH",
        environmental_condition="monsoon",
        intervention_name="Improved Drainage and Surface Maintenance",
        description="Enhanced road drainage to prevent water accumulation and skidding",
        implementation="Clean/upgrade drainage systems, fill potholes, improve surface texture. Regular maintenance during monsoon",
        effectiveness=70,
        cost="Medium",
        timeframe="Immediate",
        references=["Road Maintenance Standards"],
    ),
    SafetyIntervention(
        id="INT_024",
        issue_type="weather_related_accident",
        road_type="NH",
        environmental_condition="fog",
        intervention_name="Fog Detection System with Warning",
        description="Automated system to detect fog and alert drivers",
        implementation="Install fog detection sensors with automatic speed reduction signage and SMS alerts to drivers",
        effectiveness=85,
        cost="Very High",
        timeframe="Long-term",
        best_practice_region="Himalayas, Deccan plateau",
    ),
    SafetyIntervention(
        id="INT_025",
        issue_type="skidding",
        road_type="NH",
        environmental_condition="wet_road",
        intervention_name="High-Friction Surface (Skid-Resistant Pavement)",
        description="Special pavement surface with improved grip in wet conditions",
        implementation="Apply high-friction friction course on accident-prone sections. Texture improves traction up to 30%",
        effectiveness=75,
        cost="High",
        timeframe="Medium-term",
    ),
    SafetyIntervention(
        id="INT_026",
        issue_type="unsafe_behavior",
        road_type="all",
        environmental_condition="all",
        intervention_name="Public Awareness Campaigns",
        description="Educational campaigns about road safety",
        implementation="Mass media campaigns (TV, radio, social media) on specific hazards. Focus on high-risk periods/locations",
        effectiveness=40,
        cost="Low",
        timeframe="Immediate",
    ),
    SafetyIntervention(
        id="INT_027",
        issue_type="unsafe_behavior",
        road_type="all",
        environmental_condition="all",
        intervention_name="Driver Education and Training Programs",
        description="Comprehensive driver training on road safety",
        implementation="Mandate defensive driving courses for commercial drivers. Provide training on hazard recognition, vehicle control",
        effectiveness=60,
        cost="Medium",
        timeframe="Medium-term",
    ),
    SafetyIntervention(
        id="INT_028",
        issue_type="occupant_protection",
        road_type="all",
        environmental_condition="all",
        intervention_name="Seatbelt and Helmet Enforcement",
        description="Strict enforcement of occupant protection requirements",
        implementation="Check seatbelt/helmet usage at checkpoints. Penalty for violations. Awareness about injury reduction",
        effectiveness=90,
        cost="Low",
        timeframe="Immediate",
    ),
    SafetyIntervention(
        id="INT_029",
        issue_type="truck_accident",
        road_type="NH",
        environmental_condition="all",
        intervention_name="Designated Truck Routes",
        description="Restrict heavy vehicles to specific highways",
        implementation="Designate NH routes for trucks, restrict from urban/residential areas. Enforce with toll/penalty systems",
        effectiveness=70,
        cost="Medium",
        timeframe="Medium-term",
    ),
    SafetyIntervention(
        id="INT_030",
        issue_type="blind_spot_accident",
        road_type="NH",
        environmental_condition="all",
        intervention_name="Truck Mirror Improvements and Blind Spot Mirrors",
        description="Mandated additional mirrors to eliminate blind spots",
        implementation="Mandate convex mirrors on both sides and rear. Provide training on mirror checking before lane changes",
        effectiveness=60,
        cost="Low",
        timeframe="Immediate",
    ),
)

_BY_ID: dict[str, SafetyIntervention] = {rec.id: rec for rec in SAFETY_INTERVENTIONS}


# ---------------------------------------------------------------------------
# Text templates
# ---------------------------------------------------------------------------

_NO_MATCH_REASONING = (
    "No specific interventions found for {issue} on {road_type} roads in "
    "{condition} conditions."
)
_NO_MATCH_RECOMMENDATIONS = (
    "Consider consulting road safety audit guidelines or expert consultation."
)
_REASONING = (
    'For the identified safety issue of "{issue}" on {road_type} roads under '
    "{condition} conditions, the following interventions are recommended based "
    "on global best practices and safety audit standards:\n\n"
)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def get_intervention(intervention_id: str) -> SafetyIntervention:
    """Return the intervention record for a given id.

    Args:
        intervention_id: Record id (e.g. ``'INT_002'``).

    Raises:
        KeyError: If *intervention_id* is not in the table.
    """
    key = intervention_id.strip().upper()
    if key not in _BY_ID:
        raise KeyError(
            f"Unknown intervention id '{intervention_id}'. "
            f"Valid ids: {', '.join(sorted(_BY_ID))}"
        )
    return _BY_ID[key]


def get_all_interventions() -> list[SafetyIntervention]:
    """Return every safety intervention in table order."""
    return list(SAFETY_INTERVENTIONS)


def _field_matches(value: str, query: str) -> bool:
    value = value.lower()
    query = query.lower()
    return value == WILDCARD or query == WILDCARD or query in value


def find_interventions(
    issue_type: str,
    road_type: str,
    environmental_condition: str,
) -> list[SafetyIntervention]:
    """Find interventions matching all three query values.

    The issue type matches by case-insensitive substring. Road type and
    condition match when the record holds the ``'all'`` wildcard, when the
    query itself is ``'all'``, or by case-insensitive substring.

    Returns:
        Matching records in table order (possibly empty).
    """
    issue = issue_type.lower()
    return [
        rec
        for rec in SAFETY_INTERVENTIONS
        if issue in rec.issue_type.lower()
        and _field_matches(rec.road_type, road_type)
        and _field_matches(rec.environmental_condition, environmental_condition)
    ]


def get_intervention_recommendations(
    safety_issue: str,
    road_type: str,
    environmental_condition: str,
    additional_context: Optional[str] = None,
) -> dict[str, Any]:
    """Rank matching interventions and describe them for a prompt.

    Args:
        safety_issue: Issue type tag (e.g. ``'speeding'``).
        road_type: Road type tag (e.g. ``'NH'``).
        environmental_condition: Condition tag (e.g. ``'night_driving'``).
        additional_context: Optional text appended to the recommendations.

    Returns:
        Dict with ``interventions`` (sorted by effectiveness, highest first),
        ``reasoning`` and ``recommendations`` text.
    """
    params = {
        "issue": safety_issue,
        "road_type": road_type,
        "condition": environmental_condition,
    }
    matches = find_interventions(safety_issue, road_type, environmental_condition)

    if not matches:
        return {
            "interventions": [],
            "reasoning": _NO_MATCH_REASONING.format(**params),
            "recommendations": _NO_MATCH_RECOMMENDATIONS,
        }

    # sorted() is stable: equal effectiveness keeps table order
    ranked = sorted(matches, key=lambda rec: rec.effectiveness, reverse=True)

    lines: list[str] = ["**Recommended Interventions (in order of effectiveness):**", ""]
    for i, rec in enumerate(ranked, start=1):
        lines.append(f"{i}. **{rec.intervention_name}** ({rec.effectiveness}% effectiveness)")
        lines.append(f"   - Description: {rec.description}")
        lines.append(f"   - Implementation: {rec.implementation}")
        lines.append(f"   - Cost: {rec.cost} | Timeframe: {rec.timeframe}")
        if rec.best_practice_region:
            lines.append(
                f"   - Best Practice: Successfully implemented in {rec.best_practice_region}"
            )
        lines.append("")

    lines.append("**Supporting Evidence:**")
    for rec in ranked:
        if rec.references:
            lines.append(f"- {rec.intervention_name}: {', '.join(rec.references)}")
    recommendations = "\n".join(lines) + "\n"

    if additional_context:
        recommendations += f"\n**Additional Context Considered:** {additional_context}"

    return {
        "interventions": ranked,
        "reasoning": _REASONING.format(**params),
        "recommendations": recommendations,
    }
