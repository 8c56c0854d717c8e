"""
Heuristic Matching

Selects heuristics whose target genus is an active candidate at (or above)
the heuristic's required confidence, and turns their leading procedure
steps into suggested actions.
"""

import logging
from typing import Dict, List, Sequence

from mycoid.schemas.heuristic import Heuristic

from .models import (
    CONFIDENCE_THRESHOLDS,
    CandidateScore,
    SuggestedAction,
    TriggeredHeuristic,
)

logger = logging.getLogger(__name__)

LEVEL_FLOORS: Dict[str, float] = {level.value: threshold for level, threshold in CONFIDENCE_THRESHOLDS}

PRIORITY_ORDER = {"critical": 0, "standard": 1, "supplementary": 2}

# Narrow the genus before deciding edibility
CATEGORY_ORDER = {
    "safety_rule": 0,
    "safety_screening": 1,
    "discrimination": 2,
    "edibility_determination": 3,
    "ecological_context": 4,
    "gestalt_recognition": 5,
}

SAFETY_CATEGORIES = ("safety_rule", "safety_screening", "discrimination")


def meets_confidence(score: float, required: str) -> bool:
    return score >= LEVEL_FLOORS[required]


def procedure_steps(heuristic: Heuristic) -> List[str]:
    """Flatten a procedure into display lines."""
    if isinstance(heuristic.procedure, str):
        return [line for line in heuristic.procedure.split("\n") if line.strip()]

    steps = []
    for step in heuristic.procedure.steps:
        text = step.instruction
        if step.safety_note:
            text += f" (Safety: {step.safety_note})"
        steps.append(text)
    return steps


def find_applicable_heuristics(
    candidates: Sequence[CandidateScore],
    heuristics: Sequence[Heuristic],
) -> List[TriggeredHeuristic]:
    """
    Heuristics targeting an active genus whose score meets confidence_required.

    Family- or morphology-targeted heuristics never fire. Sorted by priority,
    then category (safety before discrimination before edibility).
    """
    active = {c.genus: c for c in candidates if c.active}
    if not active:
        return []

    results: List[TriggeredHeuristic] = []
    for heuristic in heuristics:
        genus = heuristic.applies_to.genus
        if not genus or genus not in active:
            continue
        if not meets_confidence(active[genus].score, heuristic.applies_to.confidence_required):
            continue

        results.append(TriggeredHeuristic(
            heuristic_id=heuristic.heuristic_id,
            name=heuristic.name,
            genus=genus,
            category=heuristic.category,
            priority=heuristic.priority,
            steps=tuple(procedure_steps(heuristic)),
            safety_notes=tuple(heuristic.safety_notes),
        ))

    results.sort(key=lambda t: (PRIORITY_ORDER[t.priority], CATEGORY_ORDER.get(t.category, 5)))

    if results:
        logger.debug(f"Triggered heuristics: {[t.heuristic_id for t in results]}")
    return results


def generate_heuristic_actions(triggered: Sequence[TriggeredHeuristic]) -> List[SuggestedAction]:
    """First two procedure steps of each triggered heuristic as suggested actions."""
    actions: List[SuggestedAction] = []

    for heuristic in triggered:
        if not heuristic.steps:
            continue
        is_safety = heuristic.category in SAFETY_CATEGORIES
        priority = "critical" if heuristic.priority == "critical" else "recommended"
        reason = f"{heuristic.name} - targets {heuristic.genus}"

        actions.append(SuggestedAction(
            action=heuristic.steps[0],
            reason=reason,
            priority=priority,
            safety_relevant=is_safety,
        ))
        if len(heuristic.steps) > 1:
            actions.append(SuggestedAction(
                action=heuristic.steps[1],
                reason=reason,
                priority=priority if is_safety else "recommended",
                safety_relevant=is_safety,
            ))

    return actions
