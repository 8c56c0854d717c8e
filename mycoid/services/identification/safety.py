"""
Safety Assessment

Read-only tables of dangerous genera and dangerous lookalike pairs, and
the gate that decides whether a result is confident enough to discuss
foraging at all. A dangerous genus that is still an active candidate
blocks the gate regardless of the top candidate's score.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from .models import (
    FORAGING_CONFIDENCE_LEVELS,
    CandidateScore,
    ConfidenceLevel,
    LookalikeWarning,
    SafetyAssessment,
    SafetyWarning,
)
from .scorer import score_to_confidence

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DangerousGenus:
    toxicity: str       # "deadly" | "toxic"
    message: str


@dataclass(frozen=True)
class LookalikePair:
    genus_a: str
    genus_b: str
    danger_genus: str
    features: Tuple[str, ...]
    danger_species: Optional[str] = None


DANGEROUS_GENERA: Dict[str, DangerousGenus] = {
    "Amanita": DangerousGenus(
        toxicity="deadly",
        message=(
            "Amanita includes Death Cap and Destroying Angel, the most lethal mushrooms in the UK. "
            "NEVER eat without absolute certainty of identification."
        ),
    ),
    "Clitocybe": DangerousGenus(
        toxicity="deadly",
        message=(
            "Clitocybe includes C. rivulosa and C. dealbata which contain muscarine and can be fatal. "
            "Small white Clitocybe species are particularly dangerous."
        ),
    ),
    "Coprinopsis": DangerousGenus(
        toxicity="toxic",
        message=(
            "Coprinopsis atramentaria (Common Ink Cap) causes severe illness when consumed with alcohol. "
            "Avoid alcohol for 3 days before and after eating any ink cap."
        ),
    ),
}

LOOKALIKE_PAIRS: Tuple[LookalikePair, ...] = (
    LookalikePair(
        genus_a="Agaricus",
        genus_b="Amanita",
        danger_genus="Amanita",
        features=(
            "Check for volva at base (Amanita has one, Agaricus does not)",
            "Check gill colour (Amanita: white; Agaricus: pink to brown)",
            "Check habitat (Amanita: often near trees; Agaricus: often grassland)",
        ),
    ),
    LookalikePair(
        genus_a="Macrolepiota",
        genus_b="Amanita",
        danger_genus="Amanita",
        danger_species="Small Lepiota species (deadly) can be confused with young Parasols",
        features=(
            "Check for volva at base (Amanita/Lepiota has one, Macrolepiota does not)",
            "Confirm large size (>10cm cap); small \"parasols\" may be deadly Lepiota",
            "Check stem pattern (Macrolepiota has snakeskin pattern; Amanita does not)",
        ),
    ),
    LookalikePair(
        genus_a="Lepista",
        genus_b="Clitocybe",
        danger_genus="Clitocybe",
        features=(
            "Clitocybe rivulosa/dealbata (Fool's Funnel) is deadly and can resemble Lepista",
            "Check stem colour (Lepista: lilac/violet; Clitocybe: pale/whitish)",
            "Check spore print (Lepista: pink; Clitocybe: white/cream)",
            "Check smell (Lepista: perfumed; dangerous Clitocybe: faint/mealy)",
        ),
    ),
    LookalikePair(
        genus_a="Cantharellus",
        genus_b="Hygrophoropsis",
        danger_genus="Hygrophoropsis",
        danger_species="False Chanterelle (Hygrophoropsis aurantiaca)",
        features=(
            "True chanterelle has forked ridges/veins, NOT thin true gills",
            "True chanterelle smells of apricots; false chanterelle has no distinctive smell",
            "True chanterelle flesh is white; false chanterelle flesh is orange throughout",
        ),
    ),
    LookalikePair(
        genus_a="Armillaria",
        genus_b="Galerina",
        danger_genus="Galerina",
        danger_species="Funeral Bell (Galerina marginata), deadly",
        features=(
            "Both grow on wood in clusters with rings and look very similar at a glance",
            "Armillaria: white spore print; Galerina: rusty brown spore print",
            "Armillaria grows in very large clusters; Galerina in smaller groups",
            "When in doubt, take a spore print; this is critical for safety",
        ),
    ),
)

# Worst first
TOXICITY_ORDER = ("deadly", "toxic")


def dangerous_active_genera(candidates: Sequence[CandidateScore]) -> List[str]:
    return [c.genus for c in candidates if c.active and c.genus in DANGEROUS_GENERA]


def classify_toxicity(active_genera: Sequence[str]) -> str:
    """Worst toxicity class among active dangerous genera, else "unknown"."""
    classes = {DANGEROUS_GENERA[g].toxicity for g in active_genera if g in DANGEROUS_GENERA}
    for toxicity in TOXICITY_ORDER:
        if toxicity in classes:
            return toxicity
    return "unknown"


def build_safety_assessment(candidates: Sequence[CandidateScore]) -> SafetyAssessment:
    """
    Warnings for every active dangerous genus, lookalike warnings for every
    pair with at least one active member, and the foraging gate.

    Args:
        candidates: Scored candidates, sorted (non-eliminated first, by score)
    """
    active = [c for c in candidates if c.active]
    active_genera = {c.genus for c in active}

    warnings: List[SafetyWarning] = []
    for candidate in active:
        danger = DANGEROUS_GENERA.get(candidate.genus)
        if danger is None:
            continue
        warnings.append(SafetyWarning(
            type="deadly_lookalike" if danger.toxicity == "deadly" else "toxic_lookalike",
            message=danger.message,
            severity="critical" if danger.toxicity == "deadly" else "high",
            genus=candidate.genus,
        ))

    lookalikes: List[LookalikeWarning] = []
    for pair in LOOKALIKE_PAIRS:
        if pair.genus_a in active_genera or pair.genus_b in active_genera:
            lookalikes.append(LookalikeWarning(
                species=pair.danger_species or pair.danger_genus,
                genus=pair.danger_genus,
                danger_level="critical",
                distinguishing_features=pair.features,
                paired_with=pair.genus_b if pair.danger_genus == pair.genus_a else pair.genus_a,
            ))

    top_confidence = score_to_confidence(active[0].score) if active else ConfidenceLevel.INSUFFICIENT
    dangerous = dangerous_active_genera(active)
    sufficient = top_confidence in FORAGING_CONFIDENCE_LEVELS and not dangerous

    if dangerous:
        logger.info(f"Foraging gate blocked by active dangerous genera: {dangerous}")

    return SafetyAssessment(
        toxicity=classify_toxicity(dangerous),
        warnings=tuple(warnings),
        dangerous_lookalikes=tuple(lookalikes),
        confidence_sufficient_for_foraging=sufficient,
    )
