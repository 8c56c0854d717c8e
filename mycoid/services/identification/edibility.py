"""
Edibility

Genus-level edibility defaults for the 20 seed genera, and the gated
EdibilityInfo attached to a result. Species-level variation exists within
every genus; this is only ever the genus default.
"""

from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .models import (
    FORAGING_CONFIDENCE_LEVELS,
    CandidateScore,
    EdibilityInfo,
    SafetyAssessment,
)
from .disambiguation import SAFETY_FEATURES
from .rule_matching import field_value
from .scorer import score_to_confidence


@dataclass(frozen=True)
class GenusEdibility:
    genus: str
    default_safety: str         # "edible" | "edible_with_caution" | "inedible" | "toxic" | "deadly"
    requires_cooking: bool
    beginner_safe: bool
    warnings: Tuple[str, ...]
    foraging_advice: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


EDIBILITY_DATA: Tuple[GenusEdibility, ...] = (
    # Safety critical
    GenusEdibility(
        "Amanita", "deadly", False, False,
        (
            "Contains Death Cap and Destroying Angel, the most lethal mushrooms in the world",
            "One cap of Death Cap can kill an adult",
            "Symptoms may be delayed 6-24 hours, giving false sense of recovery",
        ),
        "NEVER eat any Amanita unless you are absolutely certain of the species AND are an "
        "experienced mycologist. Even experts exercise extreme caution.",
    ),
    GenusEdibility(
        "Agaricus", "edible_with_caution", False, False,
        (
            "Yellow-staining Mushroom (A. xanthodermus) causes GI upset; check for yellow staining at base of stem",
            "CRITICAL: must distinguish from Amanita (check no volva, gills pink-to-brown not white)",
        ),
        "Good edibles exist but must confirm identity carefully. Check: no volva, pink-to-brown "
        "gills (never pure white), dark brown spore print.",
    ),
    # Beginner-friendly
    GenusEdibility(
        "Russula", "edible_with_caution", False, True,
        ("Peppery/acrid species cause vomiting if eaten; use taste test",),
        "Excellent beginner genus. Use the taste test: mild = edible, peppery = reject. "
        "No deadly species in UK.",
    ),
    GenusEdibility(
        "Boletus", "edible_with_caution", False, True,
        (
            "Avoid any bolete with red pores (may be toxic)",
            "Some species cause GI upset; avoid bitter-tasting boletes",
        ),
        "Generally safe genus. Avoid red-pored and bitter-tasting species. "
        "Penny Bun (B. edulis) is the prize find.",
    ),
    GenusEdibility(
        "Cantharellus", "edible", False, True, (),
        "Choice edible, very safe. Confirm forked ridges (not true gills) and apricot smell to "
        "distinguish from false chanterelle.",
    ),
    GenusEdibility(
        "Lactarius", "edible_with_caution", False, False,
        (
            "Many species with white/acrid milk are inedible or cause GI upset",
            "Only eat species with coloured (orange/carrot) milk",
        ),
        "Use the milk colour test. Saffron Milkcap (orange milk) is the best edible. "
        "Avoid all species with white or acrid milk.",
    ),
    GenusEdibility(
        "Pleurotus", "edible", False, True, (),
        "Safe, distinctive edible. Grows on wood in shelf-like clusters. Few dangerous lookalikes.",
    ),
    GenusEdibility(
        "Macrolepiota", "edible_with_caution", False, False,
        (
            "CRITICAL: small Lepiota species (<10cm cap) are DEADLY; only eat confirmed large specimens",
            "Must confirm no volva (would indicate Amanita)",
            "Confirm snakeskin stem pattern",
        ),
        "Choice edible but requires care. Only pick mature specimens with cap >10cm, "
        "confirmed snakeskin stem, and NO volva.",
    ),
    GenusEdibility(
        "Coprinopsis", "edible_with_caution", False, False,
        (
            "Common Ink Cap causes SEVERE illness when consumed with alcohol",
            "Avoid ALL alcohol for 3 days before and after eating any ink cap species",
            "Must eat very fresh, before deliquescence begins",
        ),
        "Shaggy Ink Cap is edible but must be eaten immediately after picking (before it "
        "dissolves). NEVER consume with alcohol.",
    ),
    GenusEdibility(
        "Hydnum", "edible", False, True, (),
        "One of the safest wild edibles. The teeth under the cap are unique, with no dangerous "
        "lookalikes in the UK.",
    ),
    # Good edibles
    GenusEdibility(
        "Laetiporus", "edible_with_caution", True, True,
        (
            "Avoid specimens growing on yew or eucalyptus (may absorb toxins)",
            "Can cause GI upset in some individuals; try a small amount first",
            "Only eat when young and soft (tough old specimens are indigestible)",
        ),
        "Distinctive and popular. Only eat young, soft specimens. Avoid if growing on yew. "
        "Cook thoroughly.",
    ),
    GenusEdibility(
        "Fistulina", "edible", False, True,
        ("Can be sour/acidic; slice thin and try a small amount",),
        "Unmistakable: looks like a tongue of raw beef on a tree. Safe, no dangerous lookalikes.",
    ),
    GenusEdibility(
        "Marasmius", "edible_with_caution", False, False,
        (
            "CRITICAL lookalike: Clitocybe rivulosa (Fool's Funnel) also grows in rings on lawns and is DEADLY",
            "Must confirm: tough wiry stem, free gills (not decurrent)",
        ),
        "Good edible but must distinguish from deadly Clitocybe rivulosa which grows in similar "
        "rings on lawns. Check tough stem and free gills.",
    ),
    GenusEdibility(
        "Craterellus", "edible", False, True, (),
        "Choice edible. No dangerous lookalikes. Hard to find due to dark colour among leaf litter.",
    ),
    GenusEdibility(
        "Sparassis", "edible", False, True, (),
        "Unmistakable cauliflower-like shape. No dangerous lookalikes. Needs thorough washing.",
    ),
    GenusEdibility(
        "Calvatia", "edible_with_caution", False, False,
        (
            "CRITICAL: ALWAYS slice puffballs in half before eating",
            "If internal structure visible (silhouette of cap/gills), it may be a young Amanita egg (DEADLY)",
            "Only eat when flesh is pure white throughout; browning indicates spore maturation",
        ),
        "Edible when young (pure white inside). ALWAYS slice in half to check for internal "
        "structure, since young Amanita eggs can resemble small puffballs.",
    ),
    GenusEdibility(
        "Leccinum", "edible", True, True,
        (
            "Must cook thoroughly; some species cause GI upset if undercooked",
            "Flesh turns dark/black when cooked; this is normal",
        ),
        "Safe edibles. Distinguished from Boletus by rough scabers on stem. Always cook thoroughly.",
    ),
    # Intermediate
    GenusEdibility(
        "Armillaria", "edible_with_caution", True, False,
        (
            "DEADLY lookalike: Galerina marginata (Funeral Bell) also grows on wood with ring",
            "Must take spore print: Armillaria = white, Galerina = rusty brown",
            "Must cook thoroughly; toxic raw",
            "Can cause GI upset even when cooked in some individuals",
        ),
        "Edible when cooked but has deadly lookalike. NOT for beginners. Must confirm white "
        "spore print to rule out Galerina.",
    ),
    GenusEdibility(
        "Clitocybe", "deadly", False, False,
        (
            "Contains DEADLY species: C. rivulosa and C. dealbata",
            "These small white species grow in grassland and can be mistaken for edible species",
            "High muscarine content causes sweating, salivation, and can be fatal",
        ),
        "NOT recommended for eating. Several species are deadly. Even experienced foragers "
        "should exercise extreme caution.",
    ),
    GenusEdibility(
        "Lepista", "edible_with_caution", True, False,
        (
            "Must distinguish from Clitocybe (some deadly) and Cortinarius (some deadly)",
            "Confirm: lilac stem, pink spore print, perfumed smell",
            "Must cook thoroughly; toxic raw",
        ),
        "Good edibles when cooked but requires careful identification. Key: lilac stem, pink "
        "spore print, perfumed smell. Not for beginners.",
    ),
)

_EDIBILITY_BY_GENUS: Dict[str, GenusEdibility] = {e.genus: e for e in EDIBILITY_DATA}

REASON_INSUFFICIENT_CONFIDENCE = "insufficient_confidence"
REASON_DANGEROUS_GENUS_ACTIVE = "dangerous_genus_active"


def get_genus_edibility(genus: str) -> Optional[GenusEdibility]:
    """Genus-level edibility defaults, None for genera outside the table."""
    return _EDIBILITY_BY_GENUS.get(genus)


def _missing_fields(score: CandidateScore, limit: int) -> List[str]:
    fields: List[str] = []
    for evidence in score.missing:
        if evidence.field not in fields:
            fields.append(evidence.field)
    return fields[:limit]


def _unobserved_safety_checks(observation: Any, genera: Sequence[str], limit: int) -> List[str]:
    checks: List[str] = []
    for genus in genera:
        for field in SAFETY_FEATURES.get(genus, ()):
            if field not in checks and field_value(observation, field) is None:
                checks.append(field)
    return checks[:limit]


def build_edibility(
    top: CandidateScore,
    safety: SafetyAssessment,
    observation: Any,
    dangerous_active: Sequence[str],
    missing_limit: int = 3,
) -> EdibilityInfo:
    """
    Edibility for the top non-eliminated candidate behind the foraging gate.

    Advice is only released when the safety assessment says confidence is
    sufficient for foraging. Otherwise the info carries a machine-readable
    reason_code and the observations that would move the gate.
    """
    confidence = score_to_confidence(top.score)

    if dangerous_active:
        names = ", ".join(dangerous_active)
        return EdibilityInfo(
            available=False,
            genus=top.genus,
            reason_code=REASON_DANGEROUS_GENUS_ACTIVE,
            reason_unavailable=(
                f"A dangerous genus is still a candidate ({names}). Edibility advice is withheld "
                "until it is ruled out."
            ),
            missing_checks=tuple(_unobserved_safety_checks(observation, dangerous_active, missing_limit)),
        )

    if confidence not in FORAGING_CONFIDENCE_LEVELS or not safety.confidence_sufficient_for_foraging:
        missing = _missing_fields(top, missing_limit)
        reason = (
            f"Confidence is {confidence.value}: need high or definitive confidence to advise on edibility."
        )
        if missing:
            reason += f" Check: {', '.join(f.replace('_', ' ') for f in missing)}."
        return EdibilityInfo(
            available=False,
            genus=top.genus,
            reason_code=REASON_INSUFFICIENT_CONFIDENCE,
            reason_unavailable=reason,
            missing_checks=tuple(missing),
        )

    info = get_genus_edibility(top.genus)
    if info is None:
        return EdibilityInfo(
            available=True,
            genus=top.genus,
            status="unknown",
            notes=f"{top.genus} identified with {confidence.value} confidence. No edibility data for this genus.",
        )

    preparation = "Must be cooked thoroughly before eating." if info.requires_cooking else None
    notes = f"{top.genus} identified with {confidence.value} confidence. {info.foraging_advice}"
    if info.warnings:
        notes += " Warnings: " + "; ".join(info.warnings) + "."

    return EdibilityInfo(
        available=True,
        genus=top.genus,
        status=info.default_safety,
        notes=notes,
        preparation_notes=preparation,
    )
