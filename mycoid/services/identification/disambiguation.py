"""
Disambiguation Question Selection

Ranks unobserved fields by how well they discriminate among the active
candidates. Safety-relevant fields for any active genus are always asked
first; every question is skippable.
"""

from typing import Any, Dict, List, Sequence, Tuple

from .models import (
    CandidateScore,
    DisambiguationQuestion,
    EvidenceTier,
    FeatureRule,
    MatchKind,
)
from .rule_matching import field_value

# Safety-critical fields to ask first when the genus is an active candidate
SAFETY_FEATURES: Dict[str, Tuple[str, ...]] = {
    "Amanita": ("volva_present", "ring_present", "gill_color"),
    "Agaricus": ("volva_present", "gill_color"),
    "Clitocybe": ("ring_present", "spore_print_color", "cap_shape"),
    "Macrolepiota": ("volva_present", "cap_size_cm"),
    "Armillaria": ("spore_print_color",),
    "Coprinopsis": ("bruising_color",),
    "Lepista": ("stem_color", "spore_print_color"),
}

QUESTION_TEXT: Dict[str, str] = {
    "flesh_texture": "What is the flesh texture? (Does it snap like chalk, or is it fibrous?)",
    "gill_type": "What is under the cap? (Gills, pores/sponge, teeth, or smooth?)",
    "gill_color": "What colour are the gills?",
    "gill_attachment": "How are the gills attached to the stem?",
    "ring_present": "Is there a ring (skirt) on the stem?",
    "volva_present": "Is there a volva (cup/bag) at the base? (Dig gently to check)",
    "cap_color": "What colour is the cap?",
    "cap_texture": "What is the cap surface texture? (Smooth, slimy, scaly, etc.)",
    "stem_present": "Does it have a stem?",
    "stem_color": "What colour is the stem?",
    "spore_print_color": "Have you taken a spore print? What colour is it?",
    "habitat": "What habitat is it growing in? (Woodland, grassland, etc.)",
    "substrate": "What is it growing on? (Soil, wood, dung, etc.)",
    "nearby_trees": "What trees are nearby?",
    "season_month": "What month is it?",
    "smell": "Does it have a distinctive smell?",
    "bruising_color": "Does the flesh change colour when bruised or cut?",
    "growth_pattern": "How is it growing? (Solitary, clustered, in a ring, etc.)",
    "cap_size_cm": "How wide is the cap, in centimetres?",
    "description_notes": "Anything else distinctive? (Milk when cut, snakeskin stem, dissolving gills, etc.)",
}

EXCLUSIONARY_BONUS = 0.3
DEFINITIVE_BONUS = 0.4


def question_text(field: str) -> str:
    return QUESTION_TEXT.get(field, f"What is the {field.replace('_', ' ')}?")


def is_safety_feature(field: str, genera: Sequence[str]) -> bool:
    return any(field in SAFETY_FEATURES.get(genus, ()) for genus in genera)


def select_questions(
    candidates: Sequence[CandidateScore],
    observation: Any,
    rules: Sequence[FeatureRule],
) -> List[DisambiguationQuestion]:
    """
    Select disambiguation questions over unobserved fields.

    Information gain for a field = (active genera with a rule on it) / (active
    genera), +0.3 if any of those rules is exclusionary, +0.4 if any is
    definitive. Returns [] when at most one candidate is active.
    """
    active_genera = [c.genus for c in candidates if c.active]
    if len(active_genera) <= 1:
        return []

    active = set(active_genera)
    relevant_rules = [r for r in rules if r.genus in active]

    # Unobserved fields in rule authoring order
    rules_by_field: Dict[str, List[FeatureRule]] = {}
    for rule in relevant_rules:
        if field_value(observation, rule.field) is not None:
            continue
        if rule.match.kind == MatchKind.ABSENT:
            continue
        rules_by_field.setdefault(rule.field, [])
    for rule in relevant_rules:
        if rule.field in rules_by_field:
            rules_by_field[rule.field].append(rule)

    questions: List[DisambiguationQuestion] = []
    for field, field_rules in rules_by_field.items():
        genera_with_rules = {r.genus for r in field_rules}
        information_gain = len(genera_with_rules) / len(active)
        if any(r.tier == EvidenceTier.EXCLUSIONARY for r in field_rules):
            information_gain += EXCLUSIONARY_BONUS
        if any(r.tier == EvidenceTier.DEFINITIVE for r in field_rules):
            information_gain += DEFINITIVE_BONUS

        questions.append(DisambiguationQuestion(
            question=question_text(field),
            feature=field,
            information_gain=information_gain,
            safety_relevant=is_safety_feature(field, active_genera),
            skippable=True,
        ))

    questions.sort(key=lambda q: (not q.safety_relevant, -q.information_gain))
    return questions
