"""
Candidate Scorer

Hierarchical, non-additive evidence model per genus:
  1. Exclusionary contradictions eliminate outright (score 0)
  2. Any definitive match sets a 0.80 baseline
  3. Strong, moderate and weak matches add with diminishing returns (0.6^i,
     per tier, in rule authoring order)
  4. Each non-exclusionary contradiction subtracts half its tier weight
  5. Result clamped to [0, 1]

A supporting rule whose field is observed but does not match counts as a
mild contradiction, except on the free-text description_notes field.
"""

import logging
from typing import Any, Iterable, List, Sequence

from .models import (
    CONFIDENCE_THRESHOLDS,
    CONTRADICTION_PENALTY,
    DIMINISHING_FACTOR,
    TIER_WEIGHTS,
    CandidateScore,
    ConfidenceLevel,
    EvidenceTier,
    FeatureRule,
    MatchKind,
    MatchedEvidence,
)
from .rule_matching import field_value, matches_rule

logger = logging.getLogger(__name__)

FREE_TEXT_RULE_FIELD = "description_notes"

ACCUMULATED_TIERS = (EvidenceTier.STRONG, EvidenceTier.MODERATE, EvidenceTier.WEAK)


def _to_evidence(rule: FeatureRule) -> MatchedEvidence:
    return MatchedEvidence(
        rule_id=rule.id,
        field=rule.field,
        tier=rule.tier,
        supporting=rule.supporting,
        description=rule.description,
    )


def _diminishing_sum(weight: float, count: int) -> float:
    return sum(weight * DIMINISHING_FACTOR ** i for i in range(count))


def score_candidate(observation: Any, genus: str, rules: Iterable[FeatureRule]) -> CandidateScore:
    """
    Score a single genus against an observation.

    Args:
        observation: Observation (any object exposing the observation fields)
        genus: Genus to score
        rules: Full rule base; rules for other genera are ignored

    Returns:
        CandidateScore with evidence partitioned into matching/contradicting/missing
    """
    matching: List[MatchedEvidence] = []
    contradicting: List[MatchedEvidence] = []
    missing: List[MatchedEvidence] = []

    for rule in rules:
        if rule.genus != genus:
            continue

        observed = field_value(observation, rule.field) is not None
        if not observed and rule.match.kind != MatchKind.ABSENT:
            missing.append(_to_evidence(rule))
            continue

        matched = matches_rule(observation, rule)
        if matched and rule.supporting:
            matching.append(_to_evidence(rule))
        elif matched:
            contradicting.append(_to_evidence(rule))
        elif (
            rule.supporting
            and observed
            and rule.match.kind != MatchKind.ABSENT
            and rule.field != FREE_TEXT_RULE_FIELD
        ):
            contradicting.append(_to_evidence(rule))

    evidence = dict(matching=tuple(matching), contradicting=tuple(contradicting), missing=tuple(missing))

    # Step 1: exclusionary evidence eliminates
    exclusion = next((e for e in contradicting if e.tier == EvidenceTier.EXCLUSIONARY), None)
    if exclusion is not None:
        return CandidateScore(
            genus=genus,
            score=0.0,
            eliminated=True,
            elimination_reason=exclusion.description,
            **evidence,
        )

    # Step 2: no supporting evidence at all
    if not matching:
        return CandidateScore(genus=genus, score=0.0, eliminated=False, **evidence)

    # Step 3: hierarchical score
    score = 0.0
    if any(e.tier == EvidenceTier.DEFINITIVE for e in matching):
        score = TIER_WEIGHTS[EvidenceTier.DEFINITIVE]

    for tier in ACCUMULATED_TIERS:
        count = sum(1 for e in matching if e.tier == tier)
        score += _diminishing_sum(TIER_WEIGHTS[tier], count)

    for e in contradicting:
        score -= TIER_WEIGHTS[e.tier] * CONTRADICTION_PENALTY

    score = max(0.0, min(1.0, score))

    return CandidateScore(genus=genus, score=score, eliminated=False, **evidence)


def score_all_candidates(
    observation: Any,
    genera: Sequence[str],
    rules: Sequence[FeatureRule],
) -> List[CandidateScore]:
    """
    Score every genus. Non-eliminated candidates first by descending score,
    then eliminated candidates; ties keep the input genus order.
    """
    scores = [score_candidate(observation, genus, rules) for genus in genera]
    scores.sort(key=lambda s: (s.eliminated, -s.score))

    eliminated = sum(1 for s in scores if s.eliminated)
    logger.debug(f"Scored {len(scores)} genera ({eliminated} eliminated)")
    return scores


def score_to_confidence(score: float) -> ConfidenceLevel:
    """Map a numeric score to its named confidence level."""
    for level, threshold in CONFIDENCE_THRESHOLDS:
        if score >= threshold:
            return level
    return ConfidenceLevel.INSUFFICIENT
