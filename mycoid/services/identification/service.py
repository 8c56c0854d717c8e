"""
Identification Service

Main orchestration for genus identification:

    observation -> infer -> preprocess notes -> score all genera
                -> candidates, reasoning, safety, edibility,
                   follow-up questions, heuristics, ambiguities

assemble_result() is the pure entry point: the same observation, tables and
clock always give the same result. IdentificationService holds the static
tables and accepts raw mappings.
"""

import logging
from datetime import datetime
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from mycoid import config
from mycoid.data import ALL_GENERA, FEATURE_RULES, common_name, get_heuristics
from mycoid.schemas.heuristic import Heuristic
from mycoid.schemas.observation import Observation

from .ambiguity_detection import detect_ambiguities
from .description_preprocessing import preprocess_description_notes
from .disambiguation import SAFETY_FEATURES, select_questions
from .edibility import build_edibility
from .evidence_summary import (
    field_label,
    format_value,
    summarize_all_observations,
    summarize_observation,
)
from .feature_inference import infer_features
from .heuristic_matching import find_applicable_heuristics, generate_heuristic_actions
from .models import (
    Candidate,
    CandidateScore,
    DisambiguationQuestion,
    Evidence,
    FeatureRule,
    FollowUpQuestion,
    IdentificationResult,
    InferredFeature,
    MatchedEvidence,
    PreprocessingResult,
    SuggestedAction,
)
from .rule_matching import field_value
from .safety import build_safety_assessment, dangerous_active_genera
from .scorer import score_all_candidates, score_to_confidence

logger = logging.getLogger(__name__)

# Fields that need the forager to perform a test rather than just look
ACTIVE_TEST_FIELDS = ("spore_print_color", "bruising_color", "taste")

BASIC_OBSERVATIONS_ACTION = SuggestedAction(
    action="Provide some basic observations (gill type, flesh texture, habitat)",
    reason="No candidates could be identified with current information",
    priority="recommended",
    safety_relevant=False,
)


# ============================================================================
# CANDIDATES
# ============================================================================

def _to_evidence(evidence: MatchedEvidence, observation: Observation) -> Evidence:
    value = field_value(observation, evidence.field)
    summary = summarize_observation(evidence.field, value) if value is not None else field_label(evidence.field)
    return Evidence(
        rule_id=evidence.rule_id,
        feature=evidence.field,
        observed_value=format_value(value),
        tier=evidence.tier,
        supports=evidence.supporting,
        summary=summary,
        description=evidence.description,
    )


def to_candidate(scored: CandidateScore, observation: Observation) -> Candidate:
    return Candidate(
        genus=scored.genus,
        common_name=common_name(scored.genus),
        confidence=score_to_confidence(scored.score),
        score=scored.score,
        eliminated=scored.eliminated,
        elimination_reason=scored.elimination_reason,
        matching_evidence=tuple(_to_evidence(e, observation) for e in scored.matching),
        contradicting_evidence=tuple(_to_evidence(e, observation) for e in scored.contradicting),
        missing_evidence=tuple(_to_evidence(e, observation) for e in scored.missing),
    )


# ============================================================================
# REASONING CHAIN
# ============================================================================

def build_reasoning_chain(
    observation: Observation,
    inferences: Sequence[InferredFeature],
    preprocessing: PreprocessingResult,
    scored: Sequence[CandidateScore],
    other_candidates: int,
) -> List[str]:
    """Ordered human-readable steps explaining the ranking."""
    chain: List[str] = []

    summaries = summarize_all_observations(observation)
    if summaries:
        chain.append(f"Observed: {', '.join(summaries)}.")
    else:
        chain.append("No features observed yet.")

    for inference in inferences:
        chain.append(
            f"Inferred {summarize_observation(inference.field, inference.value)} "
            f"({inference.reason}; {inference.confidence} confidence)."
        )

    if preprocessing.genus_exclusions:
        chain.append(f"Description notes rule out: {', '.join(preprocessing.genus_exclusions)}.")
    negated = [n.negated_term for n in preprocessing.negations]
    if negated:
        chain.append(f"Description notes negate: {', '.join(negated)}.")

    eliminated = [s for s in scored if s.eliminated]
    if eliminated:
        chain.append("Eliminated: " + ", ".join(
            f"{s.genus} ({s.elimination_reason})" for s in eliminated
        ) + ".")

    active = [s for s in scored if s.active]
    if active:
        top = active[0]
        chain.append(
            f"Top candidate: {top.genus} ({score_to_confidence(top.score).value} confidence, "
            f"score {top.score:.2f})."
        )
        if len(active) > 1:
            others = ", ".join(f"{s.genus} ({s.score:.2f})" for s in active[1:1 + other_candidates])
            chain.append(f"Other candidates: {others}.")
    else:
        chain.append("No strong candidates based on current observations.")

    return chain


# ============================================================================
# QUESTIONS AND ACTIONS
# ============================================================================

def _impact_note(
    question: DisambiguationQuestion,
    active_genera: Sequence[str],
    rules: Sequence[FeatureRule],
) -> str:
    bearing = [g for g in active_genera if any(r.genus == g and r.field == question.feature for r in rules)]
    note = f"Bears on {', '.join(bearing)}." if bearing else "Refines the remaining candidates."
    if question.safety_relevant:
        guarded = [g for g in active_genera if question.feature in SAFETY_FEATURES.get(g, ())]
        note = f"Safety check for {', '.join(guarded)}. {note}"
    return note


def build_follow_up_questions(
    questions: Sequence[DisambiguationQuestion],
    active_genera: Sequence[str],
    rules: Sequence[FeatureRule],
    limit: int,
) -> List[FollowUpQuestion]:
    return [
        FollowUpQuestion(
            question=q.question,
            feature=q.feature,
            information_gain=q.information_gain,
            safety_relevant=q.safety_relevant,
            previously_available=q.feature not in ACTIVE_TEST_FIELDS,
            impact_note=_impact_note(q, active_genera, rules),
            skippable=q.skippable,
        )
        for q in questions[:limit]
    ]


def build_suggested_actions(
    questions: Sequence[DisambiguationQuestion],
    heuristic_actions: Sequence[SuggestedAction],
    any_active: bool,
    limit: int,
) -> List[SuggestedAction]:
    """Question-derived actions first, then heuristic actions."""
    actions = [
        SuggestedAction(
            action=q.question,
            reason=f"Would help distinguish between remaining candidates (information gain: {q.information_gain:.2f})",
            priority="critical" if q.safety_relevant else "recommended",
            safety_relevant=q.safety_relevant,
        )
        for q in questions[:limit]
    ]
    actions.extend(heuristic_actions)

    if not actions and not any_active:
        actions.append(BASIC_OBSERVATIONS_ACTION)
    return actions


# ============================================================================
# PIPELINE
# ============================================================================

def assemble_result(
    observation: Observation,
    genera: Sequence[str],
    rules: Sequence[FeatureRule],
    heuristics: Sequence[Heuristic] = (),
    now: Optional[datetime] = None,
) -> IdentificationResult:
    """
    Assemble a complete identification result.

    Args:
        observation: Validated observation
        genera: Candidate genera, in tie-break order
        rules: Static rule base
        heuristics: Heuristic table
        now: Injectable clock for season inference

    Returns:
        IdentificationResult (immutable, deterministic for the same inputs)
    """
    # Step 1: implicit features
    inference = infer_features(observation, now=now)
    observed = inference.observation

    # Step 2: free-text negations and exclusions become contra-rules
    preprocessing = preprocess_description_notes(observed, rules)
    all_rules = tuple(rules) + preprocessing.contra_rules

    # Step 3: score every genus
    scored = score_all_candidates(observed, genera, all_rules)
    active_genera = [s.genus for s in scored if s.active]

    # Step 4: safety gate, then edibility behind it
    safety = build_safety_assessment(scored)
    top = next((s for s in scored if not s.eliminated), None)
    edibility = None
    if top is not None:
        edibility = build_edibility(
            top,
            safety,
            observed,
            dangerous_active_genera(scored),
            missing_limit=config.EDIBILITY_MISSING_CHECKS,
        )

    # Step 5: what to ask and do next
    questions = select_questions(scored, observed, all_rules)
    triggered = find_applicable_heuristics(scored, heuristics)
    actions = build_suggested_actions(
        questions,
        generate_heuristic_actions(triggered),
        any_active=bool(active_genera),
        limit=config.MAX_SUGGESTED_ACTIONS,
    )
    follow_ups = build_follow_up_questions(
        questions, active_genera, all_rules, limit=config.MAX_FOLLOW_UP_QUESTIONS
    )

    reasoning = build_reasoning_chain(
        observation,
        inference.inferences,
        preprocessing,
        scored,
        other_candidates=config.OTHER_CANDIDATES_IN_REASONING,
    )

    logger.debug(
        f"Identification: top={active_genera[0] if active_genera else None}, "
        f"active={len(active_genera)}, foraging_ok={safety.confidence_sufficient_for_foraging}"
    )

    return IdentificationResult(
        candidates=tuple(to_candidate(s, observed) for s in scored),
        reasoning_chain=tuple(reasoning),
        safety=safety,
        edibility=edibility,
        suggested_actions=tuple(actions),
        follow_up_questions=tuple(follow_ups),
        ambiguities=tuple(detect_ambiguities(observed, active_genera)),
        triggered_heuristics=tuple(triggered),
        inferences=inference.inferences,
    )


class IdentificationService:
    """
    Identifies the genus of a specimen from a sparse field observation.

    Holds the genus list, rule base and heuristic table. The heuristic table
    is loaded on first use.
    """

    def __init__(
        self,
        genera: Optional[Sequence[str]] = None,
        rules: Optional[Sequence[FeatureRule]] = None,
        heuristics: Optional[Sequence[Heuristic]] = None,
    ):
        self.genera = tuple(genera) if genera is not None else ALL_GENERA
        self.rules = tuple(rules) if rules is not None else FEATURE_RULES
        self._heuristics = tuple(heuristics) if heuristics is not None else None

    @property
    def heuristics(self) -> Sequence[Heuristic]:
        """Lazy load the configured heuristic table."""
        if self._heuristics is None:
            self._heuristics = get_heuristics()
        return self._heuristics

    @staticmethod
    def to_observation(observation: Union[Observation, Mapping[str, Any]]) -> Observation:
        if isinstance(observation, Observation):
            return observation
        return Observation.model_validate(dict(observation))

    def identify(
        self,
        observation: Union[Observation, Mapping[str, Any]],
        now: Optional[datetime] = None,
    ) -> IdentificationResult:
        """
        Identify a specimen.

        Args:
            observation: Observation or plain mapping of observation fields
            now: Injectable clock for season inference (defaults to datetime.now())
        """
        return assemble_result(
            self.to_observation(observation),
            self.genera,
            self.rules,
            self.heuristics,
            now=now,
        )

    def score(
        self,
        observation: Union[Observation, Mapping[str, Any]],
    ) -> List[CandidateScore]:
        """Raw candidate scores without inference or presentation."""
        return score_all_candidates(self.to_observation(observation), self.genera, self.rules)

    def identify_dict(
        self,
        observation: Union[Observation, Mapping[str, Any]],
        now: Optional[datetime] = None,
    ) -> Dict[str, Any]:
        return self.identify(observation, now=now).to_dict()
