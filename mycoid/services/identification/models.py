"""
Identification Models

Data classes, enums and fixed constants for genus identification.
All records are frozen: every call builds fresh output and never mutates
shared tables.
"""

from dataclasses import dataclass, asdict
from enum import Enum
from typing import Any, Dict, Optional, Tuple, Union


class EvidenceTier(str, Enum):
    """Categorical weight and elimination power of one observed feature."""
    DEFINITIVE = "definitive"
    STRONG = "strong"
    MODERATE = "moderate"
    WEAK = "weak"
    EXCLUSIONARY = "exclusionary"


class ConfidenceLevel(str, Enum):
    """Named bucket a numeric score maps to."""
    INSUFFICIENT = "insufficient"
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"
    DEFINITIVE = "definitive"


class MatchKind(str, Enum):
    EQUALS = "equals"
    INCLUDES = "includes"
    ONE_OF = "one_of"
    RANGE = "range"
    PRESENT = "present"
    ABSENT = "absent"


# Tier weights (exclusionary eliminates outright, it carries no weight)
TIER_WEIGHTS: Dict[EvidenceTier, float] = {
    EvidenceTier.DEFINITIVE: 0.80,
    EvidenceTier.STRONG: 0.35,
    EvidenceTier.MODERATE: 0.12,
    EvidenceTier.WEAK: 0.04,
    EvidenceTier.EXCLUSIONARY: 0.0,
}

DIMINISHING_FACTOR = 0.6       # i-th match of a tier counts weight * 0.6**i
CONTRADICTION_PENALTY = 0.5    # non-exclusionary contradiction subtracts half its tier weight

# Lower bound of each confidence level, highest first
CONFIDENCE_THRESHOLDS: Tuple[Tuple[ConfidenceLevel, float], ...] = (
    (ConfidenceLevel.DEFINITIVE, 0.9),
    (ConfidenceLevel.HIGH, 0.65),
    (ConfidenceLevel.MODERATE, 0.4),
    (ConfidenceLevel.LOW, 0.15),
    (ConfidenceLevel.INSUFFICIENT, 0.0),
)

CONFIDENCE_ORDER: Tuple[ConfidenceLevel, ...] = (
    ConfidenceLevel.INSUFFICIENT,
    ConfidenceLevel.LOW,
    ConfidenceLevel.MODERATE,
    ConfidenceLevel.HIGH,
    ConfidenceLevel.DEFINITIVE,
)

FORAGING_CONFIDENCE_LEVELS = (ConfidenceLevel.HIGH, ConfidenceLevel.DEFINITIVE)

MatchValue = Union[str, bool, int, float]


# ============================================================================
# RULE BASE
# ============================================================================

@dataclass(frozen=True)
class FeatureMatch:
    """Predicate applied to one observation field."""
    kind: MatchKind
    value: Optional[MatchValue] = None
    values: Tuple[str, ...] = ()
    min: Optional[float] = None
    max: Optional[float] = None


def equals(value: MatchValue) -> FeatureMatch:
    return FeatureMatch(MatchKind.EQUALS, value=value)


def includes(text: str) -> FeatureMatch:
    return FeatureMatch(MatchKind.INCLUDES, value=text)


def one_of(*values: str) -> FeatureMatch:
    return FeatureMatch(MatchKind.ONE_OF, values=tuple(values))


def in_range(min: Optional[float] = None, max: Optional[float] = None) -> FeatureMatch:
    return FeatureMatch(MatchKind.RANGE, min=min, max=max)


def present() -> FeatureMatch:
    return FeatureMatch(MatchKind.PRESENT)


def absent() -> FeatureMatch:
    return FeatureMatch(MatchKind.ABSENT)


@dataclass(frozen=True)
class FeatureRule:
    """
    Atomic fact: an observation field+value supports or contradicts a genus.

    Example: FeatureRule('russula-brittle-flesh', 'flesh_texture', equals('brittle'),
             'Russula', EvidenceTier.DEFINITIVE, True, ...)
    means brittle flesh is definitive evidence FOR Russula.
    """
    id: str
    field: str
    match: FeatureMatch
    genus: str
    tier: EvidenceTier
    supporting: bool    # True = FOR this genus, False = AGAINST
    description: str


# ============================================================================
# SCORING
# ============================================================================

@dataclass(frozen=True)
class MatchedEvidence:
    rule_id: str
    field: str
    tier: EvidenceTier
    supporting: bool
    description: str


@dataclass(frozen=True)
class CandidateScore:
    """Per-genus scoring output. Recomputed fresh on every call."""
    genus: str
    score: float                               # 0.0 - 1.0
    eliminated: bool
    matching: Tuple[MatchedEvidence, ...] = ()
    contradicting: Tuple[MatchedEvidence, ...] = ()
    missing: Tuple[MatchedEvidence, ...] = ()
    elimination_reason: Optional[str] = None

    @property
    def active(self) -> bool:
        """Not ruled out and carrying positive evidence."""
        return not self.eliminated and self.score > 0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


# ============================================================================
# PIPELINE INTERMEDIATES
# ============================================================================

@dataclass(frozen=True)
class InferredFeature:
    field: str
    value: Any
    reason: str
    confidence: str     # "high" | "medium" | "low"


@dataclass(frozen=True)
class InferenceResult:
    observation: Any    # mycoid.schemas.Observation
    inferences: Tuple[InferredFeature, ...] = ()


@dataclass(frozen=True)
class NegatedTerm:
    """E.g. "not rolled" -> NegatedTerm('rolled', 'not rolled')."""
    negated_term: str
    full_phrase: str


@dataclass(frozen=True)
class PreprocessingResult:
    negations: Tuple[NegatedTerm, ...] = ()
    genus_exclusions: Tuple[str, ...] = ()
    contra_rules: Tuple[FeatureRule, ...] = ()


@dataclass(frozen=True)
class AmbiguityFlag:
    id: str
    fields: Tuple[str, ...]
    question: str
    explanation: str
    relevant_genera: Tuple[str, ...]


@dataclass(frozen=True)
class DisambiguationQuestion:
    question: str
    feature: str
    information_gain: float
    safety_relevant: bool
    skippable: bool = True


@dataclass(frozen=True)
class TriggeredHeuristic:
    heuristic_id: str
    name: str
    genus: str
    category: str
    priority: str       # "critical" | "standard" | "supplementary"
    steps: Tuple[str, ...] = ()
    safety_notes: Tuple[str, ...] = ()


# ============================================================================
# RESULT
# ============================================================================

@dataclass(frozen=True)
class Evidence:
    rule_id: str
    feature: str
    observed_value: str
    tier: EvidenceTier
    supports: bool
    summary: str        # e.g. "no ring", "brittle flesh"
    description: str


@dataclass(frozen=True)
class Candidate:
    genus: str
    common_name: str
    confidence: ConfidenceLevel
    score: float
    eliminated: bool
    elimination_reason: Optional[str] = None
    matching_evidence: Tuple[Evidence, ...] = ()
    contradicting_evidence: Tuple[Evidence, ...] = ()
    missing_evidence: Tuple[Evidence, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class SafetyWarning:
    type: str           # "deadly_lookalike" | "toxic_lookalike" | "requires_confirmation" | "general"
    message: str
    severity: str       # "critical" | "high" | "moderate" | "low"
    genus: Optional[str] = None


@dataclass(frozen=True)
class LookalikeWarning:
    species: str
    genus: str
    danger_level: str
    distinguishing_features: Tuple[str, ...]
    paired_with: str


@dataclass(frozen=True)
class SafetyAssessment:
    toxicity: str
    warnings: Tuple[SafetyWarning, ...]
    dangerous_lookalikes: Tuple[LookalikeWarning, ...]
    confidence_sufficient_for_foraging: bool

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class EdibilityInfo:
    """
    Genus-level edibility advice, present only behind the foraging gate.

    When withheld, reason_code is machine readable
    ("insufficient_confidence" | "dangerous_genus_active") and missing_checks
    names the observations that would move the gate.
    """
    available: bool
    genus: str
    status: Optional[str] = None
    notes: str = ""
    preparation_notes: Optional[str] = None
    reason_code: Optional[str] = None
    reason_unavailable: Optional[str] = None
    missing_checks: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class SuggestedAction:
    action: str
    reason: str
    priority: str       # "critical" | "recommended" | "optional"
    safety_relevant: bool


@dataclass(frozen=True)
class FollowUpQuestion:
    question: str
    feature: str
    information_gain: float
    safety_relevant: bool
    previously_available: bool    # plain form field left empty, vs an active test
    impact_note: str
    skippable: bool = True


@dataclass(frozen=True)
class IdentificationResult:
    """One immutable identification: a pure function of observation and tables."""
    candidates: Tuple[Candidate, ...]
    reasoning_chain: Tuple[str, ...]
    safety: SafetyAssessment
    edibility: Optional[EdibilityInfo]
    suggested_actions: Tuple[SuggestedAction, ...] = ()
    follow_up_questions: Tuple[FollowUpQuestion, ...] = ()
    ambiguities: Tuple[AmbiguityFlag, ...] = ()
    triggered_heuristics: Tuple[TriggeredHeuristic, ...] = ()
    inferences: Tuple[InferredFeature, ...] = ()

    @property
    def top_candidate(self) -> Optional[Candidate]:
        for candidate in self.candidates:
            if not candidate.eliminated and candidate.score > 0:
                return candidate
        return None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
