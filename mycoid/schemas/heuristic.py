"""
Heuristic schemas.

Heuristics are externally authored procedural tests (taste test, spore print,
slice check, ...). They are reference data: validated once when the table is
loaded, immutable afterwards.
"""

from typing import Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

ConfidenceLevelName = Literal["insufficient", "low", "moderate", "high", "definitive"]

HeuristicCategory = Literal[
    "safety_rule",
    "safety_screening",
    "edibility_determination",
    "discrimination",
    "ecological_context",
    "gestalt_recognition",
]

HeuristicPriority = Literal["critical", "standard", "supplementary"]

HeuristicConclusion = Literal[
    "EDIBLE",
    "REJECT",
    "CAUTION",
    "LIKELY_TOXIC",
    "AVOID",
    "PROCEED_WITH_CAUTION",
    "INVESTIGATE_FURTHER",
]

RiskLevel = Literal["low", "medium", "high"]


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")


class ProcedureStep(_Frozen):
    """One step of a structured procedure."""
    instruction: str
    safety_note: Optional[str] = None


class StructuredProcedure(_Frozen):
    steps: List[ProcedureStep] = Field(default_factory=list)
    estimated_time: Optional[str] = None


class HeuristicOutcome(_Frozen):
    id: Optional[str] = None
    condition: str
    conclusion: HeuristicConclusion
    confidence: ConfidenceLevelName
    action: str
    next_steps: List[str] = Field(default_factory=list)


class HeuristicAppliesTo(_Frozen):
    """Target of a heuristic. Only genus-targeted heuristics can fire."""
    genus: Optional[str] = None
    family: Optional[str] = None
    morphology: Optional[Dict[str, str]] = None
    confidence_required: ConfidenceLevelName = "moderate"


class HeuristicSafety(_Frozen):
    false_positive_risk: RiskLevel
    false_negative_risk: RiskLevel
    failure_mode: str


class Heuristic(_Frozen):
    """Externally authored identification procedure."""
    heuristic_id: str
    version: int = 1
    name: str
    category: HeuristicCategory
    priority: HeuristicPriority = "standard"
    applies_to: HeuristicAppliesTo
    procedure: Union[str, StructuredProcedure]
    outcomes: List[HeuristicOutcome] = Field(default_factory=list)
    safety_notes: List[str] = Field(default_factory=list)
    safety: Optional[HeuristicSafety] = None
    rationale: Optional[str] = None
    source: Optional[str] = None
