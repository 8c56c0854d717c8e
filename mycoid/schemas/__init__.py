"""
Schemas - Pydantic models for validating engine inputs.

Organized by domain:
- observation.py: Observation (sparse specimen record)
- heuristic.py: Heuristic, ProcedureStep, HeuristicOutcome
"""

from .observation import Observation
from .heuristic import (
    Heuristic,
    HeuristicAppliesTo,
    HeuristicOutcome,
    ProcedureStep,
    StructuredProcedure
)

__all__ = [
    'Observation',
    'Heuristic',
    'HeuristicAppliesTo',
    'HeuristicOutcome',
    'ProcedureStep',
    'StructuredProcedure'
]
