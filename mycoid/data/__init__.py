"""
Reference tables for identification.

- genera.py: the 20 seed genera and their common names
- feature_rules.py: structured field rules
- description_rules.py: free-text rules over description_notes
- heuristics.py: JSON heuristic table loader (seed_heuristics.json)
"""

from typing import Tuple

from mycoid.services.identification.models import FeatureRule

from .description_rules import DESCRIPTION_RULES
from .feature_rules import STRUCTURED_RULES
from .genera import ALL_GENERA, COMMON_NAMES, GENUS_LOOKUP, common_name
from .heuristics import HeuristicTableError, clear_heuristics_cache, get_heuristics, load_heuristics

# Full rule base in authoring order: structured rules first, then free text
FEATURE_RULES: Tuple[FeatureRule, ...] = STRUCTURED_RULES + DESCRIPTION_RULES

__all__ = [
    "ALL_GENERA",
    "COMMON_NAMES",
    "GENUS_LOOKUP",
    "common_name",
    "FEATURE_RULES",
    "STRUCTURED_RULES",
    "DESCRIPTION_RULES",
    "HeuristicTableError",
    "get_heuristics",
    "load_heuristics",
    "clear_heuristics_cache",
]
