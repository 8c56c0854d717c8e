"""
Configuration module for the identification engine.

Scoring constants (tier weights, confidence thresholds) are NOT configurable;
they live in services/identification/models.py. Settings here only bound
presentation sizes and choose data sources.
"""
import logging
import os
from typing import Optional

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

LOG_LEVEL = os.getenv("MYCOID_LOG_LEVEL", "WARNING").upper()

# Result presentation limits
MAX_SUGGESTED_ACTIONS = int(os.getenv("MYCOID_MAX_SUGGESTED_ACTIONS", "5"))
MAX_FOLLOW_UP_QUESTIONS = int(os.getenv("MYCOID_MAX_FOLLOW_UP_QUESTIONS", "8"))
OTHER_CANDIDATES_IN_REASONING = int(os.getenv("MYCOID_OTHER_CANDIDATES_IN_REASONING", "3"))
EDIBILITY_MISSING_CHECKS = int(os.getenv("MYCOID_EDIBILITY_MISSING_CHECKS", "3"))

# Optional JSON heuristic table replacing the shipped seed table
HEURISTICS_PATH = os.getenv("MYCOID_HEURISTICS_PATH") or None


def configure_logging(level: Optional[str] = None) -> None:
    """Apply MYCOID_LOG_LEVEL to the mycoid logger hierarchy."""
    logging.getLogger("mycoid").setLevel(level or LOG_LEVEL)
