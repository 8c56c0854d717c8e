"""
Observation schema for specimen identification.

Every field is optional. None means "not observed" (not "absent"):
ring_present=False is an observation, ring_present=None is not.
"""

import logging
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

logger = logging.getLogger(__name__)

ObservationConfidence = Literal["certain", "likely", "unsure"]

FREE_TEXT_FIELDS = (
    "cap_color",
    "cap_shape",
    "cap_texture",
    "gill_type",
    "gill_color",
    "gill_attachment",
    "stem_color",
    "spore_print_color",
    "flesh_color",
    "flesh_texture",
    "bruising_color",
    "smell",
    "taste",
    "habitat",
    "substrate",
    "region",
    "growth_pattern",
    "description_notes",
    "observation_conditions",
)


class Observation(BaseModel):
    """Sparse field observation of a single specimen."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    # Morphological features
    cap_color: Optional[str] = Field(None, description="Cap colour (e.g., 'yellow', 'dark red')")
    cap_size_cm: Optional[float] = Field(None, description="Cap diameter in cm")
    cap_shape: Optional[str] = Field(None, description="e.g., 'convex', 'funnel', 'depressed'")
    cap_texture: Optional[str] = None
    gill_type: Optional[str] = Field(None, description="'gills', 'pores', 'teeth', 'smooth' or 'ridges'")
    gill_color: Optional[str] = None
    gill_attachment: Optional[str] = None
    stem_present: Optional[bool] = None
    stem_color: Optional[str] = None
    ring_present: Optional[bool] = None
    volva_present: Optional[bool] = None
    spore_print_color: Optional[str] = None
    flesh_color: Optional[str] = None
    flesh_texture: Optional[str] = Field(None, description="'brittle', 'fibrous', 'soft', 'tough'")
    bruising_color: Optional[str] = None
    smell: Optional[str] = None
    taste: Optional[str] = None

    # Ecological context
    habitat: Optional[str] = None
    substrate: Optional[str] = None
    substrate_confidence: Optional[ObservationConfidence] = None
    nearby_trees: Optional[List[str]] = None
    tree_confidence: Optional[ObservationConfidence] = None
    season_month: Optional[int] = Field(None, description="Month of observation, 1-12")
    region: Optional[str] = None
    growth_pattern: Optional[str] = None

    # Unstructured diagnostic prose
    description_notes: Optional[str] = None

    # Meta
    photo_available: Optional[bool] = None
    observation_conditions: Optional[str] = None

    @field_validator(*FREE_TEXT_FIELDS, mode="before")
    @classmethod
    def _blank_text_is_unobserved(cls, value: Any) -> Any:
        if value is None:
            return None
        if not isinstance(value, str):
            value = str(value)
        value = value.strip()
        return value or None

    @field_validator("stem_present", "ring_present", "volva_present", "photo_available", mode="before")
    @classmethod
    def _lenient_flag(cls, value: Any) -> Optional[bool]:
        if value is None or isinstance(value, bool):
            return value
        token = str(value).strip().lower()
        if token in ("true", "yes", "y", "1"):
            return True
        if token in ("false", "no", "n", "0"):
            return False
        logger.warning(f"Dropping unrecognised yes/no value: {value!r}")
        return None

    @field_validator("cap_size_cm", mode="before")
    @classmethod
    def _lenient_size(cls, value: Any) -> Optional[float]:
        if value is None or isinstance(value, bool):
            return None
        try:
            return float(value)
        except (TypeError, ValueError):
            logger.warning(f"Dropping unparsable cap_size_cm: {value!r}")
            return None

    @field_validator("season_month", mode="before")
    @classmethod
    def _lenient_month(cls, value: Any) -> Optional[int]:
        if value is None or isinstance(value, bool):
            return None
        try:
            month = int(value)
        except (TypeError, ValueError):
            logger.warning(f"Dropping unparsable season_month: {value!r}")
            return None
        if not 1 <= month <= 12:
            logger.warning(f"Dropping out-of-range season_month: {month}")
            return None
        return month

    @field_validator("substrate_confidence", "tree_confidence", mode="before")
    @classmethod
    def _lenient_confidence(cls, value: Any) -> Optional[str]:
        if value in ("certain", "likely", "unsure"):
            return value
        return None

    @field_validator("nearby_trees", mode="before")
    @classmethod
    def _tree_list(cls, value: Any) -> Optional[List[str]]:
        if value is None:
            return None
        if isinstance(value, str):
            value = [value]
        if not isinstance(value, (list, tuple)):
            logger.warning(f"Dropping unparsable nearby_trees: {value!r}")
            return None
        trees = [str(t).strip() for t in value if str(t).strip()]
        return trees or None

    def observed_fields(self) -> Dict[str, Any]:
        """Fields with a non-null value, in declaration order."""
        return {
            name: value
            for name, value in self.model_dump().items()
            if value is not None
        }

    def with_updates(self, **updates: Any) -> "Observation":
        """Return a new Observation with the given fields replaced."""
        return self.model_copy(update=updates)
