"""
Feature Inference

Fills implicit fields from context (growth pattern, habitat, substrate and
the current month). Never overrides an explicitly observed field and never
mutates its input.
"""

import logging
from datetime import datetime
from typing import List, Optional

from mycoid.schemas.observation import Observation

from .models import InferenceResult, InferredFeature

logger = logging.getLogger(__name__)

SOIL_HABITATS = ("parkland", "grassland", "garden")


def infer_features(observation: Observation, now: Optional[datetime] = None) -> InferenceResult:
    """
    Infer implicit features from context.

    Args:
        observation: The raw observation
        now: Injectable clock for the season inference (defaults to datetime.now())

    Returns:
        InferenceResult with a new Observation and the ordered inferences
    """
    now = now or datetime.now()
    updates = {}
    inferences: List[InferredFeature] = []

    observed = observation.observed_fields()
    has_other_observations = any(field != "season_month" for field in observed)

    substrate = observation.substrate
    habitat = observation.habitat

    # Growth pattern -> substrate
    if observation.growth_pattern == "tiered" and substrate is None:
        substrate = "wood"
        updates["substrate"] = substrate
        inferences.append(InferredFeature(
            field="substrate",
            value="wood",
            reason="Tiered/shelf growth almost always occurs on wood",
            confidence="high",
        ))

    # Habitat -> substrate
    if substrate is None and habitat in SOIL_HABITATS:
        substrate = "soil"
        updates["substrate"] = substrate
        inferences.append(InferredFeature(
            field="substrate",
            value="soil",
            reason=f"{habitat} habitat implies soil substrate",
            confidence="medium",
        ))

    # Substrate -> habitat
    if substrate == "dung" and habitat is None:
        habitat = "grassland"
        updates["habitat"] = habitat
        inferences.append(InferredFeature(
            field="habitat",
            value="grassland",
            reason="Dung substrate implies grassland habitat",
            confidence="medium",
        ))

    # Wood + tiered -> bracket fungus, no stem
    if substrate == "wood" and observation.growth_pattern == "tiered" and observation.stem_present is None:
        updates["stem_present"] = False
        inferences.append(InferredFeature(
            field="stem_present",
            value=False,
            reason="Tiered growth on wood suggests bracket fungi (no stem)",
            confidence="medium",
        ))

    # Season only once something else has been observed
    if observation.season_month is None and has_other_observations:
        updates["season_month"] = now.month
        inferences.append(InferredFeature(
            field="season_month",
            value=now.month,
            reason="Season inferred from current date",
            confidence="high",
        ))

    if inferences:
        logger.debug(f"Inferred {[i.field for i in inferences]}")

    return InferenceResult(
        observation=observation.with_updates(**updates),
        inferences=tuple(inferences),
    )
