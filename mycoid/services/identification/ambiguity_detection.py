"""
Ambiguity Detection

Contextual checks where an observation could plausibly mean different
things that change the identification (buried wood, nearby trees, ridges
vs gills, white vs pale pink gills, parasol size).
"""

from typing import Any, List, Sequence

from .models import AmbiguityFlag

WOOD_DECAY_GENERA = ("Armillaria", "Pleurotus", "Laetiporus", "Fistulina")
MYCORRHIZAL_GENERA = ("Russula", "Boletus", "Leccinum", "Cantharellus", "Lactarius", "Amanita")


def detect_ambiguities(observation: Any, active_genera: Sequence[str]) -> List[AmbiguityFlag]:
    """
    Flag ambiguous observations that warrant a follow-up prompt.

    Args:
        observation: Observation after inference
        active_genera: Genera still in play (not eliminated, score > 0)
    """
    flags: List[AmbiguityFlag] = []
    active = set(active_genera)

    if observation.substrate == "soil" and observation.habitat in ("woodland", "parkland"):
        flags.append(AmbiguityFlag(
            id="buried_wood",
            fields=("substrate", "habitat"),
            question=(
                "Could there be buried wood underneath? Near trees, mushrooms appearing to grow "
                "from soil may actually be on buried roots or wood."
            ),
            explanation=(
                "Many wood-decaying species (Armillaria, Pleurotus) grow from buried wood that "
                "looks like soil. This matters for identification."
            ),
            relevant_genera=tuple(g for g in active_genera if g in WOOD_DECAY_GENERA),
        ))

    if observation.habitat == "grassland" and observation.nearby_trees:
        flags.append(AmbiguityFlag(
            id="grassland_trees",
            fields=("habitat", "nearby_trees"),
            question=(
                "Are the trees within a few metres? Some species form mycorrhizal associations "
                "even in apparent grassland near trees."
            ),
            explanation=(
                "Mycorrhizal species like Russula and Boletus need tree roots. If trees are close, "
                "these genera become candidates even in grassland."
            ),
            relevant_genera=tuple(g for g in active_genera if g in MYCORRHIZAL_GENERA),
        ))

    if observation.gill_type == "ridges" and "Cantharellus" in active:
        flags.append(AmbiguityFlag(
            id="ridge_vs_gill",
            fields=("gill_type",),
            question=(
                "Are the ridges forked and vein-like (running down the stem), or thin, blade-like, "
                "and evenly spaced?"
            ),
            explanation=(
                "True chanterelles have irregular forked ridges/veins. False chanterelles have "
                "thinner, more regular, blade-like gills. This is the key distinction."
            ),
            relevant_genera=("Cantharellus", "Hygrophoropsis"),
        ))

    if observation.gill_color == "white" and "Amanita" in active and "Agaricus" in active:
        flags.append(AmbiguityFlag(
            id="white_gill_ambiguity",
            fields=("gill_color",),
            question=(
                "Are the gills truly white, or could they be very pale pink? Young Agaricus have "
                "pale pink gills that darken with age."
            ),
            explanation=(
                "Amanita gills stay white. Agaricus gills start pale pink and turn brown. "
                "This distinction is safety-critical."
            ),
            relevant_genera=("Amanita", "Agaricus"),
        ))

    if "Macrolepiota" in active and observation.cap_size_cm is None:
        flags.append(AmbiguityFlag(
            id="parasol_size",
            fields=("cap_size_cm",),
            question=(
                "What is the cap diameter? This is critical: small \"parasols\" (under 10cm) may be "
                "deadly Lepiota species, not true Parasols."
            ),
            explanation=(
                "Macrolepiota (Parasol) has caps 10-30cm. Small Lepiota species look similar but "
                "are lethally toxic. Size is the first safety check."
            ),
            relevant_genera=("Macrolepiota",),
        ))

    return flags
