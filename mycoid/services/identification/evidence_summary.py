"""
Evidence Summary

Short human-readable phrases for observed field values ("no ring",
"brittle flesh", "growing on wood"), used in evidence records and the
reasoning chain.
"""

from typing import Any, List

MONTH_NAMES = (
    "", "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

BOOLEAN_SUMMARIES = {
    "ring_present": ("ring present", "no ring"),
    "volva_present": ("volva present", "no volva"),
    "stem_present": ("stem present", "no stem"),
    "photo_available": ("photo available", "no photo"),
}

GILL_TYPE_SUMMARIES = {
    "gills": "gills",
    "pores": "pores",
    "teeth": "teeth/spines",
    "smooth": "smooth underside",
    "ridges": "ridges (false gills)",
}

FLESH_TEXTURE_SUMMARIES = {
    "brittle": "brittle flesh",
    "fibrous": "fibrous flesh",
    "soft": "soft flesh",
    "tough": "tough flesh",
}

CAP_SHAPE_SUMMARIES = {
    "convex": "convex cap",
    "flat": "flat cap",
    "funnel": "funnel-shaped cap",
    "depressed": "depressed cap",
    "concave": "concave cap",
    "conical": "conical cap",
    "round": "round cap",
}

GROWTH_PATTERN_SUMMARIES = {
    "solitary": "solitary growth",
    "scattered": "scattered growth",
    "clustered": "clustered growth",
    "tufted": "tufted growth",
    "ring": "ring/arc growth",
    "fairy ring": "fairy ring growth",
    "arc": "arc growth",
    "tiered": "tiered/shelf growth",
    "overlapping": "overlapping growth",
}

# field -> template for free-text values
TEXT_TEMPLATES = {
    "habitat": "{} habitat",
    "substrate": "growing on {}",
    "gill_color": "{} gills",
    "cap_color": "{} cap",
    "stem_color": "{} stem",
    "flesh_color": "{} flesh",
    "spore_print_color": "{} spore print",
    "smell": "smells of {}",
    "taste": "tastes {}",
    "bruising_color": "bruises {}",
}


def field_label(field: str) -> str:
    return field.replace("_", " ")


def format_value(value: Any) -> str:
    """Observed value as display text ('' when unobserved)."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (list, tuple)):
        return ", ".join(str(v) for v in value)
    return str(value)


def summarize_observation(field: str, value: Any) -> str:
    """Human-readable summary for a single field and value."""
    if field in BOOLEAN_SUMMARIES:
        yes, no = BOOLEAN_SUMMARIES[field]
        return yes if value else no

    if isinstance(value, str):
        if field == "gill_type":
            return GILL_TYPE_SUMMARIES.get(value, value)
        if field == "flesh_texture":
            return FLESH_TEXTURE_SUMMARIES.get(value, f"{value} flesh")
        if field == "cap_shape":
            return CAP_SHAPE_SUMMARIES.get(value, f"{value} cap")
        if field == "growth_pattern":
            return GROWTH_PATTERN_SUMMARIES.get(value, f"{value} growth")
        if field in TEXT_TEMPLATES:
            return TEXT_TEMPLATES[field].format(value)
        return f"{field_label(field)}: {value}"

    if field == "cap_size_cm" and isinstance(value, (int, float)):
        return f"cap ~{format_value(value)}cm"

    if field == "season_month" and isinstance(value, int) and 1 <= value <= 12:
        return MONTH_NAMES[value]

    if field == "nearby_trees" and isinstance(value, (list, tuple)) and value:
        return f"near {format_value(value)}"

    return field_label(field)


def summarize_all_observations(observation: Any) -> List[str]:
    """Summaries for every observed field, in declaration order."""
    return [
        summarize_observation(field, value)
        for field, value in observation.observed_fields().items()
    ]
