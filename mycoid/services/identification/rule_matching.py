"""
Rule Matching

Evaluates a single FeatureRule predicate against an observation.
Total over every observation: unobserved or wrongly typed values never
raise, they simply do not match.
"""

from typing import Any, Optional

from .models import FeatureMatch, FeatureRule, MatchKind


def field_value(observation: Any, field: str) -> Any:
    """Value of an observation field, None when unobserved or unknown."""
    return getattr(observation, field, None)


def _strict_equals(value: Any, expected: Any) -> bool:
    # True must not equal 1 and "1" must not equal 1
    if isinstance(value, bool) or isinstance(expected, bool):
        return isinstance(value, bool) and isinstance(expected, bool) and value is expected
    if isinstance(value, str) or isinstance(expected, str):
        return isinstance(value, str) and isinstance(expected, str) and value == expected
    return value == expected


def _in_range(value: Any, low: Optional[float], high: Optional[float]) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    if low is not None and value < low:
        return False
    if high is not None and value > high:
        return False
    return True


def matches_value(value: Any, match: FeatureMatch) -> bool:
    if match.kind == MatchKind.ABSENT:
        return value is None
    if match.kind == MatchKind.PRESENT:
        return value is not None
    if value is None:
        return False

    if match.kind == MatchKind.EQUALS:
        return _strict_equals(value, match.value)

    if match.kind == MatchKind.INCLUDES:
        needle = str(match.value).lower()
        if isinstance(value, str):
            return needle in value.lower()
        if isinstance(value, (list, tuple)):
            return any(isinstance(v, str) and needle in v.lower() for v in value)
        return False

    if match.kind == MatchKind.ONE_OF:
        if not isinstance(value, str):
            return False
        lowered = value.lower()
        return any(candidate.lower() == lowered for candidate in match.values)

    if match.kind == MatchKind.RANGE:
        return _in_range(value, match.min, match.max)

    return False


def matches_rule(observation: Any, rule: FeatureRule) -> bool:
    """
    True when the rule's predicate holds for the observation.

    'absent' holds exactly when the field is unobserved and 'present' when it
    is observed. Every other predicate is False for an unobserved field.
    """
    return matches_value(field_value(observation, rule.field), rule.match)
