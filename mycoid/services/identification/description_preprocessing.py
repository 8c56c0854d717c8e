"""
Description-Notes Preprocessing

Advisory regex layer over free-text notes. Extracts negated terms
("not rolled", "no milk") and explicit genus exclusions ("unlikely a
Clitocybe"), then synthesises contra-rules the scorer applies alongside
the static rule base. The parser is approximate by nature; it can only
ever add evidence against a genus.
"""

import logging
import re
from typing import Any, Iterable, List, Tuple

from mycoid.data.genera import GENUS_LOOKUP

from .models import (
    EvidenceTier,
    FeatureRule,
    MatchKind,
    NegatedTerm,
    PreprocessingResult,
    present,
)

logger = logging.getLogger(__name__)

_APOSTROPHE = "['’]"

# One capture group per pattern: the negated term
NEGATION_PATTERNS = tuple(re.compile(p, re.IGNORECASE) for p in (
    r"\bnot\s+(\w+)",
    r"\bno\s+(\w+)",
    r"\bnever\s+(\w+)",
    r"\bwithout\s+(?:a\s+)?(\w+)",
    rf"\bdoesn{_APOSTROPHE}t\s+(\w+)",
    r"\bdoes\s+not\s+(\w+)",
    rf"\bisn{_APOSTROPHE}t\s+(\w+)",
    rf"\bhasn{_APOSTROPHE}t\s+(\w+)",
    r"\bhas\s+no\s+(\w+)",
    r"\blacks?\s+(?:a\s+)?(\w+)",
    r"\babsence\s+of\s+(\w+)",
))

# One capture group per pattern: the candidate genus name
EXCLUSION_PATTERNS = tuple(re.compile(p, re.IGNORECASE) for p in (
    r"\bunlikely\s+(?:a\s+)?(\w+)",
    r"\bnot\s+(?:a\s+)?(\w+)",
    r"\brules?\s+out\s+(\w+)",
    rf"\bcan{_APOSTROPHE}t\s+be\s+(\w+)",
    r"\bcannot\s+be\s+(\w+)",
    r"\bprobably\s+not\s+(?:a\s+)?(\w+)",
    r"\bdefinitely\s+not\s+(?:a\s+)?(\w+)",
    r"\bexcludes?\s+(\w+)",
))

FILLER_WORDS = frozenset(("the", "a", "an", "it", "this", "that", "very", "quite"))

NOTES_FIELD = "description_notes"


def parse_negations(text: str) -> Tuple[NegatedTerm, ...]:
    """Negated terms in pattern order, first occurrence of each term kept."""
    results: List[NegatedTerm] = []
    seen = set()

    for pattern in NEGATION_PATTERNS:
        for match in pattern.finditer(text):
            term = match.group(1).lower()
            # Genus names belong to parse_genus_exclusions
            if term in GENUS_LOOKUP or term in FILLER_WORDS:
                continue
            if term not in seen:
                seen.add(term)
                results.append(NegatedTerm(negated_term=term, full_phrase=match.group(0)))

    return tuple(results)


def parse_genus_exclusions(text: str) -> Tuple[str, ...]:
    """Canonical genus names the text explicitly rules out."""
    results: List[str] = []
    seen = set()

    for pattern in EXCLUSION_PATTERNS:
        for match in pattern.finditer(text):
            genus = GENUS_LOOKUP.get(match.group(1).lower())
            if genus and genus not in seen:
                seen.add(genus)
                results.append(genus)

    return tuple(results)


def _negation_contra_rules(negations: Iterable[NegatedTerm], rules: Iterable[FeatureRule]) -> List[FeatureRule]:
    supporting_notes_rules = [
        r for r in rules
        if r.field == NOTES_FIELD and r.supporting and r.match.kind == MatchKind.INCLUDES
    ]
    contra: List[FeatureRule] = []
    for negation in negations:
        term = negation.negated_term
        for rule in supporting_notes_rules:
            needle = str(rule.match.value).lower()
            if term in needle or needle in term:
                contra.append(FeatureRule(
                    id=f"negation-{term}-{rule.genus}",
                    field=NOTES_FIELD,
                    match=present(),
                    genus=rule.genus,
                    tier=rule.tier,
                    supporting=False,
                    description=f'User stated "{negation.full_phrase}": contradicts {rule.description.lower()}',
                ))
    return contra


def preprocess_description_notes(observation: Any, rules: Iterable[FeatureRule]) -> PreprocessingResult:
    """
    Extract negations and genus exclusions from description_notes.

    Returns synthetic contra-rules: one per (negated term, supporting notes
    rule it overlaps), at the negated rule's tier, plus one strong
    contra-rule per explicitly excluded genus.
    """
    notes = getattr(observation, NOTES_FIELD, None)
    if not notes:
        return PreprocessingResult()

    negations = parse_negations(notes)
    exclusions = parse_genus_exclusions(notes)

    contra_rules = _negation_contra_rules(negations, rules)
    for genus in exclusions:
        contra_rules.append(FeatureRule(
            id=f"exclusion-user-{genus}",
            field=NOTES_FIELD,
            match=present(),
            genus=genus,
            tier=EvidenceTier.STRONG,
            supporting=False,
            description=f"User explicitly stated this is unlikely to be {genus}",
        ))

    if contra_rules:
        logger.debug(f"Synthesised {len(contra_rules)} contra-rules from description notes")

    return PreprocessingResult(
        negations=negations,
        genus_exclusions=exclusions,
        contra_rules=tuple(contra_rules),
    )
