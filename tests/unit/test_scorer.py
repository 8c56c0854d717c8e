"""
Unit tests for the hierarchical candidate scorer.
"""
import pytest

from mycoid.data import ALL_GENERA, FEATURE_RULES
from mycoid.schemas.observation import Observation
from mycoid.services.identification.models import ConfidenceLevel, EvidenceTier, FeatureRule, absent
from mycoid.services.identification.scorer import (
    score_all_candidates,
    score_candidate,
    score_to_confidence,
)


# ============================================================================
# SINGLE CANDIDATE
# ============================================================================

class TestScoreCandidate:
    """Test per-genus scoring steps."""

    def test_definitive_match_sets_baseline(self):
        score = score_candidate(Observation(flesh_texture="brittle"), "Russula", FEATURE_RULES)

        assert score.score == pytest.approx(0.80)
        assert score.eliminated is False
        assert [e.rule_id for e in score.matching] == ["russula-brittle-flesh"]

    def test_strong_matches_diminish(self):
        observation = Observation(gill_type="gills", ring_present=False, volva_present=False)
        score = score_candidate(observation, "Russula", FEATURE_RULES)

        # 0.35 + 0.35*0.6 + 0.35*0.36
        assert score.score == pytest.approx(0.686)

    def test_failed_supporting_rule_is_mild_contradiction(self):
        observation = Observation(gill_type="gills", habitat="grassland")
        score = score_candidate(observation, "Russula", FEATURE_RULES)

        assert [e.rule_id for e in score.contradicting] == ["russula-woodland"]
        assert score.score == pytest.approx(0.35 - 0.06)

    def test_score_clamped_to_one(self):
        observation = Observation(
            flesh_texture="brittle", gill_type="gills", ring_present=False,
            volva_present=False, habitat="woodland", season_month=9,
        )
        assert score_candidate(observation, "Russula", FEATURE_RULES).score == 1.0

    def test_exclusionary_eliminates(self):
        score = score_candidate(Observation(flesh_texture="brittle"), "Amanita", FEATURE_RULES)

        assert score.eliminated is True
        assert score.score == 0.0
        assert score.elimination_reason == "Brittle flesh rules out Amanita (Amanita flesh is fibrous)"
        assert score.active is False

    def test_no_evidence_scores_zero(self):
        score = score_candidate(Observation(), "Russula", FEATURE_RULES)

        assert score.score == 0.0
        assert score.eliminated is False
        assert score.active is False
        assert "ring_present" in [e.field for e in score.missing]

    def test_unmatched_notes_rule_is_not_contradiction(self):
        score = score_candidate(Observation(description_notes="smells nice"), "Russula", FEATURE_RULES)
        assert score.contradicting == ()

    def test_absent_rule_never_contradicts(self):
        rules = (FeatureRule("t-no-smell", "smell", absent(), "Testus", EvidenceTier.STRONG, True, "No smell"),)

        assert score_candidate(Observation(smell="anise"), "Testus", rules).contradicting == ()
        assert score_candidate(Observation(gill_type="gills"), "Testus", rules).score == pytest.approx(0.35)

    def test_rules_for_other_genera_ignored(self):
        score = score_candidate(Observation(gill_type="pores"), "Boletus", FEATURE_RULES)
        boletus_rules = {r.id for r in FEATURE_RULES if r.genus == "Boletus"}
        evidence = score.matching + score.contradicting + score.missing

        assert evidence
        assert {e.rule_id for e in evidence} <= boletus_rules


# ============================================================================
# RANKING
# ============================================================================

class TestScoreAllCandidates:
    """Test ranking order."""

    def test_pores_ranking(self):
        scores = score_all_candidates(Observation(gill_type="pores"), ALL_GENERA, FEATURE_RULES)

        assert [s.genus for s in scores[:4]] == ["Boletus", "Leccinum", "Laetiporus", "Fistulina"]
        assert all(s.eliminated for s in scores[4:])
        # Eliminated candidates keep genus order
        assert scores[4].genus == "Amanita"

    def test_ties_keep_genus_order(self):
        scores = score_all_candidates(Observation(flesh_texture="brittle"), ALL_GENERA, FEATURE_RULES)

        assert [s.genus for s in scores[:2]] == ["Russula", "Lactarius"]
        assert scores[-1].genus == "Amanita"

    def test_deterministic(self):
        observation = Observation(gill_type="gills", ring_present=True, habitat="woodland")
        assert score_all_candidates(observation, ALL_GENERA, FEATURE_RULES) == \
            score_all_candidates(observation, ALL_GENERA, FEATURE_RULES)


class TestScoreToConfidence:
    """Test confidence thresholds."""

    @pytest.mark.parametrize("score,level", [
        (1.0, ConfidenceLevel.DEFINITIVE),
        (0.9, ConfidenceLevel.DEFINITIVE),
        (0.89, ConfidenceLevel.HIGH),
        (0.65, ConfidenceLevel.HIGH),
        (0.64, ConfidenceLevel.MODERATE),
        (0.4, ConfidenceLevel.MODERATE),
        (0.39, ConfidenceLevel.LOW),
        (0.15, ConfidenceLevel.LOW),
        (0.14, ConfidenceLevel.INSUFFICIENT),
        (0.0, ConfidenceLevel.INSUFFICIENT),
    ])
    def test_thresholds(self, score, level):
        assert score_to_confidence(score) == level


class TestScoringProperties:
    """Test invariants over the shipped rule base."""

    def test_empty_observation(self):
        for score in score_all_candidates(Observation(), ALL_GENERA, FEATURE_RULES):
            assert score.score == 0.0
            assert score.eliminated is False

    def test_adding_matching_evidence_never_lowers_score(self):
        steps = [
            {"gill_type": "gills"},
            {"gill_type": "gills", "ring_present": False},
            {"gill_type": "gills", "ring_present": False, "habitat": "woodland"},
            {"gill_type": "gills", "ring_present": False, "habitat": "woodland", "flesh_texture": "brittle"},
        ]
        scores = [score_candidate(Observation(**s), "Russula", FEATURE_RULES).score for s in steps]
        assert scores == sorted(scores)

    def test_eliminated_candidates_keep_evidence(self):
        score = score_candidate(Observation(gill_type="pores", habitat="woodland"), "Russula", FEATURE_RULES)

        assert score.eliminated is True
        assert "russula-woodland" in [e.rule_id for e in score.matching]

    def test_confidence_monotonic(self):
        levels = [score_to_confidence(s / 100) for s in range(101)]
        order = list(ConfidenceLevel)
        ranks = [order.index(level) for level in levels]
        assert ranks == sorted(ranks)
