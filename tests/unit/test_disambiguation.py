"""
Unit tests for follow-up question selection.
"""
import pytest

from mycoid.data import FEATURE_RULES
from mycoid.schemas.observation import Observation
from mycoid.services.identification.disambiguation import (
    is_safety_feature,
    question_text,
    select_questions,
)
from mycoid.services.identification.models import CandidateScore


def _scores(*pairs):
    return [CandidateScore(genus=g, score=s, eliminated=False) for g, s in pairs]


class TestSelectQuestions:
    """Test question ranking."""

    def test_single_candidate_needs_no_questions(self):
        assert select_questions(_scores(("Russula", 0.8)), Observation(), FEATURE_RULES) == []

    def test_inactive_candidates_do_not_count(self):
        candidates = _scores(("Russula", 0.8), ("Lactarius", 0.0))
        assert select_questions(candidates, Observation(), FEATURE_RULES) == []

    def test_safety_questions_first(self):
        candidates = _scores(("Amanita", 0.5), ("Agaricus", 0.5))
        questions = select_questions(candidates, Observation(), FEATURE_RULES)

        assert [q.feature for q in questions[:3]] == ["gill_color", "ring_present", "volva_present"]
        assert all(q.safety_relevant for q in questions[:3])
        assert not any(q.safety_relevant for q in questions[3:])
        assert all(q.skippable for q in questions)

    def test_information_gain(self):
        candidates = _scores(("Amanita", 0.5), ("Agaricus", 0.5))
        gains = {q.feature: q.information_gain for q in select_questions(candidates, Observation(), FEATURE_RULES)}

        # both genera + exclusionary bonus
        assert gains["gill_color"] == pytest.approx(1.3)
        assert gains["ring_present"] == pytest.approx(1.0)
        assert gains["volva_present"] == pytest.approx(0.5)
        assert gains["spore_print_color"] == pytest.approx(0.5)

    def test_observed_fields_not_asked(self):
        candidates = _scores(("Amanita", 0.5), ("Agaricus", 0.5))
        questions = select_questions(candidates, Observation(gill_color="white", ring_present=True), FEATURE_RULES)

        features = [q.feature for q in questions]
        assert "gill_color" not in features
        assert "ring_present" not in features


class TestQuestionHelpers:
    """Test question text and safety lookup."""

    def test_known_question(self):
        assert question_text("volva_present") == "Is there a volva (cup/bag) at the base? (Dig gently to check)"

    def test_fallback_question(self):
        assert question_text("gill_spacing") == "What is the gill spacing?"

    def test_safety_feature(self):
        assert is_safety_feature("spore_print_color", ["Russula", "Armillaria"]) is True
        assert is_safety_feature("spore_print_color", ["Russula"]) is False
