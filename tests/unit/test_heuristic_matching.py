"""
Unit tests for heuristic selection and heuristic-derived actions.
"""
import pytest

from mycoid.data.heuristics import SEED_HEURISTICS_PATH, load_heuristics
from mycoid.schemas.heuristic import Heuristic
from mycoid.services.identification.heuristic_matching import (
    find_applicable_heuristics,
    generate_heuristic_actions,
    procedure_steps,
)
from mycoid.services.identification.models import CandidateScore, TriggeredHeuristic


@pytest.fixture(scope="module")
def seed_heuristics():
    return load_heuristics(SEED_HEURISTICS_PATH)


def _ids(triggered):
    return [t.heuristic_id for t in triggered]


class TestFindApplicableHeuristics:
    """Test confidence gating and ordering."""

    def test_priority_then_category_order(self, seed_heuristics):
        candidates = [
            CandidateScore("Russula", 0.7, False),
            CandidateScore("Amanita", 0.5, False),
        ]
        triggered = find_applicable_heuristics(candidates, seed_heuristics)

        assert _ids(triggered) == [
            "amanita_recognition_warning",
            "death_cap_habitat_alert",
            "russula_taste_test",
        ]

    def test_confidence_required(self, seed_heuristics):
        triggered = find_applicable_heuristics([CandidateScore("Russula", 0.5, False)], seed_heuristics)
        assert "russula_taste_test" not in _ids(triggered)

    def test_eliminated_genus_never_triggers(self, seed_heuristics):
        candidates = [CandidateScore("Amanita", 0.0, True, elimination_reason="Pores rule out Amanita")]
        assert find_applicable_heuristics(candidates, seed_heuristics) == []

    def test_family_and_morphology_heuristics_do_not_fire(self, seed_heuristics):
        candidates = [CandidateScore("Boletus", 0.9, False), CandidateScore("Leccinum", 0.9, False)]
        ids = _ids(find_applicable_heuristics(candidates, seed_heuristics))

        assert "bolete_blue_staining_caution" not in ids
        assert "avoid_lbms" not in ids
        assert "bolete_red_pore_test" not in ids
        assert "mycorrhizal_tree_association" not in ids


class TestProcedureSteps:
    """Test procedure flattening."""

    def test_string_procedure_split_on_lines(self, seed_heuristics):
        alert = next(h for h in seed_heuristics if h.heuristic_id == "death_cap_habitat_alert")
        assert len(procedure_steps(alert)) == 2

    def test_structured_procedure_with_safety_note(self):
        heuristic = Heuristic.model_validate({
            "heuristic_id": "dig_test",
            "name": "Dig test",
            "category": "safety_rule",
            "applies_to": {"genus": "Amanita"},
            "procedure": {"steps": [
                {"instruction": "Dig around the base", "safety_note": "Wear gloves"},
                {"instruction": "Look for a sac"},
            ]},
        })
        assert procedure_steps(heuristic) == ["Dig around the base (Safety: Wear gloves)", "Look for a sac"]


class TestGenerateHeuristicActions:
    """Test action generation from triggered heuristics."""

    def test_first_two_steps_of_safety_heuristic(self):
        triggered = [TriggeredHeuristic(
            heuristic_id="h", name="Amanita check", genus="Amanita",
            category="safety_rule", priority="critical", steps=("one", "two", "three"),
        )]
        actions = generate_heuristic_actions(triggered)

        assert [a.action for a in actions] == ["one", "two"]
        assert all(a.priority == "critical" and a.safety_relevant for a in actions)
        assert actions[0].reason == "Amanita check - targets Amanita"

    def test_edibility_heuristic_is_recommended(self):
        triggered = [TriggeredHeuristic(
            heuristic_id="h", name="Taste test", genus="Russula",
            category="edibility_determination", priority="standard", steps=("taste",),
        )]
        actions = generate_heuristic_actions(triggered)

        assert len(actions) == 1
        assert actions[0].priority == "recommended"
        assert actions[0].safety_relevant is False

    def test_no_steps_no_actions(self):
        triggered = [TriggeredHeuristic("h", "Empty", "Russula", "discrimination", "standard")]
        assert generate_heuristic_actions(triggered) == []
