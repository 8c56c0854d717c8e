"""
Unit tests for gated edibility advice.
"""
from mycoid.data import ALL_GENERA
from mycoid.schemas.observation import Observation
from mycoid.services.identification.edibility import (
    REASON_DANGEROUS_GENUS_ACTIVE,
    REASON_INSUFFICIENT_CONFIDENCE,
    build_edibility,
    get_genus_edibility,
)
from mycoid.services.identification.models import CandidateScore, EvidenceTier, MatchedEvidence
from mycoid.services.identification.safety import build_safety_assessment


def _missing(field):
    return MatchedEvidence(f"x-{field}", field, EvidenceTier.STRONG, True, field)


class TestGenusEdibility:
    """Test edibility table lookups."""

    def test_every_genus_has_data(self):
        for genus in ALL_GENERA:
            assert get_genus_edibility(genus) is not None

    def test_unknown_genus(self):
        assert get_genus_edibility("Galerina") is None

    def test_deadly_genera(self):
        assert get_genus_edibility("Amanita").default_safety == "deadly"
        assert get_genus_edibility("Clitocybe").default_safety == "deadly"


class TestBuildEdibility:
    """Test the foraging gate in front of edibility advice."""

    def test_available_when_confident_and_safe(self):
        top = CandidateScore("Cantharellus", 0.95, False)
        safety = build_safety_assessment([top])

        info = build_edibility(top, safety, Observation(), [])

        assert info.available is True
        assert info.status == "edible"
        assert info.preparation_notes is None
        assert info.reason_code is None
        assert info.notes.startswith("Cantharellus identified with definitive confidence.")

    def test_cooking_note(self):
        top = CandidateScore("Leccinum", 0.95, False)
        info = build_edibility(top, build_safety_assessment([top]), Observation(), [])

        assert info.preparation_notes == "Must be cooked thoroughly before eating."

    def test_withheld_for_dangerous_active_genus(self):
        top = CandidateScore("Russula", 1.0, False)
        safety = build_safety_assessment([top, CandidateScore("Amanita", 0.2, False)])

        info = build_edibility(top, safety, Observation(gill_color="white"), ["Amanita"])

        assert info.available is False
        assert info.status is None
        assert info.reason_code == REASON_DANGEROUS_GENUS_ACTIVE
        assert "Amanita" in info.reason_unavailable
        assert info.missing_checks == ("volva_present", "ring_present")

    def test_withheld_for_low_confidence(self):
        top = CandidateScore(
            "Russula", 0.3, False,
            missing=(_missing("flesh_texture"), _missing("ring_present"), _missing("ring_present"), _missing("habitat")),
        )
        info = build_edibility(top, build_safety_assessment([top]), Observation(), [], missing_limit=2)

        assert info.available is False
        assert info.reason_code == REASON_INSUFFICIENT_CONFIDENCE
        assert info.missing_checks == ("flesh_texture", "ring_present")
        assert info.reason_unavailable.startswith("Confidence is low")
