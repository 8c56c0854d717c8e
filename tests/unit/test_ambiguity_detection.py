"""
Unit tests for ambiguity flags.
"""
from mycoid.schemas.observation import Observation
from mycoid.services.identification.ambiguity_detection import detect_ambiguities


def _ids(flags):
    return [f.id for f in flags]


class TestDetectAmbiguities:
    """Test each contextual ambiguity check."""

    def test_buried_wood(self):
        flags = detect_ambiguities(Observation(substrate="soil", habitat="woodland"), ["Russula", "Armillaria"])

        assert _ids(flags) == ["buried_wood"]
        assert flags[0].relevant_genera == ("Armillaria",)
        assert flags[0].fields == ("substrate", "habitat")

    def test_grassland_with_trees(self):
        observation = Observation(habitat="grassland", nearby_trees=["oak"], substrate="dung")
        flags = detect_ambiguities(observation, ["Russula", "Agaricus"])

        assert _ids(flags) == ["grassland_trees"]
        assert flags[0].relevant_genera == ("Russula",)

    def test_ridges_need_active_chanterelle(self):
        observation = Observation(gill_type="ridges")

        assert _ids(detect_ambiguities(observation, ["Cantharellus"])) == ["ridge_vs_gill"]
        assert detect_ambiguities(observation, ["Craterellus"]) == []

    def test_white_gills_need_both_genera_active(self):
        observation = Observation(gill_color="white")

        assert _ids(detect_ambiguities(observation, ["Amanita", "Agaricus"])) == ["white_gill_ambiguity"]
        assert detect_ambiguities(observation, ["Amanita"]) == []

    def test_parasol_size(self):
        assert _ids(detect_ambiguities(Observation(), ["Macrolepiota"])) == ["parasol_size"]
        assert detect_ambiguities(Observation(cap_size_cm=18), ["Macrolepiota"]) == []

    def test_no_flags(self):
        assert detect_ambiguities(Observation(gill_type="gills"), ["Russula"]) == []
