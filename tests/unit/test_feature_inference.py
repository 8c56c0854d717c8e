"""
Unit tests for implicit feature inference.
"""
from mycoid.schemas.observation import Observation
from mycoid.services.identification.feature_inference import infer_features


class TestSubstrateInference:
    """Test substrate and habitat inference."""

    def test_tiered_growth_implies_wood_and_no_stem(self, september):
        result = infer_features(Observation(growth_pattern="tiered"), now=september)

        assert [i.field for i in result.inferences] == ["substrate", "stem_present", "season_month"]
        assert result.observation.substrate == "wood"
        assert result.observation.stem_present is False
        assert result.inferences[0].reason == "Tiered/shelf growth almost always occurs on wood"
        assert result.inferences[0].confidence == "high"

    def test_explicit_substrate_is_never_overridden(self, september):
        result = infer_features(Observation(growth_pattern="tiered", substrate="soil"), now=september)

        assert result.observation.substrate == "soil"
        assert result.observation.stem_present is None
        assert [i.field for i in result.inferences] == ["season_month"]

    def test_grassland_implies_soil(self, september):
        result = infer_features(Observation(habitat="grassland"), now=september)

        substrate = result.inferences[0]
        assert substrate.field == "substrate"
        assert substrate.value == "soil"
        assert substrate.reason == "grassland habitat implies soil substrate"
        assert substrate.confidence == "medium"

    def test_woodland_does_not_imply_soil(self, september):
        result = infer_features(Observation(habitat="woodland"), now=september)
        assert result.observation.substrate is None

    def test_dung_implies_grassland(self, september):
        result = infer_features(Observation(substrate="dung"), now=september)

        assert result.observation.habitat == "grassland"
        assert result.inferences[0].reason == "Dung substrate implies grassland habitat"


class TestSeasonInference:
    """Test current-month inference."""

    def test_season_added_once_something_is_observed(self, september):
        result = infer_features(Observation(gill_type="gills"), now=september)

        assert result.observation.season_month == 9
        assert result.inferences[-1].reason == "Season inferred from current date"

    def test_empty_observation_gets_no_inferences(self, september):
        result = infer_features(Observation(), now=september)

        assert result.inferences == ()
        assert result.observation.season_month is None

    def test_explicit_month_kept(self, september):
        result = infer_features(Observation(gill_type="gills", season_month=4), now=september)

        assert result.observation.season_month == 4
        assert result.inferences == ()


class TestPurity:
    """Inference must not mutate its input."""

    def test_input_unchanged(self, september):
        observation = Observation(growth_pattern="tiered")
        infer_features(observation, now=september)

        assert observation.substrate is None
        assert observation.season_month is None
