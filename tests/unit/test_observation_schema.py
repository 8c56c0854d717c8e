"""
Unit tests for the lenient Observation schema.
"""
import pytest
from pydantic import ValidationError

from mycoid.schemas.observation import Observation


class TestObservationCoercion:
    """Test lenient coercion of loosely typed input."""

    def test_blank_text_is_unobserved(self):
        observation = Observation(cap_color="   ", habitat="")
        assert observation.cap_color is None
        assert observation.habitat is None

    def test_text_is_stripped(self):
        assert Observation(habitat=" woodland ").habitat == "woodland"

    @pytest.mark.parametrize("raw,expected", [
        ("yes", True),
        ("No", False),
        ("true", True),
        (0, False),
        ("maybe", None),
    ])
    def test_yes_no_flags(self, raw, expected):
        assert Observation(ring_present=raw).ring_present is expected

    @pytest.mark.parametrize("raw,expected", [
        ("9", 9),
        (12, 12),
        (13, None),
        (0, None),
        ("autumn", None),
    ])
    def test_season_month(self, raw, expected):
        assert Observation(season_month=raw).season_month == expected

    def test_cap_size(self):
        assert Observation(cap_size_cm="12.5").cap_size_cm == 12.5
        assert Observation(cap_size_cm="huge").cap_size_cm is None

    def test_nearby_trees(self):
        assert Observation(nearby_trees="oak").nearby_trees == ["oak"]
        assert Observation(nearby_trees=["", " "]).nearby_trees is None
        assert Observation(nearby_trees=("oak", "beech")).nearby_trees == ["oak", "beech"]

    @pytest.mark.parametrize("raw", [5, True, 3.2, {"tree": "oak"}])
    def test_non_list_nearby_trees_dropped(self, raw):
        observation = Observation(gill_type="gills", nearby_trees=raw)

        assert observation.nearby_trees is None
        assert observation.gill_type == "gills"

    def test_unknown_confidence_dropped(self):
        assert Observation(substrate_confidence="sure-ish").substrate_confidence is None

    def test_unknown_fields_ignored(self):
        observation = Observation.model_validate({"gill_type": "gills", "colour_of_moon": "blue"})
        assert observation.gill_type == "gills"


class TestObservationHelpers:
    """Test immutability and helpers."""

    def test_frozen(self):
        observation = Observation(gill_type="gills")
        with pytest.raises(ValidationError):
            observation.gill_type = "pores"

    def test_observed_fields(self):
        observation = Observation(gill_type="gills", ring_present=False)
        assert observation.observed_fields() == {"gill_type": "gills", "ring_present": False}

    def test_with_updates_returns_copy(self):
        observation = Observation(gill_type="gills")
        updated = observation.with_updates(season_month=9)

        assert updated.season_month == 9
        assert observation.season_month is None
