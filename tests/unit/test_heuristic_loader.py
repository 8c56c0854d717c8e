"""
Unit tests for heuristic table loading.
"""
import json

import pytest

from mycoid import config
from mycoid.data.heuristics import (
    SEED_HEURISTICS_PATH,
    HeuristicTableError,
    get_heuristics,
    load_heuristics,
)

MINIMAL_HEURISTIC = {
    "heuristic_id": "volva_dig",
    "name": "Volva dig",
    "category": "safety_rule",
    "applies_to": {"genus": "Amanita"},
    "procedure": "Dig around the stem base",
}


def _write(tmp_path, payload, name="heuristics.json"):
    path = tmp_path / name
    path.write_text(payload if isinstance(payload, str) else json.dumps(payload), encoding="utf-8")
    return path


class TestLoadHeuristics:
    """Test table validation."""

    def test_seed_table(self):
        heuristics = load_heuristics(SEED_HEURISTICS_PATH)

        assert len(heuristics) == 27
        ids = [h.heuristic_id for h in heuristics]
        assert len(ids) == len(set(ids))
        for heuristic_id in ("puffball_vs_amanita_egg", "galerina_marginata_warning", "uk_seasonal_fruiting_guide"):
            assert heuristic_id in ids

    def test_seed_targets(self):
        by_id = {h.heuristic_id: h for h in load_heuristics(SEED_HEURISTICS_PATH)}

        assert by_id["avoid_lbms"].applies_to.morphology == {"cap_color": "brown", "cap_size": "small (under 5cm)"}
        assert by_id["galerina_marginata_warning"].applies_to.morphology["substrate"] == "wood"
        assert by_id["bolete_red_pore_test"].applies_to.family == "Boletaceae"
        context = by_id["mycorrhizal_tree_association"].applies_to
        assert (context.genus, context.family, context.morphology) == (None, None, None)

    def test_defaults_applied(self, tmp_path):
        heuristic = load_heuristics(_write(tmp_path, [MINIMAL_HEURISTIC]))[0]

        assert heuristic.priority == "standard"
        assert heuristic.applies_to.confidence_required == "moderate"
        assert heuristic.safety_notes == []

    def test_missing_file(self, tmp_path):
        with pytest.raises(HeuristicTableError):
            load_heuristics(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path):
        with pytest.raises(HeuristicTableError, match="not valid JSON"):
            load_heuristics(_write(tmp_path, "[{"))

    def test_schema_violation(self, tmp_path):
        bad = dict(MINIMAL_HEURISTIC, category="vibes")
        with pytest.raises(HeuristicTableError, match="failed validation"):
            load_heuristics(_write(tmp_path, [bad]))

    def test_duplicate_ids(self, tmp_path):
        with pytest.raises(HeuristicTableError, match="duplicate ids"):
            load_heuristics(_write(tmp_path, [MINIMAL_HEURISTIC, MINIMAL_HEURISTIC]))


class TestGetHeuristics:
    """Test path resolution and caching."""

    def test_defaults_to_seed_table(self, fresh_heuristics_cache, monkeypatch):
        monkeypatch.setattr(config, "HEURISTICS_PATH", None)
        assert len(get_heuristics()) == 27

    def test_configured_path(self, fresh_heuristics_cache, monkeypatch, tmp_path):
        path = _write(tmp_path, [MINIMAL_HEURISTIC])
        monkeypatch.setattr(config, "HEURISTICS_PATH", str(path))

        assert [h.heuristic_id for h in get_heuristics()] == ["volva_dig"]

    def test_explicit_path_wins(self, fresh_heuristics_cache, monkeypatch, tmp_path):
        monkeypatch.setattr(config, "HEURISTICS_PATH", str(tmp_path / "missing.json"))
        assert len(get_heuristics(SEED_HEURISTICS_PATH)) == 27

    def test_cached(self, fresh_heuristics_cache):
        assert get_heuristics(SEED_HEURISTICS_PATH) is get_heuristics(SEED_HEURISTICS_PATH)
