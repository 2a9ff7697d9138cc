"""Tests for quiz_mapper.core.matching."""

import pytest

from quiz_mapper.core.matching import (
    calculate_type_match,
    determine_main_result,
    indicator_overlap,
    rank_result_types,
)
from quiz_mapper.core.models import AnalysisState

from factories import make_type


def _state(scores=None, indicators=()):
    state = AnalysisState.for_aspects(["technical", "creative"])
    state.scores.update(scores or {})
    for indicator in indicators:
        state.indicators[indicator] = None
    return state


class TestCalculateTypeMatch:
    def test_threshold_pass_adds_full_weight(self, make_config):
        definition = make_type("T", thresholds={"technical": 0.5})
        config = make_config([definition])
        assert calculate_type_match(_state({"technical": 0.6}), definition, config) == pytest.approx(0.5)

    def test_threshold_is_inclusive(self, make_config):
        definition = make_type("T", thresholds={"technical": 0.5})
        config = make_config([definition])
        assert calculate_type_match(_state({"technical": 0.5}), definition, config) == pytest.approx(0.5)

    def test_threshold_miss_adds_nothing(self, make_config):
        definition = make_type("T", thresholds={"technical": 0.5})
        config = make_config([definition])
        assert calculate_type_match(_state({"technical": 0.49}), definition, config) == 0.0

    def test_partial_indicator_overlap(self, make_config):
        definition = make_type("T", indicators=["x", "y", "z", "w"])
        config = make_config([definition])
        state = _state(indicators=["x", "z", "other"])
        assert calculate_type_match(state, definition, config) == pytest.approx(0.5 * 0.3)

    def test_empty_indicator_list_contributes_zero(self, make_config):
        definition = make_type("T", indicators=[])
        config = make_config([definition])
        state = _state(indicators=["x"])
        assert indicator_overlap(state, definition) == 0.0
        assert calculate_type_match(state, definition, config) == 0.0

    def test_unconfigured_threshold_aspect_never_passes(self, make_config):
        definition = make_type("T", thresholds={"leadership": 0.0})
        config = make_config([definition])
        assert calculate_type_match(_state(), definition, config) == 0.0

    def test_score_can_exceed_one(self, make_config):
        definition = make_type("T", thresholds={"technical": 0.1, "creative": 0.1}, indicators=["x"])
        config = make_config([definition], weights={"technical": 0.6, "creative": 0.6})
        state = _state({"technical": 1.0, "creative": 1.0}, indicators=["x"])
        assert calculate_type_match(state, definition, config) == pytest.approx(1.5)


class TestDetermineMainResult:
    def test_highest_score_wins(self, make_config):
        low = make_type("low", thresholds={"creative": 0.5})
        high = make_type("high", thresholds={"technical": 0.5})
        config = make_config([low, high])
        ranked = rank_result_types(_state({"technical": 1.0}), config)
        definition, score = determine_main_result(ranked)
        assert definition.key == "high"
        assert score == pytest.approx(0.5)

    def test_ties_go_to_first_declared(self, make_config):
        first = make_type("first", thresholds={"technical": 0.5})
        second = make_type("second", thresholds={"technical": 0.5})
        state = _state({"technical": 1.0})

        ranked = rank_result_types(state, make_config([first, second]))
        assert determine_main_result(ranked)[0].key == "first"

        ranked = rank_result_types(state, make_config([second, first]))
        assert determine_main_result(ranked)[0].key == "second"

    def test_ranking_keeps_declaration_order(self, make_config):
        types = [make_type(k) for k in ("c", "a", "b")]
        ranked = rank_result_types(_state(), make_config(types))
        assert [d.key for d, _ in ranked] == ["c", "a", "b"]
