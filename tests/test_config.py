"""Tests for analyzer configuration and the YAML config reader."""

from pathlib import Path

import pytest
import yaml

from quiz_mapper.core.config import AnalyzerConfig, build_default_config
from quiz_mapper.core.rules import FunctionRule
from quiz_mapper.errors import ConfigurationError
from quiz_mapper.io.config_reader import count_quiz_questions, load_analyzer_config, load_config

from factories import make_type


class TestAnalyzerConfigValidation:
    def test_empty_catalog_rejected(self):
        with pytest.raises(ConfigurationError):
            AnalyzerConfig(aspect_weights={"a": 1.0}, result_types=(), expected_responses=3)

    def test_empty_weights_rejected(self):
        with pytest.raises(ConfigurationError):
            AnalyzerConfig(aspect_weights={}, result_types=(make_type("T"),), expected_responses=3)

    def test_non_numeric_weight_rejected(self):
        with pytest.raises(ConfigurationError):
            AnalyzerConfig(aspect_weights={"a": "heavy"}, result_types=(make_type("T"),), expected_responses=3)

    @pytest.mark.parametrize("expected", [0, -2, 1.5, None, "many"])
    def test_bad_expectation_rejected(self, expected):
        with pytest.raises(ConfigurationError):
            AnalyzerConfig(aspect_weights={"a": 1.0}, result_types=(make_type("T"),), expected_responses=expected)

    def test_duplicate_keys_rejected(self):
        with pytest.raises(ConfigurationError):
            AnalyzerConfig(
                aspect_weights={"a": 1.0},
                result_types=(make_type("T"), make_type("T")),
                expected_responses=1,
            )

    def test_callables_become_rules(self):
        config = AnalyzerConfig(
            aspect_weights={"a": 1.0},
            result_types=(make_type("T"),),
            expected_responses=1,
            custom_rules=(lambda s, d: 0.1,),
        )
        assert isinstance(config.custom_rules[0], FunctionRule)

    def test_config_is_frozen(self):
        config = build_default_config(expected_responses=4)
        with pytest.raises(AttributeError):
            config.expected_responses = 9

    def test_default_config_instances_are_independent(self):
        first = build_default_config(expected_responses=4)
        first.aspect_weights["primary"] = 99
        assert build_default_config(expected_responses=4).aspect_weights["primary"] == 0.4


class TestFromMapping:
    def test_camel_case_options(self):
        config = AnalyzerConfig.from_mapping(
            {
                "aspectWeights": {"technical": 0.4, "creative": 0.3, "business": 0.3},
                "resultTypes": {
                    "developer": {
                        "title": "Developer Profile",
                        "thresholds": {"technical": 0.7, "creative": 0.3},
                        "indicators": ["coding", "analysis", "backend"],
                    },
                    "designer": {"title": "Designer"},
                },
                "thresholdModifiers": {"technical": 0.05},
                "expectedResponses": 10,
            }
        )
        assert [d.key for d in config.result_types] == ["developer", "designer"]
        assert config.result_types[0].indicators == ("coding", "analysis", "backend")
        assert config.threshold_modifiers == {"technical": 0.05}
        assert config.expected_responses == 10

    def test_list_of_result_types(self):
        config = AnalyzerConfig.from_mapping(
            {
                "aspect_weights": {"a": 1},
                "result_types": [{"key": "x", "title": "X"}, {"title": "Y"}],
                "expected_responses": 2,
            }
        )
        assert [d.key for d in config.result_types] == ["x", "Y"]

    def test_expectation_is_required(self):
        with pytest.raises(ConfigurationError):
            AnalyzerConfig.from_mapping({"aspect_weights": {"a": 1}, "result_types": {"x": {}}})

    def test_scoring_overrides(self):
        config = AnalyzerConfig.from_mapping(
            {
                "aspect_weights": {"a": 1},
                "result_types": {"x": {}},
                "expected_responses": 1,
                "scoring": {"indicator_weight": 0.5, "pattern_window": 5},
            }
        )
        assert config.indicator_weight == 0.5
        assert config.pattern_window == 5

    @pytest.mark.parametrize(
        "overrides",
        [
            {"result_types": {"x": {"thresholds": ["technical"]}}},
            {"result_types": {"x": ["technical"]}},
            {"scoring": {"indicator_weight": "heavy"}},
            {"scoring": {"pattern_window": "wide"}},
            {"scoring": [0.3]},
        ],
    )
    def test_malformed_sections_are_config_errors(self, overrides):
        raw = {"aspect_weights": {"a": 1}, "result_types": {"x": {}}, "expected_responses": 1, **overrides}
        with pytest.raises(ConfigurationError):
            AnalyzerConfig.from_mapping(raw)


class TestConfigReader:
    def test_missing_file_gives_empty_config(self, tmp_path):
        assert load_config(tmp_path / "nope.yaml") == {}

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("analyzer: [unclosed", encoding="utf-8")
        with pytest.raises(ConfigurationError):
            load_config(path)

    def test_quiz_question_count_sets_expectation(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(
            yaml.safe_dump(
                {
                    "analyzer": {"aspect_weights": {"a": 1.0}, "result_types": {"x": {"title": "X"}}},
                    "quiz": {"sections": [{"questions": [{}, {}]}, {"questions": [{}]}]},
                }
            ),
            encoding="utf-8",
        )
        config = load_analyzer_config(load_config(path))
        assert config.expected_responses == 3

    def test_explicit_expectation_wins(self):
        raw = {
            "analyzer": {"aspect_weights": {"a": 1.0}, "result_types": {"x": {}}, "expected_responses": 7},
            "quiz": {"sections": [{"questions": [{}]}]},
        }
        assert load_analyzer_config(raw).expected_responses == 7
        assert load_analyzer_config(raw, expected_responses=2).expected_responses == 2

    def test_missing_analyzer_section(self):
        with pytest.raises(ConfigurationError):
            load_analyzer_config({"logging": {}})

    def test_count_quiz_questions_handles_gaps(self):
        assert count_quiz_questions(None) == 0
        assert count_quiz_questions({"sections": [None, {"questions": None}, {"questions": [{}]}]}) == 1

    def test_shipped_default_config_loads(self):
        path = Path(__file__).resolve().parent.parent / "configs" / "default.yaml"
        config = load_analyzer_config(load_config(path))
        assert config.expected_responses == 2
        assert [d.key for d in config.result_types] == ["technical_creative", "practical_leader"]
