"""Shared fixtures for quiz_mapper tests."""

import pytest

from quiz_mapper.core.config import AnalyzerConfig

from factories import make_type


@pytest.fixture
def make_config():
    """Factory for small configs; defaults to technical/creative at 0.5 each."""

    def _make(result_types, *, weights=None, expected_responses=1, **kwargs):
        return AnalyzerConfig(
            aspect_weights=weights or {"technical": 0.5, "creative": 0.5},
            result_types=tuple(result_types),
            expected_responses=expected_responses,
            **kwargs,
        )

    return _make


@pytest.fixture
def scenario_config(make_config):
    return make_config([make_type("T", thresholds={"technical": 0.5}, indicators=["x"], title="Technical")])
