"""Result-type matching: rank every configured type against an analysis state."""

from __future__ import annotations

from .config import AnalyzerConfig
from .models import AnalysisState, ResultTypeDefinition
from .rules import evaluate_rules


def indicator_overlap(state: AnalysisState, definition: ResultTypeDefinition) -> float:
    """Share of the definition's indicators seen in the state (0 when it lists none)."""
    if not definition.indicators:
        return 0.0
    present = sum(1 for indicator in definition.indicators if state.has_indicator(indicator))
    return present / len(definition.indicators)


def calculate_type_match(
    state: AnalysisState,
    definition: ResultTypeDefinition,
    config: AnalyzerConfig,
) -> float:
    """Unbounded ranking score of ``definition`` for the accumulated state.

    Each threshold met adds that aspect's weight (pass/fail, not graded),
    indicator overlap adds ``indicator_weight`` times the overlap ratio, and
    custom rules add their contributions.
    """
    match_score = 0.0
    for aspect, threshold in definition.thresholds.items():
        if aspect in state.scores and state.scores[aspect] >= threshold:
            match_score += config.aspect_weights[aspect]

    match_score += indicator_overlap(state, definition) * config.indicator_weight
    match_score += evaluate_rules(config.custom_rules, state, definition)
    return match_score


def rank_result_types(
    state: AnalysisState,
    config: AnalyzerConfig,
) -> list[tuple[ResultTypeDefinition, float]]:
    """(definition, match score) pairs in declaration order."""
    return [(definition, calculate_type_match(state, definition, config)) for definition in config.result_types]


def determine_main_result(
    ranked: list[tuple[ResultTypeDefinition, float]],
) -> tuple[ResultTypeDefinition, float]:
    """Pick the strictly greatest match score; the earliest declared type wins ties."""
    if not ranked:
        raise ValueError("No result types to choose from")
    best_definition, best_score = ranked[0]
    for definition, score in ranked[1:]:
        if score > best_score:
            best_definition, best_score = definition, score
    return best_definition, best_score
