"""Extension points: custom scoring rules, pattern detection, secondary results."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Protocol, runtime_checkable

from ..utils import get_logger
from ..utils.normalize import clean_number
from .models import AnalysisState, Answer, ResultTypeDefinition, SecondaryMatch


_log = get_logger(__name__)


@runtime_checkable
class ScoringRule(Protocol):
    """Adds a bonus (or penalty) to a result type's match score."""

    def evaluate(self, state: AnalysisState, definition: ResultTypeDefinition) -> float: ...


class FunctionRule:
    """Adapt a plain ``(state, definition) -> number`` callable to ScoringRule."""

    def __init__(self, func: Callable[[AnalysisState, ResultTypeDefinition], float], name: str | None = None):
        self.func = func
        self.name = name or getattr(func, "__name__", "rule")

    def evaluate(self, state: AnalysisState, definition: ResultTypeDefinition) -> float:
        return self.func(state, definition)

    def __repr__(self) -> str:
        return f"FunctionRule({self.name})"


def as_rule(rule: ScoringRule | Callable) -> ScoringRule:
    if isinstance(rule, ScoringRule):
        return rule
    if callable(rule):
        return FunctionRule(rule)
    raise TypeError(f"Custom rule must be callable or define evaluate(): {rule!r}")


def evaluate_rules(
    rules: Sequence[ScoringRule],
    state: AnalysisState,
    definition: ResultTypeDefinition,
) -> float:
    """Sum rule contributions. A failing or non-numeric rule contributes 0."""
    total = 0.0
    for rule in rules:
        try:
            result = rule.evaluate(state, definition)
        except Exception:
            _log.warning("Custom rule %r failed for result type %r", rule, definition.key, exc_info=True)
            continue
        contribution = clean_number(result)
        if contribution is None:
            if result is not None:
                _log.debug("Ignoring non-numeric result %r from rule %r", result, rule)
            continue
        total += contribution
    return total


class PatternDetector(Protocol):
    def detect(self, recent: Sequence[Answer], state: AnalysisState) -> list[str]: ...


class NullPatternDetector:
    """Detects nothing; the confidence pattern bonus stays inactive."""

    def detect(self, recent: Sequence[Answer], state: AnalysisState) -> list[str]:
        return []


class SecondaryResultFinder(Protocol):
    def find(
        self,
        ranked: Sequence[tuple[ResultTypeDefinition, float]],
        primary: ResultTypeDefinition,
        state: AnalysisState,
    ) -> list[SecondaryMatch]: ...


class NullSecondaryFinder:
    def find(
        self,
        ranked: Sequence[tuple[ResultTypeDefinition, float]],
        primary: ResultTypeDefinition,
        state: AnalysisState,
    ) -> list[SecondaryMatch]:
        return []


class MarginSecondaryFinder:
    """Report non-primary result types whose match score reaches ``min_score``.

    Matches are ordered best first; equal scores keep declaration order.
    """

    def __init__(self, min_score: float):
        self.min_score = float(min_score)

    def find(
        self,
        ranked: Sequence[tuple[ResultTypeDefinition, float]],
        primary: ResultTypeDefinition,
        state: AnalysisState,
    ) -> list[SecondaryMatch]:
        candidates = [
            SecondaryMatch(key=definition.key, title=definition.title, match_score=score)
            for definition, score in ranked
            if definition.key != primary.key and score >= self.min_score
        ]
        # sorted() is stable, so ties stay in declaration order
        return sorted(candidates, key=lambda match: match.match_score, reverse=True)
