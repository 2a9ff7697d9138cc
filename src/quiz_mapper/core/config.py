"""Analyzer configuration: aspect weights, result-type catalog and scoring constants."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from ..errors import ConfigurationError
from ..utils import get_logger
from ..utils.normalize import clean_number
from .models import ResultTypeDefinition
from .rules import ScoringRule, as_rule


_log = get_logger(__name__)

INDICATOR_WEIGHT = 0.3
PATTERN_BONUS = 1.1
CONFIDENCE_HIGH = 0.8
CONFIDENCE_MEDIUM = 0.6
PATTERN_WINDOW = 3
SCHEMA_VERSION = "2.0"


@dataclass(frozen=True)
class AnalyzerConfig:
    aspect_weights: dict[str, float]
    result_types: tuple[ResultTypeDefinition, ...]
    expected_responses: int
    custom_rules: tuple[ScoringRule, ...] = ()
    threshold_modifiers: dict[str, float] = field(default_factory=dict)  # reserved, not used in scoring
    indicator_weight: float = INDICATOR_WEIGHT
    pattern_bonus: float = PATTERN_BONUS
    confidence_high: float = CONFIDENCE_HIGH
    confidence_medium: float = CONFIDENCE_MEDIUM
    pattern_window: int = PATTERN_WINDOW
    schema_version: str = SCHEMA_VERSION

    def __post_init__(self) -> None:
        if not self.aspect_weights:
            raise ConfigurationError("aspect_weights must define at least one aspect")
        weights: dict[str, float] = {}
        for aspect, weight in self.aspect_weights.items():
            number = clean_number(weight)
            if number is None:
                raise ConfigurationError(f"Weight for aspect {aspect!r} is not numeric: {weight!r}")
            weights[str(aspect)] = number
        object.__setattr__(self, "aspect_weights", weights)

        result_types = tuple(self.result_types)
        if not result_types:
            raise ConfigurationError("At least one result type must be configured")
        seen: set[str] = set()
        for definition in result_types:
            if definition.key in seen:
                raise ConfigurationError(f"Duplicate result type key: {definition.key!r}")
            seen.add(definition.key)
            unknown = [aspect for aspect in definition.thresholds if aspect not in weights]
            if unknown:
                _log.warning(
                    "Result type %r has thresholds on unconfigured aspects %s; they can never pass",
                    definition.key,
                    ", ".join(unknown),
                )
        object.__setattr__(self, "result_types", result_types)

        object.__setattr__(self, "expected_responses", validate_expected_responses(self.expected_responses))

        try:
            rules = tuple(as_rule(rule) for rule in self.custom_rules)
        except TypeError as e:
            raise ConfigurationError(str(e)) from e
        object.__setattr__(self, "custom_rules", rules)

        modifiers: dict[str, float] = {}
        for aspect, value in self.threshold_modifiers.items():
            number = clean_number(value)
            if number is None:
                raise ConfigurationError(f"Threshold modifier for {aspect!r} is not numeric: {value!r}")
            modifiers[str(aspect)] = number
        object.__setattr__(self, "threshold_modifiers", modifiers)

        if self.pattern_window < 1:
            raise ConfigurationError("pattern_window must be at least 1")

    @property
    def aspects(self) -> tuple[str, ...]:
        return tuple(self.aspect_weights)

    @classmethod
    def from_mapping(
        cls,
        raw: Mapping[str, Any],
        *,
        custom_rules: tuple[ScoringRule | Callable, ...] = (),
        expected_responses: int | None = None,
    ) -> AnalyzerConfig:
        """Build a config from a plain mapping (YAML section or JS-style options).

        Accepts camelCase keys (aspectWeights, resultTypes, thresholdModifiers,
        expectedResponses) as well as snake_case ones. ``resultTypes`` may be a
        mapping in declaration order or a list of dicts carrying a ``key``.
        """
        weights = _pick(raw, "aspect_weights", "aspectWeights") or {}
        if not isinstance(weights, Mapping):
            raise ConfigurationError("aspect_weights must be a mapping of aspect -> weight")

        expected = expected_responses
        if expected is None:
            expected = _pick(raw, "expected_responses", "expectedResponses")
        if expected is None:
            raise ConfigurationError("expected_responses is required (total number of quiz questions)")

        modifiers = _pick(raw, "threshold_modifiers", "thresholdModifiers") or {}
        if not isinstance(modifiers, Mapping):
            raise ConfigurationError("threshold_modifiers must be a mapping of aspect -> value")

        scoring = raw.get("scoring") or {}
        if not isinstance(scoring, Mapping):
            raise ConfigurationError("scoring must be a mapping of constant -> value")
        return cls(
            aspect_weights=dict(weights),
            result_types=parse_result_types(_pick(raw, "result_types", "resultTypes")),
            expected_responses=expected,
            custom_rules=tuple(custom_rules) + tuple(_pick(raw, "custom_rules", "customRules") or ()),
            threshold_modifiers=dict(modifiers),
            indicator_weight=_scoring_number(scoring, "indicator_weight", INDICATOR_WEIGHT),
            pattern_bonus=_scoring_number(scoring, "pattern_bonus", PATTERN_BONUS),
            confidence_high=_scoring_number(scoring, "confidence_high", CONFIDENCE_HIGH),
            confidence_medium=_scoring_number(scoring, "confidence_medium", CONFIDENCE_MEDIUM),
            pattern_window=int(_scoring_number(scoring, "pattern_window", PATTERN_WINDOW)),
        )


def parse_result_types(raw: Any) -> tuple[ResultTypeDefinition, ...]:
    if not raw:
        return ()
    if isinstance(raw, Mapping):
        out = []
        for key, item in raw.items():
            item = item or {}
            if not isinstance(item, Mapping):
                raise ConfigurationError(f"Result type {key!r} must be a mapping, got {type(item).__name__}")
            out.append(ResultTypeDefinition.from_dict(key, item))
        return tuple(out)
    if isinstance(raw, (list, tuple)):
        out = []
        for i, item in enumerate(raw):
            if isinstance(item, ResultTypeDefinition):
                out.append(item)
                continue
            if not isinstance(item, Mapping):
                raise ConfigurationError(f"Result type #{i} must be a mapping, got {type(item).__name__}")
            key = item.get("key") or item.get("title")
            if not key:
                raise ConfigurationError(f"Result type #{i} needs a 'key' or 'title'")
            out.append(ResultTypeDefinition.from_dict(key, item))
        return tuple(out)
    raise ConfigurationError("result_types must be a mapping or a list")


def build_default_config(expected_responses: int) -> AnalyzerConfig:
    """Demonstration config with four generic aspects and one placeholder type."""
    return AnalyzerConfig(
        aspect_weights={"primary": 0.4, "secondary": 0.3, "tertiary": 0.2, "context": 0.1},
        result_types=(
            ResultTypeDefinition(
                key="typeA",
                title="Type A Result",
                description="Description for Type A",
                thresholds={"primary": 0.7, "secondary": 0.5},
                indicators=("indicator1", "indicator2"),
                attributes={"strength": "high", "focus": "detail"},
                categories=("cat1", "cat2"),
            ),
        ),
        expected_responses=expected_responses,
    )


def _pick(raw: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        if key in raw:
            return raw[key]
    return None


def _scoring_number(scoring: Mapping[str, Any], key: str, default: float) -> float:
    if scoring.get(key) is None:
        return default
    number = clean_number(scoring[key])
    if number is None:
        raise ConfigurationError(f"scoring.{key} is not numeric: {scoring[key]!r}")
    return number


def validate_expected_responses(value: Any) -> int:
    number = clean_number(value)
    if number is None or number <= 0 or number != int(number):
        raise ConfigurationError(f"expected_responses must be a positive integer, got {value!r}")
    return int(number)
