"""Models for quiz answers, result types, per-call analysis state and reports."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Literal

from ..errors import ConfigurationError
from ..utils.normalize import clean_number, is_blank, split_tags


ConfidenceLevel = Literal["HIGH", "MEDIUM", "LOW"]


@dataclass(frozen=True)
class Answer:
    """One selected quiz option.

    Construction normalizes the optional fields: missing or malformed
    mappings become empty, non-numeric score contributions are dropped and
    unhashable attribute values are stringified.
    """

    value: Any
    indicators: tuple[str, ...] = ()
    scores: dict[str, float] = field(default_factory=dict)
    attributes: dict[str, Any] = field(default_factory=dict)
    category: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "indicators", tuple(split_tags(self.indicators)))

        scores: dict[str, float] = {}
        for aspect, contribution in _mapping(self.scores).items():
            number = clean_number(contribution)
            if number is not None:
                scores[str(aspect)] = number
        object.__setattr__(self, "scores", scores)

        attributes: dict[str, Any] = {}
        for key, value in _mapping(self.attributes).items():
            attributes[str(key)] = value if _is_hashable(value) else str(value)
        object.__setattr__(self, "attributes", attributes)

        category = None if is_blank(self.category) else str(self.category)
        object.__setattr__(self, "category", category)

    @property
    def has_value(self) -> bool:
        return not is_blank(self.value)

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> Answer:
        """Build an Answer from a loosely structured mapping; unknown keys are ignored."""
        return cls(
            value=raw.get("value"),
            indicators=raw.get("indicators"),
            scores=raw.get("scores"),
            attributes=raw.get("attributes"),
            category=raw.get("category"),
        )


def coerce_answer(raw: Answer | Mapping[str, Any] | None) -> Answer | None:
    """Return a usable Answer, or None when the input must be ignored."""
    if raw is None:
        return None
    if isinstance(raw, Answer):
        answer = raw
    elif isinstance(raw, Mapping):
        answer = Answer.from_dict(raw)
    else:
        return None
    return answer if answer.has_value else None


@dataclass(frozen=True)
class ResultTypeDefinition:
    key: str
    title: str
    description: str = ""
    thresholds: dict[str, float] = field(default_factory=dict)
    indicators: tuple[str, ...] = ()
    attributes: dict[str, Any] = field(default_factory=dict)
    categories: tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, key: str, raw: Mapping[str, Any]) -> ResultTypeDefinition:
        raw_thresholds = raw.get("thresholds") or {}
        if not isinstance(raw_thresholds, Mapping):
            raise ConfigurationError(f"Thresholds for result type {key!r} must be a mapping of aspect -> minimum")
        raw_attributes = raw.get("attributes") or {}
        if not isinstance(raw_attributes, Mapping):
            raise ConfigurationError(f"Attributes for result type {key!r} must be a mapping")

        thresholds: dict[str, float] = {}
        for aspect, minimum in raw_thresholds.items():
            number = clean_number(minimum)
            if number is None:
                raise ConfigurationError(f"Threshold for {aspect!r} in result type {key!r} is not numeric: {minimum!r}")
            thresholds[str(aspect)] = number
        return cls(
            key=str(key),
            title=str(raw.get("title") or key),
            description=str(raw.get("description") or ""),
            thresholds=thresholds,
            indicators=tuple(split_tags(raw.get("indicators"))),
            attributes=dict(raw_attributes),
            categories=tuple(split_tags(raw.get("categories"))),
        )


@dataclass
class AnalysisState:
    """Accumulator owned by a single analyze() call."""

    scores: dict[str, float]
    # dict used as an insertion-ordered set
    indicators: dict[str, None] = field(default_factory=dict)
    attributes: dict[str, list[Any]] = field(default_factory=dict)
    categories: dict[str, int] = field(default_factory=dict)
    patterns: list[str] = field(default_factory=list)
    raw_responses: list[Answer] = field(default_factory=list)

    @classmethod
    def for_aspects(cls, aspects: list[str] | tuple[str, ...]) -> AnalysisState:
        return cls(scores={aspect: 0.0 for aspect in aspects})

    def has_indicator(self, indicator: str) -> bool:
        return indicator in self.indicators


@dataclass(frozen=True)
class AttributeSummary:
    primary: Any
    frequencies: Mapping[Any, int]

    def __post_init__(self) -> None:
        object.__setattr__(self, "frequencies", MappingProxyType(dict(self.frequencies)))

    def to_dict(self) -> dict[str, Any]:
        return {"primary": self.primary, "frequencies": dict(self.frequencies)}


@dataclass(frozen=True)
class SecondaryMatch:
    key: str
    title: str
    match_score: float

    def to_dict(self) -> dict[str, Any]:
        return {"key": self.key, "title": self.title, "match_score": self.match_score}


@dataclass(frozen=True)
class ReportMetadata:
    timestamp: str
    version: str
    analysis_id: str


@dataclass(frozen=True)
class Report:
    result_key: str
    result_type: str
    description: str
    match_score: float
    confidence_score: float
    confidence_level: ConfidenceLevel
    scores: Mapping[str, float]
    attributes: Mapping[str, AttributeSummary]
    categories: Mapping[str, int]
    indicators: tuple[str, ...]
    secondary_matches: tuple[SecondaryMatch, ...]
    metadata: ReportMetadata

    def __post_init__(self) -> None:
        # read-only views so a returned report cannot be edited in place
        for name in ("scores", "attributes", "categories"):
            object.__setattr__(self, name, MappingProxyType(dict(getattr(self, name))))
        object.__setattr__(self, "indicators", tuple(self.indicators))
        object.__setattr__(self, "secondary_matches", tuple(self.secondary_matches))

    def to_dict(self) -> dict[str, Any]:
        return {
            "result_key": self.result_key,
            "result_type": self.result_type,
            "description": self.description,
            "match_score": self.match_score,
            "confidence_score": self.confidence_score,
            "confidence_level": self.confidence_level,
            "scores": dict(self.scores),
            "attributes": {key: summary.to_dict() for key, summary in self.attributes.items()},
            "categories": dict(self.categories),
            "secondary_matches": [match.to_dict() for match in self.secondary_matches],
            "indicators": list(self.indicators),
            "metadata": {
                "timestamp": self.metadata.timestamp,
                "version": self.metadata.version,
                "analysis_id": self.metadata.analysis_id,
            },
        }


def _mapping(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


def _is_hashable(value: Any) -> bool:
    try:
        hash(value)
    except TypeError:
        return False
    return True
