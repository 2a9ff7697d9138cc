"""Response analyzer: turn one completed quiz's answers into a Report."""

from __future__ import annotations

import secrets
import string
import time
from collections.abc import Iterable, Mapping
from datetime import datetime, timezone
from typing import Any

from ..errors import ConfigurationError
from ..utils import get_logger
from ..utils.normalize import clean_number
from .confidence import calculate_confidence, confidence_level
from .config import AnalyzerConfig, validate_expected_responses
from .matching import determine_main_result, rank_result_types
from .models import AnalysisState, Answer, Report, ReportMetadata, coerce_answer
from .rules import NullPatternDetector, NullSecondaryFinder, PatternDetector, SecondaryResultFinder
from .summary import summarize_attributes


_log = get_logger(__name__)

_ID_ALPHABET = string.digits + string.ascii_lowercase
_ID_PREFIX = "QZID"


class QuizAnalyzer:
    """Configured once, then called once per completed quiz.

    The analyzer keeps no per-call state, so one instance can serve
    concurrent callers.
    """

    def __init__(
        self,
        config: AnalyzerConfig | None,
        *,
        pattern_detector: PatternDetector | None = None,
        secondary_finder: SecondaryResultFinder | None = None,
    ):
        if config is None:
            raise ConfigurationError(
                "An AnalyzerConfig is required; use build_default_config() for the demo catalog"
            )
        self.config = config
        self.pattern_detector = pattern_detector or NullPatternDetector()
        self.secondary_finder = secondary_finder or NullSecondaryFinder()

    def analyze(
        self,
        answers: Iterable[Answer | Mapping[str, Any] | None] | None,
        *,
        expected_responses: int | None = None,
    ) -> Report:
        """Score ``answers`` against every result type and build the report.

        ``expected_responses`` overrides the configured expectation for this
        call only.
        """
        expected = (
            self.config.expected_responses
            if expected_responses is None
            else validate_expected_responses(expected_responses)
        )

        state = AnalysisState.for_aspects(self.config.aspects)
        for raw in answers or ():
            self._process_answer(raw, state)

        ranked = rank_result_types(state, self.config)
        primary, match_score = determine_main_result(ranked)
        secondary = self.secondary_finder.find(ranked, primary, state)

        confidence = calculate_confidence(
            match_score,
            response_count=len(state.raw_responses),
            expected_responses=expected,
            has_patterns=bool(state.patterns),
            pattern_bonus=self.config.pattern_bonus,
        )
        _log.debug(
            "Selected %r (match %.3f, confidence %.3f) from %d responses",
            primary.key,
            match_score,
            confidence,
            len(state.raw_responses),
        )

        return Report(
            result_key=primary.key,
            result_type=primary.title,
            description=primary.description,
            match_score=match_score,
            confidence_score=confidence,
            confidence_level=confidence_level(
                confidence,
                high=self.config.confidence_high,
                medium=self.config.confidence_medium,
            ),
            scores=dict(state.scores),
            attributes=summarize_attributes(state.attributes),
            categories=dict(state.categories),
            indicators=tuple(state.indicators),
            secondary_matches=tuple(secondary),
            metadata=self._metadata(),
        )

    def _process_answer(self, raw: Answer | Mapping[str, Any] | None, state: AnalysisState) -> None:
        answer = coerce_answer(raw)
        if answer is None:
            _log.debug("Skipping answer without a value: %r", raw)
            return

        state.raw_responses.append(answer)

        for indicator in answer.indicators:
            state.indicators.setdefault(indicator, None)

        for aspect in self.config.aspects:
            if aspect not in answer.scores:
                continue
            contribution = clean_number(answer.scores[aspect])
            if contribution is not None:
                state.scores[aspect] += contribution

        for key, value in answer.attributes.items():
            state.attributes.setdefault(key, []).append(value)

        if answer.category:
            state.categories[answer.category] = state.categories.get(answer.category, 0) + 1

        recent = state.raw_responses[-self.config.pattern_window:]
        state.patterns.extend(self.pattern_detector.detect(recent, state))

    def _metadata(self) -> ReportMetadata:
        now = datetime.now(timezone.utc)
        return ReportMetadata(
            timestamp=now.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
            version=self.config.schema_version,
            analysis_id=generate_analysis_id(),
        )


def generate_analysis_id() -> str:
    suffix = "".join(secrets.choice(_ID_ALPHABET) for _ in range(9))
    return f"{_ID_PREFIX}-{int(time.time() * 1000)}-{suffix}"
