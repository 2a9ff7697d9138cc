"""Confidence estimate for the primary result and its level label."""

from __future__ import annotations

from ..errors import ConfigurationError
from ..utils.normalize import clean_number
from .config import CONFIDENCE_HIGH, CONFIDENCE_MEDIUM, PATTERN_BONUS
from .models import ConfidenceLevel


def clamp(value: float, min_val: float, max_val: float) -> float:
    return max(min_val, min(max_val, value))


def calculate_confidence(
    match_score: float,
    *,
    response_count: int,
    expected_responses: int,
    has_patterns: bool = False,
    pattern_bonus: float = PATTERN_BONUS,
) -> float:
    """
    Scale the primary match score by pattern consistency and completeness.

    Args:
        match_score: Match score of the selected result type
        response_count: Number of answers that were not ignored
        expected_responses: Number of answers a complete quiz yields
        has_patterns: Whether any response pattern was detected
        pattern_bonus: Multiplier applied when patterns were detected

    Returns:
        Confidence in [0, 1]
    """
    if expected_responses <= 0:
        raise ConfigurationError(f"expected_responses must be positive, got {expected_responses!r}")

    confidence = clean_number(match_score)
    if confidence is None:
        return 0.0
    if has_patterns:
        confidence *= pattern_bonus

    completeness = response_count / expected_responses
    confidence *= completeness

    return clamp(confidence, 0.0, 1.0)


def confidence_level(
    score: float,
    *,
    high: float = CONFIDENCE_HIGH,
    medium: float = CONFIDENCE_MEDIUM,
) -> ConfidenceLevel:
    if score >= high:
        return "HIGH"
    if score >= medium:
        return "MEDIUM"
    return "LOW"
