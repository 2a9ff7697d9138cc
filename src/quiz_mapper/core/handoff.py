"""Payload handed to the next step after a quiz (e.g. pre-filling a contact form)."""

from __future__ import annotations

from typing import Any

from .models import Report


def generate_recommendations(report: Report) -> str:
    focus = ", ".join(report.attributes)
    return (
        f"Based on your {report.result_type} profile, we recommend focusing on {focus}. "
        f"Your confidence score of {report.confidence_score * 100:.1f}% suggests this is a strong match."
    )


def build_handoff(report: Report) -> dict[str, Any]:
    return {
        "result_type": report.result_type,
        "description": report.description,
        "confidence_score": report.confidence_score,
        "attributes": {key: summary.to_dict() for key, summary in report.attributes.items()},
        "recommendations": generate_recommendations(report),
    }
