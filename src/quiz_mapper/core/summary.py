"""Attribute frequency summaries."""

from __future__ import annotations

from typing import Any

from .models import AttributeSummary


def summarize_attributes(attributes: dict[str, list[Any]]) -> dict[str, AttributeSummary]:
    """Count each key's observed values and pick the most frequent one.

    Frequencies keep first-seen order, and the primary value is the first one
    to reach the maximum count.
    """
    summary: dict[str, AttributeSummary] = {}
    for key, values in attributes.items():
        if not values:
            continue
        frequencies: dict[Any, int] = {}
        for value in values:
            frequencies[value] = frequencies.get(value, 0) + 1

        primary, best = None, 0
        for value, count in frequencies.items():
            if count > best:
                primary, best = value, count
        summary[key] = AttributeSummary(primary=primary, frequencies=frequencies)
    return summary
