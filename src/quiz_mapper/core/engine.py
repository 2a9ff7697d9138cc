"""Batch engine: orchestrates read config -> read answers -> analyze -> write."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from ..io import load_analyzer_config, read_answer_sets
from ..report import write_reports
from ..utils import setup_logging, get_logger
from .analyzer import QuizAnalyzer
from .models import Report
from .rules import MarginSecondaryFinder


def build_analyzer(config: dict[str, Any], *, expected_responses: int | None = None) -> QuizAnalyzer:
    analyzer_cfg = load_analyzer_config(config, expected_responses=expected_responses)
    secondary_min = (config.get("analyzer") or {}).get("secondary_min_score")
    finder = MarginSecondaryFinder(secondary_min) if secondary_min is not None else None
    return QuizAnalyzer(analyzer_cfg, secondary_finder=finder)


def analyze_answer_sets(analyzer: QuizAnalyzer, answer_sets: dict[str, list[dict[str, Any]]]) -> dict[str, Report]:
    return {submission: analyzer.analyze(answers) for submission, answers in answer_sets.items()}


def run_batch(
    config: dict[str, Any],
    *,
    answers_path: str | Path,
    output_path: str | Path | None = None,
    expected_responses: int | None = None,
) -> Path:
    """Analyze every submission in ``answers_path`` and write the reports."""
    setup_logging(config.get("logging") or {})
    log = get_logger(__name__)

    paths = config.get("paths") or {}
    output_path = Path(output_path or paths.get("output", "out/quiz_reports.json"))

    analyzer = build_analyzer(config, expected_responses=expected_responses)
    answer_sets = read_answer_sets(answers_path, config.get("excel") or {})
    if not answer_sets:
        log.warning("No submissions found in %s", answers_path)

    log.info("Analyzing %s submission(s)", len(answer_sets))
    reports = analyze_answer_sets(analyzer, answer_sets)
    for submission, report in reports.items():
        log.info(
            "%s: %s (confidence %.2f, %s)",
            submission,
            report.result_type,
            report.confidence_score,
            report.confidence_level,
        )
    return write_reports(reports, output_path)
