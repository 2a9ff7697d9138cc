"""Report writers: JSON documents and Excel workbooks of analysis reports."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pandas as pd

from ..core.handoff import build_handoff
from ..core.models import Report
from ..utils import get_logger

_log = get_logger(__name__)


def write_reports(reports: dict[str, Report], path: str | Path) -> Path:
    """Write reports to ``path``; ``.xlsx`` gives a workbook, anything else JSON."""
    path = Path(path)
    if path.suffix.lower() == ".xlsx":
        write_reports_excel(reports, path)
    else:
        write_reports_json(reports, path)
    return path


def write_reports_json(reports: dict[str, Report], path: str | Path) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = {
        submission: {**report.to_dict(), "handoff": build_handoff(report)}
        for submission, report in reports.items()
    }
    with open(path, "w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2, ensure_ascii=False, default=str)
    _log.info("Wrote %s report(s) to %s", len(reports), path)


def write_reports_excel(reports: dict[str, Report], path: str | Path) -> None:
    """Write one workbook with Summary, Scores, Attributes and Categories sheets."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    summary_rows: list[dict[str, Any]] = []
    score_rows: list[dict[str, Any]] = []
    attribute_rows: list[dict[str, Any]] = []
    category_rows: list[dict[str, Any]] = []

    for submission, report in reports.items():
        summary_rows.append(
            {
                "Submission": submission,
                "Result Key": report.result_key,
                "Result Type": report.result_type,
                "Match Score": round(report.match_score, 4),
                "Confidence": round(report.confidence_score, 4),
                "Confidence Level": report.confidence_level,
                "Indicators": ", ".join(report.indicators),
                "Secondary Matches": ", ".join(m.title for m in report.secondary_matches),
                "Analysis ID": report.metadata.analysis_id,
                "Timestamp": report.metadata.timestamp,
            }
        )
        score_rows.append({"Submission": submission, **report.scores})
        for key, summary in report.attributes.items():
            for value, count in summary.frequencies.items():
                attribute_rows.append(
                    {
                        "Submission": submission,
                        "Attribute": key,
                        "Value": value,
                        "Count": count,
                        "Primary": value == summary.primary,
                    }
                )
        for label, count in report.categories.items():
            category_rows.append({"Submission": submission, "Category": label, "Count": count})

    with pd.ExcelWriter(path, engine="openpyxl") as writer:
        _frame(summary_rows, ["Submission", "Result Key", "Result Type", "Match Score", "Confidence",
                              "Confidence Level", "Indicators", "Secondary Matches", "Analysis ID",
                              "Timestamp"]).to_excel(writer, sheet_name="Summary", index=False)
        _frame(score_rows, ["Submission"]).to_excel(writer, sheet_name="Scores", index=False)
        _frame(attribute_rows, ["Submission", "Attribute", "Value", "Count", "Primary"]).to_excel(
            writer, sheet_name="Attributes", index=False
        )
        _frame(category_rows, ["Submission", "Category", "Count"]).to_excel(
            writer, sheet_name="Categories", index=False
        )

    _log.info("Wrote %s report(s) to %s", len(reports), path)


def _frame(rows: list[dict[str, Any]], columns: list[str]) -> pd.DataFrame:
    if not rows:
        return pd.DataFrame(columns=columns)
    return pd.DataFrame(rows)
