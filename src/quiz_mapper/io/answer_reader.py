"""Readers for quiz answer sets (YAML/JSON documents or CSV/Excel tables)."""

from __future__ import annotations

import re
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import pandas as pd
import yaml

from ..errors import AnswerFormatError
from ..utils import get_logger
from ..utils.normalize import is_blank, normalize_label, split_tags

_log = get_logger(__name__)

_DOCUMENT_SUFFIXES = {".yaml", ".yml", ".json"}
_TABLE_SUFFIXES = {".csv", ".xlsx", ".xls"}
_PREFIXED_RE = re.compile(r"^(score|scores|attr|attribute)[:_]+(.+)$")

AnswerSets = dict[str, list[dict[str, Any]]]


def read_answer_sets(path: str | Path, excel_config: dict[str, Any] | None = None) -> AnswerSets:
    """Read one or more submissions from ``path``.

    Returns an ordered mapping of submission id -> list of raw answer dicts.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Answer file not found: {path}")
    suffix = path.suffix.lower()
    if suffix in _DOCUMENT_SUFFIXES:
        sets = _read_document(path)
    elif suffix in _TABLE_SUFFIXES:
        sets = _read_table(path, excel_config or {})
    else:
        raise AnswerFormatError(f"Unsupported answer file type: {path.suffix or path.name}")
    _log.info("Read %s submission(s) from %s", len(sets), path)
    return sets


def _read_document(path: Path) -> AnswerSets:
    # JSON is a subset of YAML, so one loader covers both.
    with open(path, encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise AnswerFormatError(f"Could not parse {path}: {e}") from e

    if isinstance(data, Mapping) and "submissions" in data:
        data = data["submissions"]

    if isinstance(data, list):
        return {path.stem: _answer_list(data, path.stem)}
    if isinstance(data, Mapping):
        return {str(sid): _answer_list(answers, str(sid)) for sid, answers in data.items()}
    raise AnswerFormatError(f"{path} must contain a list of answers or a mapping of submissions")


def _answer_list(raw: Any, submission: str) -> list[dict[str, Any]]:
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise AnswerFormatError(f"Answers for submission {submission!r} must be a list")
    out = []
    for item in raw:
        if not isinstance(item, Mapping):
            _log.debug("Dropping non-mapping answer %r in submission %r", item, submission)
            continue
        out.append(dict(item))
    return out


def _read_table(path: Path, excel_config: dict[str, Any]) -> AnswerSets:
    if path.suffix.lower() == ".csv":
        df = pd.read_csv(path)
    else:
        df = pd.read_excel(
            path,
            sheet_name=excel_config.get("answers_sheet", 0),
            header=int(excel_config.get("header_row", 0)),
        )
    df.columns = [normalize_label(c) for c in df.columns]
    if "value" not in df.columns:
        raise AnswerFormatError(f"Expected a 'value' column in {path}")

    sets: AnswerSets = {}
    for _, row in df.iterrows():
        submission = row.get("submission")
        sid = path.stem if is_blank(submission) else _cell_text(submission)
        sets.setdefault(sid, []).append(answer_from_row(row.to_dict()))
    return sets


def answer_from_row(row: Mapping[str, Any]) -> dict[str, Any]:
    """Convert one normalized table row into a raw answer dict."""
    answer: dict[str, Any] = {"scores": {}, "attributes": {}}
    for column, cell in row.items():
        if is_blank(cell):
            continue
        if column == "value":
            answer["value"] = _cell_text(cell)
        elif column == "category":
            answer["category"] = _cell_text(cell)
        elif column == "indicators":
            answer["indicators"] = split_tags(cell)
        else:
            m = _PREFIXED_RE.match(str(column))
            if not m:
                continue
            kind, name = m.groups()
            if kind.startswith("score"):
                answer["scores"][name] = cell
            else:
                answer["attributes"][name] = _cell_text(cell)
    return answer


def _cell_text(cell: Any) -> str:
    # pandas reads integer-like ids as floats when a column has gaps
    if isinstance(cell, float) and cell.is_integer():
        return str(int(cell))
    return str(cell).strip()
