"""Normalization helpers for loosely structured quiz input."""

from __future__ import annotations

import math
import re
from typing import Any

import pandas as pd


_WS_RE = re.compile(r"\s+")
_PUNCT_RE = re.compile(r"[^a-z0-9_:\s]")
_SPLIT_RE = re.compile(r"[,;]")


def normalize_label(value: Any) -> str:
    """Lower-case a header/key, drop punctuation and collapse whitespace to '_'."""
    if value is None:
        return ""
    s = str(value).strip().lower().replace("\n", " ")
    s = _PUNCT_RE.sub(" ", s)
    s = _WS_RE.sub(" ", s).strip()
    return s.replace(" ", "_")


def is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, float) and pd.isna(value):
        return True
    return isinstance(value, str) and not value.strip()


def clean_number(value: Any) -> float | None:
    """Return a finite float for numeric-looking input, else None."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        s = str(value).strip()
        if not s or s.lower() in {"na", "n/a", "nan", "none"}:
            return None
        try:
            number = float(s)
        except ValueError:
            return None
    if not math.isfinite(number):
        return None
    return number


def split_tags(value: Any) -> list[str]:
    """Split a comma/semicolon separated cell, or pass a list through."""
    if is_blank(value):
        return []
    if isinstance(value, (list, tuple, set)):
        return [str(v).strip() for v in value if not is_blank(v)]
    return [part.strip() for part in _SPLIT_RE.split(str(value)) if part.strip()]
