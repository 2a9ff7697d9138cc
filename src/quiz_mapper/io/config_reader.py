"""YAML configuration: logging, analyzer catalog and optional quiz definition."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from ..core.config import AnalyzerConfig
from ..errors import ConfigurationError
from ..utils import get_logger

_log = get_logger(__name__)


def load_config(config_path: str | Path | None) -> dict[str, Any]:
    """Read a YAML config file. A missing file yields an empty config."""
    path = Path(config_path or "configs/default.yaml")
    if not path.exists():
        _log.debug("Config file %s not found; using empty config", path)
        return {}
    with open(path, encoding="utf-8") as f:
        try:
            config = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e
    if not isinstance(config, dict):
        raise ConfigurationError(f"Top level of {path} must be a mapping")
    return config


def count_quiz_questions(quiz: Mapping[str, Any] | None) -> int:
    """Total number of questions across all quiz sections."""
    if not quiz:
        return 0
    total = 0
    for section in quiz.get("sections") or []:
        total += len((section or {}).get("questions") or [])
    return total


def load_analyzer_config(config: Mapping[str, Any], *, expected_responses: int | None = None) -> AnalyzerConfig:
    """Build an AnalyzerConfig from the ``analyzer`` section of a loaded config.

    When neither ``expected_responses`` nor the section sets the expectation,
    the question count of the ``quiz`` definition is used.
    """
    section = config.get("analyzer")
    if not isinstance(section, Mapping):
        raise ConfigurationError("Config has no 'analyzer' section")

    expected = expected_responses
    if expected is None and section.get("expected_responses") is None and section.get("expectedResponses") is None:
        expected = count_quiz_questions(config.get("quiz")) or None
        if expected is not None:
            _log.debug("Using quiz question count %d as expected responses", expected)

    return AnalyzerConfig.from_mapping(section, expected_responses=expected)
