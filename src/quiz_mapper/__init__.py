"""Configurable quiz response analysis."""

from .core import (
    Answer,
    AnalyzerConfig,
    QuizAnalyzer,
    Report,
    ResultTypeDefinition,
    build_default_config,
    build_handoff,
)
from .errors import AnswerFormatError, ConfigurationError, QuizMapperError

__version__ = "2.0.0"

__all__ = [
    "Answer",
    "AnalyzerConfig",
    "QuizAnalyzer",
    "Report",
    "ResultTypeDefinition",
    "build_default_config",
    "build_handoff",
    "AnswerFormatError",
    "ConfigurationError",
    "QuizMapperError",
]
