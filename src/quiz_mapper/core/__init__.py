"""Analysis core: models, matching, confidence, analyzer, batch engine."""

from .analyzer import QuizAnalyzer
from .config import AnalyzerConfig, build_default_config
from .engine import run_batch
from .handoff import build_handoff
from .models import Answer, Report, ResultTypeDefinition

__all__ = [
    "QuizAnalyzer",
    "AnalyzerConfig",
    "build_default_config",
    "run_batch",
    "build_handoff",
    "Answer",
    "Report",
    "ResultTypeDefinition",
]
