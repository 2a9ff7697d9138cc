"""I/O: YAML config and answer-set readers."""

from .config_reader import load_config, load_analyzer_config, count_quiz_questions
from .answer_reader import read_answer_sets

__all__ = ["load_config", "load_analyzer_config", "count_quiz_questions", "read_answer_sets"]
