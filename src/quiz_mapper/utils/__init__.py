"""Utilities: logging, normalization."""

from .logging import setup_logging, get_logger
from .normalize import normalize_label, is_blank, clean_number, split_tags

__all__ = [
    "setup_logging",
    "get_logger",
    "normalize_label",
    "is_blank",
    "clean_number",
    "split_tags",
]
