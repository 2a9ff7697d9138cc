"""Tests for quiz_mapper.utils."""

import logging

import pytest

from quiz_mapper.utils import clean_number, get_logger, normalize_label, setup_logging, split_tags


@pytest.mark.parametrize(
    "raw, expected",
    [("Score: Technical", "score:_technical"), ("  Value ", "value"), ("attr_focus", "attr_focus"), (None, "")],
)
def test_normalize_label(raw, expected):
    assert normalize_label(raw) == expected


@pytest.mark.parametrize(
    "raw, expected",
    [(1, 1.0), ("0.25", 0.25), (" n/a ", None), ("x", None), (True, None), (float("nan"), None), (None, None)],
)
def test_clean_number(raw, expected):
    assert clean_number(raw) == expected


def test_split_tags():
    assert split_tags("a, b;c") == ["a", "b", "c"]
    assert split_tags(["a", "", None, " b "]) == ["a", "b"]
    assert split_tags(float("nan")) == []


def test_get_logger_is_cached():
    assert get_logger("quiz_mapper.test") is get_logger("quiz_mapper.test")


def test_get_logger_nests_under_package():
    assert get_logger("reports").name == "quiz_mapper.reports"
    assert get_logger("quiz_mapper").name == "quiz_mapper"


def test_setup_logging_leaves_root_logger_alone():
    root_handlers = list(logging.getLogger().handlers)
    logger = setup_logging({"level": "WARNING"})
    assert logger.name == "quiz_mapper"
    assert logger.handlers
    assert logging.getLogger().handlers == root_handlers


def test_verbose_lowers_package_level():
    logger = setup_logging({"level": "WARNING"})
    previous = logger.level
    try:
        setup_logging(verbose=True)
        assert logger.level == logging.DEBUG
    finally:
        logger.setLevel(previous)
