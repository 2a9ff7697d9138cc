"""Exception types raised by quiz-mapper."""


class QuizMapperError(Exception):
    """Base class for quiz-mapper errors."""


class ConfigurationError(QuizMapperError, ValueError):
    """Raised when analyzer configuration is missing or invalid."""


class AnswerFormatError(QuizMapperError, ValueError):
    """Raised when an answer file cannot be interpreted as answer sets."""
