"""
Tests for text and logging helpers.
"""
import logging

from chatlearn.utils.logger import setup_logger
from chatlearn.utils.text import detokenize, sanitize_mentions, tokenize


def test_tokenize_splits_on_whitespace():
    assert tokenize("  a\tb\n c  ") == ["a", "b", "c"]
    assert tokenize("") == []


def test_detokenize_single_spaces():
    assert detokenize(["a", "b", "c"]) == "a b c"


def test_sanitize_mentions():
    """Test every @ gets a zero-width space after it."""
    assert sanitize_mentions("@ana and @ben") == "@\u200bana and @\u200bben"
    assert sanitize_mentions("no mentions") == "no mentions"


def test_setup_logger_level():
    """Test the level name is applied to the root logger."""
    root = logging.getLogger()
    previous = root.level
    try:
        logger = setup_logger("chatlearn.test", level="warning")

        assert logger.name == "chatlearn.test"
        assert root.level == logging.WARNING
    finally:
        root.setLevel(previous)
