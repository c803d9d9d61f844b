"""Exceptions raised by the chat engine."""


class ChatEngineError(Exception):
    """Base exception for chatlearn errors."""


class InvalidPhraseError(ChatEngineError, ValueError):
    """A redaction phrase was empty or whitespace only."""
