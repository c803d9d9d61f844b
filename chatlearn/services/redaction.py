"""
Phrase redaction across every chat store.

A purge removes each message, conversation pair, rating and Markov successor
whose text contains the phrase (case-sensitive substring). Chain keys that
contain the phrase go too, as do keys left without successors. Each store
is rebuilt and swapped in whole, so no store is ever seen half-filtered.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass

from chatlearn.errors import InvalidPhraseError
from .storage import ChatState

logger = logging.getLogger(__name__)


@dataclass
class PurgeReport:
    """How many entries a purge removed from each store."""
    messages: int = 0
    conversations: int = 0
    feedback: int = 0
    successors: int = 0
    keys: int = 0

    @property
    def total(self) -> int:
        return self.messages + self.conversations + self.feedback + self.successors

    def to_dict(self) -> dict:
        return {
            "messages": self.messages,
            "conversations": self.conversations,
            "feedback": self.feedback,
            "successors": self.successors,
            "keys": self.keys,
        }


def validate_phrase(phrase: str) -> str:
    if not isinstance(phrase, str) or not phrase.strip():
        raise InvalidPhraseError("Redaction phrase must be a non-empty string")
    return phrase


def purge(state: ChatState, phrase: str) -> PurgeReport:
    """
    Remove every record and successor containing ``phrase`` from ``state``.

    Raises:
        InvalidPhraseError: phrase is empty or whitespace only (nothing is touched)
    """
    validate_phrase(phrase)
    report = PurgeReport()

    kept_messages = [m for m in state.messages if phrase not in m.content]
    report.messages = len(state.messages) - len(kept_messages)
    state.messages = kept_messages

    report.conversations = state.conversations.remove_if(
        lambda p: phrase in p.original or phrase in p.reply
    )

    kept_feedback = [r for r in state.feedback if phrase not in r.message]
    report.feedback = len(state.feedback) - len(kept_feedback)
    state.feedback = kept_feedback

    keys_before = len(state.model)
    # empty successors are dropped too; they can only come from hand-edited files
    report.successors = state.model.filter_successors(
        lambda s: bool(s) and phrase not in s,
        keep_key=lambda token: phrase not in token,
    )
    report.keys = keys_before - len(state.model)

    logger.info(f"[Redaction] Purged {phrase!r}: {report.to_dict()}")
    return report
