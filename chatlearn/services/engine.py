"""
Chat engine: the narrow interface platform adapters call.

One engine owns one data directory. Every entry point runs under the
engine lock and persists all four stores before returning, so events are
handled strictly one after another.
"""
from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple, Union

from chatlearn.config import Settings
from chatlearn.errors import InvalidPhraseError
from .markov import DEFAULT_MAX_TOKENS, DEFAULT_PREFIX_TOKENS
from .records import FeedbackRecord, MessageRecord
from .redaction import PurgeReport, purge, validate_phrase
from .storage import ChatState, JsonStorage

logger = logging.getLogger(__name__)

FeedbackSample = Union[FeedbackRecord, Tuple[str, int, int]]


@dataclass
class InboundResult:
    """Reply to send back for one inbound message."""
    text: str
    generated: bool
    persisted: bool


@dataclass
class PurgeResult:
    ok: bool
    phrase: str
    report: PurgeReport = field(default_factory=PurgeReport)
    error: Optional[str] = None
    persisted: bool = False


@dataclass
class FeedbackResult:
    recorded: int
    persisted: bool


def fresh_seed() -> str:
    return str(time.time_ns())


class ChatEngine:
    """
    Learns from inbound chat text and answers with Markov continuations.

    Usage:
        engine = ChatEngine(JsonStorage(Path("./data")))
        engine.load()
        result = engine.on_inbound_text("ana", "hello there friend", 1700000000000)
        engine.on_admin_purge("friend")
    """

    def __init__(
        self,
        storage: JsonStorage,
        prefix_tokens: int = DEFAULT_PREFIX_TOKENS,
        max_tokens: int = DEFAULT_MAX_TOKENS,
    ):
        self.storage = storage
        self.prefix_tokens = prefix_tokens
        self.max_tokens = max_tokens
        self.state = ChatState()
        self._lock = threading.Lock()

    @classmethod
    def from_settings(cls, settings: Settings) -> "ChatEngine":
        return cls(
            JsonStorage.from_settings(settings),
            prefix_tokens=settings.PREFIX_TOKENS,
            max_tokens=settings.MAX_OUTPUT_TOKENS,
        )

    def load(self) -> "ChatEngine":
        with self._lock:
            self.state = self.storage.load()
        return self

    def generate(self, seed_input: str, seed: str) -> str:
        """Seeded continuation of ``seed_input``; may be empty."""
        with self._lock:
            return self._generate(seed_input, seed)

    def _generate(self, seed_input: str, seed: str) -> str:
        return self.state.model.generate(
            seed_input,
            seed,
            max_len=self.max_tokens,
            prefix_len=self.prefix_tokens,
        )

    def on_inbound_text(
        self,
        author: str,
        content: str,
        timestamp: int,
        reply_to: Optional[str] = None,
        seed: Optional[str] = None,
    ) -> InboundResult:
        """
        Log, learn from and answer one inbound message.

        Args:
            author: Display name of the sender
            content: Full message text
            timestamp: Epoch milliseconds of the message
            reply_to: Content of the message this one replies to, if any
            seed: Generator seed; a fresh timestamp when omitted

        Returns:
            InboundResult whose text echoes ``content`` when nothing was generated
        """
        seed = fresh_seed() if seed is None else seed

        with self._lock:
            self.state.messages.append(
                MessageRecord(author=author, content=content, timestamp=timestamp)
            )
            self.state.model.train(content)

            text = self._generate(content, seed)
            generated = bool(text.strip())
            if not generated:
                text = content

            if reply_to is not None:
                self.state.conversations.append(reply_to, content, timestamp)

            persisted = self.storage.save_all(self.state)

        return InboundResult(text=text, generated=generated, persisted=persisted)

    def on_admin_purge(self, phrase: str) -> PurgeResult:
        """Redact ``phrase`` (trimmed) from every store and persist."""
        try:
            phrase = validate_phrase(phrase).strip()
        except InvalidPhraseError as e:
            logger.warning(f"[Redaction] Rejected purge request: {e}")
            return PurgeResult(ok=False, phrase="", error=str(e))

        with self._lock:
            report = purge(self.state, phrase)
            persisted = self.storage.save_all(self.state)

        return PurgeResult(ok=True, phrase=phrase, report=report, persisted=persisted)

    def on_feedback_sample(self, samples: Iterable[FeedbackSample]) -> FeedbackResult:
        """Append one rating per sampled reply and persist."""
        records: List[FeedbackRecord] = []
        for sample in samples:
            if isinstance(sample, FeedbackRecord):
                records.append(sample)
            else:
                message, positive, negative = sample
                records.append(
                    FeedbackRecord(message=message, positive=positive, negative=negative)
                )

        if not records:
            return FeedbackResult(recorded=0, persisted=True)

        with self._lock:
            self.state.feedback.extend(records)
            persisted = self.storage.save_all(self.state)

        logger.info(f"[Feedback] Recorded {len(records)} ratings (persisted={persisted})")
        return FeedbackResult(recorded=len(records), persisted=persisted)

    def status(self) -> Dict[str, int]:
        with self._lock:
            return {
                "messages": len(self.state.messages),
                "conversations": len(self.state.conversations),
                "feedback": len(self.state.feedback),
                "markov_keys": len(self.state.model),
                "markov_transitions": self.state.model.transition_count(),
            }
