"""
Append-only log of (original, reply) conversation pairs.
Ordered by insertion only; kept for context-aware generation later.
"""
from __future__ import annotations

from typing import Callable, Iterable, Iterator, List, Optional

from .records import ConversationPair


class ConversationLog:
    def __init__(self, pairs: Optional[Iterable[ConversationPair]] = None):
        self._pairs: List[ConversationPair] = list(pairs or [])

    def __len__(self) -> int:
        return len(self._pairs)

    def __iter__(self) -> Iterator[ConversationPair]:
        return iter(self._pairs)

    def append(self, original: str, reply: str, timestamp: int) -> ConversationPair:
        pair = ConversationPair(original=original, reply=reply, timestamp=timestamp)
        self._pairs.append(pair)
        return pair

    def replies_to(self, original: str) -> List[str]:
        """Replies recorded for an exact original message, oldest first."""
        return [p.reply for p in self._pairs if p.original == original]

    def remove_if(self, predicate: Callable[[ConversationPair], bool]) -> int:
        kept = [p for p in self._pairs if not predicate(p)]
        removed = len(self._pairs) - len(kept)
        self._pairs = kept
        return removed

    def to_list(self) -> List[ConversationPair]:
        return list(self._pairs)
