"""
First-order Markov chain over whitespace tokens (CPU-only).
Successor lists keep duplicates: multiplicity is the empirical frequency,
so a uniform draw over the list is a frequency-weighted draw.
Persistence: JSON-friendly ``{token: [successor, ...]}``.
"""
from __future__ import annotations

import math
import random
from typing import Callable, Dict, Iterable, List, Optional

from chatlearn.utils.text import detokenize, tokenize

DEFAULT_PREFIX_TOKENS = 3
DEFAULT_MAX_TOKENS = 50


class MarkovModel:
    def __init__(self, transitions: Optional[Dict[str, List[str]]] = None):
        self.transitions: Dict[str, List[str]] = {}
        for token, successors in (transitions or {}).items():
            if successors:
                self.transitions[token] = list(successors)

    def __len__(self) -> int:
        return len(self.transitions)

    def __contains__(self, token: object) -> bool:
        return token in self.transitions

    def train(self, text: str) -> int:
        """Record every adjacent token pair of ``text``. Returns pairs added."""
        tokens = tokenize(text)
        for word, nxt in zip(tokens, tokens[1:]):
            self.transitions.setdefault(word, []).append(nxt)
        return max(0, len(tokens) - 1)

    def train_corpus(self, corpus: Iterable[str]) -> int:
        return sum(self.train(line) for line in corpus)

    def successors(self, token: str) -> List[str]:
        return list(self.transitions.get(token, ()))

    def transition_count(self) -> int:
        return sum(len(s) for s in self.transitions.values())

    def generate(
        self,
        seed_input: str,
        seed: str,
        max_len: int = DEFAULT_MAX_TOKENS,
        prefix_len: int = DEFAULT_PREFIX_TOKENS,
    ) -> str:
        """
        Continue ``seed_input`` by walking the chain.

        The output starts with up to ``prefix_len`` input tokens and grows one
        successor at a time until the last token has no successors or the
        output holds ``max_len`` tokens. ``seed`` fully determines the draws.
        """
        rng = random.Random(seed)
        output = tokenize(seed_input)[:prefix_len][:max_len]

        while output and len(output) < max_len:
            possible = self.transitions.get(output[-1])
            if not possible:
                break
            output.append(self._sample(possible, rng.random))

        return detokenize(output)

    def filter_successors(
        self,
        keep: Callable[[str], bool],
        keep_key: Optional[Callable[[str], bool]] = None,
    ) -> int:
        """
        Drop successors for which ``keep`` is false and delete keys left empty.
        Keys rejected by ``keep_key`` are deleted along with their successors.
        Returns how many successor entries were removed.
        """
        filtered: Dict[str, List[str]] = {}
        removed = 0
        for token, successors in self.transitions.items():
            if keep_key is not None and not keep_key(token):
                removed += len(successors)
                continue
            kept = [s for s in successors if keep(s)]
            removed += len(successors) - len(kept)
            if kept:
                filtered[token] = kept
        self.transitions = filtered
        return removed

    def to_dict(self) -> Dict[str, List[str]]:
        return {token: list(s) for token, s in self.transitions.items()}

    @classmethod
    def from_dict(cls, data: Dict[str, List[str]]) -> "MarkovModel":
        return cls(data)

    # --- helpers ---
    @staticmethod
    def _sample(possible: List[str], draw: Callable[[], float]) -> str:
        return possible[math.floor(draw() * len(possible))]


def train_from_corpus(lines: List[str]) -> MarkovModel:
    model = MarkovModel()
    model.train_corpus(lines)
    return model
