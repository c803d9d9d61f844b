"""Text helpers shared by training, generation and the HTTP layer."""
from __future__ import annotations

from typing import List

ZERO_WIDTH_SPACE = "\u200b"


def tokenize(text: str) -> List[str]:
    """Split on runs of whitespace. No case or punctuation normalization."""
    return text.split()


def detokenize(tokens: List[str]) -> str:
    return " ".join(tokens)


def sanitize_mentions(text: str) -> str:
    """Break every ``@`` so the chat platform does not turn it into a ping."""
    return text.replace("@", "@" + ZERO_WIDTH_SPACE)
