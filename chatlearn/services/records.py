"""
Typed records for the three persisted logs.

Field aliases keep the on-disk key names the original bot used
(``username``, ``thumbsUp``, ``thumbsDown``), so existing files load as-is.
"""
from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt, TypeAdapter


class _Record(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    def to_json_dict(self) -> dict:
        return self.model_dump(by_alias=True)


class MessageRecord(_Record):
    """One inbound, non-command chat message."""

    author: str = Field(alias="username")
    content: str
    timestamp: int


class ConversationPair(_Record):
    """A message together with the message it replied to."""

    original: str
    reply: str
    timestamp: int


class FeedbackRecord(_Record):
    """Audience reactions counted on one generated reply."""

    message: str
    positive: NonNegativeInt = Field(default=0, alias="thumbsUp")
    negative: NonNegativeInt = Field(default=0, alias="thumbsDown")


MessageList = TypeAdapter(List[MessageRecord])
ConversationList = TypeAdapter(List[ConversationPair])
FeedbackList = TypeAdapter(List[FeedbackRecord])
