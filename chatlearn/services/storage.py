"""
JSON persistence for the four chat stores.

Each store is its own document: message log, conversation pairs, feedback
ratings and the Markov transitions. Loading is forgiving per store; saving
stages every document to a ``.tmp`` sibling before any of them replaces the
live file.
"""
from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, List, Tuple

from pydantic import TypeAdapter

from chatlearn.config import Settings
from .conversations import ConversationLog
from .markov import MarkovModel
from .records import (
    ConversationList,
    FeedbackList,
    FeedbackRecord,
    MessageList,
    MessageRecord,
)

logger = logging.getLogger(__name__)

TransitionMap = TypeAdapter(Dict[str, List[str]])


@dataclass
class ChatState:
    """In-memory copy of everything the engine persists."""
    messages: List[MessageRecord] = field(default_factory=list)
    conversations: ConversationLog = field(default_factory=ConversationLog)
    feedback: List[FeedbackRecord] = field(default_factory=list)
    model: MarkovModel = field(default_factory=MarkovModel)


class JsonStorage:
    """
    Load/save the chat stores as indented JSON files in one directory.

    Usage:
        storage = JsonStorage(Path("./data"))
        state = storage.load()
        state.model.train("hello there")
        storage.save_all(state)
    """

    def __init__(
        self,
        data_dir: Path,
        messages_file: str = "data.json",
        conversations_file: str = "conversations.json",
        ratings_file: str = "ratingsData.json",
        markov_file: str = "markovData.json",
    ):
        self.data_dir = Path(data_dir)
        self.paths: Dict[str, Path] = {
            "messages": self.data_dir / messages_file,
            "conversations": self.data_dir / conversations_file,
            "feedback": self.data_dir / ratings_file,
            "markov": self.data_dir / markov_file,
        }

    @classmethod
    def from_settings(cls, settings: Settings) -> "JsonStorage":
        return cls(
            settings.data_path,
            messages_file=settings.MESSAGES_FILE,
            conversations_file=settings.CONVERSATIONS_FILE,
            ratings_file=settings.RATINGS_FILE,
            markov_file=settings.MARKOV_FILE,
        )

    def load(self) -> ChatState:
        """Read every store; a missing or bad store comes back empty."""
        messages = self._load_store("messages", MessageList.validate_python, [])
        pairs = self._load_store("conversations", ConversationList.validate_python, [])
        feedback = self._load_store("feedback", FeedbackList.validate_python, [])
        transitions = self._load_store("markov", TransitionMap.validate_python, {})

        state = ChatState(
            messages=messages,
            conversations=ConversationLog(pairs),
            feedback=feedback,
            model=MarkovModel.from_dict(transitions),
        )
        logger.info(
            f"[Storage] Loaded {len(state.messages)} messages, "
            f"{len(state.conversations)} conversations, {len(state.feedback)} ratings, "
            f"{len(state.model)} markov keys from {self.data_dir}"
        )
        return state

    def save_all(self, state: ChatState) -> bool:
        """
        Write all four stores. Returns False (after logging) if any write fails.

        Every document is staged before the first rename, so a failure while
        serializing or writing leaves all live files at their previous version.
        """
        documents = {
            "messages": [r.to_json_dict() for r in state.messages],
            "conversations": [p.to_json_dict() for p in state.conversations],
            "feedback": [r.to_json_dict() for r in state.feedback],
            "markov": state.model.to_dict(),
        }
        staged: List[Tuple[Path, Path]] = []

        try:
            self.data_dir.mkdir(parents=True, exist_ok=True)
            for name, document in documents.items():
                path = self.paths[name]
                tmp = path.with_suffix(path.suffix + ".tmp")
                staged.append((tmp, path))
                with tmp.open("w", encoding="utf-8") as f:
                    json.dump(document, f, indent=2, ensure_ascii=False)
                    f.flush()
                    os.fsync(f.fileno())

            for tmp, path in staged:
                os.replace(tmp, path)
            return True

        except (OSError, TypeError, ValueError) as e:
            logger.error(f"[Storage] Error saving data to {self.data_dir}: {e}", exc_info=True)
            for tmp, _ in staged:
                tmp.unlink(missing_ok=True)
            return False

    # --- helpers ---
    def _load_store(self, name: str, validate: Callable[[Any], Any], empty: Any) -> Any:
        path = self.paths[name]
        if not path.exists():
            return empty

        try:
            with path.open("r", encoding="utf-8") as f:
                raw = json.load(f)
            if raw is None:
                return empty
            return validate(raw)
        # decode, unicode and pydantic validation errors are all ValueErrors
        except (OSError, ValueError, RecursionError) as e:
            logger.warning(f"[Storage] Could not load {name} store from {path}, starting empty: {e}")
            return empty

