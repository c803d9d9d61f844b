"""
Shared pytest fixtures for chat engine tests.
"""
import json
from pathlib import Path
from typing import Dict, List

import pytest

from chatlearn.config import Settings
from chatlearn.services.engine import ChatEngine
from chatlearn.services.storage import JsonStorage


@pytest.fixture
def sample_corpus() -> List[str]:
    """Sample chat lines for training."""
    return [
        "hello there friend how are you",
        "hello world this is a test",
        "the world is full of amazing things",
        "friend of mine how was your day",
        "this is a wonderful day",
    ]


@pytest.fixture
def sample_messages() -> List[Dict]:
    """Message log entries as the original bot wrote them."""
    return [
        {"username": "ana", "content": "hello world", "timestamp": 1700000000000},
        {"username": "ben", "content": "good morning", "timestamp": 1700000001000},
    ]


@pytest.fixture
def data_dir(tmp_path) -> Path:
    return tmp_path / "data"


@pytest.fixture
def storage(data_dir) -> JsonStorage:
    return JsonStorage(data_dir)


@pytest.fixture
def engine(storage) -> ChatEngine:
    return ChatEngine(storage).load()


@pytest.fixture
def test_settings(data_dir) -> Settings:
    return Settings(DATA_DIR=str(data_dir))


# Helper functions for tests


def write_json(path: Path, data) -> Path:
    """Helper to write a JSON document, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def read_json(path: Path):
    return json.loads(path.read_text(encoding="utf-8"))
