"""Shared fixtures: a small sample dictionary in every shape the code accepts."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest
import structlog

from dictionary_service.engine import LookupEngine
from dictionary_service.store import DictionaryStore

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture(autouse=True)
def _reset_structlog():
    """configure_logging binds the current sys.stderr; undo it between tests."""
    yield
    structlog.reset_defaults()


@pytest.fixture()
def sample_words() -> dict[str, list[str]]:
    return {
        "apple": ["a fruit", "a tech company"],
        "app": ["short for application"],
        "Application": ["a program"],
        "apply": ["to make a request"],
        "banana": ["a long yellow fruit"],
        "band": ["a group of musicians", "a strip of material"],
        "Bandana": ["a large handkerchief"],
        "cat": ["a small domesticated feline"],
        "ice cream": ["a frozen dessert"],
        "iceberg": ["a floating mass of ice"],
        "empty": [],
    }


@pytest.fixture()
def store(sample_words: dict[str, list[str]]) -> DictionaryStore:
    return DictionaryStore(sample_words)


@pytest.fixture()
def engine(store: DictionaryStore) -> LookupEngine:
    return LookupEngine(store)


@pytest.fixture()
def source_json(tmp_path: Path, sample_words: dict[str, list[str]]) -> Path:
    """The sample dictionary written in the upstream export format."""
    path = tmp_path / "dictionary.json"
    document = {
        "TotalUniqueWords": len(sample_words),
        "Words": [{"EnglishWord": w, "Meanings": m} for w, m in sample_words.items()],
    }
    path.write_text(json.dumps(document), encoding="utf-8")
    return path
