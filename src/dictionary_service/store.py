"""Immutable word → meanings store.

Built once from an already decoded mapping and never mutated afterwards, so
any number of readers can share one instance without locking.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType


@dataclass(frozen=True)
class Entry:
    word: str
    meanings: tuple[str, ...]


class DictionaryStore:
    """Exact, case-sensitive lookups over a frozen mapping."""

    __slots__ = ("_words",)

    def __init__(self, mapping: Mapping[str, Sequence[str]]) -> None:
        # Copy so later changes to the caller's mapping are not observed
        self._words: Mapping[str, tuple[str, ...]] = MappingProxyType(
            {word: tuple(meanings) for word, meanings in mapping.items()}
        )

    def lookup(self, word: str) -> tuple[tuple[str, ...] | None, bool]:
        """Return ``(meanings, True)`` for a known word, ``(None, False)`` otherwise."""
        meanings = self._words.get(word)
        if meanings is None:
            return None, False
        return meanings, True

    def exists(self, word: str) -> bool:
        return word in self._words

    def count(self) -> int:
        return len(self._words)

    def words(self) -> Iterator[str]:
        return iter(self._words)

    def entries(self) -> Iterator[Entry]:
        for word, meanings in self._words.items():
            yield Entry(word, meanings)

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, word: object) -> bool:
        return word in self._words
