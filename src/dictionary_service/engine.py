"""Lookup engine: exact lookups plus case-insensitive prefix suggestions.

The word list is sorted once by its lower-cased form (ties broken by the
original string) and the lower-cased keys are kept in a parallel tuple. A
prefix query is a lower-bound bisect into that tuple followed by a forward
walk that stops at the first key not starting with the prefix. Because the
ordering and the match test use the same projection, every match sits in one
contiguous run, so the early exit never skips a mixed-case word.

Python compares ``str`` by code point, which orders the same way as UTF-8
bytes.
"""

from __future__ import annotations

from bisect import bisect_left
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dictionary_service.store import DictionaryStore

DEFAULT_SUGGEST_LIMIT = 20
MAX_SUGGEST_LIMIT = 100


def clamp_limit(limit: int) -> int:
    """Non-positive → default, anything above the cap → cap."""
    if limit <= 0:
        return DEFAULT_SUGGEST_LIMIT
    return min(limit, MAX_SUGGEST_LIMIT)


class LookupEngine:
    """Read-only query surface over a ``DictionaryStore``."""

    __slots__ = ("_store", "_sorted_words", "_sorted_keys")

    def __init__(self, store: DictionaryStore) -> None:
        self._store = store
        words = sorted(store.words(), key=lambda w: (w.lower(), w))
        self._sorted_words: tuple[str, ...] = tuple(words)
        self._sorted_keys: tuple[str, ...] = tuple(w.lower() for w in words)

    @property
    def store(self) -> DictionaryStore:
        return self._store

    @property
    def sorted_words(self) -> tuple[str, ...]:
        return self._sorted_words

    def lookup(self, word: str) -> tuple[tuple[str, ...] | None, bool]:
        return self._store.lookup(word)

    def exists(self, word: str) -> bool:
        return self._store.exists(word)

    def count(self) -> int:
        return self._store.count()

    def suggest(self, prefix: str, limit: int = DEFAULT_SUGGEST_LIMIT) -> list[str]:
        """Words starting with ``prefix`` (case-insensitive), in index order.

        Whitespace-only prefixes return nothing rather than matching everything.
        The prefix itself is searched as given (only lower-cased), so words
        containing spaces can still be completed.
        """
        if not prefix.strip():
            return []
        limit = clamp_limit(limit)
        needle = prefix.lower()

        keys = self._sorted_keys
        suggestions: list[str] = []
        for i in range(bisect_left(keys, needle), len(keys)):
            if len(suggestions) >= limit or not keys[i].startswith(needle):
                break
            suggestions.append(self._sorted_words[i])
        return suggestions
