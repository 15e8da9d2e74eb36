"""Dictionary source and snapshot I/O.

Two on-disk formats feed the engine:

* the upstream JSON export (``{"TotalUniqueWords": .., "Words": [..]}``), and
* a compact SQLite snapshot produced from it by ``convert_json_to_snapshot``.

Unlike a cache, nothing here degrades gracefully: a dictionary that cannot be
read means the service has nothing to serve, so every failure surfaces as a
``DictionaryError`` and startup aborts.
"""

from __future__ import annotations

import json
from datetime import UTC, datetime
from pathlib import Path
from typing import TYPE_CHECKING, TypeVar

import aiosqlite
import structlog
from pydantic import ValidationError

from dictionary_service.errors import DictionaryError, ErrorCode
from dictionary_service.models.source import SourceDictionary
from dictionary_service.store import DictionaryStore, Entry

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Iterable

log = structlog.get_logger()

T = TypeVar("T")

_CREATE_WORDS_TABLE = """
CREATE TABLE IF NOT EXISTS words (
    word      TEXT PRIMARY KEY,
    meanings  TEXT NOT NULL
)
"""

_CREATE_META_TABLE = """
CREATE TABLE IF NOT EXISTS snapshot_meta (
    key    TEXT PRIMARY KEY,
    value  TEXT NOT NULL
)
"""


class SnapshotWriter:
    """Writes entries into a fresh SQLite snapshot."""

    def __init__(self, db: aiosqlite.Connection) -> None:
        self._db = db

    async def init_db(self) -> None:
        """Create tables. Called once per snapshot file."""
        await self._db.execute(_CREATE_WORDS_TABLE)
        await self._db.execute(_CREATE_META_TABLE)
        await self._db.commit()

    async def write(self, entries: Iterable[Entry]) -> int:
        """Insert all entries in one transaction and record metadata."""
        rows = [(e.word, json.dumps(list(e.meanings), ensure_ascii=False)) for e in entries]
        await self._db.executemany(
            "INSERT OR REPLACE INTO words (word, meanings) VALUES (?, ?)", rows
        )
        await self._db.executemany(
            "INSERT OR REPLACE INTO snapshot_meta (key, value) VALUES (?, ?)",
            [
                ("word_count", str(len(rows))),
                ("built_at", datetime.now(UTC).isoformat()),
            ],
        )
        await self._db.commit()
        await self._db.execute("VACUUM")
        return len(rows)


class SnapshotReader:
    """Reads a snapshot written by ``SnapshotWriter``."""

    def __init__(self, db: aiosqlite.Connection) -> None:
        self._db = db

    async def read_words(self) -> dict[str, list[str]]:
        words: dict[str, list[str]] = {}
        async with self._db.execute("SELECT word, meanings FROM words") as cursor:
            async for word, meanings in cursor:
                words[word] = json.loads(meanings)
        return words

    async def read_meta(self) -> dict[str, str]:
        async with self._db.execute("SELECT key, value FROM snapshot_meta") as cursor:
            return {key: value async for key, value in cursor}


# ---------------------------------------------------------------------------
# Source JSON
# ---------------------------------------------------------------------------


def read_source_json(path: str | Path) -> dict[str, list[str]]:
    """Parse the upstream JSON export into a word → meanings mapping."""
    path = Path(path)
    try:
        raw = path.read_bytes()
    except FileNotFoundError:
        raise DictionaryError(
            ErrorCode.SOURCE_NOT_FOUND, f"Dictionary source not found: {path}"
        ) from None
    except OSError as exc:
        raise DictionaryError(
            ErrorCode.INVALID_SOURCE, f"Cannot read dictionary source {path}: {exc}"
        ) from exc
    try:
        source = SourceDictionary.model_validate_json(raw)
    except ValidationError as exc:
        raise DictionaryError(
            ErrorCode.INVALID_SOURCE, f"Malformed dictionary source {path}: {exc}"
        ) from exc
    return source.to_mapping()


# ---------------------------------------------------------------------------
# Snapshot
# ---------------------------------------------------------------------------


async def convert_json_to_snapshot(json_path: str | Path, snapshot_path: str | Path) -> int:
    """Convert a JSON export into a SQLite snapshot. Returns the word count."""
    mapping = read_source_json(json_path)
    snapshot_path = Path(snapshot_path)
    snapshot_path.parent.mkdir(parents=True, exist_ok=True)
    # Stale rows from a previous build must not survive
    snapshot_path.unlink(missing_ok=True)

    async with aiosqlite.connect(snapshot_path) as db:
        writer = SnapshotWriter(db)
        await writer.init_db()
        written = await writer.write(DictionaryStore(mapping).entries())

    log.info(
        "snapshot_written",
        source=str(json_path),
        snapshot=str(snapshot_path),
        word_count=written,
    )
    return written


async def _read_snapshot(path: Path, read: Callable[[SnapshotReader], Awaitable[T]]) -> T:
    if not path.is_file():
        raise DictionaryError(ErrorCode.SOURCE_NOT_FOUND, f"Dictionary snapshot not found: {path}")
    try:
        # Read-only so a typo'd path never leaves an empty database behind
        async with aiosqlite.connect(f"{path.resolve().as_uri()}?mode=ro", uri=True) as db:
            return await read(SnapshotReader(db))
    except (aiosqlite.Error, json.JSONDecodeError) as exc:
        raise DictionaryError(
            ErrorCode.INVALID_SNAPSHOT, f"Unreadable dictionary snapshot {path}: {exc}"
        ) from exc


async def load_snapshot(path: str | Path) -> dict[str, list[str]]:
    """Read every entry of a SQLite snapshot into memory."""
    return await _read_snapshot(Path(path), SnapshotReader.read_words)


async def load_snapshot_meta(path: str | Path) -> dict[str, str]:
    """Build metadata (``word_count``, ``built_at``) recorded by the converter."""
    return await _read_snapshot(Path(path), SnapshotReader.read_meta)


async def load_dictionary(path: str | Path) -> dict[str, list[str]]:
    """Load a dictionary from a ``.json`` export or a SQLite snapshot."""
    path = Path(path)
    if path.suffix.lower() == ".json":
        mapping = read_source_json(path)
    else:
        mapping = await load_snapshot(path)
    log.info("dictionary_loaded", path=str(path), word_count=len(mapping))
    return mapping
