"""Unit-specific fixtures (no I/O beyond tmp_path and in-memory SQLite)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import aiosqlite
import pytest

from dictionary_service.snapshot import SnapshotWriter, convert_json_to_snapshot

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture()
async def writer():
    """In-memory snapshot writer; the connection is exposed as ``writer._db``."""
    async with aiosqlite.connect(":memory:") as db:
        w = SnapshotWriter(db)
        await w.init_db()
        yield w


@pytest.fixture()
async def snapshot_path(tmp_path: Path, source_json: Path) -> Path:
    path = tmp_path / "snapshots" / "dictionary.db"
    await convert_json_to_snapshot(source_json, path)
    return path
