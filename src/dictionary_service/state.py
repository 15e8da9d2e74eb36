"""Application state shared by every request handler."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from dictionary_service.engine import LookupEngine
from dictionary_service.snapshot import load_dictionary, load_snapshot_meta
from dictionary_service.store import DictionaryStore

if TYPE_CHECKING:
    from dictionary_service.config import Settings


@dataclass(frozen=True)
class AppState:
    """Everything built at startup. Fully constructed before serving begins.

    Handlers only read ``engine``. Replacing the dictionary means building a
    new ``AppState`` and swapping the reference, never editing this one.
    """

    settings: Settings
    engine: LookupEngine
    source_path: str | None = None
    # Snapshot build time; None when loaded straight from a JSON export
    built_at: str | None = None


def build_engine(mapping: dict[str, list[str]]) -> LookupEngine:
    return LookupEngine(DictionaryStore(mapping))


async def load_built_at(path: str) -> str | None:
    if Path(path).suffix.lower() == ".json":
        return None
    meta = await load_snapshot_meta(path)
    return meta.get("built_at")


async def load_state(settings: Settings) -> AppState:
    path = settings.dictionary.path
    mapping = await load_dictionary(path)
    return AppState(
        settings=settings,
        engine=build_engine(mapping),
        source_path=path,
        built_at=await load_built_at(path),
    )
