"""Integration test fixtures.

Provides a fully wired app over the shared sample dictionary and a clean
environment for subprocess-based startup tests.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest
from fastapi.testclient import TestClient

from dictionary_service.config import ServerSettings, Settings
from dictionary_service.server import create_app
from dictionary_service.state import AppState

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

    from dictionary_service.engine import LookupEngine


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    # Point static_dir somewhere empty so tests never pick up a real frontend
    return Settings(server=ServerSettings(static_dir=str(tmp_path / "no-static")))


@pytest.fixture()
def app_state(settings: Settings, engine: LookupEngine) -> AppState:
    return AppState(settings=settings, engine=engine, source_path="memory")


@pytest.fixture()
def client(settings: Settings, app_state: AppState) -> Iterator[TestClient]:
    app = create_app(settings, app_state)
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def subprocess_env(tmp_path: Path) -> dict[str, str]:
    """Environment with no inherited DICTIONARY__ overrides."""
    env = {k: v for k, v in os.environ.items() if not k.startswith("DICTIONARY__")}
    env["DICTIONARY__SERVER__STATIC_DIR"] = str(tmp_path / "no-static")
    return env
