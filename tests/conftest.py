# tests/conftest.py

from __future__ import annotations

from datetime import date
from pathlib import Path
from types import SimpleNamespace

import pytest

from tasklist.core.state import AppState
from tasklist.tasks.task_store import TaskStore

from .fakes import FakeClock

TODAY = date(2025, 1, 26)


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the connectors.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="tasklist-test",
        log_level="DEBUG",
        data_dir=tmp_path / "data",
        console_enabled=True,
        http_enabled=False,
        http_host="127.0.0.1",
        http_port=0,
        allow_project_overwrite=False,
    )


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock(TODAY)


@pytest.fixture()
def store(clock: FakeClock) -> TaskStore:
    return TaskStore(today=clock)


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore) -> AppState:
    """AppState wired with a real in-memory store and a fixed clock."""
    return AppState(settings=settings, task_store=store)
