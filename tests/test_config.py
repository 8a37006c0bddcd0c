# tests/test_config.py

from __future__ import annotations

from pathlib import Path

from tasklist.cli.bootstrap import create_initial_state
from tasklist.config import Settings


def test_settings_defaults(monkeypatch) -> None:
    for key in (
        "TASKLIST_APP_NAME",
        "TASKLIST_CONSOLE_ENABLED",
        "TASKLIST_HTTP_ENABLED",
        "TASKLIST_HTTP_PORT",
        "TASKLIST_ALLOW_PROJECT_OVERWRITE",
        "TASKLIST_DATA_DIR",
    ):
        monkeypatch.delenv(key, raising=False)

    s = Settings.from_env()
    assert s.app_name == "tasklist"
    assert s.console_enabled is True
    assert s.http_enabled is False
    assert s.http_port == 8080
    assert s.allow_project_overwrite is False
    assert s.data_dir == Path(".local/tasklist")


def test_settings_from_env(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TASKLIST_HTTP_ENABLED", "yes")
    monkeypatch.setenv("TASKLIST_HTTP_PORT", "9000")
    monkeypatch.setenv("TASKLIST_ALLOW_PROJECT_OVERWRITE", "1")
    monkeypatch.setenv("TASKLIST_DATA_DIR", str(tmp_path))

    s = Settings.from_env()
    assert s.http_enabled is True
    assert s.http_port == 9000
    assert s.allow_project_overwrite is True
    assert s.data_dir == tmp_path


def test_malformed_int_falls_back(monkeypatch) -> None:
    monkeypatch.setenv("TASKLIST_HTTP_PORT", "eighty")
    assert Settings.from_env().http_port == 8080


def test_create_initial_state_applies_overwrite_policy(settings) -> None:
    settings.allow_project_overwrite = True
    state = create_initial_state(settings=settings)

    assert settings.data_dir.is_dir()
    state.task_store.add_project("secrets")
    assert state.task_store.add_project("secrets").success
