# src/tasklist/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from .ports import TaskRepo


@dataclass
class AppState:
    # Store Settings on the state for easy access in connectors.
    settings: object

    # One store per process (or per test); connectors only see the TaskRepo port.
    task_store: TaskRepo
