# src/tasklist/core/ports.py

"""
Ports (interfaces) used by the connectors.

Connectors depend on Protocols instead of concrete implementations.
This keeps the store swappable and makes testing easier (tests pass fakes).
"""

from __future__ import annotations

import sys
from datetime import date
from typing import Protocol

from ..tasks.task_models import Task, TaskResult


class TaskRepo(Protocol):
    # Mutations
    def add_project(self, name: str) -> TaskResult: ...
    def add_task(self, project_name: str, description: str) -> TaskResult: ...
    def set_done(self, task_id: int, done: bool) -> TaskResult: ...
    def check_task(self, task_id: int) -> TaskResult: ...
    def uncheck_task(self, task_id: int) -> TaskResult: ...
    def set_deadline(
            self,
            task_id: int,
            deadline: date | None,
            *,
            project_name: str | None = None,
    ) -> TaskResult: ...
    def clear(self) -> None: ...

    # Lookups
    def get_task(self, task_id: int) -> Task | None: ...
    def get_project_name_of_task(self, task_id: int) -> str | None: ...
    def count_tasks(self) -> int: ...

    # Views
    def get_all_tasks(self) -> dict[str, list[Task]]: ...
    def get_tasks_of_today(self) -> list[Task]: ...
    def get_tasks_by_deadline(self) -> dict[date | None, list[Task]]: ...
    def get_tasks_by_deadline_per_project(self) -> dict[date | None, dict[str, list[Task]]]: ...


class Console(Protocol):
    """Line-oriented text stream used by the console connector."""

    def read_line(self) -> str | None: ...
    def write(self, text: str) -> None: ...
    def write_line(self, text: str = "") -> None: ...


class StdConsole:
    """Console over stdin/stdout. read_line() returns None on EOF."""

    def read_line(self) -> str | None:
        line = sys.stdin.readline()
        if not line:
            return None
        return line.rstrip("\r\n")

    def write(self, text: str) -> None:
        sys.stdout.write(text)
        sys.stdout.flush()

    def write_line(self, text: str = "") -> None:
        print(text, flush=True)
