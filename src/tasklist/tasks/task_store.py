# src/tasklist/tasks/task_store.py

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from datetime import date

from .task_models import Task, TaskError, TaskResult, deadline_sort_key

logger = logging.getLogger(__name__)


class TaskStore:
    """
    In-memory task store.

    State is a mapping project name -> tasks (both kept in insertion order)
    plus a counter for the next task id. Nothing is persisted.

    Thread-safety:
    - one lock per store; every mutation and every read-then-write sequence
      (id assignment, lookup-then-mutate) runs under it, so the console and
      HTTP connectors can share a single instance.
    """

    def __init__(
        self,
        *,
        allow_overwrite: bool = False,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._projects: dict[str, list[Task]] = {}
        self._last_id = 0
        self._lock = threading.Lock()
        self._allow_overwrite = allow_overwrite
        self._today = today
        logger.info("TaskStore ready (allow_overwrite=%s)", allow_overwrite)

    # ---- low-level helpers (call with the lock held) ----

    def _next_id(self) -> int:
        self._last_id += 1
        return self._last_id

    def _find(self, task_id: int) -> tuple[str, Task] | None:
        for name, tasks in self._projects.items():
            for task in tasks:
                if task.id == task_id:
                    return name, task
        return None

    @staticmethod
    def _task_not_found(task_id: int) -> TaskResult:
        return TaskResult.fail(TaskError.NOT_FOUND, f"Could not find a task with an ID of {task_id}.")

    @staticmethod
    def _project_not_found(name: str) -> TaskResult:
        return TaskResult.fail(
            TaskError.NOT_FOUND, f'Could not find a project with the name "{name}".'
        )

    # ---- public API ----

    def count_tasks(self) -> int:
        with self._lock:
            return sum(len(tasks) for tasks in self._projects.values())

    def clear(self) -> None:
        """Drop every project and restart ids at 1 (same as a fresh store)."""
        with self._lock:
            self._projects.clear()
            self._last_id = 0
        logger.debug("TaskStore cleared")

    def add_project(self, name: str) -> TaskResult:
        if not name or not name.strip():
            return TaskResult.fail(TaskError.INVALID_ARGUMENT, "Name is empty.")

        with self._lock:
            if name in self._projects:
                if not self._allow_overwrite:
                    logger.info("Project already exists name=%s", name)
                    return TaskResult.fail(
                        TaskError.ALREADY_EXISTS, f'A project with the name "{name}" already exists.'
                    )
                logger.warning("Overwriting existing project name=%s", name)
            self._projects[name] = []

        logger.debug("Project added name=%s", name)
        return TaskResult.ok()

    def add_task(self, project_name: str, description: str) -> TaskResult:
        if not description or not description.strip():
            return TaskResult.fail(TaskError.INVALID_ARGUMENT, "Description is empty.")

        with self._lock:
            tasks = self._projects.get(project_name)
            if tasks is None:
                logger.info("add_task: unknown project=%s", project_name)
                return self._project_not_found(project_name)
            task = Task(id=self._next_id(), description=description)
            tasks.append(task)

        logger.debug("Task added id=%s project=%s", task.id, project_name)
        return TaskResult.ok(task)

    def get_task(self, task_id: int) -> Task | None:
        with self._lock:
            found = self._find(task_id)
        return found[1] if found else None

    def get_project_name_of_task(self, task_id: int) -> str | None:
        with self._lock:
            found = self._find(task_id)
        return found[0] if found else None

    def set_done(self, task_id: int, done: bool) -> TaskResult:
        with self._lock:
            found = self._find(task_id)
            if found is None:
                logger.info("set_done: unknown task id=%s", task_id)
                return self._task_not_found(task_id)
            task = found[1]
            task.done = done

        logger.debug("Task id=%s done=%s", task_id, done)
        return TaskResult.ok(task)

    def check_task(self, task_id: int) -> TaskResult:
        return self.set_done(task_id, True)

    def uncheck_task(self, task_id: int) -> TaskResult:
        return self.set_done(task_id, False)

    def set_deadline(
        self,
        task_id: int,
        deadline: date | None,
        *,
        project_name: str | None = None,
    ) -> TaskResult:
        """
        Set (or clear, with None) a task's deadline.

        With project_name the task must belong to that project.
        """
        with self._lock:
            if project_name is not None:
                tasks = self._projects.get(project_name)
                if tasks is None:
                    return self._project_not_found(project_name)
                task = next((t for t in tasks if t.id == task_id), None)
            else:
                found = self._find(task_id)
                task = found[1] if found else None

            if task is None:
                logger.info("set_deadline: unknown task id=%s project=%s", task_id, project_name)
                return self._task_not_found(task_id)
            task.deadline = deadline

        logger.debug("Task id=%s deadline=%s", task_id, deadline)
        return TaskResult.ok(task)

    def get_all_tasks(self) -> dict[str, list[Task]]:
        with self._lock:
            return {name: list(tasks) for name, tasks in self._projects.items()}

    def get_tasks_of_today(self) -> list[Task]:
        today = self._today()
        with self._lock:
            return [
                task
                for tasks in self._projects.values()
                for task in tasks
                if task.is_due_on(today)
            ]

    def get_tasks_by_deadline(self) -> dict[date | None, list[Task]]:
        """
        Group every task by deadline.

        Dated groups come in ascending order; the no-deadline group (key None)
        comes last. Within a group tasks keep project/insertion order.
        """
        groups: dict[date | None, list[Task]] = {}
        with self._lock:
            for tasks in self._projects.values():
                for task in tasks:
                    groups.setdefault(task.deadline, []).append(task)
        return {key: groups[key] for key in sorted(groups, key=deadline_sort_key)}

    def get_tasks_by_deadline_per_project(self) -> dict[date | None, dict[str, list[Task]]]:
        """Same grouping as get_tasks_by_deadline(), split by project (names ascending)."""
        groups: dict[date | None, dict[str, list[Task]]] = {}
        with self._lock:
            for name, tasks in self._projects.items():
                for task in tasks:
                    groups.setdefault(task.deadline, {}).setdefault(name, []).append(task)
        return {
            key: {name: groups[key][name] for name in sorted(groups[key])}
            for key in sorted(groups, key=deadline_sort_key)
        }
