# src/tasklist/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from enum import StrEnum

# User-facing deadline format (dd-MM-yyyy).
DEADLINE_FORMAT = "%d-%m-%Y"
NO_DEADLINE_LABEL = "No deadline"


class TaskError(StrEnum):
    """Failure kinds reported by the task store and adapters."""

    INVALID_ARGUMENT = "invalid_argument"
    NOT_FOUND = "not_found"
    ALREADY_EXISTS = "already_exists"
    PARSE_ERROR = "parse_error"


class DeadlineParseError(ValueError):
    """Raised by parse_deadline(); adapters catch it and report the message."""

    error = TaskError.PARSE_ERROR


@dataclass(slots=True)
class Task:
    id: int
    description: str
    done: bool = False
    # None means "no deadline" (ordered after every real date).
    deadline: date | None = None

    def is_due_on(self, day: date) -> bool:
        return self.deadline is not None and self.deadline == day


@dataclass(frozen=True, slots=True)
class TaskResult:
    """
    Outcome of a store mutation.

    Store failures are values, not exceptions: callers decide how to surface
    `message` (printed line in the console, 400 response over HTTP).
    """

    success: bool
    message: str = ""
    error: TaskError | None = None
    task: Task | None = None

    @classmethod
    def ok(cls, task: Task | None = None) -> TaskResult:
        return cls(success=True, task=task)

    @classmethod
    def fail(cls, error: TaskError, message: str) -> TaskResult:
        return cls(success=False, message=message, error=error)

    def __bool__(self) -> bool:
        return self.success


def deadline_sort_key(deadline: date | None) -> date:
    return date.max if deadline is None else deadline


def parse_deadline(raw: str) -> date:
    text = (raw or "").strip()
    try:
        return datetime.strptime(text, DEADLINE_FORMAT).date()
    except ValueError as e:
        raise DeadlineParseError('The date is not in the correct format "dd-MM-yyyy".') from e


def format_deadline(deadline: date | None) -> str:
    if deadline is None:
        return NO_DEADLINE_LABEL
    return deadline.strftime(DEADLINE_FORMAT)
