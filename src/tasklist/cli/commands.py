# src/tasklist/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.state import AppState
from ..tasks.task_models import (
    DeadlineParseError,
    TaskResult,
    format_deadline,
    parse_deadline,
)

CommandHandler = Callable[[AppState, str], str]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Command registry used by the console connector (show, add, check, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> str:
        """
        Handle a line like "add task secrets Laundry".

        The first word selects the handler, the rest of the line is passed
        through untouched (descriptions may contain spaces).
        Returns the text to print ("" when there is nothing to say).
        """
        parts = line.strip().split(" ", 1)
        name = parts[0]
        if not name:
            return ""
        rest = parts[1].strip() if len(parts) > 1 else ""

        handler = self._handlers.get(name.lower())
        if not handler:
            return f'I don\'t know what the command "{name}" is.'
        return handler(state, rest)

    def build_help(self) -> str:
        lines = ["Commands:"]
        for help_text in self._help.values():
            for usage in help_text.splitlines():
                lines.append(f"  {usage}")
        return "\n".join(lines)


registry = CommandRegistry()


def _split2(text: str) -> tuple[str, str]:
    parts = text.split(" ", 1)
    head = parts[0]
    tail = parts[1].strip() if len(parts) > 1 else ""
    return head, tail


def _parse_task_id(raw: str) -> int | None:
    try:
        return int(raw)
    except ValueError:
        return None


def _invalid_id(raw: str) -> str:
    return f'Invalid task id: "{raw}".'


def _failure_text(result: TaskResult) -> str:
    return "" if result.success else result.message


def cmd_help(state: AppState, args: str) -> str:
    return registry.build_help()


def cmd_show(state: AppState, args: str) -> str:
    lines: list[str] = []
    for project, tasks in state.task_store.get_all_tasks().items():
        lines.append(project)
        for task in tasks:
            mark = "x" if task.done else " "
            lines.append(f"    [{mark}] {task.id}: {task.description}")
        lines.append("")
    return "\n".join(lines)


def cmd_add(state: AppState, args: str) -> str:
    """
    add project <project name>
    add task <project name> <task description>
    """
    sub, rest = _split2(args)

    if sub == "project":
        return _failure_text(state.task_store.add_project(rest))

    if sub == "task":
        project, description = _split2(rest)
        if not project or not description:
            return "Please provide both project and task description"
        return _failure_text(state.task_store.add_task(project, description))

    return "Usage: add project <project name> | add task <project name> <task description>"


def _set_done(state: AppState, args: str, done: bool) -> str:
    raw = args.strip()
    task_id = _parse_task_id(raw)
    if task_id is None:
        return _invalid_id(raw)
    return _failure_text(state.task_store.set_done(task_id, done))


def cmd_check(state: AppState, args: str) -> str:
    return _set_done(state, args, True)


def cmd_uncheck(state: AppState, args: str) -> str:
    return _set_done(state, args, False)


def cmd_deadline(state: AppState, args: str) -> str:
    raw_id, raw_date = _split2(args)
    task_id = _parse_task_id(raw_id)
    if task_id is None:
        return _invalid_id(raw_id)

    try:
        deadline = parse_deadline(raw_date)
    except DeadlineParseError as e:
        logger.debug("Rejected deadline %r for task id=%s", raw_date, task_id)
        return str(e)

    result = state.task_store.set_deadline(task_id, deadline)
    if not result.success:
        return result.message
    return f'Added deadline: "{format_deadline(deadline)}" to task with id "{task_id}"'


def cmd_today(state: AppState, args: str) -> str:
    store = state.task_store
    lines = [
        f'Project: "{store.get_project_name_of_task(task.id)}", Task: "{task.description}"'
        for task in store.get_tasks_of_today()
    ]
    return "\n".join(lines)


def cmd_view_by_deadline(state: AppState, args: str) -> str:
    lines: list[str] = []
    for deadline, projects in state.task_store.get_tasks_by_deadline_per_project().items():
        lines.append(f"{format_deadline(deadline)}:")
        for project, tasks in projects.items():
            lines.append(f"\t{project}:")
            for task in tasks:
                lines.append(f"\t\t{task.id}: {task.description}")
    return "\n".join(lines)


registry.register("show", cmd_show, help_text="show")
registry.register(
    "add",
    cmd_add,
    help_text="add project <project name>\nadd task <project name> <task description>",
)
registry.register("check", cmd_check, help_text="check <task ID>")
registry.register("uncheck", cmd_uncheck, help_text="uncheck <task ID>")
registry.register("deadline", cmd_deadline, help_text="deadline <task ID> <date in dd-MM-yyyy>")
registry.register("today", cmd_today, help_text="today")
registry.register("view-by-deadline", cmd_view_by_deadline, help_text="view-by-deadline")
registry.register("help", cmd_help, help_text="help", aliases=["?"])
