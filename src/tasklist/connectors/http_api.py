# src/tasklist/connectors/http_api.py

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Any

import uvicorn
from fastapi import APIRouter, Body, Depends, FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import BaseModel

from ..core.ports import TaskRepo
from ..core.state import AppState
from ..tasks.task_models import DeadlineParseError, Task, format_deadline, parse_deadline

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/projects", tags=["projects"])


class CreateTaskRequest(BaseModel):
    description: str


def _store(request: Request) -> TaskRepo:
    return request.app.state.app_state.task_store


def _task_to_dict(task: Task) -> dict[str, Any]:
    return {
        "id": task.id,
        "description": task.description,
        "done": task.done,
        "deadline": format_deadline(task.deadline) if task.deadline else None,
    }


def _bad_request(message: str) -> PlainTextResponse:
    return PlainTextResponse(message, status_code=400)


@router.get("")
async def list_projects(store: TaskRepo = Depends(_store)):  # noqa: B008
    return {
        name: [_task_to_dict(t) for t in tasks] for name, tasks in store.get_all_tasks().items()
    }


@router.post("")
async def create_project(
    name: str = Body(...),  # noqa: B008
    store: TaskRepo = Depends(_store),  # noqa: B008
):
    result = store.add_project(name)
    if not result.success:
        logger.info("create_project rejected name=%r: %s", name, result.message)
        return _bad_request(result.message)
    return JSONResponse({"projectName": name}, status_code=201)


@router.post("/{project_id}/tasks")
async def create_task(
    project_id: str,
    body: CreateTaskRequest,
    store: TaskRepo = Depends(_store),  # noqa: B008
):
    result = store.add_task(project_id, body.description)
    if not result.success or result.task is None:
        logger.info("create_task rejected project=%r: %s", project_id, result.message)
        return _bad_request(result.message)
    return _task_to_dict(result.task)


@router.put("/{project_id}/tasks/{task_id}")
async def update_task_deadline(
    project_id: str,
    task_id: int,
    deadline: str,
    store: TaskRepo = Depends(_store),  # noqa: B008
):
    try:
        parsed = parse_deadline(deadline)
    except DeadlineParseError as e:
        return _bad_request(str(e))

    result = store.set_deadline(task_id, parsed, project_name=project_id)
    if not result.success:
        return _bad_request(result.message)
    return PlainTextResponse(f"Deadline for task {task_id} updated to {deadline}.")


@router.get("/view_by_deadline")
async def view_by_deadline(store: TaskRepo = Depends(_store)):  # noqa: B008
    lines: list[str] = []
    for deadline, tasks in store.get_tasks_by_deadline().items():
        lines.append(f"{format_deadline(deadline)}:")
        for task in tasks:
            lines.append(f"{task.id}: {task.description}")
    text = "".join(f"{line}\n" for line in lines)
    return PlainTextResponse(text)


def create_app(state: AppState) -> FastAPI:
    app = FastAPI(title=str(getattr(state.settings, "app_name", "tasklist")))
    app.state.app_state = state
    app.include_router(router)
    return app


@dataclass
class HttpBackgroundRunner:
    thread: threading.Thread
    server: uvicorn.Server

    def stop(self) -> None:
        self.server.should_exit = True

    def join(self, timeout: float | None = None) -> None:
        self.thread.join(timeout=timeout)


def start_http_in_background(state: AppState) -> HttpBackgroundRunner | None:
    """
    Start the HTTP API in a background thread (so the console REPL can run in parallel).

    Both connectors share state.task_store; the store serializes access itself.
    """
    settings = state.settings
    if not getattr(settings, "http_enabled", False):
        logger.info("HTTP connector disabled, not starting.")
        return None

    host = str(getattr(settings, "http_host", "127.0.0.1"))
    port = int(getattr(settings, "http_port", 8080))

    # log_config=None: keep the handlers installed by setup_logging().
    config = uvicorn.Config(create_app(state), host=host, port=port, log_config=None)
    server = uvicorn.Server(config)

    t = threading.Thread(target=server.run, name="tasklist-http", daemon=True)
    t.start()

    logger.info("HTTP background thread started on %s:%s.", host, port)
    return HttpBackgroundRunner(thread=t, server=server)
