# tests/test_task_store.py

from __future__ import annotations

import threading
from datetime import date

from tasklist.tasks.task_models import TaskError
from tasklist.tasks.task_store import TaskStore

from .conftest import TODAY


def test_add_project_then_task_is_retrievable(store: TaskStore) -> None:
    assert store.add_project("secrets").success

    result = store.add_task("secrets", "Laundry")
    assert result.success
    assert result.task is not None
    assert result.task.id == 1

    tasks = store.get_all_tasks()["secrets"]
    assert [(t.id, t.description, t.done, t.deadline) for t in tasks] == [
        (1, "Laundry", False, None)
    ]
    assert store.get_task(1) is tasks[0]
    assert store.get_project_name_of_task(1) == "secrets"


def test_add_project_rejects_empty_name(store: TaskStore) -> None:
    for name in ("", "   "):
        result = store.add_project(name)
        assert not result.success
        assert result.error is TaskError.INVALID_ARGUMENT
    assert store.get_all_tasks() == {}


def test_add_project_duplicate_fails_and_keeps_tasks(store: TaskStore) -> None:
    store.add_project("secrets")
    store.add_task("secrets", "Laundry")

    result = store.add_project("secrets")
    assert not result.success
    assert result.error is TaskError.ALREADY_EXISTS
    assert len(store.get_all_tasks()["secrets"]) == 1


def test_add_project_duplicate_overwrites_when_allowed() -> None:
    store = TaskStore(allow_overwrite=True)
    store.add_project("secrets")
    store.add_task("secrets", "Laundry")

    assert store.add_project("secrets").success
    assert store.get_all_tasks()["secrets"] == []
    # ids are not reused after the overwrite
    assert store.add_task("secrets", "Game").task.id == 2


def test_add_task_to_unknown_project_fails_without_side_effects(store: TaskStore) -> None:
    store.add_project("secrets")

    result = store.add_task("training", "SOLID")
    assert not result.success
    assert result.error is TaskError.NOT_FOUND
    assert "training" in result.message
    assert store.count_tasks() == 0

    # the failed attempt did not consume an id
    assert store.add_task("secrets", "Laundry").task.id == 1


def test_add_task_rejects_empty_description(store: TaskStore) -> None:
    store.add_project("secrets")
    result = store.add_task("secrets", " ")
    assert result.error is TaskError.INVALID_ARGUMENT
    assert store.count_tasks() == 0


def test_ids_are_sequential_across_projects(store: TaskStore) -> None:
    store.add_project("secrets")
    store.add_project("training")

    ids = [
        store.add_task("secrets", "Eat more donuts.").task.id,
        store.add_task("training", "Four Elements of Simple Design").task.id,
        store.add_task("secrets", "Destroy all humans.").task.id,
        store.add_task("training", "SOLID").task.id,
    ]
    assert ids == [1, 2, 3, 4]
    assert [t.id for t in store.get_all_tasks()["secrets"]] == [1, 3]
    assert list(store.get_all_tasks()) == ["secrets", "training"]


def test_check_then_uncheck_restores_pending(store: TaskStore) -> None:
    store.add_project("secrets")
    store.add_task("secrets", "Laundry")

    assert store.check_task(1).success
    assert store.get_task(1).done is True
    assert store.uncheck_task(1).success
    assert store.get_task(1).done is False


def test_set_done_unknown_id_fails_and_changes_nothing(store: TaskStore) -> None:
    store.add_project("secrets")
    store.add_task("secrets", "Laundry")

    result = store.set_done(42, True)
    assert not result.success
    assert result.error is TaskError.NOT_FOUND
    assert store.get_task(1).done is False
    assert store.get_task(42) is None
    assert store.get_project_name_of_task(42) is None


def test_set_deadline_overwrites_and_clears(store: TaskStore) -> None:
    store.add_project("secrets")
    store.add_task("secrets", "Laundry")

    assert store.set_deadline(1, date(2025, 1, 26)).success
    assert store.set_deadline(1, date(2025, 2, 1)).success
    assert store.get_task(1).deadline == date(2025, 2, 1)

    assert store.set_deadline(1, None).success
    assert store.get_task(1).deadline is None

    assert store.set_deadline(9, date(2025, 1, 1)).error is TaskError.NOT_FOUND


def test_set_deadline_scoped_to_project(store: TaskStore) -> None:
    store.add_project("secrets")
    store.add_project("training")
    store.add_task("secrets", "Laundry")
    store.add_task("training", "SOLID")

    day = date(2025, 3, 1)
    assert store.set_deadline(2, day, project_name="training").success
    assert store.get_task(2).deadline == day

    wrong_project = store.set_deadline(1, day, project_name="training")
    assert wrong_project.error is TaskError.NOT_FOUND
    assert store.get_task(1).deadline is None

    unknown_project = store.set_deadline(1, day, project_name="nope")
    assert unknown_project.error is TaskError.NOT_FOUND
    assert "nope" in unknown_project.message


def test_tasks_by_deadline_sorted_with_undated_last(store: TaskStore) -> None:
    store.add_project("secrets")
    store.add_project("training")
    store.add_task("secrets", "Laundry")
    store.add_task("secrets", "Game")
    store.add_task("training", "SOLID")
    store.add_task("training", "Refactor")

    store.set_deadline(1, date(2025, 1, 26))
    store.set_deadline(3, date(2024, 12, 31))
    store.set_deadline(4, date(2025, 1, 26))

    groups = store.get_tasks_by_deadline()
    assert list(groups) == [date(2024, 12, 31), date(2025, 1, 26), None]
    assert [t.id for t in groups[date(2025, 1, 26)]] == [1, 4]
    assert [t.id for t in groups[None]] == [2]


def test_tasks_by_deadline_per_project_sorts_project_names(store: TaskStore) -> None:
    store.add_project("zeta")
    store.add_project("alpha")
    store.add_task("zeta", "Z1")
    store.add_task("alpha", "A1")
    store.add_task("zeta", "Z2")
    store.set_deadline(1, date(2025, 1, 26))
    store.set_deadline(2, date(2025, 1, 26))

    groups = store.get_tasks_by_deadline_per_project()
    assert list(groups) == [date(2025, 1, 26), None]
    assert list(groups[date(2025, 1, 26)]) == ["alpha", "zeta"]
    assert [t.id for t in groups[date(2025, 1, 26)]["zeta"]] == [1]
    assert list(groups[None]) == ["zeta"]
    assert [t.id for t in groups[None]["zeta"]] == [3]


def test_views_are_empty_for_empty_store(store: TaskStore) -> None:
    assert store.get_all_tasks() == {}
    assert store.get_tasks_by_deadline() == {}
    assert store.get_tasks_by_deadline_per_project() == {}
    assert store.get_tasks_of_today() == []


def test_tasks_of_today_uses_injected_clock(store: TaskStore, clock) -> None:
    store.add_project("secrets")
    store.add_project("training")
    store.add_task("secrets", "Laundry")
    store.add_task("training", "SOLID")
    store.add_task("training", "Undated")
    store.set_deadline(1, TODAY)
    store.set_deadline(2, date(2025, 1, 27))

    assert [t.id for t in store.get_tasks_of_today()] == [1]

    clock.day = date(2025, 1, 27)
    assert [t.id for t in store.get_tasks_of_today()] == [2]


def test_clear_resets_projects_and_ids(store: TaskStore) -> None:
    store.add_project("secrets")
    store.add_task("secrets", "Laundry")

    store.clear()
    assert store.get_all_tasks() == {}

    store.add_project("secrets")
    assert store.add_task("secrets", "Laundry").task.id == 1


def test_get_all_tasks_returns_copies(store: TaskStore) -> None:
    store.add_project("secrets")
    snapshot = store.get_all_tasks()
    snapshot["secrets"].append("junk")
    snapshot["other"] = []
    assert store.get_all_tasks() == {"secrets": []}


def test_concurrent_adds_get_unique_ids(store: TaskStore) -> None:
    store.add_project("secrets")

    def worker() -> None:
        for i in range(50):
            store.add_task("secrets", f"task {i}")

    threads = [threading.Thread(target=worker) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    ids = [t.id for t in store.get_all_tasks()["secrets"]]
    assert sorted(ids) == list(range(1, 201))
