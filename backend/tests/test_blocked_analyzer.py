"""Blocked-task analyzer tests."""

from __future__ import annotations

from taskdeps.models.task import Task
from taskdeps.services.blocked_analyzer import get_blocked_tasks, get_ready_tasks


def test_unknown_completed_id_blocks_every_dependent_task(project_tasks, recorder) -> None:
    blocked = get_blocked_tasks(project_tasks, ["c"], reporter=recorder)

    assert [(info.task_id, info.missing_dependencies) for info in blocked] == [
        ("t2", ["t1"]),
        ("t3", ["t1"]),
        ("t4", ["t2", "t3"]),
        ("t5", ["t4"]),
        ("t6", ["t4", "t5"]),
    ]
    assert blocked[0].task_name == "Build API"
    assert recorder.names() == ["blocked_tasks"]


def test_completed_tasks_are_not_reported(project_tasks, recorder) -> None:
    blocked = get_blocked_tasks(project_tasks, ["t1", "t2", "t2", "t4"], reporter=recorder)

    # t3 and t5 have every dependency completed
    assert [(info.task_id, info.missing_dependencies) for info in blocked] == [("t6", ["t5"])]


def test_missing_dependencies_keep_declared_order(recorder) -> None:
    tasks = [Task(id="z", name="Z", dependencies=["c", "a", "b"])]

    blocked = get_blocked_tasks(tasks, ["a"], reporter=recorder)

    assert blocked[0].missing_dependencies == ["c", "b"]


def test_empty_inputs_produce_empty_result(recorder) -> None:
    assert get_blocked_tasks([], ["t1"], reporter=recorder) == []
    assert get_blocked_tasks([Task(id="solo", name="Solo")], [], reporter=recorder) == []


def test_ready_tasks_follow_completed_set(project_tasks) -> None:
    assert get_ready_tasks(project_tasks, []) == ["t1"]
    assert get_ready_tasks(project_tasks, ["t1"]) == ["t2", "t3"]
    assert get_ready_tasks(project_tasks, ["t1", "t2", "t3", "t4", "t5", "t6"]) == []


def test_blocked_tasks_is_idempotent(project_tasks, recorder) -> None:
    snapshot = [task.model_dump() for task in project_tasks]

    first = get_blocked_tasks(project_tasks, ["c"], reporter=recorder)
    second = get_blocked_tasks(project_tasks, ["c"], reporter=recorder)

    assert first == second
    assert [task.model_dump() for task in project_tasks] == snapshot


def test_ready_tasks_skip_completed_and_blocked(project_tasks) -> None:
    assert get_ready_tasks(project_tasks, ["t1", "t2"]) == ["t3"]
    assert get_ready_tasks([], ["t1"]) == []
