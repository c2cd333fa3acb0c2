from __future__ import annotations

from typing import Any

import pytest

from taskdeps.models.task import Task


class RecordingReporter:
    def __init__(self) -> None:
        self.events: list[tuple[str, dict[str, Any]]] = []

    def report(self, event: str, payload: dict[str, Any]) -> None:
        self.events.append((event, payload))

    def names(self) -> list[str]:
        return [name for name, _ in self.events]


@pytest.fixture
def recorder() -> RecordingReporter:
    return RecordingReporter()


@pytest.fixture
def project_tasks() -> list[Task]:
    return [
        Task(id="t1", name="Setup DB"),
        Task(id="t2", name="Build API", dependencies=["t1"]),
        Task(id="t3", name="Auth Module", dependencies=["t1"]),
        Task(id="t4", name="Build Frontend", dependencies=["t2", "t3"]),
        Task(id="t5", name="Write Tests", dependencies=["t4"]),
        Task(id="t6", name="Deploy", dependencies=["t4", "t5"]),
    ]


@pytest.fixture
def cyclic_tasks() -> list[Task]:
    return [
        Task(id="a", name="Task A", dependencies=["c"]),
        Task(id="b", name="Task B", dependencies=["a"]),
        Task(id="c", name="Task C", dependencies=["b"]),
    ]
