"""Point-in-time queries over a task list and a completed set."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from taskdeps.config import ResolverSettings, build_reporter
from taskdeps.models.task import BlockedInfo, Task
from taskdeps.utils.reporter import BLOCKED_TASKS, DiagnosticReporter


def get_blocked_tasks(
    tasks: Sequence[Task],
    completed_ids: Iterable[str],
    *,
    reporter: DiagnosticReporter | None = None,
    settings: ResolverSettings | None = None,
) -> list[BlockedInfo]:
    """Return incomplete tasks that have at least one dependency not yet completed.

    Tasks without dependencies are never blocked. Results follow input order and
    each record lists the missing dependencies in declaration order.
    """
    completed = set(completed_ids)
    blocked: list[BlockedInfo] = []
    for task in tasks:
        if task.id in completed:
            continue
        missing = [dep for dep in task.dependencies if dep not in completed]
        if missing:
            blocked.append(
                BlockedInfo(task_id=task.id, task_name=task.name, missing_dependencies=missing)
            )

    if reporter is None:
        reporter = build_reporter(settings or ResolverSettings())
    reporter.report(BLOCKED_TASKS, {"blocked": [info.model_dump() for info in blocked]})
    return blocked


def get_ready_tasks(tasks: Sequence[Task], completed_ids: Iterable[str]) -> list[str]:
    """Return ids of incomplete tasks whose dependencies are all in the completed set.

    This query reports no diagnostics, so it takes no reporter or settings.
    """
    completed = set(completed_ids)
    ready: list[str] = []
    for task in tasks:
        if task.id not in completed and all(dep in completed for dep in task.dependencies):
            ready.append(task.id)
    return ready
