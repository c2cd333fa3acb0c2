"""Layered topological ordering of tasks with stall detection."""

from __future__ import annotations

from collections.abc import Sequence

from taskdeps.config import ResolverSettings, build_reporter
from taskdeps.errors import DuplicateTaskIdError
from taskdeps.models.resolution import Resolution
from taskdeps.models.task import Task
from taskdeps.utils.dag import TaskDAG
from taskdeps.utils.reporter import (
    CYCLE_DETECTED,
    DUPLICATE_TASK_IDS,
    ORDER_RESOLVED,
    DiagnosticReporter,
)


def resolve(
    tasks: Sequence[Task],
    *,
    reporter: DiagnosticReporter | None = None,
    settings: ResolverSettings | None = None,
) -> Resolution:
    """Resolve tasks round by round.

    Each round scans the whole list in input order and takes every task whose
    id is not yet resolved and whose dependencies all are. The number of rounds
    is capped at ``len(tasks)``. A round that finds nothing while tasks remain
    means a cycle or a dependency on an id that is not in the list; the partial
    order is returned and a ``cycle_detected`` diagnostic is reported.

    Repeated ids are counted once: a later entry with an id that is already
    resolved, or already taken in the same round, is skipped, and completeness
    is measured against the distinct ids. A plain scan of the raw list would
    instead emit such an id twice and, because the list is longer than the
    resolved set, report a stall that is not there.
    """
    settings = settings or ResolverSettings()
    if reporter is None:
        reporter = build_reporter(settings)

    dag = TaskDAG(tasks)
    duplicates = dag.duplicate_ids()
    if duplicates:
        if settings.reject_duplicate_ids:
            raise DuplicateTaskIdError(duplicates)
        reporter.report(DUPLICATE_TASK_IDS, {"duplicate_ids": duplicates})

    resolved: set[str] = set()
    order: list[str] = []
    waves: list[list[str]] = []

    for _ in range(len(tasks)):
        wave: list[str] = []
        taken: set[str] = set()
        for task in tasks:
            if task.id in resolved or task.id in taken:
                continue
            if all(dep in resolved for dep in task.dependencies):
                wave.append(task.id)
                taken.add(task.id)
        if not wave:
            break
        resolved.update(wave)
        order.extend(wave)
        waves.append(wave)

    unresolved = [task_id for task_id in dag.ids if task_id not in resolved]
    cycle = None
    if unresolved:
        cycle = dag.find_cycle(among=unresolved)
        reporter.report(
            CYCLE_DETECTED,
            {
                "resolved": list(order),
                "unresolved": list(unresolved),
                "cycle": cycle,
                "dangling": dag.dangling_dependencies(),
            },
        )

    reporter.report(ORDER_RESOLVED, {"order": list(order), "complete": not unresolved})
    return Resolution(
        order=order,
        waves=waves,
        complete=not unresolved,
        unresolved=unresolved,
        cycle=cycle,
        duplicate_ids=duplicates,
    )


def resolve_order(
    tasks: Sequence[Task],
    *,
    reporter: DiagnosticReporter | None = None,
    settings: ResolverSettings | None = None,
) -> list[str]:
    """Return task ids in a dependency-respecting order (possibly partial)."""
    return resolve(tasks, reporter=reporter, settings=settings).order


def resolve_waves(
    tasks: Sequence[Task],
    *,
    reporter: DiagnosticReporter | None = None,
    settings: ResolverSettings | None = None,
) -> list[list[str]]:
    """Return task ids grouped into waves of mutually independent work."""
    return resolve(tasks, reporter=reporter, settings=settings).waves
