"""Task DAG utilities using graphlib."""

from collections.abc import Iterable, Sequence
from graphlib import CycleError, TopologicalSorter

from taskdeps.models.task import Task


class TaskDAG:
    """Read-only dependency view over a task list.

    The first task declared with a given id defines its dependencies.
    """

    def __init__(self, tasks: Sequence[Task]) -> None:
        self._graph: dict[str, list[str]] = {}
        self._duplicates: list[str] = []
        for task in tasks:
            if task.id in self._graph:
                if task.id not in self._duplicates:
                    self._duplicates.append(task.id)
                continue
            self._graph[task.id] = list(task.dependencies)

    @property
    def ids(self) -> list[str]:
        """Distinct task ids in declaration order."""
        return list(self._graph)

    def dependencies_of(self, task_id: str) -> list[str]:
        """Return the declared dependencies of a task."""
        return list(self._graph.get(task_id, []))

    def dangling_dependencies(self) -> dict[str, list[str]]:
        """Map task ids to the dependencies that reference no task in the list."""
        dangling: dict[str, list[str]] = {}
        for task_id, deps in self._graph.items():
            missing = [dep for dep in deps if dep not in self._graph]
            if missing:
                dangling[task_id] = missing
        return dangling

    def duplicate_ids(self) -> list[str]:
        """Ids declared more than once, in order of first repeat."""
        return list(self._duplicates)

    def find_cycle(self, among: Iterable[str] | None = None) -> list[str] | None:
        """Return one dependency loop, or None if the graph is acyclic.

        The loop is reported as graphlib does: the first and last ids are the
        same. ``among`` restricts the search to a subset of task ids.
        """
        nodes = set(self._graph) if among is None else set(among) & set(self._graph)
        graph = {
            task_id: {dep for dep in self._graph[task_id] if dep in nodes}
            for task_id in nodes
        }
        try:
            TopologicalSorter(graph).prepare()
        except CycleError as exc:
            return list(exc.args[1])
        return None
