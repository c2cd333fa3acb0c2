"""Exceptions raised at the input boundary.

Cycles and dangling dependencies are not errors; they are reported through the
resolution result and the diagnostic channel.
"""


class TaskDepsError(Exception):
    """Base class for taskdeps errors."""


class ConfigError(TaskDepsError, ValueError):
    """Raised when a settings file cannot be interpreted."""


class DuplicateTaskIdError(TaskDepsError, ValueError):
    """Raised when duplicate task ids are rejected by configuration."""

    def __init__(self, duplicate_ids: list[str]) -> None:
        self.duplicate_ids = list(duplicate_ids)
        super().__init__(f"Duplicate task ids: {', '.join(self.duplicate_ids)}")
