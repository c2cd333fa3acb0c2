"""Diagnostic channel for resolver events."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, Protocol

CYCLE_DETECTED = "cycle_detected"
ORDER_RESOLVED = "order_resolved"
BLOCKED_TASKS = "blocked_tasks"
DUPLICATE_TASK_IDS = "duplicate_task_ids"

_WARNING_EVENTS = frozenset({CYCLE_DETECTED, DUPLICATE_TASK_IDS})


class DiagnosticReporter(Protocol):
    """Receives named diagnostic events with a payload."""

    def report(self, event: str, payload: dict[str, Any]) -> None: ...


class LoggingReporter:
    """Writes diagnostics to the standard logging tree."""

    def __init__(self, logger_name: str = "taskdeps", level: int = logging.DEBUG) -> None:
        self.logger = logging.getLogger(logger_name)
        self.level = level

    def report(self, event: str, payload: dict[str, Any]) -> None:
        level = logging.WARNING if event in _WARNING_EVENTS else self.level
        self.logger.log(level, "%s: %s", event, payload)


class NullReporter:
    """Discards every diagnostic."""

    def report(self, event: str, payload: dict[str, Any]) -> None:
        return None


class CallbackReporter:
    """Forwards diagnostics to a callable, event-bus style."""

    def __init__(self, handler: Callable[[str, dict[str, Any]], None]) -> None:
        self._handler = handler

    def report(self, event: str, payload: dict[str, Any]) -> None:
        self._handler(event, payload)
