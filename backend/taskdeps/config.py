"""Resolver settings and YAML loading."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, ValidationError, field_validator

from taskdeps.errors import ConfigError
from taskdeps.utils.reporter import DiagnosticReporter, LoggingReporter, NullReporter


class ResolverSettings(BaseModel):
    logger_name: str = "taskdeps"
    log_level: str = "DEBUG"
    reject_duplicate_ids: bool = False
    report_diagnostics: bool = True

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level


def load_settings(path: Path | None = None) -> ResolverSettings:
    """Build settings from an optional YAML file; a ``taskdeps`` section is honoured."""
    if path is None or not path.exists():
        return ResolverSettings()
    data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ConfigError(f"Settings file must hold a mapping: {path}")
    section = data.get("taskdeps", data)
    if not isinstance(section, dict):
        raise ConfigError(f"'taskdeps' section must be a mapping: {path}")
    try:
        return ResolverSettings(**section)
    except ValidationError as exc:
        raise ConfigError(f"Invalid settings in {path}: {exc}") from exc


def build_reporter(settings: ResolverSettings) -> DiagnosticReporter:
    """Return the reporter described by the settings."""
    if not settings.report_diagnostics:
        return NullReporter()
    return LoggingReporter(settings.logger_name, logging.getLevelName(settings.log_level))
