"""Typed configuration models for queues built from config files.

The config subsystem relies on pydantic to validate YAML files and to hand
strongly-typed objects to :func:`stableheap.config.loader.build_queue`.
"""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from stableheap.core.enums import SortOrder

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class TelemetryConfig(BaseModel):
    """Logging switches.

    ``log_dir`` unset means logs go to stderr only.
    """

    log_level: str = Field("INFO")
    log_dir: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level: {value}")
        return level


class QueueConfig(BaseModel):
    """Settings applied when building a queue from configuration.

    ``order`` flips the comparator for descending (max-first) queues.
    ``collation_locale`` selects the LC_COLLATE used by the default comparator
    for text; ``None`` keeps the process setting.
    """

    order: SortOrder = SortOrder.ASCENDING
    collation_locale: Optional[str] = Field(None, min_length=1)
    telemetry: TelemetryConfig = Field(default_factory=TelemetryConfig)

    model_config = ConfigDict(frozen=True)
