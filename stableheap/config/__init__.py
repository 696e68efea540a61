"""Configuration loading and validation package."""

from .loader import build_queue, load_queue_config
from .models import QueueConfig, TelemetryConfig

__all__ = [
    "QueueConfig",
    "TelemetryConfig",
    "build_queue",
    "load_queue_config",
]
