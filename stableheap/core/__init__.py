"""Core primitives shared by the queue and its helpers.

Enums, type aliases, comparators and error classes live here so that the
queue, config and telemetry packages can import them without cycles.
"""

from . import comparators, enums, errors, types

__all__ = ["comparators", "enums", "errors", "types"]
