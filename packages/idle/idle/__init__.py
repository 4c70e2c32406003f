"""idle - A frame-driven, fixed-timestep engine for incremental games."""

from idle.clock import Clock
from idle.engine import Engine
from idle.types import Handle, SnapshotError, System, TickContext

__all__ = [
    "Engine",
    "Clock",
    "TickContext",
    "Handle",
    "System",
    "SnapshotError",
]
