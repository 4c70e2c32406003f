"""Shared type aliases and protocols for the idle engine."""

from __future__ import annotations

import random as _random
from dataclasses import dataclass
from fractions import Fraction
from typing import Callable

Handle = int


@dataclass(frozen=True, slots=True)
class TickContext:
    tick_number: int
    dt: Fraction
    elapsed: Fraction
    random: _random.Random


class SnapshotError(Exception):
    """Raised on restore failures (version mismatch, TPS mismatch)."""


System = Callable[[TickContext], None]
