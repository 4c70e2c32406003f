"""Clock and TickContext for the fixed-timestep engine.

The clock turns wall-clock time into whole ticks. Timestamps are
quantized to milliseconds before they are subtracted, so the backlog is an
exact ``Fraction`` and the total simulated time always equals the wall
time covered, whatever the frame rate.
"""

from __future__ import annotations

import random
from fractions import Fraction

from idle.types import TickContext


def _as_seconds(value: float | int | Fraction) -> Fraction:
    if isinstance(value, Fraction):
        return value
    return Fraction(round(value * 1000), 1000)


class Clock:
    def __init__(
        self, tps: int = 20, max_ticks_per_frame: int = 100, now: float = 0.0
    ) -> None:
        if tps <= 0:
            raise ValueError("tps must be positive")
        if max_ticks_per_frame <= 0:
            raise ValueError("max_ticks_per_frame must be positive")
        self._tps = tps
        self._dt = Fraction(1, tps)
        self._max_ticks = max_ticks_per_frame
        self._tick_number = 0
        self._backlog = Fraction(0)
        self._previous = _as_seconds(now)

    @property
    def tps(self) -> int:
        return self._tps

    @property
    def dt(self) -> Fraction:
        return self._dt

    @property
    def tick_number(self) -> int:
        return self._tick_number

    @property
    def max_ticks_per_frame(self) -> int:
        return self._max_ticks

    @property
    def backlog(self) -> Fraction:
        """Accumulated simulated time (seconds) not yet turned into ticks."""
        return self._backlog

    @property
    def previous(self) -> Fraction:
        return self._previous

    def advance(self, now: float) -> int:
        """Accumulate time since the previous call and consume whole ticks.

        At most ``max_ticks_per_frame`` ticks are consumed; the rest of the
        backlog stays for later frames. The previous timestamp is updated
        on every call.
        """
        stamp = _as_seconds(now)
        elapsed = stamp - self._previous
        self._previous = stamp
        if elapsed > 0:
            self._backlog += elapsed

        ticks = 0
        while self._backlog >= self._dt and ticks < self._max_ticks:
            self._backlog -= self._dt
            ticks += 1
        return ticks

    def add_time(self, seconds: float | int | Fraction) -> None:
        """Fast-forward: push extra simulated seconds into the backlog."""
        amount = _as_seconds(seconds)
        if amount < 0:
            raise ValueError(f"seconds must be >= 0, got {seconds}")
        self._backlog += amount

    def resync(self, now: float) -> None:
        """Forget the time since the previous frame (used after a load)."""
        self._previous = _as_seconds(now)

    def tick(self) -> int:
        self._tick_number += 1
        return self._tick_number

    def context(self, rng: random.Random) -> TickContext:
        return TickContext(
            tick_number=self._tick_number,
            dt=self._dt,
            elapsed=self._tick_number * self._dt,
            random=rng,
        )

    def reset(self, tick_number: int = 0, backlog: Fraction = Fraction(0)) -> None:
        self._tick_number = tick_number
        self._backlog = Fraction(backlog)
