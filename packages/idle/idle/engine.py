"""Engine - frame-driven tick loop, seeded randomness, snapshots."""

from __future__ import annotations

import logging
import os
import random
import time
from fractions import Fraction
from typing import Any, Callable

from idle.clock import Clock
from idle.types import SnapshotError, System

logger = logging.getLogger(__name__)

_SNAPSHOT_VERSION = 1


class Engine:
    def __init__(
        self,
        tps: int = 20,
        max_ticks_per_frame: int = 100,
        seed: int | None = None,
        time_fn: Callable[[], float] = time.monotonic,
    ) -> None:
        self._time_fn = time_fn
        self._clock = Clock(tps, max_ticks_per_frame, now=time_fn())
        self._systems: list[System] = []

        if seed is None:
            seed = int.from_bytes(os.urandom(8), "big")
        self._seed = seed
        self._rng = random.Random(seed)

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def random(self) -> random.Random:
        return self._rng

    def add_system(self, system: System) -> None:
        self._systems.append(system)

    def _tick(self) -> None:
        self._clock.tick()
        ctx = self._clock.context(self._rng)
        for system in self._systems:
            system(ctx)

    def step(self) -> None:
        self._tick()

    def run(self, n: int) -> None:
        for _ in range(n):
            self._tick()

    def frame(self, now: float | None = None) -> int:
        """Run every tick the wall clock owes since the previous frame.

        Returns the number of ticks run. All of them complete before this
        returns, so callers always observe a consistent simulated instant.
        """
        if now is None:
            now = self._time_fn()
        ticks = self._clock.advance(now)
        for _ in range(ticks):
            self._tick()
        if (
            ticks == self._clock.max_ticks_per_frame
            and self._clock.backlog >= self._clock.dt
        ):
            logger.debug(
                "tick cap reached, %s seconds of backlog carried over",
                self._clock.backlog,
            )
        return ticks

    def snapshot(self) -> dict[str, Any]:
        return {
            "version": _SNAPSHOT_VERSION,
            "tick_number": self._clock.tick_number,
            "tps": self._clock.tps,
            "backlog": str(self._clock.backlog),
            "seed": self._seed,
            "rng_state": _serialize_rng_state(self._rng.getstate()),
        }

    def restore(self, data: dict[str, Any], now: float | None = None) -> None:
        version = data.get("version")
        if version != _SNAPSHOT_VERSION:
            raise SnapshotError(
                f"Unsupported snapshot version {version!r} (this build reads {_SNAPSHOT_VERSION})"
            )

        snap_tps = data.get("tps")
        if snap_tps != self._clock.tps:
            raise SnapshotError(
                f"TPS mismatch: saved at {snap_tps}, running at {self._clock.tps}"
            )

        tick_number = int(data["tick_number"])
        backlog = Fraction(data.get("backlog", "0"))
        if tick_number < 0 or backlog < 0:
            raise SnapshotError(
                f"Negative clock state: tick {tick_number}, backlog {backlog}"
            )
        seed = data["seed"]
        rng_state = _deserialize_rng_state(data["rng_state"])
        random.Random().setstate(rng_state)

        # Nothing below can fail, so a rejected snapshot leaves the engine as it was.
        self._clock.reset(tick_number, backlog)
        self._clock.resync(self._time_fn() if now is None else now)
        self._seed = seed
        self._rng.setstate(rng_state)


def _serialize_rng_state(state: tuple[int, tuple[int, ...], float | None]) -> list[Any]:
    """Flatten ``Random.getstate()`` into lists so it survives JSON.

    Only meaningful on CPython, whose Mersenne Twister state this is.
    """
    mt_version, words, gauss = state
    return [mt_version, list(words), gauss]


def _deserialize_rng_state(data: list[Any]) -> tuple[int, tuple[int, ...], float | None]:
    mt_version, words, gauss = data
    return (mt_version, tuple(words), gauss)
