"""OreMinigame - press the shuffled numbers in ascending order.

The buttons show a random permutation of ``1..difficulty``. Pressing the
expected value moves the session on; any other press fails it. Once
every value has been pressed in order the session is solved and stays
solved until reset.
"""
from __future__ import annotations

import random
from enum import Enum
from typing import Callable


class MinigameStatus(Enum):
    IN_PROGRESS = "in_progress"
    FAILED = "failed"
    SOLVED = "solved"


class OreMinigame:
    def __init__(self, difficulty: int, rng: random.Random) -> None:
        if difficulty < 1:
            raise ValueError(f"difficulty must be >= 1, got {difficulty}")
        self._difficulty = difficulty
        self._rng = rng
        self._order: list[int] = []
        self._next = 1
        self._failed = False
        self._rewarded = False
        self.reset()

    @property
    def difficulty(self) -> int:
        return self._difficulty

    @property
    def order(self) -> tuple[int, ...]:
        """Values in display order."""
        return tuple(self._order)

    @property
    def next(self) -> int:
        return self._next

    @property
    def status(self) -> MinigameStatus:
        if self._failed:
            return MinigameStatus.FAILED
        if self._next > self._difficulty:
            return MinigameStatus.SOLVED
        return MinigameStatus.IN_PROGRESS

    def is_failed(self) -> bool:
        return self._failed

    def is_solved(self) -> bool:
        return self.status == MinigameStatus.SOLVED

    def is_pressed(self, value: int) -> bool:
        """Whether *value* was already accepted (its button is spent)."""
        return not self._failed and value < self._next

    def press(self, value: int) -> MinigameStatus:
        """Press the button showing *value*.

        Presses on a failed or solved session are ignored.
        """
        if self.status != MinigameStatus.IN_PROGRESS:
            return self.status
        if value == self._next:
            self._next += 1
        else:
            self._failed = True
        return self.status

    def reset(self) -> OreMinigame:
        """Start a new session with a fresh order. Difficulty is kept."""
        order = list(range(1, self._difficulty + 1))
        self._rng.shuffle(order)
        self._order = order
        self._next = 1
        self._failed = False
        self._rewarded = False
        return self

    def reset_if_failed(self) -> OreMinigame:
        if self.is_failed():
            self.reset()
        return self

    def reset_if_solved(self) -> OreMinigame:
        if self.is_solved():
            self.reset()
        return self

    def do_if_solved(self, effect: Callable[[OreMinigame], None]) -> OreMinigame:
        """Run *effect* once for a solved session.

        Call before ``reset_if_solved``; repeated calls on the same solved
        session do nothing.
        """
        if self.is_solved() and not self._rewarded:
            self._rewarded = True
            effect(self)
        return self

    def __repr__(self) -> str:
        return (
            f"OreMinigame(difficulty={self._difficulty}, order={self._order}, "
            f"next={self._next}, status={self.status.name})"
        )
