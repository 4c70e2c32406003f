"""OreSessions - one lazily created minigame per minable good."""
from __future__ import annotations

import random
from typing import Callable

from idle_economy import GOODS, Good, GoodCatalog, GoodGroup
from idle_ores.minigame import MinigameStatus, OreMinigame


class OreSessions:
    """Holds the running minigame of each good.

    Sessions are created on first access with the good's catalog
    difficulty and then only ever reset in place. All of them draw their
    orders from the shared *rng*.
    """

    def __init__(self, rng: random.Random, catalog: GoodCatalog = GOODS) -> None:
        self._rng = rng
        self._catalog = catalog
        self._sessions: dict[Good, OreMinigame] = {}

    def session(self, good: Good) -> OreMinigame:
        game = self._sessions.get(good)
        if game is None:
            difficulty = self._catalog.properties(good).difficulty
            if difficulty < 1:
                raise ValueError(f"{good.name} has no minigame (difficulty {difficulty})")
            game = OreMinigame(difficulty, self._rng)
            self._sessions[good] = game
        return game

    def has(self, good: Good) -> bool:
        return good in self._sessions

    def press(self, good: Good, value: int) -> MinigameStatus:
        return self.session(good).press(value)

    def settle(self, good: Good, reward: Callable[[Good], None]) -> bool:
        """Resolve a finished session.

        A failed session restarts; a solved one pays *reward* once and
        restarts. Returns True if the reward fired.
        """
        paid: list[Good] = []

        def pay(_game: OreMinigame) -> None:
            reward(good)
            paid.append(good)

        self.session(good).reset_if_failed().do_if_solved(pay).reset_if_solved()
        return bool(paid)

    def orders(self, group: GoodGroup = GoodGroup.ORE) -> dict[Good, tuple[int, ...]]:
        """Display order of every session in *group*, creating any missing."""
        return {good: self.session(good).order for good in self._catalog.group_iter(group)}

    def clear(self) -> None:
        self._sessions.clear()
