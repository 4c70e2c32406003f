"""IdleGame - the game-state aggregate and its per-frame entry point."""
from __future__ import annotations

import logging
import time
from enum import Enum
from fractions import Fraction
from typing import Any, Callable

from idle import Engine, Handle, SnapshotError
from idle_economy import (
    GOODS,
    PRODUCERS,
    Good,
    GoodCatalog,
    Inventory,
    InventoryHelper,
    Producer,
    ProducerCatalog,
    ProducerRoster,
    ProductionRates,
    make_production_system,
    theoretical_rates,
)
from idle_economy.types import to_fraction
from idle_game.config import GameConfig, clamp_debug_amount
from idle_ores import OreMinigame, OreSessions

logger = logging.getLogger(__name__)


class Selection(Enum):
    """Which section of the game the player is looking at."""

    SUMMARY = "Summary"
    METALLURGY = "Metallurgy"

    def __str__(self) -> str:
        return self.value


class IdleGame:
    """Owns every piece of mutable game state.

    ``update`` is the single per-frame mutation point for the simulation;
    player actions (building, grants, minigame presses) are applied
    between frames by the host.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        time_fn: Callable[[], float] = time.monotonic,
        goods: GoodCatalog = GOODS,
        producers: ProducerCatalog = PRODUCERS,
    ) -> None:
        self._config = config or GameConfig()
        self._time_fn = time_fn
        self._goods = goods
        self._producers = producers
        self._engine = Engine(
            tps=self._config.tps,
            max_ticks_per_frame=self._config.max_ticks_per_frame,
            seed=self._config.seed,
            time_fn=time_fn,
        )
        self._inventory = InventoryHelper.seeded(goods)
        self._roster = ProducerRoster()
        self._ores = OreSessions(self._engine.random, goods)
        self.selection = Selection.SUMMARY
        self.debug_amount = self._config.debug_amount
        self._engine.add_system(
            make_production_system(
                self._roster, self._inventory, producers, self._config.policy
            )
        )

    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    def engine(self) -> Engine:
        return self._engine

    @property
    def inventory(self) -> Inventory:
        return self._inventory

    @property
    def roster(self) -> ProducerRoster:
        return self._roster

    @property
    def ores(self) -> OreSessions:
        return self._ores

    # -- Per-frame update --

    def update(self, now: float | None = None) -> int:
        """Advance the simulation to *now*. Returns the ticks run."""
        return self._engine.frame(now)

    # -- Producers --

    def build(self, producer: Producer, is_open: bool = False) -> Handle:
        """Add a producer without paying for it."""
        self._require_debug("build")
        return self._add(producer, is_open)

    def _add(self, producer: Producer, is_open: bool = False) -> Handle:
        handle = self._roster.add(producer, is_open)
        logger.debug("built %s as handle %d", self.producer_name(producer), handle)
        return handle

    def purchase(self, producer: Producer) -> Handle | None:
        """Pay the producer's cost in Money and build it.

        Returns None, leaving everything untouched, if the player cannot
        afford it.
        """
        cost = self._producers.properties(producer).cost
        if not InventoryHelper.has(self._inventory, Good.MONEY, cost):
            return None
        InventoryHelper.debit(self._inventory, Good.MONEY, cost)
        return self._add(producer)

    def demolish(self, handle: Handle) -> Producer | None:
        return self._roster.remove(handle)

    def toggle_window(self, handle: Handle) -> bool:
        return self._roster.toggle(handle)

    # -- Debug actions --

    def _require_debug(self, action: str) -> None:
        if not self._config.debug:
            raise RuntimeError(f"{action} is a debug action and debug is disabled")

    def grant(self, good: Good, amount: int | Fraction) -> None:
        """Debug grant. A negative amount takes goods away."""
        self._require_debug("grant")
        amount = to_fraction(amount)
        if amount >= 0:
            InventoryHelper.credit(self._inventory, good, amount)
        else:
            InventoryHelper.debit(self._inventory, good, -amount)

    def add_time(self, seconds: int | Fraction) -> None:
        """Debug fast-forward; the extra ticks run over the next frames."""
        self._require_debug("add_time")
        self._engine.clock.add_time(seconds)

    # -- Ore minigame --

    def ore_session(self, good: Good) -> OreMinigame:
        return self._ores.session(good)

    def ore_orders(self) -> dict[Good, tuple[int, ...]]:
        return self._ores.orders()

    def press_ore(self, good: Good, value: int) -> bool:
        """Press a minigame button. Returns True if one ore was mined."""
        self._ores.press(good, value)
        return self._ores.settle(good, self._mine)

    def _mine(self, good: Good) -> None:
        InventoryHelper.credit(self._inventory, good, 1)

    # -- Views --

    def inventory_rows(self) -> list[tuple[Good, Fraction]]:
        return InventoryHelper.rows(self._inventory)

    def production_table(self) -> dict[Good, ProductionRates]:
        return theoretical_rates(self._roster.producers(), self._producers)

    def good_name(self, good: Good) -> str:
        return self._goods.name(good)

    def producer_name(self, producer: Producer) -> str:
        return producer.display_name(self._producers, self._goods)

    def window_id(self, handle: Handle) -> str:
        return self._roster.window_id(handle, self._producers, self._goods)

    # -- Lifecycle --

    def reset(self) -> None:
        """Start over: empty inventory, no producers, fresh minigames.

        Producer handles keep counting so no handle is ever reused.
        """
        self._inventory.slots = InventoryHelper.seeded(self._goods).slots
        self._roster.clear()
        self._ores.clear()
        self.selection = Selection.SUMMARY
        logger.info("game reset")

    def snapshot(self) -> dict[str, Any]:
        """JSON-compatible record of the persistent state.

        Minigame sessions are deliberately left out; they restart on load.
        """
        data = self._engine.snapshot()
        data["game"] = {
            "inventory": InventoryHelper.snapshot(self._inventory),
            "producers": self._roster.snapshot(),
            "selection": self.selection.name,
            "debug_amount": self.debug_amount,
        }
        return data

    def restore(self, data: dict[str, Any], now: float | None = None) -> None:
        """Replace the game state with a snapshot.

        Every section is parsed before anything is committed, so a
        rejected snapshot leaves the live game untouched.
        """
        if not isinstance(data, dict):
            raise SnapshotError(f"Expected a mapping, got {type(data).__name__}")
        game = data.get("game", {})
        if not isinstance(game, dict):
            raise SnapshotError(f"Expected a mapping for game, got {type(game).__name__}")
        inventory = InventoryHelper.restore(game.get("inventory", {}), self._goods)
        roster = ProducerRoster()
        roster.restore(game.get("producers", {}))
        for producer in roster.producers():
            self._producers.properties(producer)
        selection = Selection.__members__.get(
            game.get("selection", ""), Selection.SUMMARY
        )
        debug_amount = clamp_debug_amount(
            int(game.get("debug_amount", self._config.debug_amount))
        )

        self._engine.restore(data, now)
        self._inventory.slots = inventory.slots
        self._roster.replace_with(roster)
        self._ores.clear()
        self.selection = selection
        self.debug_amount = debug_amount

    @classmethod
    def load(
        cls,
        data: Any,
        config: GameConfig | None = None,
        now: float | None = None,
        time_fn: Callable[[], float] = time.monotonic,
        goods: GoodCatalog = GOODS,
        producers: ProducerCatalog = PRODUCERS,
    ) -> IdleGame:
        """Build a game from a snapshot, falling back to a new game.

        A malformed or incompatible record is logged and discarded rather
        than surfaced to the player.
        """
        game = cls(config, time_fn, goods, producers)
        try:
            game.restore(data, now)
        except (SnapshotError, AttributeError, KeyError, ValueError, TypeError) as exc:
            logger.warning("discarding unreadable save: %s", exc)
            return cls(config, time_fn, goods, producers)
        logger.info("loaded game at tick %d", game.engine.clock.tick_number)
        return game
