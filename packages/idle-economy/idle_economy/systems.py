"""System factory for production."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from idle_economy.inventory import Inventory
from idle_economy.producers import PRODUCERS, ProducerCatalog
from idle_economy.production import ThrottlePolicy, advance_all
from idle_economy.roster import ProducerRoster

if TYPE_CHECKING:
    from idle import TickContext


def make_production_system(
    roster: ProducerRoster,
    inventory: Inventory,
    catalog: ProducerCatalog = PRODUCERS,
    policy: ThrottlePolicy = ThrottlePolicy.PROPORTIONAL,
    on_throttled: Callable[..., None] | None = None,
) -> Callable[..., None]:
    """Return a system that advances every rostered producer each tick.

    ``on_throttled(ctx, handle, producer, scale)`` fires when a producer
    ran for less than the full tick.
    """

    def production_system(ctx: TickContext) -> None:
        entries = list(roster.items())
        scales = advance_all(
            (producer for _, producer in entries), inventory, ctx.dt, catalog, policy
        )
        if on_throttled is None:
            return
        for (handle, producer), scale in zip(entries, scales):
            if scale < ctx.dt:
                on_throttled(ctx, handle, producer, scale)

    return production_system
