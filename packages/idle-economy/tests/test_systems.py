"""Tests for the production system driven by the engine."""
from __future__ import annotations

from fractions import Fraction

from idle import Engine
from idle_economy import (
    Good,
    Inventory,
    InventoryHelper,
    Producer,
    ProducerKind,
    ProducerRoster,
    ThrottlePolicy,
    make_production_system,
)


class TestProductionSystem:
    def test_gravity_drill_over_one_second(self) -> None:
        engine = Engine(tps=20, seed=42)
        roster = ProducerRoster()
        inv = InventoryHelper.seeded()
        roster.add(Producer(ProducerKind.GRAVITY_DRILL, Good.SILVER_ORE))
        engine.add_system(make_production_system(roster, inv))

        engine.run(20)

        assert inv.slots[Good.SILVER_ORE] == 1

    def test_wall_clock_frames_drive_production(self) -> None:
        engine = Engine(tps=20, seed=42, time_fn=lambda: 0.0)
        roster = ProducerRoster()
        inv = InventoryHelper.seeded()
        roster.add(Producer(ProducerKind.GRAVITY_DRILL, Good.IRON_ORE))
        engine.add_system(make_production_system(roster, inv))

        engine.frame(0.5)
        engine.frame(1.0)

        assert inv.slots[Good.IRON_ORE] == 1

    def test_removed_producer_stops(self) -> None:
        engine = Engine(tps=20, seed=42)
        roster = ProducerRoster()
        inv = Inventory()
        handle = roster.add(Producer(ProducerKind.GRAVITY_DRILL, Good.IRON_ORE))
        engine.add_system(make_production_system(roster, inv))

        engine.run(10)
        roster.remove(handle)
        engine.run(10)

        assert inv.slots[Good.IRON_ORE] == Fraction(1, 2)

    def test_on_throttled_reports_short_producers(self) -> None:
        engine = Engine(tps=20, seed=42)
        roster = ProducerRoster()
        inv = Inventory(slots={Good.COAL: Fraction(1, 160)})
        roster.add(Producer(ProducerKind.GRAVITY_DRILL, Good.IRON_ORE))
        coal = roster.add(Producer(ProducerKind.COAL_DRILL, Good.GOLD_ORE))
        events: list[tuple[int, int, Fraction]] = []

        def on_throttled(ctx, handle, producer, scale):
            events.append((ctx.tick_number, handle, scale))

        engine.add_system(make_production_system(roster, inv, on_throttled=on_throttled))
        engine.run(2)

        # 1/160 coal pays for half of the first tick, none of the second.
        assert events == [(1, coal, Fraction(1, 40)), (2, coal, Fraction(0))]
        assert inv.slots[Good.GOLD_ORE] == Fraction(1, 40)

    def test_all_or_nothing_policy(self) -> None:
        engine = Engine(tps=20, seed=42)
        roster = ProducerRoster()
        inv = Inventory(slots={Good.COAL: Fraction(1, 160)})
        roster.add(Producer(ProducerKind.COAL_DRILL, Good.GOLD_ORE))
        engine.add_system(
            make_production_system(roster, inv, policy=ThrottlePolicy.ALL_OR_NOTHING)
        )

        engine.run(1)

        assert InventoryHelper.get(inv, Good.GOLD_ORE) == 0
        assert inv.slots[Good.COAL] == Fraction(1, 160)
